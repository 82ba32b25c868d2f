"""Plugin Service for the Community Hub.

Creates plugins together with their tag links and lists them for the
catalogue page.
"""

import logging
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..core.config import get_settings_instance
from ..core.database import begin_write
from ..core.exceptions import DatabaseQueryError
from ..models.plugin import Plugin
from ..schemas.plugin import PluginCreate, PluginCreated, PluginResponse
from .tag_service import TagService, normalize_tag_name

logger = logging.getLogger(__name__)


def normalize_tag_names(names: Iterable[str | None]) -> list[str]:
    """Trim names, drop blanks and duplicates, keeping first-seen order."""
    seen: dict[str, None] = {}
    for name in names:
        normalized = normalize_tag_name(name)
        if normalized is not None:
            seen.setdefault(normalized, None)
    return list(seen)


class PluginService:
    """Service for creating and listing plugins."""

    def __init__(self, db: AsyncSession, atomic: bool | None = None) -> None:
        self.db = db
        self.tag_service = TagService(db)
        self.atomic = get_settings_instance().atomic_plugin_create if atomic is None else atomic

    async def list_plugins(self) -> list[PluginResponse]:
        """Return all plugins, best rated first, ties broken by name."""
        stmt = (
            select(Plugin)
            .options(selectinload(Plugin.tags))
            .order_by(Plugin.rating.desc(), Plugin.name.asc(), Plugin.id.asc())
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to list plugins: {e}")
            raise DatabaseQueryError("Failed to fetch plugins", details={"reason": str(e)}) from e
        return [PluginResponse.model_validate(plugin) for plugin in result.scalars().all()]

    async def create_plugin(self, plugin_data: PluginCreate) -> PluginCreated:
        """Store a plugin and attach its tags.

        In atomic mode the plugin and every link commit together, so a failure
        leaves nothing behind. Otherwise the plugin commits first and each tag
        commits on its own; a tag that fails is logged and skipped.

        Args:
            plugin_data: Validated plugin creation data

        Returns:
            Confirmation carrying the new plugin id

        Raises:
            DatabaseQueryError: If the plugin (or, in atomic mode, any tag) cannot be stored

        """
        tag_names = normalize_tag_names(plugin_data.tags)

        plugin = Plugin(
            name=plugin_data.name,
            author=plugin_data.author,
            version=plugin_data.version,
            rating=plugin_data.rating,
        )

        try:
            await begin_write(self.db)
            self.db.add(plugin)
            await self.db.flush()
            # Keep the id as a plain int; a later rollback expires the instance
            plugin_id = plugin.id

            if self.atomic:
                for tag_name in tag_names:
                    await self._attach_tag(plugin_id, tag_name)
            await self.db.commit()
        except (SQLAlchemyError, DatabaseQueryError) as e:
            await self.db.rollback()
            logger.error(
                f"Failed to add plugin: {e}",
                extra={"plugin_name": plugin_data.name, "atomic": self.atomic},
            )
            raise DatabaseQueryError("Failed to add plugin", details={"reason": str(e)}) from e

        failed_tags: list[str] = []
        if not self.atomic:
            failed_tags = await self._attach_tags_individually(plugin_id, tag_names)

        logger.info(
            f"Created plugin '{plugin_data.name}'",
            extra={
                "plugin_id": plugin_id,
                "tag_count": len(tag_names) - len(failed_tags),
                "failed_tags": failed_tags,
            },
        )
        return PluginCreated(plugin_id=plugin_id)

    async def _attach_tag(self, plugin_id: int, tag_name: str) -> bool:
        tag_id = await self.tag_service.resolve_tag(tag_name)
        if tag_id is None:
            return False
        return await self.tag_service.link(plugin_id, tag_id)

    async def _attach_tags_individually(self, plugin_id: int, tag_names: list[str]) -> list[str]:
        """Resolve and link each tag in its own transaction; return the names that failed."""
        failed: list[str] = []
        for tag_name in tag_names:
            try:
                await begin_write(self.db)
                await self._attach_tag(plugin_id, tag_name)
                await self.db.commit()
            except (SQLAlchemyError, DatabaseQueryError) as e:
                await self.db.rollback()
                failed.append(tag_name)
                logger.warning(
                    "Tag link failed; plugin kept with partial tags",
                    extra={"plugin_id": plugin_id, "tag_name": tag_name, "error": str(e)},
                )
        return failed
