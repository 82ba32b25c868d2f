"""Tag resolution and plugin-tag linking.

Tags are created lazily the first time a plugin references them by name.
Both writes here are get-or-create style and lean on the store's uniqueness
constraints (``tags.name`` and the ``plugin_tags`` primary key) instead of a
check-then-insert, so concurrent requests can never produce duplicates.
"""

import logging

from sqlalchemy import Table, insert, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import begin_write
from ..core.exceptions import DatabaseQueryError
from ..models.plugin import PluginTag, Tag
from ..schemas.plugin import TagResponse

logger = logging.getLogger(__name__)

_DIALECT_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}


def normalize_tag_name(name: str | None) -> str | None:
    """Trim a tag name; blank names normalize to ``None`` and must be skipped."""
    if name is None:
        return None
    name = name.strip()
    return name or None


class TagService:
    """Resolve tag names to ids and link tags to plugins."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_tags(self) -> list[TagResponse]:
        """Return every tag ordered by name."""
        try:
            result = await self.db.execute(select(Tag).order_by(Tag.name))
        except SQLAlchemyError as e:
            logger.error(f"Failed to list tags: {e}")
            raise DatabaseQueryError("Failed to fetch tags", details={"reason": str(e)}) from e
        return [TagResponse.model_validate(tag) for tag in result.scalars().all()]

    async def get_tag_id(self, name: str) -> int | None:
        result = await self.db.execute(select(Tag.id).where(Tag.name == name))
        return result.scalar_one_or_none()

    async def resolve_tag(self, name: str | None) -> int | None:
        """Return the id of the tag called ``name``, creating the tag if needed.

        Args:
            name: Tag name; surrounding whitespace is ignored

        Returns:
            The tag id, or None when the name is blank (nothing to link)

        """
        normalized = normalize_tag_name(name)
        if normalized is None:
            return None

        await begin_write(self.db)
        tag_id = await self.get_tag_id(normalized)
        if tag_id is not None:
            return tag_id

        # A concurrent request may insert the same name between the lookup and
        # here; the conflict is swallowed and the winner's row is re-selected.
        created = await self._insert_ignoring_conflict(Tag.__table__, {"name": normalized}, ["name"])
        tag_id = await self.get_tag_id(normalized)
        if tag_id is None:
            raise DatabaseQueryError("Failed to resolve tag", details={"tag": normalized})

        if created:
            logger.info("Created tag", extra={"tag_id": tag_id, "tag_name": normalized})
        else:
            logger.debug("Tag created concurrently, reusing it", extra={"tag_id": tag_id, "tag_name": normalized})
        return tag_id

    async def link(self, plugin_id: int, tag_id: int) -> bool:
        """Link a plugin to a tag.

        Returns:
            True when a new link was written, False when the pair already existed

        """
        await begin_write(self.db)
        linked = await self._insert_ignoring_conflict(
            PluginTag.__table__,
            {"plugin_id": plugin_id, "tag_id": tag_id},
            ["plugin_id", "tag_id"],
        )
        if not linked:
            logger.debug("Plugin already linked to tag", extra={"plugin_id": plugin_id, "tag_id": tag_id})
        return linked

    async def _insert_ignoring_conflict(self, table: Table, values: dict, conflict_columns: list[str]) -> bool:
        """Insert one row unless it collides with a unique key; return whether it was inserted."""
        dialect = self.db.get_bind().dialect.name
        dialect_insert = _DIALECT_INSERTS.get(dialect)

        if dialect_insert is not None:
            stmt = dialect_insert(table).values(**values).on_conflict_do_nothing(index_elements=conflict_columns)
            result = await self.db.execute(stmt)
            return result.rowcount > 0

        # Dialects without ON CONFLICT: isolate the insert in a savepoint so a
        # uniqueness violation only undoes this statement
        try:
            async with self.db.begin_nested():
                await self.db.execute(insert(table).values(**values))
        except IntegrityError:
            return False
        return True
