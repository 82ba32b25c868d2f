"""
FastAPI dependencies for the Community Hub backend.

Each request gets one database session; the service providers below build
the per-request service objects on top of it.
"""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db as core_get_db
from ..services.faq_service import FAQService
from ..services.issue_service import IssueService
from ..services.plugin_service import PluginService
from ..services.tag_service import TagService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Database session dependency, closed when the response has been sent."""
    async for session in core_get_db():
        yield session


def get_plugin_service(db: AsyncSession = Depends(get_db)) -> PluginService:
    # atomic mode comes from HUB_ATOMIC_PLUGIN_CREATE
    return PluginService(db)


def get_tag_service(db: AsyncSession = Depends(get_db)) -> TagService:
    return TagService(db)


def get_issue_service(db: AsyncSession = Depends(get_db)) -> IssueService:
    return IssueService(db)


def get_faq_service(db: AsyncSession = Depends(get_db)) -> FAQService:
    return FAQService(db)
