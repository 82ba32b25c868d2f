"""Tag API endpoints (feeds the tag filter dropdown)."""

import logging

from fastapi import APIRouter, Depends

from ..core.exceptions import HubException
from ..core.response import HubResponse
from ..schemas.plugin import TagResponse
from ..services.tag_service import TagService
from .dependencies import get_tag_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=list[TagResponse], summary="List tags", description="List all tags by name.")
async def list_tags(service: TagService = Depends(get_tag_service)):
    try:
        return HubResponse.success(await service.list_tags())
    except HubException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        return HubResponse.error("Failed to fetch tags", status_code=500)
