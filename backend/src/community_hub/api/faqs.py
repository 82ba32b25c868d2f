"""FAQ API endpoints."""

import logging

from fastapi import APIRouter, Depends

from ..core.exceptions import HubException
from ..core.response import HubResponse
from ..schemas.faq import FAQCreate, FAQResponse
from ..services.faq_service import FAQService
from .dependencies import get_faq_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/faqs", tags=["faqs"])


@router.get("", response_model=list[FAQResponse], summary="List FAQs", description="List FAQs in the order they were added.")
async def list_faqs(service: FAQService = Depends(get_faq_service)):
    try:
        return HubResponse.success(await service.list_faqs())
    except HubException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing faqs: {e}")
        return HubResponse.error("Failed to fetch faqs", status_code=500)


@router.post("", response_model=FAQResponse, status_code=201, summary="Add a FAQ")
async def create_faq(faq_data: FAQCreate, service: FAQService = Depends(get_faq_service)):
    try:
        faq = await service.create_faq(faq_data)
        return HubResponse.created(faq)
    except HubException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error creating faq: {e}")
        return HubResponse.error("Failed to add faq", status_code=500)
