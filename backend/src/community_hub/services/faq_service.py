"""FAQ Service for the Community Hub."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import begin_write
from ..core.exceptions import DatabaseQueryError
from ..models.faq import FAQ
from ..schemas.faq import FAQCreate, FAQResponse

logger = logging.getLogger(__name__)


class FAQService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_faqs(self) -> list[FAQResponse]:
        """Return all FAQs in insertion order."""
        try:
            result = await self.db.execute(select(FAQ).order_by(FAQ.id))
        except SQLAlchemyError as e:
            logger.error(f"Failed to list faqs: {e}")
            raise DatabaseQueryError("Failed to fetch faqs", details={"reason": str(e)}) from e
        return [FAQResponse.model_validate(faq) for faq in result.scalars().all()]

    async def create_faq(self, faq_data: FAQCreate) -> FAQResponse:
        faq = FAQ(question=faq_data.question, answer=faq_data.answer)
        try:
            await begin_write(self.db)
            self.db.add(faq)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to add faq: {e}")
            raise DatabaseQueryError("Failed to add faq", details={"reason": str(e)}) from e

        logger.info("Created FAQ", extra={"faq_id": faq.id})
        return FAQResponse.model_validate(faq)
