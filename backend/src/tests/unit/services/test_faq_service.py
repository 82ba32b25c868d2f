import pytest

from community_hub.schemas.faq import FAQCreate
from community_hub.services.faq_service import FAQService


@pytest.mark.asyncio
async def test_create_then_list_in_insertion_order(db_session) -> None:
    service = FAQService(db_session)
    first = await service.create_faq(FAQCreate(question="How do I install a plugin?", answer="Use the hub."))
    second = await service.create_faq(FAQCreate(question=" Is it free? ", answer="Yes."))

    faqs = await service.list_faqs()

    assert [f.id for f in faqs] == [first.id, second.id]
    assert faqs[1].question == "Is it free?"


@pytest.mark.asyncio
async def test_empty_store(db_session) -> None:
    assert await FAQService(db_session).list_faqs() == []
