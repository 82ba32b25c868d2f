"""Unit tests for the store-level constraints on the hub models."""

import pytest
from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError

from community_hub.models import Plugin, PluginTag, Tag


class TestPluginConstraints:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [-0.1, 5.1])
    async def test_rating_outside_range_rejected(self, db_session, rating) -> None:
        db_session.add(Plugin(name="Linter", author="ada", version="1.0.0", rating=rating))

        with pytest.raises(IntegrityError):
            await db_session.flush()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [0.0, 5.0])
    async def test_boundary_ratings_accepted(self, db_session, rating) -> None:
        plugin = Plugin(name="Linter", author="ada", version="1.0.0", rating=rating)
        db_session.add(plugin)
        await db_session.flush()

        assert plugin.id is not None


class TestTagConstraints:
    @pytest.mark.asyncio
    async def test_tag_name_unique(self, db_session) -> None:
        await db_session.execute(insert(Tag).values(name="ui"))

        with pytest.raises(IntegrityError):
            await db_session.execute(insert(Tag).values(name="ui"))

    @pytest.mark.asyncio
    async def test_link_requires_existing_plugin_and_tag(self, db_session) -> None:
        with pytest.raises(IntegrityError):
            await db_session.execute(insert(PluginTag).values(plugin_id=999, tag_id=999))


def test_repr_names_the_row() -> None:
    assert repr(Tag(id=3, name="ui")) == "<Tag(id=3, name='ui')>"
    assert "Linter" in repr(Plugin(id=1, name="Linter", version="1.0.0"))
