"""
Plugin and tag models for the Community Hub.

Design Decision:
- Tags are shared rows keyed by a unique, case-sensitive name
- Plugins and tags are joined through plugin_tags, whose primary key is the
  (plugin_id, tag_id) pair, so a pair can only be linked once
"""

from sqlalchemy import CheckConstraint, Column, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from ..core.database import Base
from .base import BaseModel

RATING_MIN = 0.0
RATING_MAX = 5.0


class Plugin(BaseModel):
    """A community plugin listing."""

    __tablename__ = "plugins"
    __table_args__ = (
        CheckConstraint(f"rating >= {RATING_MIN} AND rating <= {RATING_MAX}", name="ck_plugins_rating_range"),
    )

    name = Column(Text, nullable=False)
    author = Column(Text, nullable=False)
    version = Column(Text, nullable=False)
    rating = Column(Float, nullable=False)

    # Read side of the many-to-many; links are only written through plugin_tags
    tags = relationship("Tag", secondary="plugin_tags", viewonly=True, order_by="Tag.name")

    @property
    def tag_names(self) -> list[str]:
        return [tag.name for tag in self.tags]

    def __repr__(self) -> str:
        return f"<Plugin(id={self.id}, name='{self.name}', version='{self.version}')>"


class Tag(BaseModel):
    """A tag shared by every plugin that references it by name."""

    __tablename__ = "tags"

    name = Column(Text, nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name='{self.name}')>"


class PluginTag(Base):
    """Association row linking one plugin to one tag."""

    __tablename__ = "plugin_tags"

    plugin_id = Column(Integer, ForeignKey("plugins.id", ondelete="CASCADE"), primary_key=True)
    tag_id = Column(Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True, index=True)

    def __repr__(self) -> str:
        return f"<PluginTag(plugin_id={self.plugin_id}, tag_id={self.tag_id})>"
