"""
Pydantic schemas for plugins and tags.

``PluginCreate`` carries every precondition of plugin creation, so a request
that fails any of them is rejected before anything is written.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..models.plugin import RATING_MAX, RATING_MIN


def _require_text(v: str, field: str) -> str:
    if not v or not v.strip():
        raise ValueError(f"{field} cannot be empty")
    return v.strip()


class PluginCreate(BaseModel):
    """Schema for creating a new plugin."""

    name: str = Field(..., description="Plugin name")
    author: str = Field(..., description="Plugin author")
    version: str = Field(..., description="Plugin version string")
    rating: float = Field(..., ge=RATING_MIN, le=RATING_MAX, description="Rating between 0 and 5 inclusive")
    tags: list[str] = Field(default_factory=list, description="Tag names to attach to the plugin")

    @field_validator("name", "author", "version")
    @classmethod
    def validate_text(cls, v, info):
        return _require_text(v, info.field_name)

    @field_validator("rating", mode="before")
    @classmethod
    def validate_rating_is_numeric(cls, v: Any):
        """Only accept JSON numbers; booleans and numeric strings are rejected."""
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("rating must be a number")
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def coerce_tags(cls, v: Any):
        """Accept null, a list of names, or one comma-separated string from form inputs."""
        if v is None:
            return []
        if isinstance(v, str):
            return v.split(",")
        return v


class PluginCreated(BaseModel):
    """Body returned after a plugin has been stored."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = "Plugin successfully added"
    plugin_id: int = Field(..., serialization_alias="pluginId")


class PluginResponse(BaseModel):
    """A stored plugin with the names of its tags."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    author: str
    version: str
    rating: float
    tags: list[str] = Field(default_factory=list, validation_alias=AliasChoices("tag_names", "tags"))


class TagResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
