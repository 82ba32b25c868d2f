"""
Pydantic schemas for issues.

Severity and status are opaque text. Omitted or blank values fall back to
the defaults, and anything the client sends for ``id`` or ``created_at`` is
ignored because those are assigned by the store.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.issue import DEFAULT_SEVERITY, DEFAULT_STATUS


def _blank_to_none(v: str | None) -> str | None:
    if v is None:
        return None
    v = v.strip()
    return v or None


class IssueCreate(BaseModel):
    """Schema for reporting a new issue."""

    title: str = Field(..., description="Short summary of the issue")
    severity: str | None = Field(None, description=f"Free-text severity, defaults to '{DEFAULT_SEVERITY}'")
    status: str | None = Field(None, description=f"Free-text status, defaults to '{DEFAULT_STATUS}'")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        if not v or not v.strip():
            raise ValueError("title cannot be empty")
        return v.strip()

    @field_validator("severity", "status")
    @classmethod
    def normalize_optional_text(cls, v):
        return _blank_to_none(v)


class IssueQueryParams(BaseModel):
    """Exact-match filters for listing issues; both given means both must match."""

    severity: str | None = None
    status: str | None = None

    @field_validator("severity", "status")
    @classmethod
    def normalize_filter(cls, v):
        return _blank_to_none(v)


class IssueResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    severity: str
    status: str
    created_at: datetime
