"""Issue model."""

from sqlalchemy import Column, DateTime, Index, Text, func

from .base import BaseModel

DEFAULT_SEVERITY = "low"
DEFAULT_STATUS = "open"


class Issue(BaseModel):
    """A reported issue.

    ``severity`` and ``status`` are free text; ``created_at`` is always filled
    in by the database at insert time.
    """

    __tablename__ = "issues"
    __table_args__ = (Index("ix_issues_severity_status", "severity", "status"),)

    title = Column(Text, nullable=False)
    severity = Column(Text, nullable=False, default=DEFAULT_SEVERITY)
    status = Column(Text, nullable=False, default=DEFAULT_STATUS)
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp(), index=True)

    def __repr__(self) -> str:
        return f"<Issue(id={self.id}, severity='{self.severity}', status='{self.status}')>"
