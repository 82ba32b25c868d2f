"""Issue Service for the Community Hub."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import begin_write
from ..core.exceptions import DatabaseQueryError
from ..models.issue import DEFAULT_SEVERITY, DEFAULT_STATUS, Issue
from ..schemas.issue import IssueCreate, IssueQueryParams, IssueResponse

logger = logging.getLogger(__name__)


class IssueService:
    """Service for reporting and listing issues."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_issues(self, params: IssueQueryParams) -> list[IssueResponse]:
        """List issues newest first, optionally filtered by severity and/or status.

        Args:
            params: Exact-match filters; unset filters are not applied

        Returns:
            Matching issues ordered by creation time, most recent first

        """
        stmt = select(Issue)

        if params.severity is not None:
            stmt = stmt.where(Issue.severity == params.severity)

        if params.status is not None:
            stmt = stmt.where(Issue.status == params.status)

        # created_at has second resolution, so the id breaks same-second ties
        stmt = stmt.order_by(Issue.created_at.desc(), Issue.id.desc())

        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to list issues: {e}")
            raise DatabaseQueryError("Failed to fetch issues", details={"reason": str(e)}) from e
        return [IssueResponse.model_validate(issue) for issue in result.scalars().all()]

    async def create_issue(self, issue_data: IssueCreate) -> IssueResponse:
        """Store a new issue and return the full stored row.

        Raises:
            DatabaseQueryError: If the issue cannot be stored

        """
        issue = Issue(
            title=issue_data.title,
            severity=issue_data.severity or DEFAULT_SEVERITY,
            status=issue_data.status or DEFAULT_STATUS,
        )

        try:
            await begin_write(self.db)
            self.db.add(issue)
            await self.db.commit()
            # Pick up the server-assigned created_at
            await self.db.refresh(issue)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to add issue: {e}")
            raise DatabaseQueryError("Failed to add issue", details={"reason": str(e)}) from e

        logger.info(
            "Created issue",
            extra={"issue_id": issue.id, "severity": issue.severity, "issue_status": issue.status},
        )
        return IssueResponse.model_validate(issue)
