"""Unit tests for IssueService defaults, filters and ordering."""

from datetime import datetime

import pytest
from sqlalchemy import update

from community_hub.models.issue import Issue
from community_hub.schemas.issue import IssueCreate, IssueQueryParams
from community_hub.services.issue_service import IssueService


async def _seed(service: IssueService) -> None:
    for title, severity, status in (
        ("Crash on save", "high", "open"),
        ("Typo in footer", "low", "open"),
        ("Slow search", "high", "closed"),
    ):
        await service.create_issue(IssueCreate(title=title, severity=severity, status=status))


class TestCreateIssue:
    @pytest.mark.asyncio
    async def test_defaults_applied(self, db_session) -> None:
        issue = await IssueService(db_session).create_issue(IssueCreate(title="Crash on save"))

        assert issue.id is not None
        assert issue.severity == "low"
        assert issue.status == "open"
        assert isinstance(issue.created_at, datetime)

    @pytest.mark.asyncio
    async def test_blank_severity_and_status_fall_back_to_defaults(self, db_session) -> None:
        issue = await IssueService(db_session).create_issue(
            IssueCreate(title="Crash on save", severity="  ", status="")
        )

        assert (issue.severity, issue.status) == ("low", "open")

    @pytest.mark.asyncio
    async def test_free_text_values_stored_as_given(self, db_session) -> None:
        issue = await IssueService(db_session).create_issue(
            IssueCreate(title="Crash on save", severity="blocker", status="needs-triage")
        )

        assert (issue.severity, issue.status) == ("blocker", "needs-triage")


class TestListIssues:
    @pytest.mark.asyncio
    async def test_newest_first(self, db_session) -> None:
        service = IssueService(db_session)
        await _seed(service)

        issues = await service.list_issues(IssueQueryParams())

        assert [i.title for i in issues] == ["Slow search", "Typo in footer", "Crash on save"]

    @pytest.mark.asyncio
    async def test_ordered_by_created_at_before_id(self, db_session) -> None:
        service = IssueService(db_session)
        await _seed(service)
        # Timestamps deliberately out of step with insertion order
        for title, created_at in (
            ("Crash on save", datetime(2024, 3, 3, 12, 0)),
            ("Typo in footer", datetime(2024, 1, 1, 12, 0)),
            ("Slow search", datetime(2024, 2, 2, 12, 0)),
        ):
            await db_session.execute(update(Issue).where(Issue.title == title).values(created_at=created_at))
        await db_session.commit()

        issues = await service.list_issues(IssueQueryParams())

        assert [i.title for i in issues] == ["Crash on save", "Slow search", "Typo in footer"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("severity", "status", "expected"),
        [
            ("high", None, ["Slow search", "Crash on save"]),
            (None, "open", ["Typo in footer", "Crash on save"]),
            ("high", "closed", ["Slow search"]),
            ("low", "closed", []),
            ("", "  ", ["Slow search", "Typo in footer", "Crash on save"]),
        ],
    )
    async def test_filters_combine_with_and(self, db_session, severity, status, expected) -> None:
        service = IssueService(db_session)
        await _seed(service)

        issues = await service.list_issues(IssueQueryParams(severity=severity, status=status))

        assert [i.title for i in issues] == expected

    @pytest.mark.asyncio
    async def test_filter_is_exact_match(self, db_session) -> None:
        service = IssueService(db_session)
        await _seed(service)

        assert await service.list_issues(IssueQueryParams(severity="HIGH")) == []
