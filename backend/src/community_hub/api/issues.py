"""Issue API endpoints."""

import logging

from fastapi import APIRouter, Depends, Query

from ..core.exceptions import HubException
from ..core.response import HubResponse
from ..schemas.issue import IssueCreate, IssueQueryParams, IssueResponse
from ..services.issue_service import IssueService
from .dependencies import get_issue_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/issues", tags=["issues"])


@router.get(
    "",
    response_model=list[IssueResponse],
    summary="List issues",
    description="List issues newest first. Severity and status filters are exact matches and combine with AND.",
)
async def list_issues(
    severity: str | None = Query(None, description="Only issues with exactly this severity"),
    status: str | None = Query(None, description="Only issues with exactly this status"),
    service: IssueService = Depends(get_issue_service),
):
    try:
        params = IssueQueryParams(severity=severity, status=status)
        issues = await service.list_issues(params)
        logger.debug(f"Listed {len(issues)} issues", extra={"severity": params.severity, "issue_status": params.status})
        return HubResponse.success(issues)
    except HubException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing issues: {e}")
        return HubResponse.error("Failed to fetch issues", status_code=500)


@router.post(
    "",
    response_model=IssueResponse,
    status_code=201,
    summary="Report an issue",
    description="Create an issue. Severity defaults to 'low' and status to 'open'; the timestamp is set by the server.",
)
async def create_issue(issue_data: IssueCreate, service: IssueService = Depends(get_issue_service)):
    try:
        issue = await service.create_issue(issue_data)
        return HubResponse.created(issue)
    except HubException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error creating issue: {e}")
        return HubResponse.error("Failed to add issue", status_code=500)
