"""Health check API endpoint.

Reports whether the store answers a trivial query, along with the running
version and environment.
"""

import time

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import get_settings_instance
from ..core.database import check_db_connection
from ..core.logging import get_logger
from ..core.response import HubResponse
from .dependencies import get_db

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", summary="Health check", description="Check database connectivity and report version.")
async def health_check(db: AsyncSession = Depends(get_db)):
    settings = get_settings_instance()
    start = time.perf_counter()
    db_ok = await check_db_connection(db)
    elapsed_ms = round((time.perf_counter() - start) * 1000, 2)

    health_data = {
        "status": "healthy" if db_ok else "unhealthy",
        "timestamp": time.time(),
        "version": settings.version,
        "environment": settings.environment,
        "checks": {
            "database": {"status": "healthy", "response_time_ms": elapsed_ms}
            if db_ok
            else {"status": "unhealthy"},
        },
    }

    if not db_ok:
        logger.warning("Health check failed: database unreachable")
        return HubResponse.success(health_data, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    return HubResponse.success(health_data)
