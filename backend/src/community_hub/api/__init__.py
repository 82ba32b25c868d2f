"""
API package for the Community Hub backend.

This package contains FastAPI routers for all API endpoints.
"""

from .faqs import router as faqs_router
from .health import router as health_router
from .issues import router as issues_router
from .plugins import router as plugins_router
from .tags import router as tags_router

__all__ = [
    "faqs_router",
    "health_router",
    "issues_router",
    "plugins_router",
    "tags_router",
]
