"""Response helpers for the Community Hub API.

Success bodies are the resource itself (an object or an array), error bodies
are always ``{"error": "<message>"}``.
"""

from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from .logging import get_logger

logger = get_logger(__name__)


def to_serializable(obj):
    """Recursively convert Pydantic models, lists, and dicts to serializable types."""
    if hasattr(obj, "model_dump"):
        return obj.model_dump(by_alias=True)
    if isinstance(obj, list):
        return [to_serializable(item) for item in obj]
    if isinstance(obj, dict):
        return {k: to_serializable(v) for k, v in obj.items()}
    return obj


class HubResponse:
    """Consistent JSON responses for API endpoints."""

    @staticmethod
    def success(
        data: Any, status_code: int = status.HTTP_200_OK, headers: dict[str, str] | None = None
    ) -> JSONResponse:
        """Create a successful response.

        Args:
            data: Pydantic models, lists of models, dicts or plain JSON data
            status_code: HTTP status code (default: 200)
            headers: Optional response headers

        """
        content = jsonable_encoder(to_serializable(data))
        return JSONResponse(content=content, status_code=status_code, headers=headers)

    @staticmethod
    def error(
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        """Create an error response with the ``{"error": message}`` body."""
        logger.debug(
            "Creating error response",
            extra={"status_code": status_code, "error_message": message},
        )
        return JSONResponse(content={"error": message}, status_code=status_code, headers=headers)

    @staticmethod
    def created(data: Any, headers: dict[str, str] | None = None) -> JSONResponse:
        """Create a 201 Created response."""
        return HubResponse.success(data, status.HTTP_201_CREATED, headers)
