"""
JSON response helpers shared by every API view.
"""

import logging
from typing import Any

from django.http import JsonResponse

from pydantic import BaseModel

from apps.web.core.exceptions import APIError

logger = logging.getLogger(__name__)


def _cors_headers() -> dict[str, str]:
    """CORS headers for the public site."""
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET, POST, PUT, PATCH, DELETE, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


def json_response(data: Any, status: int = 200) -> JsonResponse:
    """Create a JSON response with CORS headers.

    Pydantic models (or lists of them) are dumped in JSON mode, by alias.
    """
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", by_alias=True)
    elif isinstance(data, list):
        data = [
            item.model_dump(mode="json", by_alias=True)
            if isinstance(item, BaseModel)
            else item
            for item in data
        ]

    response = JsonResponse(data, status=status, safe=False)
    for key, value in _cors_headers().items():
        response[key] = value
    return response


def error_response(exc: Exception, component: str = "API") -> JsonResponse:
    """
    Translate any exception into a JSON error response.

    APIError subclasses carry their own status and code. Anything else is
    logged with the component tag and answered with a generic 500 that never
    includes exception detail.
    """
    if isinstance(exc, APIError):
        body: dict[str, Any] = {"error": exc.code, "message": exc.message}
        if exc.details:
            body["details"] = exc.details
        if exc.status_code >= 500:
            logger.error("[%s] %s", component, exc.message, exc_info=exc)
        return json_response(body, status=exc.status_code)

    logger.error("[%s] Unhandled error: %s", component, exc, exc_info=exc)
    return json_response(
        {"error": "internal_error", "message": "Internal Server Error"},
        status=500,
    )
