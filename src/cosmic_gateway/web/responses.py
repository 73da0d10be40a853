"""Uniform JSON response envelope.

Success: {"success": true, "data": ..., "message": ..., "timestamp": ...}
Error:   {"success": false, "error": ..., "timestamp": ..., "details": ...}
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from cosmic_gateway.cavos.base import CavosApiError

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def success(data: Any, message: Optional[str] = None, status_code: int = 200) -> JSONResponse:
    body: dict[str, Any] = {"success": True, "data": data}
    if message is not None:
        body["message"] = message
    body["timestamp"] = utc_timestamp()
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def error(message: str, status_code: int = 500, details: Optional[Any] = None) -> JSONResponse:
    body: dict[str, Any] = {
        "success": False,
        "error": message,
        "timestamp": utc_timestamp(),
    }
    if details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def validation_error(message: str, details: Optional[Any] = None) -> JSONResponse:
    return error(message, 400, details)


def not_found(message: str = "Resource not found") -> JSONResponse:
    return error(message, 404)


def unauthorized(message: str = "Unauthorized") -> JSONResponse:
    return error(message, 401)


def forbidden(message: str = "Forbidden") -> JSONResponse:
    return error(message, 403)


def failure(
    exc: Exception,
    upstream_message: str,
    internal_message: str,
    upstream_status: int = 500,
    internal_status: int = 500,
) -> JSONResponse:
    """Map a failed upstream call to an error response.

    Structured Cavos errors keep their status and message. Anything else
    gets `internal_status` and a generic message.

    Args:
        exc: The raised exception
        upstream_message: Message if the Cavos error carries none
        internal_message: Message for unstructured failures
        upstream_status: Status if the Cavos error carries none
        internal_status: Status for unstructured failures
    """
    if isinstance(exc, CavosApiError):
        return error(
            exc.message or upstream_message,
            exc.status_code or upstream_status,
            exc.details,
        )

    logger.error(f"{internal_message}: {exc!r}")
    return error(internal_message, internal_status)
