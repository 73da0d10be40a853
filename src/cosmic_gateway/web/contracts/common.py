"""Shared API contracts."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ApiResponse(BaseModel):
    """Envelope returned by every endpoint.

    Exactly one of `data` (success) or `error` (failure) is populated.
    """

    success: bool = Field(..., description="Whether the operation succeeded")
    data: Optional[Any] = Field(None, description="Operation payload on success")
    message: Optional[str] = Field(None, description="Human-readable success message")
    error: Optional[str] = Field(None, description="Error message on failure")
    details: Optional[Any] = Field(None, description="Upstream or validation details")
    timestamp: str = Field(..., description="ISO-8601 UTC timestamp")


class RequestModel(BaseModel):
    """Base for request bodies.

    Fields are optional at the schema level so missing values reach the
    validators and get a specific message.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


ENVELOPE_RESPONSES: dict = {
    400: {"model": ApiResponse, "description": "Validation error"},
    500: {"model": ApiResponse, "description": "Upstream or internal failure"},
}
