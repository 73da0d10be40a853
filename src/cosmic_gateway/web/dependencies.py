"""FastAPI dependencies shared by the controllers."""

from typing import Optional

from fastapi import Header

from cosmic_gateway.cavos.client import CavosClient

BEARER_PREFIX = "Bearer "


def get_cavos_client() -> CavosClient:
    """Cavos client built from current settings."""
    return CavosClient.from_settings()


def bearer_token(authorization: Optional[str] = Header(None)) -> str:
    """Token from a `Bearer <token>` Authorization header, or empty."""
    if authorization and authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):].strip()
    return ""


def resolve_access_token(body_token: Optional[str], header_token: str) -> str:
    """Body accessToken wins over the Authorization header."""
    return body_token or header_token
