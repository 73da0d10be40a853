"""Authentication request contracts."""

from typing import Optional

from pydantic import Field

from cosmic_gateway.web.contracts.common import RequestModel


class RegisterUserRequest(RequestModel):
    """Request to create a Cavos user and wallet."""

    email: Optional[str] = Field(None, description="User email")
    password: Optional[str] = Field(None, description="Password, at least 8 characters")
    network: Optional[str] = Field(None, description="Network (defaults to DEFAULT_NETWORK)")


class LoginUserRequest(RequestModel):
    """Request to sign a user in."""

    email: Optional[str] = Field(None, description="User email")
    password: Optional[str] = Field(None, description="Password")


class RefreshTokenRequest(RequestModel):
    """Request to exchange a refresh token for a new access token."""

    refresh_token: Optional[str] = Field(None, alias="refreshToken", description="Refresh token")
