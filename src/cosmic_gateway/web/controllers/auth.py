"""User authentication endpoints backed by Cavos auth."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from cosmic_gateway.cavos.client import CavosClient
from cosmic_gateway.config import get_settings
from cosmic_gateway.web import responses
from cosmic_gateway.web.contracts.auth import (
    LoginUserRequest,
    RefreshTokenRequest,
    RegisterUserRequest,
)
from cosmic_gateway.web.contracts.common import ENVELOPE_RESPONSES
from cosmic_gateway.web.dependencies import get_cavos_client
from cosmic_gateway.web.validators import (
    require,
    validate_email,
    validate_password,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"], responses=ENVELOPE_RESPONSES)


@router.post("/register", status_code=201)
async def register_user(
    request: RegisterUserRequest,
    client: CavosClient = Depends(get_cavos_client),
) -> JSONResponse:
    """Register a new user.

    Creates the Cavos user and its wallet on the requested network.
    """
    require("Email and password are required", email=request.email, password=request.password)
    validate_email(request.email)
    validate_password(request.password)

    network = request.network or get_settings().default_network
    logger.info(f"Registering user {request.email} on network {network}")

    try:
        result = await client.sign_up(request.email, request.password, network)
    except Exception as e:
        return responses.failure(
            e,
            upstream_message="Registration failed",
            internal_message="Internal server error during registration",
        )

    return responses.success(result.unwrap(), "User registered successfully", 201)


@router.post("/login")
async def login_user(
    request: LoginUserRequest,
    client: CavosClient = Depends(get_cavos_client),
) -> JSONResponse:
    """Sign a user in and return their tokens."""
    require("Email and password are required", email=request.email, password=request.password)

    logger.info(f"Logging in user {request.email}")

    try:
        result = await client.sign_in(request.email, request.password)
    except Exception as e:
        return responses.failure(
            e,
            upstream_message="Login failed",
            internal_message="Login failed",
            upstream_status=401,
            internal_status=401,
        )

    return responses.success(result.unwrap(), "User logged in successfully")


@router.delete("/user/{user_id}")
async def delete_user(
    user_id: str,
    client: CavosClient = Depends(get_cavos_client),
) -> JSONResponse:
    """Delete a user."""
    require("User ID is required", user_id=user_id)

    logger.info(f"Deleting user {user_id}")

    try:
        result = await client.delete_user(user_id)
    except Exception as e:
        return responses.failure(
            e,
            upstream_message="Delete user failed",
            internal_message="Internal server error during user deletion",
        )

    return responses.success(result.unwrap(), "User deleted successfully")


@router.post("/refresh")
async def refresh_token(
    request: RefreshTokenRequest,
    client: CavosClient = Depends(get_cavos_client),
) -> JSONResponse:
    """Exchange a refresh token for a new access token."""
    require("Refresh token is required", refreshToken=request.refresh_token)

    logger.info("Refreshing access token")

    try:
        result = await client.refresh_token(request.refresh_token)
    except Exception as e:
        return responses.failure(
            e,
            upstream_message="Token refresh failed",
            internal_message="Internal server error during token refresh",
            upstream_status=401,
        )

    return responses.success(result.unwrap(), "Token refreshed successfully")
