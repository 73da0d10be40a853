"""Cosmic Trader contract endpoints.

Each endpoint validates its body, builds one contract call and executes it
from the caller's account with their access token.
"""

import logging
from typing import Callable

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from cosmic_gateway.cavos.base import TransactionCall
from cosmic_gateway.cavos.client import CavosClient
from cosmic_gateway.config import get_settings
from cosmic_gateway.starknet import format_address
from cosmic_gateway.web import responses
from cosmic_gateway.web.contracts.common import ENVELOPE_RESPONSES
from cosmic_gateway.web.contracts.cosmic_trader import (
    AccountRequest,
    AddXPRequest,
    CloseTradeRequest,
    EndSessionRequest,
    PlaceTradeRequest,
    TargetUserRequest,
    TradingStatsRequest,
)
from cosmic_gateway.web.dependencies import bearer_token, get_cavos_client, resolve_access_token
from cosmic_gateway.web.services import cosmic_trader as calls
from cosmic_gateway.web.validators import (
    ValidationFailed,
    require,
    validate_counter,
    validate_direction,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/cosmic-trader",
    tags=["cosmic-trader"],
    responses=ENVELOPE_RESPONSES,
)


def _build(builder: Callable[[], TransactionCall]) -> TransactionCall:
    """Run a call builder, reporting encoding errors as validation failures."""
    try:
        return builder()
    except ValueError as e:
        raise ValidationFailed(str(e))


async def _execute(
    client: CavosClient,
    address: str,
    access_token: str,
    call: TransactionCall,
    action: str,
    done: str,
) -> JSONResponse:
    """Execute a single call and shape the outcome.

    Args:
        action: Lower-case description, e.g. "place mock trade"
        done: Success message
    """
    account = format_address(address)
    logger.info(f"Cosmic Trader {action} for {account}")

    try:
        result = await client.execute_user_calls(
            account,
            [call],
            access_token,
            get_settings().default_network,
        )
    except Exception as e:
        return responses.failure(
            e,
            upstream_message=f"Failed to {action}",
            internal_message=f"Failed to {action}",
        )

    return responses.success(result.unwrap(), done)


def _require_account(request: AccountRequest, token: str, message: str, **fields) -> None:
    require(message, address=request.address, accessToken=token, **fields)


@router.get("/contract-info")
async def get_contract_info() -> JSONResponse:
    """Contract address, class hash, selectors and grouped function names."""
    info = calls.contract_info(get_settings().default_network)
    return responses.success(info, "Contract information retrieved successfully")


# ======================
# User management
# ======================


@router.post("/register")
async def register_user(
    request: AccountRequest,
    header_token: str = Depends(bearer_token),
    client: CavosClient = Depends(get_cavos_client),
) -> JSONResponse:
    """Register the caller on the Cosmic Trader contract."""
    token = resolve_access_token(request.access_token, header_token)
    _require_account(request, token, "Wallet address and accessToken are required")

    call = calls.register_user_call()
    return await _execute(
        client,
        request.address,
        token,
        call,
        "register user",
        "User registered successfully",
    )


@router.post("/add-xp")
async def add_xp(
    request: AddXPRequest,
    header_token: str = Depends(bearer_token),
    client: CavosClient = Depends(get_cavos_client),
) -> JSONResponse:
    """Add XP to a user."""
    token = resolve_access_token(request.access_token, header_token)
    _require_account(
        request,
        token,
        "address, accessToken, targetUser, and amount are required",
        targetUser=request.target_user,
        amount=request.amount,
    )

    call = _build(lambda: calls.add_xp_call(request.target_user, request.amount))
    return await _execute(
        client,
        request.address,
        token,
        call,
        "add XP",
        "XP added successfully",
    )


@router.post("/update-streak")
async def update_streak(
    request: TargetUserRequest,
    header_token: str = Depends(bearer_token),
    client: CavosClient = Depends(get_cavos_client),
) -> JSONResponse:
    """Update a user's trading streak."""
    token = resolve_access_token(request.access_token, header_token)
    _require_account(
        request,
        token,
        "address, accessToken, and targetUser are required",
        targetUser=request.target_user,
    )

    call = calls.update_streak_call(request.target_user)
    return await _execute(
        client,
        request.address,
        token,
        call,
        "update streak",
        "Streak updated successfully",
    )


@router.post("/update-trading-stats")
async def update_trading_stats(
    request: TradingStatsRequest,
    header_token: str = Depends(bearer_token),
    client: CavosClient = Depends(get_cavos_client),
) -> JSONResponse:
    """Record traded volume for a user."""
    token = resolve_access_token(request.access_token, header_token)
    _require_account(
        request,
        token,
        "address, accessToken, targetUser, and volume are required",
        targetUser=request.target_user,
        volume=request.volume,
    )

    call = _build(lambda: calls.update_trading_stats_call(request.target_user, request.volume))
    return await _execute(
        client,
        request.address,
        token,
        call,
        "update trading stats",
        "Trading stats updated successfully",
    )


# ======================
# Mock trading
# ======================


@router.post("/start-mock-session")
async def start_mock_session(
    request: AccountRequest,
    header_token: str = Depends(bearer_token),
    client: CavosClient = Depends(get_cavos_client),
) -> JSONResponse:
    """Start a mock trading session."""
    token = resolve_access_token(request.access_token, header_token)
    _require_account(request, token, "Wallet address and accessToken are required")

    call = calls.start_mock_session_call()
    return await _execute(
        client,
        request.address,
        token,
        call,
        "start mock session",
        "Mock session started successfully",
    )


@router.post("/place-mock-trade")
async def place_mock_trade(
    request: PlaceTradeRequest,
    header_token: str = Depends(bearer_token),
    client: CavosClient = Depends(get_cavos_client),
) -> JSONResponse:
    """Place a mock trade."""
    return await _place_trade(request, header_token, client, real=False)


@router.post("/close-mock-trade")
async def close_mock_trade(
    request: CloseTradeRequest,
    header_token: str = Depends(bearer_token),
    client: CavosClient = Depends(get_cavos_client),
) -> JSONResponse:
    """Close a mock trade at an exit price."""
    return await _close_trade(request, header_token, client, real=False)


@router.post("/end-mock-session")
async def end_mock_session(
    request: EndSessionRequest,
    header_token: str = Depends(bearer_token),
    client: CavosClient = Depends(get_cavos_client),
) -> JSONResponse:
    """End a mock trading session."""
    token = resolve_access_token(request.access_token, header_token)
    _require_account(
        request,
        token,
        "address, accessToken, and sessionId are required",
        sessionId=request.session_id,
    )
    session_id = validate_counter("sessionId", request.session_id)

    call = calls.end_mock_session_call(session_id)
    return await _execute(
        client,
        request.address,
        token,
        call,
        "end mock session",
        "Mock session ended successfully",
    )


# ======================
# Real trading
# ======================


@router.post("/place-real-trade")
async def place_real_trade(
    request: PlaceTradeRequest,
    header_token: str = Depends(bearer_token),
    client: CavosClient = Depends(get_cavos_client),
) -> JSONResponse:
    """Place a real trade."""
    return await _place_trade(request, header_token, client, real=True)


@router.post("/close-real-trade")
async def close_real_trade(
    request: CloseTradeRequest,
    header_token: str = Depends(bearer_token),
    client: CavosClient = Depends(get_cavos_client),
) -> JSONResponse:
    """Close a real trade at an exit price."""
    return await _close_trade(request, header_token, client, real=True)


async def _place_trade(
    request: PlaceTradeRequest,
    header_token: str,
    client: CavosClient,
    real: bool,
) -> JSONResponse:
    token = resolve_access_token(request.access_token, header_token)
    _require_account(
        request,
        token,
        "address, accessToken, asset, amount, direction, and price are required",
        asset=request.asset,
        amount=request.amount,
        direction=request.direction,
        price=request.price,
    )
    direction = validate_direction(request.direction)

    call = _build(
        lambda: calls.place_trade_call(
            real, request.asset, request.amount, direction, request.price
        )
    )
    kind = "real" if real else "mock"
    return await _execute(
        client,
        request.address,
        token,
        call,
        f"place {kind} trade",
        f"{kind.capitalize()} trade placed successfully",
    )


async def _close_trade(
    request: CloseTradeRequest,
    header_token: str,
    client: CavosClient,
    real: bool,
) -> JSONResponse:
    token = resolve_access_token(request.access_token, header_token)
    _require_account(
        request,
        token,
        "address, accessToken, tradeId, and exitPrice are required",
        tradeId=request.trade_id,
        exitPrice=request.exit_price,
    )
    trade_id = validate_counter("tradeId", request.trade_id)

    call = _build(lambda: calls.close_trade_call(real, trade_id, request.exit_price))
    kind = "real" if real else "mock"
    return await _execute(
        client,
        request.address,
        token,
        call,
        f"close {kind} trade",
        f"{kind.capitalize()} trade closed successfully",
    )
