"""Wallet endpoints: deployment, balances, call execution, amounts."""

import logging
import re
from typing import Optional, Union

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from cosmic_gateway.amounts import format_amount, parse_decimals
from cosmic_gateway.cavos.base import TransactionCall
from cosmic_gateway.cavos.client import CavosClient
from cosmic_gateway.config import get_settings
from cosmic_gateway.web import responses
from cosmic_gateway.web.contracts.common import ENVELOPE_RESPONSES
from cosmic_gateway.web.contracts.wallet import (
    DeployWalletRequest,
    ExecuteCallsRequest,
    FormatAmountRequest,
)
from cosmic_gateway.web.dependencies import get_cavos_client
from cosmic_gateway.web.validators import ValidationFailed, require, validate_calls

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/wallet", tags=["wallet"], responses=ENVELOPE_RESPONSES)

PADDED_ADDRESS_PATTERN = re.compile(r"0x[0-9a-fA-F]{64}")


@router.post("/deploy", status_code=201)
async def deploy_wallet(
    request: Optional[DeployWalletRequest] = None,
    client: CavosClient = Depends(get_cavos_client),
) -> JSONResponse:
    """Deploy a new wallet on the requested network."""
    network = (request and request.network) or get_settings().default_network
    logger.info(f"Deploying wallet on network {network}")

    try:
        result = await client.deploy_wallet(network)
    except Exception as e:
        return responses.failure(
            e,
            upstream_message="Wallet deployment failed",
            internal_message="Internal server error during wallet deployment",
        )

    return responses.success(result.unwrap(), "Wallet deployed successfully", 201)


@router.get("/balance")
async def get_balance(
    address: Optional[str] = None,
    token_address: Optional[str] = Query(None, alias="tokenAddress"),
    decimals: Optional[str] = None,
    client: CavosClient = Depends(get_cavos_client),
) -> JSONResponse:
    """Get the balance of a token for an address.

    Query: address, tokenAddress, decimals (default 18)
    """
    require("Address and tokenAddress are required", address=address, tokenAddress=token_address)
    try:
        token_decimals = parse_decimals(decimals)
    except ValueError as e:
        raise ValidationFailed(str(e))

    logger.info(f"Getting balance for {address}, token {token_address}")

    try:
        result = await client.get_balance(address, token_address, token_decimals)
    except Exception as e:
        return responses.failure(
            e,
            upstream_message="Failed to get balance",
            internal_message="Internal server error while getting balance",
        )

    return responses.success(result.unwrap(), "Balance retrieved successfully")


@router.post("/execute-calls")
async def execute_calls(
    request: ExecuteCallsRequest,
    client: CavosClient = Depends(get_cavos_client),
) -> JSONResponse:
    """Execute a batch of contract calls from an app-managed wallet."""
    require(
        "calls, address, and hashedPk are required",
        calls=request.calls,
        address=request.address,
        hashedPk=request.hashed_pk,
    )
    raw_calls = validate_calls(request.calls)
    calls = [
        TransactionCall(
            to=str(call["to"]),
            selector=str(call["selector"]),
            calldata=[str(word) for word in call["calldata"]],
        )
        for call in raw_calls
    ]

    network = request.network or get_settings().default_network
    logger.info(f"Executing {len(calls)} calls for {request.address} on network {network}")

    try:
        result = await client.execute_calls(calls, request.address, request.hashed_pk, network)
    except Exception as e:
        return responses.failure(
            e,
            upstream_message="Failed to execute calls",
            internal_message="Internal server error while executing calls",
        )

    return responses.success(result.unwrap(), "Transaction calls executed successfully")


@router.post("/format-amount")
async def format_amount_endpoint(request: FormatAmountRequest) -> JSONResponse:
    """Scale an amount to base units and split it into u256 words."""
    amount: Union[str, int, float, None] = request.amount
    if amount is None or amount == "":
        raise ValidationFailed("Amount is required")

    try:
        formatted = format_amount(amount, request.decimals)
    except ValueError as e:
        raise ValidationFailed(str(e))

    logger.debug(f"Formatted {amount} with {formatted.decimals} decimals")
    return responses.success(formatted.to_dict(), "Amount formatted successfully")


@router.get("/info/{address}")
async def get_wallet_info(address: str) -> JSONResponse:
    """Describe an address without calling upstream.

    An address is considered valid when it is 0x followed by 64 hex digits.
    """
    require("Wallet address is required", address=address)

    wallet_info = {
        "address": address,
        "isValid": _is_padded_address(address),
        "network": get_settings().default_network,
        "timestamp": responses.utc_timestamp(),
    }
    return responses.success(wallet_info, "Wallet info retrieved successfully")


def _is_padded_address(address: str) -> bool:
    return bool(PADDED_ADDRESS_PATTERN.fullmatch(address))
