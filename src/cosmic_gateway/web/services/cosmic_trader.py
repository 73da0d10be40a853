"""Call builders for the Cosmic Trader contract.

Each builder turns validated request values into a TransactionCall whose
calldata follows the entrypoint signature order. Numeric amounts are
scaled to 18 decimals and emitted as u256 (low, high) pairs.
"""

from typing import Union

from cosmic_gateway.amounts import FormattedAmount, format_amount
from cosmic_gateway.cavos.base import TransactionCall
from cosmic_gateway.starknet import (
    COSMIC_TRADER_CLASS_HASH,
    COSMIC_TRADER_CONTRACT_ADDRESS,
    COSMIC_TRADER_FUNCTIONS,
    TradeDirection,
    cosmic_trader_selectors,
    format_address,
    get_function_selector,
    to_felt,
    trade_direction_to_felt,
)

TRADE_DECIMALS = 18

Number = Union[str, int, float]


def _call(function_name: str, calldata: list[str]) -> TransactionCall:
    return TransactionCall(
        to=COSMIC_TRADER_CONTRACT_ADDRESS,
        selector=get_function_selector(function_name),
        calldata=calldata,
    )


def _scaled(value: Number) -> FormattedAmount:
    return format_amount(value, TRADE_DECIMALS)


def register_user_call() -> TransactionCall:
    return _call("register_user", [])


def start_mock_session_call() -> TransactionCall:
    return _call("start_mock_session", [])


def end_mock_session_call(session_id: int) -> TransactionCall:
    return _call("end_mock_session", [str(session_id)])


def place_trade_call(
    real: bool,
    asset: str,
    amount: Number,
    direction: TradeDirection,
    price: Number,
) -> TransactionCall:
    """Build place_mock_trade or place_real_trade.

    Calldata: asset, amount.low, amount.high, direction, price.low, price.high
    """
    calldata = [to_felt(asset)]
    calldata += _scaled(amount).calldata()
    calldata.append(trade_direction_to_felt(direction))
    calldata += _scaled(price).calldata()
    return _call("place_real_trade" if real else "place_mock_trade", calldata)


def close_trade_call(real: bool, trade_id: int, exit_price: Number) -> TransactionCall:
    calldata = [str(trade_id)] + _scaled(exit_price).calldata()
    return _call("close_real_trade" if real else "close_mock_trade", calldata)


def add_xp_call(target_user: str, amount: Number) -> TransactionCall:
    return _call("add_xp", [format_address(target_user)] + _scaled(amount).calldata())


def update_streak_call(target_user: str) -> TransactionCall:
    return _call("update_streak", [format_address(target_user)])


def update_trading_stats_call(target_user: str, volume: Number) -> TransactionCall:
    calldata = [format_address(target_user)] + _scaled(volume).calldata()
    return _call("update_trading_stats", calldata)


def contract_info(network: str) -> dict:
    """Static descriptor of the deployed contract."""
    register = register_user_call()
    return {
        "contractAddress": COSMIC_TRADER_CONTRACT_ADDRESS,
        "classHash": COSMIC_TRADER_CLASS_HASH,
        "network": network,
        "availableFunctions": {
            group: list(names) for group, names in COSMIC_TRADER_FUNCTIONS.items()
        },
        "functionSelectors": cosmic_trader_selectors(),
        "debugInfo": {
            "registerUserSelector": register.selector,
            "registerUserCall": register.as_wallet_call(),
        },
    }
