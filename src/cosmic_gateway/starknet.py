"""Starknet calldata helpers and function selectors.

Calldata words are strings the Starknet runtime accepts as felts: either
0x-prefixed hex or plain decimal integers. Everything here is pure.
"""

import logging
from enum import Enum
from typing import Union

from eth_utils import keccak

logger = logging.getLogger(__name__)

# Starknet selectors are keccak256(name) truncated to 250 bits
SELECTOR_MASK = (1 << 250) - 1

UINT128_BASE = 1 << 128
UINT256_LIMIT = 1 << 256

# Precomputed keccak256(name) mod 2**250 for every Cosmic Trader entrypoint.
# Only consulted when hashing fails; tests recompute each entry.
KNOWN_SELECTORS: dict[str, str] = {
    # User management
    "register_user": "0x1be21fef3985ab9ddc03985d8a5261be77f1e5a73fbcb88141f8c776a97a803",
    "get_user_profile": "0x220fad8c6dd83037dac406e8a28569f07af9f0335d7ecb80285d748320a05a9",
    "is_user_registered": "0x148127ce9104a5a3e9e8197de65a1d80f6585b2972f444ad77e4c9b13fada4",
    "add_xp": "0x1e3867b32086ca2813e789947c1387a48e4518b097d5c9648c9b6ec00c90044",
    "update_streak": "0x1de93010574b8b5e0be99ef4ddd0ad5266cb78ba5f754409eedd7ace46b46d3",
    "update_trading_stats": "0x26cf71c54566c7a57793e61f62185cb8be4fe4e605037ad0bd9fbdb8262561",
    # Trading
    "start_mock_session": "0x327ad949b593d50172fc34fd281044c7c8de391398883ec8861a0de31dae839",
    "place_mock_trade": "0x23aa322b2f2798e930fd61551c562084f95649c9b2c5c568890718770c9294e",
    "close_mock_trade": "0x30b55e69341cff99abe6fe44352891751b36bb93826366533c3012e85ed116d",
    "end_mock_session": "0x288db0a1ddd81919905410804a57251b141838f9bde46cce726afe264ab85b7",
    "place_real_trade": "0x3e0f5a5045494139b3f9b14f5213152ea6f8406ed3877a5f13e71c7bcdf2858",
    "close_real_trade": "0x21b83e9cf7b848a446f733d413108a797364762defca1e24672b9ab4d6d1948",
    "get_trade": "0x27c5ddb73044e2e9c92a54a658d7c6bde3971ccf79a3126e63bb564ed8fc2fd",
    "get_user_trades": "0x3c84a1a9e1cd392e499e9a1accd3e0ba7f1057eb0c15cc39174d323b43c67f4",
    "get_active_trades": "0x3ba370019583a270b67fee6a3b5ef4c82557695c1a2b0e883a05e2a22897030",
    # Views
    "get_streak_info": "0x300563f781976b7aa268dc61ee62237beaaf9fdf40a33ef1cd91d9de22661fa",
    "get_total_users": "0xddddb1e6ec3b1a3a62b1de27ecc9a4a2c5ce1714d3829bd241f33e02003a8f",
    "get_total_trades": "0xb8732ba8d12e8abee3a259284019d43f7603ec00ca45f18a96e384c64df60a",
    "calculate_level_from_xp": "0x6265b9e7cf5f8502505de2b3c973f744dd5b1f352d343efc818e641eff8091",
    "calculate_trade_xp": "0x27b1f6ad365f0fecfd0053b23a22ac13c486c7120d3118873dbaa559e554869",
    "get_daily_trading_volume": "0x84adb1061f1938505ead0869f418615e1e00b6bbf129ad08b31f81139a82ab",
    "get_user_trading_stats": "0x3587d89822d70b168d42dc1bc4a46b7fe304c1a7a7373310d2a1b92d8c5c3",
}


class TradeDirection(str, Enum):
    """Trade direction as declared by the Cosmic Trader contract."""

    LONG = "Long"
    SHORT = "Short"


# Enum variant index used by the contract's Serde
DIRECTION_CODES = {
    TradeDirection.LONG: 0,
    TradeDirection.SHORT: 1,
}


def compute_selector(function_name: str) -> str:
    """Hash a function name into its Starknet selector."""
    digest = keccak(text=function_name)
    return hex(int.from_bytes(digest, "big") & SELECTOR_MASK)


def get_function_selector(function_name: str) -> str:
    """Resolve a function name to its selector.

    Falls back to KNOWN_SELECTORS if hashing raises. Unknown names resolve
    to "0x0" on that path.
    """
    try:
        return compute_selector(function_name)
    except Exception as e:
        logger.warning(f"Selector hashing failed for {function_name}, using table: {e}")
        return KNOWN_SELECTORS.get(function_name, "0x0")


def to_felt(value: Union[str, int]) -> str:
    """Encode a short string or integer as a felt.

    Strings already prefixed with 0x pass through untouched; other strings
    are encoded as their UTF-8 bytes in hex.
    """
    if isinstance(value, bool):
        return bool_to_felt(value)
    if isinstance(value, int):
        if value < 0:
            raise ValueError("felt values must be non-negative")
        return hex(value)
    if value.startswith("0x"):
        return value
    return "0x" + value.encode("utf-8").hex()


def bool_to_felt(value: bool) -> str:
    return "0x1" if value else "0x0"


def trade_direction_to_felt(direction: Union[str, TradeDirection]) -> str:
    """Map Long/Short to the contract's enum index.

    Raises:
        ValueError: for anything other than "Long" or "Short"
    """
    try:
        parsed = TradeDirection(direction)
    except ValueError:
        raise ValueError('direction must be either "Long" or "Short"')
    return hex(DIRECTION_CODES[parsed])


def format_address(address: str) -> str:
    """Prefix 0x if missing. No length or checksum validation."""
    if not address.startswith("0x"):
        return "0x" + address
    return address


def split_uint256(value: int) -> tuple[int, int]:
    """Split an integer into (low, high) 128-bit words."""
    if value < 0 or value >= UINT256_LIMIT:
        raise ValueError("value does not fit in a uint256")
    return value % UINT128_BASE, value // UINT128_BASE


def uint256_calldata(value: int) -> list[str]:
    """Calldata words for a u256 argument, low word first."""
    low, high = split_uint256(value)
    return [str(low), str(high)]


# ======================
# Cosmic Trader contract
# ======================

COSMIC_TRADER_CONTRACT_ADDRESS = "0x034a2d5378925319ea42550a268a46cb04f33040ad97f3e3507e41fd59a67df1"
COSMIC_TRADER_CLASS_HASH = "0x026e9f7afcd9810f46f7b6b38aac60307c4de204a7553d55079bc43046572407"

COSMIC_TRADER_FUNCTIONS: dict[str, list[str]] = {
    "userManagement": [
        "register_user",
        "get_user_profile",
        "is_user_registered",
        "add_xp",
        "update_streak",
        "update_trading_stats",
    ],
    "trading": [
        "start_mock_session",
        "place_mock_trade",
        "close_mock_trade",
        "end_mock_session",
        "place_real_trade",
        "close_real_trade",
    ],
    "views": [
        "get_trade",
        "get_user_trades",
        "get_active_trades",
        "get_streak_info",
        "get_total_users",
        "get_total_trades",
        "calculate_level_from_xp",
        "calculate_trade_xp",
        "get_daily_trading_volume",
        "get_user_trading_stats",
    ],
}


def cosmic_trader_selectors() -> dict[str, str]:
    """Selector table keyed by upper-case function name."""
    return {name.upper(): get_function_selector(name) for name in KNOWN_SELECTORS}
