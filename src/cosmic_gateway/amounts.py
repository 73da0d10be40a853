"""Decimal amount formatting for u256 contract arguments."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from cosmic_gateway.starknet import UINT256_LIMIT, split_uint256, uint256_calldata

DEFAULT_DECIMALS = 18
# 10**77 is the largest power of ten below 2**256
MAX_DECIMALS = 77


@dataclass(frozen=True)
class FormattedAmount:
    """A decimal amount scaled to base units and split into u256 words."""

    value: int
    decimals: int
    low: int
    high: int

    def calldata(self) -> list[str]:
        """Calldata words for this amount, low word first."""
        return uint256_calldata(self.value)

    def to_dict(self) -> dict:
        return {
            "amount": str(self.value),
            "decimals": self.decimals,
            "uint256": {"low": str(self.low), "high": str(self.high)},
        }


def parse_decimals(decimals: Union[int, str, None]) -> int:
    """Validate a decimals argument. None means the default of 18."""
    if decimals is None or decimals == "":
        return DEFAULT_DECIMALS
    if isinstance(decimals, bool):
        raise ValueError("decimals must be an integer")
    try:
        parsed = int(decimals)
    except (TypeError, ValueError):
        raise ValueError("decimals must be an integer")
    if isinstance(decimals, float) and parsed != decimals:
        raise ValueError("decimals must be an integer")
    if parsed < 0 or parsed > MAX_DECIMALS:
        raise ValueError(f"decimals must be between 0 and {MAX_DECIMALS}")
    return parsed


def format_amount(
    amount: Union[str, int, float, Decimal],
    decimals: Union[int, str, None] = DEFAULT_DECIMALS,
) -> FormattedAmount:
    """Scale a human-readable amount to base units.

    "1.5" with 18 decimals becomes 1500000000000000000. Floats are read
    through their shortest repr, so 0.1 stays 0.1.

    Raises:
        ValueError: if the amount is not a finite non-negative number, has
            more fractional digits than `decimals`, or overflows a u256
    """
    scale = parse_decimals(decimals)

    if isinstance(amount, bool):
        raise ValueError("amount must be a number")
    try:
        parsed = Decimal(str(amount).strip())
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {amount}")

    if not parsed.is_finite():
        raise ValueError(f"Invalid amount: {amount}")
    if parsed < 0:
        raise ValueError("amount must not be negative")
    if parsed.is_zero():
        return FormattedAmount(value=0, decimals=scale, low=0, high=0)

    # 2**256 has 78 digits
    if parsed.adjusted() + scale > MAX_DECIMALS:
        raise ValueError("amount does not fit in a uint256")

    # Work on the digits directly so nothing is rounded to context precision
    _, digits, exponent = parsed.as_tuple()
    coefficient = "".join(str(digit) for digit in digits).rstrip("0")
    shift = exponent + scale + len(digits) - len(coefficient)
    if shift < 0:
        raise ValueError(f"amount has more than {scale} decimal places")
    value = int(coefficient) * 10**shift

    if value >= UINT256_LIMIT:
        raise ValueError("amount does not fit in a uint256")

    low, high = split_uint256(value)
    return FormattedAmount(value=value, decimals=scale, low=low, high=high)
