"""Request field checks.

Every check runs before any upstream call is made. A failed check raises
ValidationFailed, which the application turns into a 400 response.
"""

import re
from typing import Any, Optional

from cosmic_gateway.starknet import TradeDirection

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 8


class ValidationFailed(Exception):
    """Request input failed validation."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


def is_missing(value: Any) -> bool:
    """True for absent values: None, empty or blank strings, empty lists."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict)):
        return not value
    return False


def require(message: str, **fields: Any) -> None:
    """Raise with `message` if any keyword value is missing."""
    missing = [name for name, value in fields.items() if is_missing(value)]
    if missing:
        raise ValidationFailed(message, {"missing": missing})


def validate_email(email: str) -> None:
    if not EMAIL_PATTERN.match(email):
        raise ValidationFailed("Invalid email format")


def validate_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationFailed(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )


def validate_direction(direction: str) -> TradeDirection:
    try:
        return TradeDirection(direction)
    except ValueError:
        raise ValidationFailed('direction must be either "Long" or "Short"')


def validate_counter(name: str, value: Any) -> int:
    """Parse a trade or session id: a non-negative integer."""
    if isinstance(value, bool):
        raise ValidationFailed(f"{name} must be a non-negative integer")
    try:
        parsed = int(str(value).strip())
    except ValueError:
        raise ValidationFailed(f"{name} must be a non-negative integer")
    if parsed < 0:
        raise ValidationFailed(f"{name} must be a non-negative integer")
    return parsed


def validate_calls(calls: Any) -> list[dict]:
    """Check a calls array: non-empty, each with to, selector and calldata."""
    if not isinstance(calls, list) or not calls:
        raise ValidationFailed("calls must be a non-empty array")

    for index, call in enumerate(calls):
        if (
            not isinstance(call, dict)
            or is_missing(call.get("to"))
            or is_missing(call.get("selector"))
            or not isinstance(call.get("calldata"), list)
        ):
            raise ValidationFailed(
                'Each call must have "to", "selector", and "calldata" fields',
                {"index": index},
            )
    return calls
