"""Shared types for the Cavos service adapter."""

from dataclasses import dataclass, field
from typing import Any, Optional


class CavosApiError(Exception):
    """Structured error returned by the Cavos service.

    Carries the upstream status code and decoded response body so callers
    can surface them unchanged.
    """

    def __init__(self, message: str, status_code: int = 500, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


@dataclass(frozen=True)
class SdkResult:
    """Upstream payload tagged with its shape.

    "wrapped" bodies carry the payload under a `data` member; "raw" bodies
    are the payload itself.
    """

    kind: str
    body: Any

    RAW = "raw"
    WRAPPED = "wrapped"

    @classmethod
    def from_body(cls, body: Any) -> "SdkResult":
        if isinstance(body, dict) and body.get("data") is not None:
            return cls(kind=cls.WRAPPED, body=body)
        return cls(kind=cls.RAW, body=body)

    @property
    def is_wrapped(self) -> bool:
        return self.kind == self.WRAPPED

    def unwrap(self) -> Any:
        if self.is_wrapped:
            return self.body["data"]
        return self.body


@dataclass
class TransactionCall:
    """A single contract invocation."""

    to: str
    selector: str
    calldata: list[str] = field(default_factory=list)

    def as_wallet_call(self) -> dict:
        return {"to": self.to, "selector": self.selector, "calldata": list(self.calldata)}

    def as_account_call(self) -> dict:
        return {
            "contractAddress": self.to,
            "entrypoint": self.selector,
            "calldata": list(self.calldata),
        }
