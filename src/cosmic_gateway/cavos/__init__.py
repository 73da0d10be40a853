"""Cavos service adapter."""

from cosmic_gateway.cavos.base import CavosApiError, SdkResult, TransactionCall
from cosmic_gateway.cavos.client import CavosClient

__all__ = [
    "CavosApiError",
    "CavosClient",
    "SdkResult",
    "TransactionCall",
]
