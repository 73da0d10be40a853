"""Cosmic Gateway: HTTP API in front of Cavos wallets and the Cosmic Trader contract."""

__version__ = "0.1.0"
