"""Wallet request contracts."""

from typing import Any, Optional, Union

from pydantic import Field

from cosmic_gateway.web.contracts.common import RequestModel


class DeployWalletRequest(RequestModel):
    """Request to deploy a new app-managed wallet."""

    network: Optional[str] = Field(None, description="Network (defaults to DEFAULT_NETWORK)")


class ExecuteCallsRequest(RequestModel):
    """Request to execute contract calls from an app-managed wallet.

    Each call is {"to": ..., "selector": ..., "calldata": [...]}.
    """

    network: Optional[str] = Field(None, description="Network (defaults to DEFAULT_NETWORK)")
    calls: Optional[Any] = Field(None, description="Calls to execute")
    address: Optional[str] = Field(None, description="Wallet address")
    hashed_pk: Optional[str] = Field(None, alias="hashedPk", description="Hashed private key")


class FormatAmountRequest(RequestModel):
    """Request to scale an amount into base units."""

    amount: Optional[Union[str, int, float]] = Field(None, description="Decimal amount")
    decimals: Optional[Union[int, str]] = Field(None, description="Token decimals (default 18)")
