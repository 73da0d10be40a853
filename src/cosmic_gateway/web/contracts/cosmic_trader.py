"""Cosmic Trader request contracts.

Every body carries the caller's account `address` and may carry
`accessToken`; otherwise the bearer token from the Authorization header
is used.
"""

from typing import Optional, Union

from pydantic import Field

from cosmic_gateway.web.contracts.common import RequestModel

Number = Union[str, int, float]


class AccountRequest(RequestModel):
    """Base body for calls made from a user's account."""

    address: Optional[str] = Field(None, description="Caller account address")
    access_token: Optional[str] = Field(None, alias="accessToken", description="User access token")


class PlaceTradeRequest(AccountRequest):
    asset: Optional[str] = Field(None, description="Asset symbol or 0x felt")
    amount: Optional[Number] = Field(None, description="Trade amount")
    direction: Optional[str] = Field(None, description='"Long" or "Short"')
    price: Optional[Number] = Field(None, description="Entry price")


class CloseTradeRequest(AccountRequest):
    trade_id: Optional[Union[int, str]] = Field(None, alias="tradeId", description="Trade id")
    exit_price: Optional[Number] = Field(None, alias="exitPrice", description="Exit price")


class EndSessionRequest(AccountRequest):
    session_id: Optional[Union[int, str]] = Field(None, alias="sessionId", description="Session id")


class TargetUserRequest(AccountRequest):
    target_user: Optional[str] = Field(None, alias="targetUser", description="Target user address")


class AddXPRequest(TargetUserRequest):
    amount: Optional[Number] = Field(None, description="XP amount")


class TradingStatsRequest(TargetUserRequest):
    volume: Optional[Number] = Field(None, description="Traded volume")
