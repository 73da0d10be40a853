"""Cavos external API client.

Async HTTP adapter for the Cavos wallet and authentication service.
App-level calls authenticate with the organization API secret, account
calls with the end user's access token.
"""

import logging
from typing import Any, Optional

import httpx

from cosmic_gateway.cavos.base import CavosApiError, SdkResult, TransactionCall
from cosmic_gateway.config import Settings, get_settings

logger = logging.getLogger(__name__)


class CavosClient:
    """Client for the Cavos external API."""

    def __init__(
        self,
        api_secret: str,
        hash_secret: str,
        base_url: str,
        default_network: str = "sepolia",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            api_secret: Organization API secret
            hash_secret: Secret the service uses to decrypt hashed keys
            base_url: External API base URL
            default_network: Network used when a call does not name one
            timeout: Request timeout in seconds
            transport: Optional httpx transport override
        """
        self.api_secret = api_secret
        self.hash_secret = hash_secret
        self.base_url = base_url.rstrip("/")
        self.default_network = default_network
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "CavosClient":
        settings = settings or get_settings()
        return cls(
            api_secret=settings.cavos_api_secret,
            hash_secret=settings.cavos_hash_secret,
            base_url=settings.cavos_base_url,
            default_network=settings.default_network,
            timeout=settings.cavos_timeout,
        )

    async def _request(
        self,
        method: str,
        path: str,
        token: Optional[str] = None,
        json: Optional[dict] = None,
        params: Optional[dict] = None,
    ) -> SdkResult:
        """Send a request and tag the decoded body.

        Raises:
            CavosApiError: on any non-2xx response
            httpx.HTTPError: on transport failures
        """
        headers = {
            "Authorization": f"Bearer {token or self.api_secret}",
            "Content-Type": "application/json",
        }

        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            response = await client.request(
                method,
                path,
                headers=headers,
                json=json,
                params=params,
            )

        body = _decode_body(response)

        if response.is_error:
            message = response.reason_phrase or "Cavos request failed"
            if isinstance(body, dict):
                message = body.get("message") or body.get("error") or message
            logger.warning(f"Cavos {method} {path} failed with {response.status_code}: {message}")
            raise CavosApiError(str(message), response.status_code, body)

        return SdkResult.from_body(body)

    # ======================
    # Authentication
    # ======================

    async def sign_up(self, email: str, password: str, network: Optional[str] = None) -> SdkResult:
        return await self._request(
            "POST",
            "/auth/signUp",
            json={
                "email": email,
                "password": password,
                "network": network or self.default_network,
            },
        )

    async def sign_in(self, email: str, password: str, network: Optional[str] = None) -> SdkResult:
        return await self._request(
            "POST",
            "/auth/signIn",
            json={
                "email": email,
                "password": password,
                "network": network or self.default_network,
            },
        )

    async def delete_user(self, user_id: str) -> SdkResult:
        return await self._request("DELETE", f"/auth/user/{user_id}")

    async def refresh_token(self, refresh_token: str, network: Optional[str] = None) -> SdkResult:
        return await self._request(
            "POST",
            "/auth/refreshToken",
            json={
                "refreshToken": refresh_token,
                "network": network or self.default_network,
            },
        )

    # ======================
    # Wallets
    # ======================

    async def deploy_wallet(self, network: Optional[str] = None) -> SdkResult:
        return await self._request(
            "POST",
            "/wallet/deploy",
            json={"network": network or self.default_network},
        )

    async def get_balance(self, address: str, token_address: str, decimals: int = 18) -> SdkResult:
        return await self._request(
            "GET",
            "/wallet/balance",
            params={
                "address": address,
                "tokenAddress": token_address,
                "decimals": str(decimals),
            },
        )

    async def execute_calls(
        self,
        calls: list[TransactionCall],
        address: str,
        hashed_pk: str,
        network: Optional[str] = None,
    ) -> SdkResult:
        """Execute calls from an app-managed wallet."""
        return await self._request(
            "POST",
            "/wallet/execute",
            json={
                "network": network or self.default_network,
                "address": address,
                "hashedPk": hashed_pk,
                "hashSecret": self.hash_secret,
                "calls": [call.as_wallet_call() for call in calls],
            },
        )

    async def execute_user_calls(
        self,
        address: str,
        calls: list[TransactionCall],
        access_token: str,
        network: Optional[str] = None,
    ) -> SdkResult:
        """Execute calls from a user's account with their access token."""
        return await self._request(
            "POST",
            "/account/execute",
            token=access_token,
            json={
                "network": network or self.default_network,
                "address": address,
                "calls": [call.as_account_call() for call in calls],
            },
        )


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return {"body": response.text[:500]}
