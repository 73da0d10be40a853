"""Pytest configuration and fixtures."""

import os
from typing import Any, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment
os.environ["NODE_ENV"] = "test"
os.environ["CAVOS_API_SECRET"] = "test-api-secret"
os.environ["CAVOS_HASH_SECRET"] = "test-hash-secret"
os.environ["DEFAULT_NETWORK"] = "sepolia"
os.environ["DEBUG"] = "true"

from cosmic_gateway.api.app import create_app
from cosmic_gateway.cavos.base import SdkResult
from cosmic_gateway.web.dependencies import get_cavos_client


class FakeCavosClient:
    """Records every upstream call instead of sending it."""

    def __init__(self):
        self.calls: list[tuple[str, dict]] = []
        self.body: Any = {"success": True, "data": {"ok": True}}
        self.error: Optional[Exception] = None

    async def _record(self, name: str, **kwargs) -> SdkResult:
        self.calls.append((name, kwargs))
        if self.error is not None:
            raise self.error
        return SdkResult.from_body(self.body)

    async def sign_up(self, email, password, network=None):
        return await self._record("sign_up", email=email, password=password, network=network)

    async def sign_in(self, email, password, network=None):
        return await self._record("sign_in", email=email, password=password, network=network)

    async def delete_user(self, user_id):
        return await self._record("delete_user", user_id=user_id)

    async def refresh_token(self, refresh_token, network=None):
        return await self._record("refresh_token", refresh_token=refresh_token, network=network)

    async def deploy_wallet(self, network=None):
        return await self._record("deploy_wallet", network=network)

    async def get_balance(self, address, token_address, decimals=18):
        return await self._record(
            "get_balance", address=address, token_address=token_address, decimals=decimals
        )

    async def execute_calls(self, calls, address, hashed_pk, network=None):
        return await self._record(
            "execute_calls", calls=calls, address=address, hashed_pk=hashed_pk, network=network
        )

    async def execute_user_calls(self, address, calls, access_token, network=None):
        return await self._record(
            "execute_user_calls",
            address=address,
            calls=calls,
            access_token=access_token,
            network=network,
        )


@pytest.fixture
def cavos():
    """Fake Cavos client shared by the app under test."""
    return FakeCavosClient()


@pytest.fixture
def test_app(cavos):
    """Application with the Cavos client replaced by the fake."""
    app = create_app()
    app.dependency_overrides[get_cavos_client] = lambda: cavos
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(test_app):
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
