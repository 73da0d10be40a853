"""Tests for the Cavos HTTP adapter."""

import json

import httpx
import pytest

from cosmic_gateway.cavos.base import CavosApiError, SdkResult, TransactionCall
from cosmic_gateway.cavos.client import CavosClient


def make_client(handler) -> CavosClient:
    return CavosClient(
        api_secret="app-secret",
        hash_secret="hash-secret",
        base_url="https://cavos.test/api/v1/external/",
        default_network="sepolia",
        transport=httpx.MockTransport(handler),
    )


class Recorder:
    """MockTransport handler that remembers the last request."""

    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self.body = body if body is not None else {"success": True, "data": {"ok": 1}}
        self.request = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.request = request
        return httpx.Response(self.status_code, json=self.body)

    @property
    def payload(self):
        return json.loads(self.request.content)


class TestSdkResult:
    """Tests for response tagging."""

    def test_wrapped_body(self):
        result = SdkResult.from_body({"success": True, "data": {"id": 1}})

        assert result.is_wrapped
        assert result.unwrap() == {"id": 1}

    def test_raw_body(self):
        result = SdkResult.from_body({"address": "0x1"})

        assert result.kind == SdkResult.RAW
        assert result.unwrap() == {"address": "0x1"}

    def test_null_data_is_raw(self):
        body = {"success": True, "data": None}

        assert SdkResult.from_body(body).unwrap() == body

    def test_list_body_is_raw(self):
        assert SdkResult.from_body([1, 2]).unwrap() == [1, 2]


class TestCavosClient:
    """Tests for request shaping and error mapping."""

    @pytest.mark.asyncio
    async def test_sign_up_uses_app_secret(self):
        recorder = Recorder()
        client = make_client(recorder)

        result = await client.sign_up("a@b.io", "correct-horse")

        assert result.unwrap() == {"ok": 1}
        assert recorder.request.method == "POST"
        assert recorder.request.url.path == "/api/v1/external/auth/signUp"
        assert recorder.request.headers["Authorization"] == "Bearer app-secret"
        assert recorder.payload == {
            "email": "a@b.io",
            "password": "correct-horse",
            "network": "sepolia",
        }

    @pytest.mark.asyncio
    async def test_get_balance_query(self):
        recorder = Recorder(body={"balance": "12"})
        client = make_client(recorder)

        result = await client.get_balance("0xabc", "0x49d", 6)

        assert result.unwrap() == {"balance": "12"}
        params = recorder.request.url.params
        assert params["address"] == "0xabc"
        assert params["tokenAddress"] == "0x49d"
        assert params["decimals"] == "6"

    @pytest.mark.asyncio
    async def test_delete_user_path(self):
        recorder = Recorder()
        client = make_client(recorder)

        await client.delete_user("u-9")

        assert recorder.request.method == "DELETE"
        assert recorder.request.url.path.endswith("/auth/user/u-9")

    @pytest.mark.asyncio
    async def test_execute_calls_sends_wallet_calls(self):
        recorder = Recorder()
        client = make_client(recorder)
        call = TransactionCall(to="0x1", selector="0x2", calldata=["3"])

        await client.execute_calls([call], "0xabc", "hashed", network="mainnet")

        assert recorder.payload == {
            "network": "mainnet",
            "address": "0xabc",
            "hashedPk": "hashed",
            "hashSecret": "hash-secret",
            "calls": [{"to": "0x1", "selector": "0x2", "calldata": ["3"]}],
        }

    @pytest.mark.asyncio
    async def test_execute_user_calls_uses_access_token(self):
        recorder = Recorder()
        client = make_client(recorder)
        call = TransactionCall(to="0x1", selector="0x2", calldata=[])

        await client.execute_user_calls("0xabc", [call], "user-token")

        assert recorder.request.headers["Authorization"] == "Bearer user-token"
        assert recorder.payload["calls"] == [
            {"contractAddress": "0x1", "entrypoint": "0x2", "calldata": []}
        ]

    @pytest.mark.asyncio
    async def test_error_response_raises_structured_error(self):
        recorder = Recorder(status_code=409, body={"message": "Email already exists"})
        client = make_client(recorder)

        with pytest.raises(CavosApiError) as exc_info:
            await client.sign_up("a@b.io", "correct-horse")

        assert exc_info.value.status_code == 409
        assert exc_info.value.message == "Email already exists"
        assert exc_info.value.details == {"message": "Email already exists"}

    @pytest.mark.asyncio
    async def test_non_json_error_body(self):
        client = make_client(lambda request: httpx.Response(502, text="Bad Gateway"))

        with pytest.raises(CavosApiError) as exc_info:
            await client.deploy_wallet()

        assert exc_info.value.status_code == 502
        assert exc_info.value.details == {"body": "Bad Gateway"}

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        client = make_client(handler)

        with pytest.raises(httpx.ConnectError):
            await client.refresh_token("r-1")
