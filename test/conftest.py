from __future__ import annotations

from pathlib import Path
from typing import Iterable

import httpx
import pytest
from dotenv import load_dotenv

from airiscode_mcp.gateway_api.client import GatewayApiClient
from airiscode_mcp.schemas.config import SessionConfig
from airiscode_mcp.session.manager import McpSessionManager
from gateway_fakes import MOCK_BASE_URL, FakeGateway

# Load dotenv files early so settings-based tests can read overrides via os.getenv
TEST_ROOT = Path(__file__).resolve().parent
load_dotenv(TEST_ROOT / ".env", override=False)


@pytest.fixture()
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture()
def gateway_client(fake_gateway: FakeGateway) -> GatewayApiClient:
    http = httpx.AsyncClient(transport=fake_gateway.transport(), base_url=MOCK_BASE_URL)
    return GatewayApiClient(MOCK_BASE_URL, api_key="test-key", client=http)


@pytest.fixture()
def session_config() -> SessionConfig:
    return SessionConfig(session_id="test-session", base_url=MOCK_BASE_URL)


@pytest.fixture()
def session(session_config: SessionConfig, gateway_client: GatewayApiClient) -> McpSessionManager:
    return McpSessionManager(session_config, client=gateway_client)


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    allowed_prefixes: Iterable[str] = (
        "http://mock",
        "https://mock",
        "http://localhost",
        "http://127.0.0.1",
    )

    orig_sync = httpx._client.Client.request
    orig_async = httpx._client.AsyncClient.request

    def _is_allowed(url_str: str) -> bool:
        return any(url_str.startswith(p) for p in allowed_prefixes)

    def offline_sync(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return orig_sync(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard: {url_str}")

    async def offline_async(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return await orig_async(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {url_str}")

    monkeypatch.setattr(httpx._client.Client, "request", offline_sync, raising=True)
    monkeypatch.setattr(httpx._client.AsyncClient, "request", offline_async, raising=True)
