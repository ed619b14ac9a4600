"""End-to-end session flow against the in-memory gateway."""

from __future__ import annotations

import httpx
import pytest

from airiscode_mcp import McpSessionManager, SessionConfig, SessionStatus, classify
from airiscode_mcp.gateway_api.client import GatewayApiClient
from airiscode_mcp.registry.categories import ProviderCategory, always_on_servers
from gateway_fakes import MOCK_BASE_URL, FakeGateway, tool


@pytest.fixture()
def gateway() -> FakeGateway:
    gw = FakeGateway()
    gw.add_server(
        "filesystem",
        [
            tool("read_file", schema={"type": "object", "properties": {"path": {"type": "string"}}, "required": ["path"]}),
            tool("write_file"),
            tool("list_dir"),
        ],
        enabled=True,
        always_on=True,
    )
    gw.add_server("context7", [tool("get_docs")], enabled=False, always_on=True)
    gw.add_server("playwright", [tool("navigate"), tool("screenshot")], enabled=False, always_on=False)
    return gw


@pytest.mark.asyncio
async def test_full_session_lifecycle(gateway: FakeGateway) -> None:
    http = httpx.AsyncClient(transport=gateway.transport(), base_url=MOCK_BASE_URL)
    client = GatewayApiClient(MOCK_BASE_URL, api_key="e2e", client=http)
    config = SessionConfig(session_id="e2e-session", base_url=MOCK_BASE_URL, tool_cache_ttl_ms=60_000)

    async with McpSessionManager(config, client=client) as session:
        assert session.status is SessionStatus.CONNECTED
        assert len(session.get_all_tools()) == 3

        added = await session.enable_lazy_server("playwright", {"PLAYWRIGHT_BROWSER": "chromium"})
        assert [t.name for t in added] == ["navigate", "screenshot"]
        assert len(session.get_all_tools()) == 5
        assert classify("playwright") is ProviderCategory.LAZY

        gateway.invoke_result = {"content": [{"type": "text", "text": "navigated"}]}
        result = await session.invoke_tool("playwright", "navigate", {"url": "https://example.com"})
        assert result == {"content": [{"type": "text", "text": "navigated"}]}

        found = session.find_tool("screenshot")
        assert found is not None and found[0] == "playwright"

    state = session.get_state()
    assert session.status is SessionStatus.DISCONNECTED
    assert state.connected is False
    assert state.lazy_tools == {}
    assert gateway.servers["playwright"]["enabled"] is False
    assert session.cache is not None and len(session.cache) == 0
    assert {r.headers["Authorization"] for r in gateway.requests} == {"Bearer e2e"}
    await http.aclose()


@pytest.mark.asyncio
async def test_registry_and_gateway_agree_on_always_on(gateway: FakeGateway) -> None:
    http = httpx.AsyncClient(transport=gateway.transport(), base_url=MOCK_BASE_URL)
    client = GatewayApiClient(MOCK_BASE_URL, client=http)

    status = await client.get_status()

    assert set(status.always_on) <= set(always_on_servers())
    assert all(classify(name) is ProviderCategory.LAZY for name in status.lazy)
    await http.aclose()
