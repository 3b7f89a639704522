"""Tests for the MCP adapter server."""

import signal

import mcp.types as types
import pytest
from mcp.shared.exceptions import McpError
from mcp.shared.memory import create_connected_server_and_client_session

from amap_config.settings import Settings
from amap_tools.adapters import server as server_module
from amap_tools.adapters.amap import AmapConfigError
from amap_tools.adapters.server import SERVER_NAMES, create_server


@pytest.fixture
def settings(api_key):
    return Settings(_env_file=None, AMAP_API_KEY=api_key)


@pytest.fixture
def coordinate_server(settings, ok_client):
    return create_server("coordinate", settings, client=ok_client)


class TestListTools:
    @pytest.mark.asyncio
    async def test_lists_mcp_tools(self, coordinate_server):
        tools = await coordinate_server.list_tools()

        assert all(isinstance(t, types.Tool) for t in tools)
        assert [t.name for t in tools][:2] == ["coordinate_convert", "keyword_search"]
        convert = tools[0]
        assert convert.description == "Convert coordinates using AMap API"
        assert convert.inputSchema["type"] == "object"
        assert convert.inputSchema["required"] == ["locations"]

    def test_server_names(self, settings, ok_client):
        assert create_server("coordinate", settings, client=ok_client).name == "amap-coordinate-server"
        assert create_server("route", settings, client=ok_client).name == "amap-route-server"
        assert set(SERVER_NAMES) == {"coordinate", "route"}


class TestCallTool:
    @pytest.mark.asyncio
    async def test_success(self, coordinate_server):
        result = await coordinate_server.call_tool("id_search", {"id": "B0FFFAEC0B"})

        assert isinstance(result, types.CallToolResult)
        assert result.isError is False
        assert result.content[0].type == "text"
        assert result.content[0].text == '{"status":"1"}'

    @pytest.mark.asyncio
    async def test_upstream_failure_is_soft(self, settings, failing_client):
        route_server = create_server("route", settings, client=failing_client)

        result = await route_server.call_tool(
            "walking_route", {"origin": "116.4,39.9", "destination": "116.5,40.0"}
        )

        assert result.isError is True
        assert "AMap API error" in result.content[0].text

    @pytest.mark.asyncio
    async def test_unknown_tool_is_protocol_error(self, coordinate_server, upstream_requests):
        with pytest.raises(McpError) as exc_info:
            await coordinate_server.call_tool("walking_route", {})

        assert exc_info.value.error.code == types.METHOD_NOT_FOUND
        assert "Unknown tool: walking_route" in exc_info.value.error.message
        assert upstream_requests == []

    @pytest.mark.asyncio
    async def test_invalid_arguments_are_protocol_error(self, coordinate_server, upstream_requests):
        with pytest.raises(McpError) as exc_info:
            await coordinate_server.call_tool("keyword_search", {"keywords": 7})

        assert exc_info.value.error.code == types.INVALID_PARAMS
        assert exc_info.value.error.data == {"kind": "wrong_type", "parameter": "keywords"}
        assert upstream_requests == []

    @pytest.mark.asyncio
    async def test_call_handler_registered(self, coordinate_server):
        lowlevel = coordinate_server.build()

        assert types.CallToolRequest in lowlevel.request_handlers
        assert types.ListToolsRequest in lowlevel.request_handlers


class TestClientSession:
    """Requests sent through an in-memory MCP client session."""

    @pytest.mark.asyncio
    async def test_list_tools(self, coordinate_server):
        async with create_connected_server_and_client_session(coordinate_server.build()) as session:
            listed = await session.list_tools()

        assert [t.name for t in listed.tools] == [
            "coordinate_convert",
            "keyword_search",
            "around_search",
            "polygon_search",
            "id_search",
            "aoi_boundary_query",
        ]

    @pytest.mark.asyncio
    async def test_call_tool_success(self, coordinate_server, upstream_requests):
        async with create_connected_server_and_client_session(coordinate_server.build()) as session:
            result = await session.call_tool("id_search", {"id": "B0FFFAEC0B"})

        assert result.isError is False
        assert result.content[0].text == '{"status":"1"}'
        assert len(upstream_requests) == 1

    @pytest.mark.asyncio
    async def test_rejected_calls_are_jsonrpc_errors(self, coordinate_server, upstream_requests):
        async with create_connected_server_and_client_session(coordinate_server.build()) as session:
            with pytest.raises(McpError) as unknown:
                await session.call_tool("nope", {})
            with pytest.raises(McpError) as wrong_type:
                await session.call_tool("keyword_search", {"keywords": 7})
            with pytest.raises(McpError) as bad_enum:
                await session.call_tool(
                    "coordinate_convert", {"locations": "116.48,39.99", "coordsys": "wgs"}
                )
            result = await session.call_tool("id_search", {"id": "B0FFFAEC0B"})

        assert unknown.value.error.code == types.METHOD_NOT_FOUND == -32601
        assert "Unknown tool: nope" in unknown.value.error.message
        assert wrong_type.value.error.code == types.INVALID_PARAMS == -32602
        assert "must be a string" in wrong_type.value.error.message
        assert bad_enum.value.error.code == types.INVALID_PARAMS
        assert "must be one of gps, mapbar, baidu, autonavi" in bad_enum.value.error.message
        assert result.isError is False
        assert len(upstream_requests) == 1


class TestStartup:
    def test_missing_key(self, monkeypatch):
        monkeypatch.delenv("AMAP_API_KEY", raising=False)

        with pytest.raises(AmapConfigError):
            create_server("route", Settings(_env_file=None))

    def test_enum_policy_from_settings(self, api_key, ok_client):
        settings = Settings(_env_file=None, AMAP_API_KEY=api_key, AMAP_ENFORCE_ENUMS=False)

        assert create_server("coordinate", settings, client=ok_client).dispatcher.enforce_enums is False

    def test_main_exits_without_key(self, monkeypatch):
        monkeypatch.delenv("AMAP_API_KEY", raising=False)
        monkeypatch.setattr(server_module, "Settings", lambda: Settings(_env_file=None))
        monkeypatch.setattr(server_module, "setup_logging", lambda settings: None)

        with pytest.raises(SystemExit) as exc_info:
            server_module.main(["--adapter", "route"])

        assert exc_info.value.code == 1

    def test_main_interrupt_exits_cleanly(self, monkeypatch, api_key):
        installed = []

        def interrupted_run(coro):
            coro.close()
            raise KeyboardInterrupt

        monkeypatch.setattr(
            server_module, "Settings", lambda: Settings(_env_file=None, AMAP_API_KEY=api_key)
        )
        monkeypatch.setattr(server_module, "setup_logging", lambda settings: None)
        monkeypatch.setattr(server_module.signal, "signal", lambda sig, handler: installed.append((sig, handler)))
        monkeypatch.setattr(server_module.asyncio, "run", interrupted_run)

        assert server_module.main(["--adapter", "route"]) is None
        assert installed == [(signal.SIGTERM, server_module._raise_keyboard_interrupt)]

    def test_sigterm_handler_interrupts(self):
        with pytest.raises(KeyboardInterrupt):
            server_module._raise_keyboard_interrupt(signal.SIGTERM, None)

    def test_main_requires_adapter(self):
        with pytest.raises(SystemExit) as exc_info:
            server_module.main([])

        assert exc_info.value.code == 2
