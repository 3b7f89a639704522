"""Single adapter server with --adapter= flag.

Usage: python -m amap_tools.adapters.server --adapter=coordinate

Serves one adapter's tool catalog over MCP stdio. Console scripts
``amap-coordinate-server`` and ``amap-route-server`` preselect the adapter.
"""

import argparse
import asyncio
import signal
import sys
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from amap_config.settings import Settings
from amap_obs.logging import get_logger, setup_logging
from amap_tools.adapters.amap import (
    ADAPTERS,
    PROVIDER_NAME,
    AmapClientWrapper,
    AmapConfigError,
    build_registry,
)
from amap_tools.base import ToolDescriptor, ToolResponse
from amap_tools.dispatcher import ToolDispatcher
from amap_tools.exceptions import ToolValidationError, UnknownToolError

logger = get_logger(__name__)

SERVER_NAMES = {
    "coordinate": "amap-coordinate-server",
    "route": "amap-route-server",
}


def to_mcp_tool(descriptor: ToolDescriptor) -> types.Tool:
    """Convert a tool descriptor into an MCP tool listing entry."""
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.input_schema(),
    )


def to_call_tool_result(response: ToolResponse) -> types.CallToolResult:
    """Convert a ToolResponse into an MCP call result."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=item.text) for item in response.content],
        isError=response.is_error,
    )


class AmapMCPServer:
    """MCP front for one adapter's dispatcher.

    Unknown tools and invalid arguments become JSON-RPC errors; upstream
    failures are already error ToolResponses by the time they get here.
    """

    def __init__(self, adapter: str, dispatcher: ToolDispatcher, version: str = "0.1.0"):
        self.adapter = adapter
        self.name = SERVER_NAMES[adapter]
        self.version = version
        self.dispatcher = dispatcher

    async def list_tools(self) -> list[types.Tool]:
        return [to_mcp_tool(d) for d in self.dispatcher.registry.list_tools()]

    async def call_tool(self, name: str, arguments: Any) -> types.CallToolResult:
        try:
            response = await self.dispatcher.dispatch(name, arguments)
        except UnknownToolError as e:
            logger.info("tool_call_rejected", tool=name, reason="unknown_tool")
            raise McpError(types.ErrorData(code=types.METHOD_NOT_FOUND, message=str(e))) from e
        except ToolValidationError as e:
            logger.info(
                "tool_call_rejected",
                tool=name,
                reason=e.kind.value,
                parameter=e.parameter,
            )
            raise McpError(
                types.ErrorData(
                    code=types.INVALID_PARAMS,
                    message=str(e),
                    data={"kind": e.kind.value, "parameter": e.parameter},
                )
            ) from e
        return to_call_tool_result(response)

    def build(self) -> Server:
        """Wire the handlers into a low-level MCP server."""
        server = Server(self.name, version=self.version)

        @server.list_tools()
        async def handle_list_tools() -> list[types.Tool]:
            return await self.list_tools()

        # Registered directly so McpError reaches the client as a JSON-RPC
        # error instead of being folded into an isError result.
        async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
            result = await self.call_tool(req.params.name, req.params.arguments)
            return types.ServerResult(result)

        server.request_handlers[types.CallToolRequest] = handle_call_tool
        return server

    async def run(self) -> None:
        """Serve over stdio until the client closes the stream."""
        server = self.build()
        logger.info("mcp_server_starting", server=self.name, tools=self.dispatcher.registry.names())
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())


def create_server(
    adapter: str,
    settings: Settings,
    client: AmapClientWrapper | None = None,
) -> AmapMCPServer:
    """Build the catalog, client and dispatcher for one adapter.

    Raises:
        AmapConfigError: AMAP_API_KEY is not set
        ValueError: Unknown adapter name
    """
    registry = build_registry(adapter)
    if client is None:
        client = AmapClientWrapper.from_settings(settings)
    dispatcher = ToolDispatcher(
        registry,
        client,
        provider_name=PROVIDER_NAME,
        enforce_enums=settings.AMAP_ENFORCE_ENUMS,
    )
    return AmapMCPServer(adapter, dispatcher, version=settings.MCP_SERVER_VERSION)


def _raise_keyboard_interrupt(signum, frame):
    raise KeyboardInterrupt


def main(argv: list[str] | None = None, default_adapter: str | None = None) -> None:
    """
    Run adapter server.

    Exits 1 when the API key is missing, 0 on a clean shutdown.
    """
    parser = argparse.ArgumentParser(description="AMap MCP tool server (stdio)")
    parser.add_argument(
        "--adapter",
        required=default_adapter is None,
        default=default_adapter,
        choices=sorted(ADAPTERS),
    )
    args = parser.parse_args(argv)

    settings = Settings()
    setup_logging(settings)

    try:
        server = create_server(args.adapter, settings)
    except AmapConfigError as e:
        logger.error("config_error", adapter=args.adapter, error=str(e))
        sys.exit(1)

    signal.signal(signal.SIGTERM, _raise_keyboard_interrupt)

    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        logger.info("mcp_server_interrupted", server=server.name)

    logger.info("mcp_server_stopped", server=server.name)


def coordinate_main() -> None:
    main(default_adapter="coordinate")


def route_main() -> None:
    main(default_adapter="route")


if __name__ == "__main__":
    main()
