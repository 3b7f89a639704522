"""Tool Dispatcher.

Routes a tool invocation to its handler: validate, build one upstream GET,
issue it, and wrap the outcome in a ToolResponse.
"""

import json
from typing import Any, Protocol

from amap_obs.logging import get_logger
from amap_tools.base import ToolInvocation, ToolResponse
from amap_tools.exceptions import UpstreamError
from amap_tools.registry import ToolRegistry

logger = get_logger(__name__)


class UpstreamClient(Protocol):
    """HTTP client issuing one GET per call."""

    async def get(self, path: str, params: dict[str, Any]) -> Any:
        ...


class ToolDispatcher:
    """Dispatches tool calls against a frozen registry.

    Holds no per-call state: the registry is read-only and the client opens a
    fresh HTTP connection per request.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        client: UpstreamClient,
        provider_name: str = "AMap",
        enforce_enums: bool = True,
    ):
        """Initialize dispatcher.

        Args:
            registry: Tool catalog (frozen)
            client: Upstream client used for every call
            provider_name: Name used in upstream error messages
            enforce_enums: Reject enumerated parameters outside allowed values
        """
        self.registry = registry
        self.client = client
        self.provider_name = provider_name
        self.enforce_enums = enforce_enums

    async def dispatch(self, tool_name: str, arguments: Any) -> ToolResponse:
        """Execute a tool call.

        Args:
            tool_name: Catalog name of the tool
            arguments: Raw argument bag from the transport

        Returns:
            ToolResponse with the upstream JSON body as text, or an error
            response when the upstream could not be reached

        Raises:
            UnknownToolError: Tool name not in the catalog
            ToolValidationError: Arguments do not match the tool's contract
        """
        tool = self.registry.require(tool_name)
        typed_args = tool.validate(arguments, enforce_enums=self.enforce_enums)
        path, params = tool.build_request(typed_args)

        logger.info("tool_call_started", tool=tool_name, path=path, params=sorted(params))

        try:
            body = await self.client.get(path, params)
        except UpstreamError as e:
            logger.warning("upstream_request_failed", tool=tool_name, path=path, error=str(e))
            return ToolResponse.text(f"{self.provider_name} API error: {e}", is_error=True)

        logger.info("tool_call_completed", tool=tool_name)
        return ToolResponse.text(json.dumps(body, ensure_ascii=False, separators=(",", ":")))

    async def invoke(self, invocation: ToolInvocation) -> ToolResponse:
        return await self.dispatch(invocation.tool_name, invocation.arguments)
