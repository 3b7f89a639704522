"""AMap adapter for the MCP tool servers.

Provides tools backed by the AMap (Gaode) web-service API:
- Coordinate conversion
- Place search (keyword, around, polygon, by ID) and AOI boundaries
- Walking, transit, driving and bicycling routes, and distance

Usage:
    from amap_tools.adapters.amap import build_registry

    registry = build_registry("route")
"""

from amap_tools.registry import ToolRegistry

from .client import AmapClientWrapper
from .exceptions import AmapAdapterError, AmapAPIError, AmapConfigError
from .schemas import COORDINATE_METADATA, PLACE_METADATA, ROUTE_METADATA
from .tools import COORDINATE_TOOLS, ROUTE_TOOLS, AmapTool

PROVIDER_NAME = "AMap"

ADAPTERS = {
    "coordinate": COORDINATE_TOOLS,
    "route": ROUTE_TOOLS,
}

__all__ = [
    # Client
    "AmapClientWrapper",
    # Exceptions
    "AmapAdapterError",
    "AmapAPIError",
    "AmapConfigError",
    # Schemas
    "COORDINATE_METADATA",
    "PLACE_METADATA",
    "ROUTE_METADATA",
    # Tools
    "AmapTool",
    "COORDINATE_TOOLS",
    "ROUTE_TOOLS",
    "ADAPTERS",
    "PROVIDER_NAME",
    "build_registry",
]


def build_registry(adapter: str) -> ToolRegistry:
    """Build the frozen tool catalog for one adapter process.

    Args:
        adapter: ``"coordinate"`` or ``"route"``

    Raises:
        ValueError: Unknown adapter name

    Example:
        registry = build_registry("coordinate")
        [t.name for t in registry.list_tools()]
    """
    try:
        tools = ADAPTERS[adapter]
    except KeyError:
        raise ValueError(
            f"Unknown adapter: {adapter} (expected one of {', '.join(ADAPTERS)})"
        ) from None
    return ToolRegistry(tools).freeze()
