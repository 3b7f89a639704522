"""AMap route planning tools.

Walking, transit, driving and bicycling directions between two points, and
straight-line or driving distance from one or more origins.
"""

from amap_tools.base import ParameterSpec, ToolDescriptor, UpstreamRequestTemplate
from amap_tools.adapters.amap.schemas import DESTINATION, ORIGIN, ROUTE_METADATA

from .tool import AmapTool


def _route_tool(name: str, description: str, path: str, *extra: ParameterSpec) -> AmapTool:
    return AmapTool(
        ToolDescriptor(
            name=name,
            description=description,
            parameters=(ORIGIN, DESTINATION, *extra),
            metadata=ROUTE_METADATA,
        ),
        UpstreamRequestTemplate(path=path),
    )


WALKING_ROUTE = _route_tool("walking_route", "Get walking route", "/v3/direction/walking")

TRANSIT_ROUTE = _route_tool(
    "transit_route",
    "Get transit route",
    "/v3/direction/transit/integrated",
    ParameterSpec(name="city", description="City name", required=True),
)

DRIVING_ROUTE = _route_tool("driving_route", "Get driving route", "/v3/direction/driving")

BICYCLING_ROUTE = _route_tool("bicycling_route", "Get bicycling route", "/v4/direction/bicycling")

DISTANCE = AmapTool(
    ToolDescriptor(
        name="distance",
        description="Get distance between two points",
        parameters=(
            ParameterSpec(
                name="origins",
                description="Origin longitude and latitude, separated by |",
                required=True,
            ),
            DESTINATION,
        ),
        metadata=ROUTE_METADATA,
    ),
    UpstreamRequestTemplate(path="/v3/distance"),
)

ROUTE_TOOLS: tuple[AmapTool, ...] = (
    WALKING_ROUTE,
    TRANSIT_ROUTE,
    DRIVING_ROUTE,
    BICYCLING_ROUTE,
    DISTANCE,
)
