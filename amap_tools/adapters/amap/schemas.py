"""AMap adapter parameter schemas.

Parameter specs shared across several AMap tools.
"""

from amap_tools.base import ParameterKind, ParameterSpec, ToolMetadata

# ============================================================================
# TOOL METADATA
# ============================================================================

COORDINATE_METADATA = ToolMetadata(capabilities=("amap.coordinate", "amap.read"))
PLACE_METADATA = ToolMetadata(capabilities=("amap.place", "amap.read"))
ROUTE_METADATA = ToolMetadata(capabilities=("amap.route", "amap.read"))


# ============================================================================
# PLACE SEARCH PARAMETERS
# ============================================================================

KEYWORDS = ParameterSpec(name="keywords", description="Keywords for the search")
TYPES = ParameterSpec(name="types", description="POI types")
CITY = ParameterSpec(name="city", description="City to search in")
OFFSET = ParameterSpec(
    name="offset",
    kind=ParameterKind.NUMBER,
    description="Number of results per page",
)
PAGE = ParameterSpec(name="page", kind=ParameterKind.NUMBER, description="Page number")
EXTENSIONS = ParameterSpec(
    name="extensions",
    description="Return extensions (base or all)",
)


# ============================================================================
# ROUTE PARAMETERS
# ============================================================================

ORIGIN = ParameterSpec(
    name="origin",
    description="Origin longitude and latitude",
    required=True,
)
DESTINATION = ParameterSpec(
    name="destination",
    description="Destination longitude and latitude",
    required=True,
)


def required(spec: ParameterSpec) -> ParameterSpec:
    """Copy of ``spec`` marked required."""
    return spec.model_copy(update={"required": True})
