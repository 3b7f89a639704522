"""AMap coordinate & place search tools.

Coordinate conversion, POI search (keyword, around, polygon, by ID) and AOI
boundary lookup.
"""

from amap_tools.base import ParameterKind, ParameterSpec, ToolDescriptor, UpstreamRequestTemplate
from amap_tools.adapters.amap.schemas import (
    CITY,
    COORDINATE_METADATA,
    EXTENSIONS,
    KEYWORDS,
    OFFSET,
    PAGE,
    PLACE_METADATA,
    TYPES,
    required,
)

from .tool import AmapTool

COORDINATE_CONVERT = AmapTool(
    ToolDescriptor(
        name="coordinate_convert",
        description="Convert coordinates using AMap API",
        parameters=(
            ParameterSpec(
                name="locations",
                description="Coordinates to convert (longitude,latitude|longitude,latitude)",
                required=True,
            ),
            ParameterSpec(
                name="coordsys",
                description="Original coordinate system (gps, mapbar, baidu, autonavi)",
                allowed_values=("gps", "mapbar", "baidu", "autonavi"),
            ),
            ParameterSpec(
                name="output",
                description="Output format (JSON, XML)",
                allowed_values=("JSON", "XML"),
            ),
        ),
        metadata=COORDINATE_METADATA,
    ),
    UpstreamRequestTemplate(path="/v3/assistant/coordinate/convert"),
)

KEYWORD_SEARCH = AmapTool(
    ToolDescriptor(
        name="keyword_search",
        description="Search for places by keyword using AMap API",
        parameters=(
            required(KEYWORDS),
            TYPES,
            CITY,
            ParameterSpec(
                name="citylimit",
                kind=ParameterKind.BOOLEAN,
                description="Limit results to the specified city",
            ),
            ParameterSpec(
                name="children",
                kind=ParameterKind.NUMBER,
                description="Whether to show child POIs",
            ),
            OFFSET,
            PAGE,
            EXTENSIONS,
        ),
        metadata=PLACE_METADATA,
    ),
    UpstreamRequestTemplate(path="/v3/place/text"),
)

AROUND_SEARCH = AmapTool(
    ToolDescriptor(
        name="around_search",
        description="Search for places around a location using AMap API",
        parameters=(
            ParameterSpec(
                name="location",
                description="Location to search around (longitude,latitude)",
                required=True,
            ),
            KEYWORDS,
            TYPES,
            CITY,
            ParameterSpec(
                name="radius",
                kind=ParameterKind.NUMBER,
                description="Search radius in meters",
            ),
            ParameterSpec(name="sortrule", description="Sort rule (distance or weight)"),
            OFFSET,
            PAGE,
            EXTENSIONS,
        ),
        metadata=PLACE_METADATA,
    ),
    UpstreamRequestTemplate(path="/v3/place/around"),
)

POLYGON_SEARCH = AmapTool(
    ToolDescriptor(
        name="polygon_search",
        description="Search for places within a polygon using AMap API",
        parameters=(
            ParameterSpec(
                name="polygon",
                description="Polygon to search within (longitude,latitude|longitude,latitude|...)",
                required=True,
            ),
            KEYWORDS,
            TYPES,
            OFFSET,
            PAGE,
            EXTENSIONS,
        ),
        metadata=PLACE_METADATA,
    ),
    UpstreamRequestTemplate(path="/v3/place/polygon"),
)

ID_SEARCH = AmapTool(
    ToolDescriptor(
        name="id_search",
        description="Search for a place by ID using AMap API",
        parameters=(
            ParameterSpec(name="id", description="ID of the place to search for", required=True),
        ),
        metadata=PLACE_METADATA,
    ),
    UpstreamRequestTemplate(path="/v3/place/detail"),
)

AOI_BOUNDARY_QUERY = AmapTool(
    ToolDescriptor(
        name="aoi_boundary_query",
        description="Query AOI boundary using AMap API",
        parameters=(
            ParameterSpec(name="id", description="ID of the AOI to query", required=True),
        ),
        metadata=PLACE_METADATA,
    ),
    UpstreamRequestTemplate(path="/v5/aoi/polyline"),
)

COORDINATE_TOOLS: tuple[AmapTool, ...] = (
    COORDINATE_CONVERT,
    KEYWORD_SEARCH,
    AROUND_SEARCH,
    POLYGON_SEARCH,
    ID_SEARCH,
    AOI_BOUNDARY_QUERY,
)
