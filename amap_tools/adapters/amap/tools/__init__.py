"""AMap tools package.

Exports the tool handler and both tool tables.
"""

from .tool import AmapTool
from .coordinate import COORDINATE_TOOLS
from .route import ROUTE_TOOLS

__all__ = [
    "AmapTool",
    "COORDINATE_TOOLS",
    "ROUTE_TOOLS",
]
