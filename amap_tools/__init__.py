"""AMap MCP Tool System.

Declarative tool catalog, argument validation and upstream dispatch.
"""

from amap_tools.base import (
    ParameterKind,
    ParameterSpec,
    Tool,
    ToolDescriptor,
    ToolMetadata,
    ToolResponse,
    UpstreamRequestTemplate,
)
from amap_tools.dispatcher import ToolDispatcher
from amap_tools.registry import ToolRegistry

__all__ = [
    "ParameterKind",
    "ParameterSpec",
    "Tool",
    "ToolDescriptor",
    "ToolDispatcher",
    "ToolMetadata",
    "ToolRegistry",
    "ToolResponse",
    "UpstreamRequestTemplate",
]
