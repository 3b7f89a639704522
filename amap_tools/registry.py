"""Tool Registry.

Immutable tool catalog with capability-based lookup.
"""

from collections.abc import Iterable
from typing import Any

from amap_tools.base import Tool, ToolDescriptor
from amap_tools.exceptions import UnknownToolError


class ToolRegistry:
    """Tool registry with capability-based lookup.

    Tools are registered while the registry is being built; ``freeze()`` makes
    it read-only so the dispatcher and the transport share one catalog.
    """

    def __init__(self, tools: Iterable[Tool] = ()):
        self._tools: dict[str, Tool] = {}
        self._frozen = False
        for tool in tools:
            self.register(tool)

    def register(self, tool: Tool) -> None:
        """Register a tool."""
        if self._frozen:
            raise RuntimeError("Tool registry is frozen")
        if tool.name in self._tools:
            raise ValueError(f"Duplicate tool name: {tool.name}")
        self._tools[tool.name] = tool

    def freeze(self) -> "ToolRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> Tool | None:
        """Get tool by name."""
        return self._tools.get(name)

    def require(self, name: str) -> Tool:
        """Get tool by name or raise UnknownToolError."""
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name)
        return tool

    def names(self) -> list[str]:
        return list(self._tools)

    def list_tools(self) -> list[ToolDescriptor]:
        """Describe every registered tool, in registration order."""
        return [tool.describe() for tool in self._tools.values()]

    def validate(self, name: str, arguments: Any, enforce_enums: bool = True) -> dict[str, Any]:
        """Validate arguments for the named tool."""
        return self.require(name).validate(arguments, enforce_enums=enforce_enums)

    def filter_by_capability(self, capability: str) -> list[Tool]:
        """Filter tools by capability tag."""
        return [t for t in self._tools.values() if capability in t.metadata.capabilities]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
