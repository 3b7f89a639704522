"""AMap tool handler.

One handler class serves every AMap tool: the descriptor says what the tool
accepts and the request template says where it goes.
"""

from typing import Any

from amap_tools.base import ToolDescriptor, ToolMetadata, UpstreamRequestTemplate
from amap_tools.validation import validate_arguments


class AmapTool:
    """Tool backed by a single AMap GET endpoint.

    Use Cases:
    - "Convert these GPS coordinates to AMap coordinates"
    - "Find coffee shops within 1km of this point"
    - "How do I walk from A to B?"
    """

    def __init__(self, descriptor: ToolDescriptor, template: UpstreamRequestTemplate):
        self.descriptor = descriptor
        self.template = template

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def description(self) -> str:
        return self.descriptor.description

    @property
    def metadata(self) -> ToolMetadata:
        return self.descriptor.metadata

    def describe(self) -> ToolDescriptor:
        return self.descriptor

    def validate(self, arguments: Any, enforce_enums: bool = True) -> dict[str, Any]:
        return validate_arguments(self.descriptor, arguments, enforce_enums=enforce_enums)

    def build_request(self, typed_args: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """Build ``(path, query params)`` from validated arguments.

        Absent arguments never appear in the query.
        """
        params: dict[str, Any] = dict(self.template.static_params)
        for name, value in typed_args.items():
            if value is None:
                continue
            params[self.template.query_key(name)] = value
        return self.template.path, params

    def __repr__(self) -> str:
        return f"AmapTool(name={self.name!r}, path={self.template.path!r})"
