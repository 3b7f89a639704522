"""Tool Interface & Metadata.

Declarative tool descriptors, parameter specs and the response envelope
shared by every adapter.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParameterKind(str, Enum):
    """JSON-schema type of a tool parameter."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


class ToolMetadata(BaseModel):
    """Tool capability metadata."""

    model_config = ConfigDict(frozen=True)

    requires_approval: bool = False
    idempotent: bool = True
    capabilities: tuple[str, ...] = ()
    risk_level: str = "low"


class ParameterSpec(BaseModel):
    """One named parameter of a tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: ParameterKind = ParameterKind.STRING
    description: str = ""
    required: bool = False
    allowed_values: tuple[str, ...] | None = None

    def json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.kind.value}
        if self.description:
            schema["description"] = self.description
        if self.allowed_values:
            schema["enum"] = list(self.allowed_values)
        return schema


class ToolDescriptor(BaseModel):
    """Discovery metadata for a single tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameters: tuple[ParameterSpec, ...] = ()
    metadata: ToolMetadata = Field(default_factory=ToolMetadata)

    @property
    def required(self) -> list[str]:
        return [p.name for p in self.parameters if p.required]

    def input_schema(self) -> dict[str, Any]:
        """Render the parameter contract as a JSON schema object."""
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.parameters},
            "required": self.required,
        }


class UpstreamRequestTemplate(BaseModel):
    """Fixed upstream endpoint a tool maps onto.

    Query keys default to the parameter names; ``query_param_mapping`` only
    lists the ones that differ. The API credential is not part of the
    template, the client adds it from configuration.

    Both mappings accept a dict and are stored as tuples of pairs, so a
    catalog template cannot be changed in place.
    """

    model_config = ConfigDict(frozen=True)

    method: Literal["GET"] = "GET"
    path: str
    query_param_mapping: tuple[tuple[str, str], ...] = ()
    static_params: tuple[tuple[str, str], ...] = ()

    @field_validator("query_param_mapping", "static_params", mode="before")
    @classmethod
    def _pairs_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    def query_key(self, parameter: str) -> str:
        return dict(self.query_param_mapping).get(parameter, parameter)


class ToolInvocation(BaseModel):
    """A single incoming tool call."""

    tool_name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class TextContent(BaseModel):
    """Text content item of a tool response."""

    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """Tool response envelope returned to the caller."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent]
    is_error: bool = Field(False, alias="isError")

    @classmethod
    def text(cls, text: str, is_error: bool = False) -> "ToolResponse":
        return cls(content=[TextContent(text=text)], is_error=is_error)


class Tool(Protocol):
    """Tool interface."""

    name: str
    description: str
    metadata: ToolMetadata

    def describe(self) -> ToolDescriptor:
        """Return the tool's discovery descriptor."""
        ...

    def validate(self, arguments: Any, enforce_enums: bool = True) -> dict[str, Any]:
        """Check a raw argument bag and return the typed arguments."""
        ...

    def build_request(self, typed_args: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """Map typed arguments onto an upstream ``(path, query params)`` pair."""
        ...
