"""Tool system exceptions.

Errors raised before any upstream request is attempted.
"""

from enum import Enum


class ValidationErrorKind(str, Enum):
    """Why an argument bag was rejected."""

    MISSING_REQUIRED = "missing_required"
    WRONG_TYPE = "wrong_type"
    INVALID_ENUM = "invalid_enum"


class ToolError(Exception):
    """Base exception for the tool system."""

    pass


class UnknownToolError(ToolError):
    """Invocation names a tool absent from the catalog."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class ToolValidationError(ToolError):
    """Argument bag does not match the tool's parameter contract.

    ``kind`` and ``parameter`` describe the first violation found;
    ``errors`` holds every ``(kind, parameter, message)`` triple.
    """

    def __init__(
        self,
        tool_name: str,
        errors: list[tuple[ValidationErrorKind, str, str]],
    ):
        self.tool_name = tool_name
        self.errors = errors
        self.kind, self.parameter, _ = errors[0]
        message = "; ".join(msg for _, _, msg in errors)
        super().__init__(f"Invalid arguments for {tool_name}: {message}")


class UpstreamError(ToolError):
    """Upstream provider could not be reached or answered garbage.

    Reported to the caller as an error ToolResponse, never raised past the
    dispatcher.
    """

    pass
