"""Argument validation.

A single routine interprets a tool's ``ParameterSpec`` sequence against a raw
argument bag. Nothing here touches the network.
"""

from collections.abc import Mapping
from typing import Any

from amap_obs.logging import get_logger
from amap_tools.base import ParameterKind, ParameterSpec, ToolDescriptor
from amap_tools.exceptions import ToolValidationError, ValidationErrorKind

logger = get_logger(__name__)


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


def _check_kind(spec: ParameterSpec, value: Any) -> bool:
    if spec.kind is ParameterKind.STRING:
        return isinstance(value, str)
    if spec.kind is ParameterKind.BOOLEAN:
        return isinstance(value, bool)
    # bool is an int subclass; JSON true is not a number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _coerce(spec: ParameterSpec, value: Any) -> Any:
    if spec.kind is ParameterKind.NUMBER and isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def validate_arguments(
    descriptor: ToolDescriptor,
    arguments: Any,
    enforce_enums: bool = True,
) -> dict[str, Any]:
    """Validate a raw argument bag against a tool descriptor.

    Args:
        descriptor: Tool whose parameter contract applies
        arguments: Untyped argument bag from the transport (``None`` = empty)
        enforce_enums: Reject values outside ``allowed_values``. When False,
            enumerated parameters are passed through unchecked.

    Returns:
        Typed arguments holding only declared, present parameters

    Raises:
        ToolValidationError: Missing required parameter, wrong kind, or
            value outside its enumeration
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise ToolValidationError(
            descriptor.name,
            [(
                ValidationErrorKind.WRONG_TYPE,
                "arguments",
                f"arguments must be an object, got {type(arguments).__name__}",
            )],
        )

    errors: list[tuple[ValidationErrorKind, str, str]] = []
    typed: dict[str, Any] = {}

    for spec in descriptor.parameters:
        value = arguments.get(spec.name)

        if _is_absent(value):
            if spec.required:
                errors.append((
                    ValidationErrorKind.MISSING_REQUIRED,
                    spec.name,
                    f"missing required parameter '{spec.name}'",
                ))
            continue

        if not _check_kind(spec, value):
            errors.append((
                ValidationErrorKind.WRONG_TYPE,
                spec.name,
                f"parameter '{spec.name}' must be a {spec.kind.value}, "
                f"got {type(value).__name__}",
            ))
            continue

        if enforce_enums and spec.allowed_values and value not in spec.allowed_values:
            errors.append((
                ValidationErrorKind.INVALID_ENUM,
                spec.name,
                f"parameter '{spec.name}' must be one of "
                f"{', '.join(spec.allowed_values)}, got {value!r}",
            ))
            continue

        typed[spec.name] = _coerce(spec, value)

    if errors:
        raise ToolValidationError(descriptor.name, errors)

    declared = {spec.name for spec in descriptor.parameters}
    ignored = sorted(str(key) for key in arguments if key not in declared)
    if ignored:
        logger.debug("tool_arguments_ignored", tool=descriptor.name, ignored=ignored)

    return typed
