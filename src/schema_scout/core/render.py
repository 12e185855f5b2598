"""Plain-text rendering of introspection types, fields and operations."""

from __future__ import annotations

from schema_scout.models import (
    TYPE_KINDS,
    FieldDescriptor,
    InputValueDescriptor,
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    TypeDescriptor,
    TypeRef,
)

MAX_FIELDS_TO_SHOW = 50
TYPE_DESCRIPTION_LIMIT = 150
OPERATION_DESCRIPTION_LIMIT = 100


def render_type_ref(ref: TypeRef | None) -> str:
    """Render a possibly-wrapped type reference, e.g. ``[Product!]!``."""
    if ref is None:
        return "null"
    if isinstance(ref, NonNullTypeRef):
        return f"{render_type_ref(ref.of_type)}!"
    if isinstance(ref, ListTypeRef):
        return f"[{render_type_ref(ref.of_type)}]"
    assert isinstance(ref, NamedTypeRef)
    return ref.name if ref.name is not None else "null"


def render_argument(arg: InputValueDescriptor) -> str:
    result = f"{arg.name}: {render_type_ref(arg.type)}"
    if arg.default_value is not None:
        result += f" = {arg.default_value}"
    return result


def render_field(field: FieldDescriptor) -> str:
    result = f"  {field.name}"
    if field.args:
        result += f"({', '.join(render_argument(arg) for arg in field.args)})"
    result += f": {render_type_ref(field.type)}"
    if field.is_deprecated:
        result += " @deprecated"
        if field.deprecation_reason:
            result += f" ({field.deprecation_reason})"
    return result


def render_input_field(field: InputValueDescriptor) -> str:
    return f"  {field.name}: {render_type_ref(field.type)}"


def _flatten_description(description: str, limit: int) -> str:
    text = description.replace("\n", " ")
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def render_type_block(
    type_: TypeDescriptor,
    max_fields: int = MAX_FIELDS_TO_SHOW,
    description_limit: int = TYPE_DESCRIPTION_LIMIT,
) -> str:
    lines = [" ".join(part for part in (type_.kind, type_.name) if part)]

    if type_.description:
        lines.append(f"  Description: {_flatten_description(type_.description, description_limit)}")

    interface_names = [i.name for i in type_.interfaces or [] if i.name]
    if interface_names:
        lines.append(f"  Implements: {', '.join(interface_names)}")

    # Wrapper or unrecognized kinds carry no renderable body
    if type_.kind not in TYPE_KINDS:
        return "\n".join(lines)

    # Input objects list inputFields; every other kind lists fields
    if type_.kind == "INPUT_OBJECT" and type_.input_fields:
        lines.append("  Input Fields:")
        lines.extend(render_input_field(f) for f in type_.input_fields[:max_fields])
        if len(type_.input_fields) > max_fields:
            lines.append(f"  ... and {len(type_.input_fields) - max_fields} more input fields")
    elif type_.fields:
        lines.append("  Fields:")
        lines.extend(render_field(f) for f in type_.fields[:max_fields])
        if len(type_.fields) > max_fields:
            lines.append(f"  ... and {len(type_.fields) - max_fields} more fields")

    return "\n".join(lines)


def render_operation(operation: FieldDescriptor, description_limit: int = OPERATION_DESCRIPTION_LIMIT) -> str:
    """Render a top-level query or mutation with its arguments and return type."""
    lines = [f"{operation.name}"]

    if operation.description:
        lines.append(f"  Description: {_flatten_description(operation.description, description_limit)}")

    if operation.args:
        lines.append("  Arguments:")
        lines.extend(f"    {render_argument(arg)}" for arg in operation.args)

    lines.append(f"  Returns: {render_type_ref(operation.type)}")
    return "\n".join(lines)
