"""Shape-based search for schema types that could describe a plain object."""

from __future__ import annotations

from collections.abc import Mapping

from graphql import (
    GraphQLNamedType,
    GraphQLSchema,
    is_input_object_type,
    is_interface_type,
    is_object_type,
)

from .resolution_errors import InvalidArgumentError
from .value_shapes import ValueShape, classify_value


def find_candidates(value: object, schema: GraphQLSchema) -> list[str]:
    """Return names of source-defined types declaring every property of ``value``.

    Only field names are compared, never field types. Results follow the
    schema's type map order. Scalars, ``None`` and dates yield no candidates.

    Raises:
      InvalidArgumentError: If ``value`` is a sequence.
    """
    shape = classify_value(value)
    if shape is ValueShape.SEQUENCE:
        raise InvalidArgumentError(
            "find_candidates expects objects to be passed in, not sequences!"
        )
    if shape is ValueShape.SCALAR:
        return []

    assert isinstance(value, Mapping)
    property_names = set(value)
    return [
        name
        for name, named_type in schema.type_map.items()
        if _declares_fields(named_type)
        and property_names.issubset(named_type.fields)  # type: ignore[attr-defined]
    ]


def _declares_fields(named_type: GraphQLNamedType) -> bool:
    if is_input_object_type(named_type):
        return False
    # built-in scalars and introspection types carry no AST node
    if named_type.ast_node is None:
        return False
    return is_object_type(named_type) or is_interface_type(named_type)
