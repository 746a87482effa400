"""Recursive typename annotation of plain value trees."""

from __future__ import annotations

import json
import logging
import pprint
from collections.abc import Mapping
from inspect import iscoroutine

from graphql import (
    GraphQLAbstractType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    get_named_type,
    is_abstract_type,
    is_object_type,
    is_scalar_type,
)
from graphql.pyutils import is_awaitable

from .candidate_search import find_candidates
from .resolution_errors import (
    AmbiguousTypeError,
    AsyncResolverUnsupportedError,
    InvalidArgumentError,
    MissingContextError,
    MissingResolverError,
    NoViableTypeError,
    TypeMismatchError,
    UnexpectedTypeError,
    UnknownFieldError,
    UnknownResolvedTypeError,
    UnknownTypeError,
    UnresolvedAbstractTypeError,
)
from .value_shapes import TYPENAME_KEY, ValueShape, classify_value

_LOGGER = logging.getLogger(__name__)


def annotate(
    value: object,
    schema: GraphQLSchema,
    parent_type_name: str | None = None,
    property_of_parent: str | None = None,
) -> object:
    """Return a copy of ``value`` with ``__typename`` stamped on every object.

    The concrete type of an object is taken, in order, from its own
    ``__typename``, from the field ``property_of_parent`` declared on
    ``parent_type_name``, or from the single schema type declaring all of
    its properties. Abstract types are narrowed through their
    ``resolve_type`` function. Objects resolving to a scalar type and all
    non-object values are returned unchanged. The input is never mutated.

    Args:
      value: Scalar or object to annotate. Sequences are rejected.
      schema: Schema describing the value tree.
      parent_type_name: Object type declaring the property holding ``value``.
      property_of_parent: Name of that property. Required together with
        ``parent_type_name``.

    Returns:
      The annotated value.

    Raises:
      TypenameResolutionError: Subclass describing why no type could be determined.
    """
    shape = classify_value(value)
    if shape is ValueShape.SEQUENCE:
        raise InvalidArgumentError("annotate expects objects to be passed in, not sequences!")
    if shape is ValueShape.SCALAR:
        return value

    assert isinstance(value, Mapping)
    named_type = _resolve_named_type(value, schema, parent_type_name, property_of_parent)
    if is_scalar_type(named_type):
        _LOGGER.debug("Leaving value of scalar type %s untouched", named_type.name)
        return value

    object_type = _resolve_object_type(
        value, named_type, schema, parent_type_name, property_of_parent
    )
    return _stamp_fields(value, schema, object_type.name)


def _resolve_named_type(
    value: Mapping[str, object],
    schema: GraphQLSchema,
    parent_type_name: str | None,
    property_of_parent: str | None,
) -> GraphQLNamedType:
    typename = value.get(TYPENAME_KEY)
    if typename:
        named_type = schema.get_type(typename) if isinstance(typename, str) else None
        if named_type is None:
            raise UnknownTypeError(f"No type found for the {TYPENAME_KEY} {typename!r}")
        _LOGGER.debug("Using explicit %s %s", TYPENAME_KEY, typename)
        return named_type
    if parent_type_name is not None or property_of_parent is not None:
        return _resolve_from_context(schema, parent_type_name, property_of_parent)
    return _resolve_from_candidates(value, schema)


def _resolve_from_context(
    schema: GraphQLSchema,
    parent_type_name: str | None,
    property_of_parent: str | None,
) -> GraphQLNamedType:
    if property_of_parent is None:
        raise MissingContextError(
            "Expected a property_of_parent to be given when parent_type_name is given!"
        )
    if parent_type_name is None:
        raise MissingContextError(
            "Expected a parent_type_name to be given when property_of_parent is given!"
        )

    parent_type = schema.get_type(parent_type_name)
    if parent_type is None:
        raise UnknownTypeError(f"No parent type found for the typename {parent_type_name}")
    if not is_object_type(parent_type):
        raise TypeMismatchError(
            f"Parent type {parent_type_name} is expected to be an object type but it is not"
        )
    assert isinstance(parent_type, GraphQLObjectType)

    field = parent_type.fields.get(property_of_parent)
    if field is None:
        raise UnknownFieldError(
            f"The given field ({property_of_parent}) does not exist on type {parent_type.name}"
        )
    named_type = get_named_type(field.type)
    _LOGGER.debug(
        "Resolved %s.%s to declared type %s", parent_type_name, property_of_parent, named_type
    )
    return named_type


def _resolve_from_candidates(
    value: Mapping[str, object], schema: GraphQLSchema
) -> GraphQLNamedType:
    candidate_names = find_candidates(value, schema)
    _LOGGER.debug("Candidate types for fields %s: %s", list(value), candidate_names)
    if not candidate_names:
        raise NoViableTypeError(f"No viable typenames found!{_error_hint(value)}", value)
    if len(candidate_names) > 1:
        # TODO narrow candidates by comparing field values against declared field types
        listing = "\n\t".join(candidate_names)
        raise AmbiguousTypeError(
            f"Cannot resolve the {TYPENAME_KEY} between these possible types:\n\n\t{listing}"
            f"{_error_hint(value)}",
            candidate_names,
        )
    named_type = schema.get_type(candidate_names[0])
    assert named_type is not None
    return named_type


def _resolve_object_type(
    value: Mapping[str, object],
    named_type: GraphQLNamedType,
    schema: GraphQLSchema,
    parent_type_name: str | None,
    property_of_parent: str | None,
) -> GraphQLObjectType:
    if is_object_type(named_type):
        assert isinstance(named_type, GraphQLObjectType)
        return named_type
    if is_abstract_type(named_type):
        return _resolve_abstract_type(value, named_type, schema)  # type: ignore[arg-type]
    raise UnexpectedTypeError(
        f"Unexpected type found {named_type.name}! "
        f"property_of_parent: {property_of_parent}, parent_type_name: {parent_type_name}"
    )


def _resolve_abstract_type(
    value: Mapping[str, object],
    abstract_type: GraphQLAbstractType,
    schema: GraphQLSchema,
) -> GraphQLObjectType:
    resolve_type = abstract_type.resolve_type
    if resolve_type is None:
        raise MissingResolverError(
            f"No resolve_type found for the abstract type {abstract_type.name}"
        )

    resolved = resolve_type(value, None, abstract_type)  # type: ignore[arg-type]
    if is_awaitable(resolved):
        if iscoroutine(resolved):
            resolved.close()
        raise AsyncResolverUnsupportedError(
            f"The resolve_type for {abstract_type.name} returns an awaitable "
            "but only synchronous resolvers are supported!"
        )
    if not resolved:
        raise UnresolvedAbstractTypeError(
            f"Unable to resolve type for abstract type {abstract_type.name}"
        )

    if is_object_type(resolved):
        resolved_type: GraphQLNamedType | None = resolved  # type: ignore[assignment]
    elif isinstance(resolved, str):
        resolved_type = schema.get_type(resolved)
    else:
        resolved_type = None
    if resolved_type is None or not is_object_type(resolved_type):
        raise UnknownResolvedTypeError(
            f"The abstract type {abstract_type.name} resolved to an unknown "
            f"or misconfigured type {resolved}"
        )
    assert isinstance(resolved_type, GraphQLObjectType)
    _LOGGER.debug("Abstract type %s resolved to %s", abstract_type.name, resolved_type.name)
    return resolved_type


def _stamp_fields(
    value: Mapping[str, object], schema: GraphQLSchema, type_name: str
) -> dict[str, object]:
    annotated = dict(value)
    annotated[TYPENAME_KEY] = type_name
    for property_name, child in value.items():
        if property_name == TYPENAME_KEY:
            continue
        if classify_value(child) is ValueShape.SEQUENCE:
            annotated[property_name] = [
                annotate(element, schema, type_name, property_name)
                for element in child  # type: ignore[attr-defined]
            ]
        else:
            annotated[property_name] = annotate(child, schema, type_name, property_name)
    return annotated


def _error_hint(value: Mapping[str, object]) -> str:
    try:
        dump = json.dumps(value, indent=2, default=str)
    except (TypeError, ValueError):
        # non-string keys such as YAML dates
        dump = pprint.pformat(value)
    return (
        f"\n\nThis is the relevant object given\n{dump}\n\n"
        f"Hint: Try adding a {TYPENAME_KEY} on your input object "
        "or pass in a parent_type_name & property_of_parent.\n"
    )
