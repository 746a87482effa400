"""Schema construction and type resolver binding service."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence

from graphql import (
    GraphQLAbstractType,
    GraphQLError,
    GraphQLSchema,
    build_schema,
    is_abstract_type,
    is_object_type,
)

from .resolver_rules import field_presence_resolver
from .schema_models import TypeMatchRule

TypeResolver = Callable[[object], object]


class SchemaError(Exception):
    """Raised for schema parsing or resolver binding failures."""


def load_schema(sdl_text: str) -> GraphQLSchema:
    """Build a schema from SDL text."""
    if not sdl_text.strip():
        raise SchemaError("Schema text cannot be empty.")
    try:
        return build_schema(sdl_text)
    except (GraphQLError, TypeError) as exc:
        raise SchemaError(f"Invalid GraphQL schema: {exc}") from exc


def bind_type_resolvers(schema: GraphQLSchema, resolvers: Mapping[str, TypeResolver]) -> None:
    """Attach ``(value) -> type name`` callables to the named abstract types.

    Raises:
      SchemaError: If a name is unknown or does not refer to an interface or union.
    """
    for type_name, resolver in resolvers.items():
        abstract_type = _require_abstract_type(schema, type_name)
        abstract_type.resolve_type = _as_type_resolver(resolver)


def bind_field_presence_resolvers(
    schema: GraphQLSchema, rules_by_type: Mapping[str, Sequence[TypeMatchRule]]
) -> None:
    """Attach field presence resolvers built from per-abstract-type rules."""
    resolvers: dict[str, TypeResolver] = {}
    for type_name, rules in rules_by_type.items():
        abstract_type = _require_abstract_type(schema, type_name)
        for rule in rules:
            possible_type = schema.get_type(rule.type_name)
            if possible_type is None or not is_object_type(possible_type):
                raise SchemaError(
                    f"Resolver rule for {type_name} names unknown object type {rule.type_name}."
                )
            if not schema.is_sub_type(abstract_type, possible_type):  # type: ignore[arg-type]
                raise SchemaError(
                    f"Type {rule.type_name} is not a possible type of {type_name}."
                )
        resolvers[type_name] = field_presence_resolver(rules)
    bind_type_resolvers(schema, resolvers)


def _require_abstract_type(schema: GraphQLSchema, type_name: str) -> GraphQLAbstractType:
    named_type = schema.get_type(type_name)
    if named_type is None:
        raise SchemaError(f"Cannot bind resolver to unknown type {type_name}.")
    if not is_abstract_type(named_type):
        raise SchemaError(f"Cannot bind resolver to {type_name}: not an interface or union.")
    return named_type  # type: ignore[return-value]


def _as_type_resolver(resolver: TypeResolver):
    def resolve_type(value, _info, _abstract_type):
        return resolver(value)

    return resolve_type
