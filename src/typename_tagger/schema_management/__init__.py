"""Schema management exports."""

from .resolver_rules import field_presence_resolver
from .schema_loading import (
    SchemaError,
    TypeResolver,
    bind_field_presence_resolvers,
    bind_type_resolvers,
    load_schema,
)
from .schema_models import TypeMatchRule

__all__ = [
    "SchemaError",
    "TypeMatchRule",
    "TypeResolver",
    "bind_field_presence_resolvers",
    "bind_type_resolvers",
    "field_presence_resolver",
    "load_schema",
]
