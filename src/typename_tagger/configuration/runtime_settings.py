"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from graphql import GraphQLSchema

from typename_tagger.schema_management.schema_models import TypeMatchRule


@dataclass(frozen=True)
class SchemaConfig:
    """Normalized schema settings."""

    text: str
    source_path: Path | None


@dataclass(frozen=True)
class RootContext:
    """Default parent context applied to the top-level fixture objects."""

    parent_type_name: str
    property_of_parent: str


@dataclass(frozen=True)
class OutputSettings:
    """Annotated fixture formatting options."""

    indent: int


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SchemaConfig
    resolvers: Mapping[str, tuple[TypeMatchRule, ...]]
    root_context: RootContext | None
    output: OutputSettings
    type_schema: GraphQLSchema
