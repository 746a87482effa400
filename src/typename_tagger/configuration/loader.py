"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from typename_tagger.schema_management import (
    SchemaError,
    TypeMatchRule,
    bind_field_presence_resolvers,
    load_schema,
)

from .runtime_settings import Configuration, OutputSettings, RootContext, SchemaConfig


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schema = _parse_schema_section(parsed.get("schema"), path.parent)
    resolvers = _parse_resolvers_section(parsed.get("resolvers"))
    try:
        type_schema = load_schema(schema.text)
        bind_field_presence_resolvers(type_schema, resolvers)
    except SchemaError as exc:
        raise ConfigurationError(str(exc)) from exc

    return Configuration(
        path=path,
        schema=schema,
        resolvers=resolvers,
        root_context=_parse_root_section(parsed.get("root")),
        output=_parse_output_section(parsed.get("output")),
        type_schema=type_schema,
    )


def _parse_schema_section(value: Any, base_path: Path) -> SchemaConfig:
    if isinstance(value, str):
        text, source_path = value, None
    else:
        section = _require_mapping(value, "schema")
        inline = section.get("inline")
        path_value = section.get("path")
        if inline and path_value:
            raise ConfigurationError("Schema definition must not set both inline and path.")
        if inline:
            if not isinstance(inline, str):
                raise ConfigurationError("Schema inline value must be a string.")
            text, source_path = inline, None
        elif path_value:
            if not isinstance(path_value, str):
                raise ConfigurationError("Schema path must be a string.")
            source_path = _resolve_path(base_path, path_value)
            if not source_path.exists():
                raise ConfigurationError(f"Schema file not found: {source_path}")
            text = source_path.read_text(encoding="utf-8")
        else:
            raise ConfigurationError("Schema definition requires either inline or path.")

    if not text.strip():
        raise ConfigurationError("Schema text cannot be empty.")
    return SchemaConfig(text=text, source_path=source_path)


def _parse_resolvers_section(value: Any) -> dict[str, tuple[TypeMatchRule, ...]]:
    if value is None:
        return {}
    section = _require_mapping(value, "resolvers")
    resolvers: dict[str, tuple[TypeMatchRule, ...]] = {}
    for abstract_name, rules_value in section.items():
        label = f"resolvers.{abstract_name}"
        rules_section = _require_mapping(rules_value, label)
        if not rules_section:
            raise ConfigurationError(f"{label} must list at least one type.")
        resolvers[str(abstract_name)] = tuple(
            TypeMatchRule(
                type_name=str(type_name),
                field_names=_normalize_field_names(field_names, f"{label}.{type_name}"),
            )
            for type_name, field_names in rules_section.items()
        )
    return resolvers


def _parse_root_section(value: Any) -> RootContext | None:
    if value is None:
        return None
    section = _require_mapping(value, "root")
    parent_type = section.get("parent_type")
    property_name = section.get("property")
    if parent_type is None and property_name is None:
        return None
    if parent_type is None:
        raise ConfigurationError("root.parent_type is required when root.property is set.")
    if property_name is None:
        raise ConfigurationError("root.property is required when root.parent_type is set.")
    return RootContext(
        parent_type_name=_require_non_empty_string(parent_type, "root.parent_type"),
        property_of_parent=_require_non_empty_string(property_name, "root.property"),
    )


def _parse_output_section(value: Any) -> OutputSettings:
    if value is None:
        return OutputSettings(indent=2)
    section = _require_mapping(value, "output")
    return OutputSettings(indent=_require_positive_int(section.get("indent", 2), "output.indent"))


def _normalize_field_names(value: Any, field_name: str) -> tuple[str, ...]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, Sequence):
        raise ConfigurationError(f"{field_name} must be a string or list of strings.")
    normalized = []
    for item in value:
        if not isinstance(item, str):
            raise ConfigurationError(f"{field_name} entries must be strings.")
        stripped = item.strip()
        if stripped:
            normalized.append(stripped)
    if not normalized:
        raise ConfigurationError(f"{field_name} must contain at least one field name.")
    return tuple(normalized)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
