"""Fixture file reading and writing service."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import yaml

_JSON_SUFFIXES = (".json",)
_YAML_SUFFIXES = (".yaml", ".yml")


class FixtureError(Exception):
    """Raised when a fixture file cannot be read or written."""


def read_fixture(fixture_path: Path | str) -> object:
    """Parse a JSON or YAML fixture file into plain data.

    YAML timestamps are returned as ``datetime.date``/``datetime.datetime`` values.
    """
    path = Path(fixture_path)
    if not path.exists():
        raise FixtureError(f"Fixture file not found: {path}")
    suffix = _require_supported_suffix(path)

    text = path.read_text(encoding="utf-8")
    try:
        if suffix in _JSON_SUFFIXES:
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise FixtureError(f"Failed to parse fixture file {path}: {exc}") from exc


def write_fixture(value: object, output_path: Path | str, *, indent: int = 2) -> Path:
    """Serialize ``value`` in the format implied by the output suffix.

    Returns:
      The resolved destination path.

    Raises:
      FixtureError: If the suffix is unsupported or the value cannot be serialized.
    """
    destination = Path(output_path)
    suffix = _require_supported_suffix(destination)
    try:
        if suffix in _JSON_SUFFIXES:
            text = json.dumps(value, indent=indent, default=_json_default, ensure_ascii=False)
            text += "\n"
        else:
            text = yaml.safe_dump(value, indent=indent, sort_keys=False, allow_unicode=True)
    except (TypeError, ValueError, yaml.YAMLError) as exc:
        raise FixtureError(f"Failed to serialize fixture for {destination}: {exc}") from exc
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text, encoding="utf-8")
    return destination.resolve()


def _require_supported_suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in _JSON_SUFFIXES + _YAML_SUFFIXES:
        raise FixtureError(f"Unsupported fixture format '{path.suffix}' for {path}")
    return suffix


def _json_default(value: object) -> str:
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
