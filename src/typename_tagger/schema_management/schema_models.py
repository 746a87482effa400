"""Schema management entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TypeMatchRule:
    """Concrete object type chosen when any of its marker fields is present."""

    type_name: str
    field_names: tuple[str, ...]
