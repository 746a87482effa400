"""Classification of plain values into the shapes the annotator dispatches on."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

TYPENAME_KEY = "__typename"


class ValueShape(str, Enum):
    """Structural kind of one node in a value tree."""

    SEQUENCE = "sequence"
    SCALAR = "scalar"
    OBJECT = "object"


def classify_value(value: object) -> ValueShape:
    """Return the shape of ``value`` without consulting any schema.

    Lists and tuples are sequences, mappings are objects. Everything else,
    including ``None`` and ``datetime.date`` instances, is a scalar.
    """
    if isinstance(value, (list, tuple)):
        return ValueShape.SEQUENCE
    if isinstance(value, Mapping):
        return ValueShape.OBJECT
    return ValueShape.SCALAR
