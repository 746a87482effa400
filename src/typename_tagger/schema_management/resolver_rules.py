"""Type resolvers driven by declarative field presence rules."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence

from .schema_models import TypeMatchRule


def field_presence_resolver(rules: Sequence[TypeMatchRule]) -> Callable[[object], str | None]:
    """Build a resolver returning the first rule whose marker fields occur in the value.

    A rule matches when any one of its field names is a key of the value.
    Rules are tried in order; ``None`` is returned when nothing matches.
    """
    ordered_rules = tuple(rules)

    def resolve(value: object) -> str | None:
        if not isinstance(value, Mapping):
            return None
        for rule in ordered_rules:
            if any(field_name in value for field_name in rule.field_names):
                return rule.type_name
        return None

    return resolve
