"""Failure kinds raised while resolving typenames."""

from __future__ import annotations

from collections.abc import Sequence


class TypenameResolutionError(Exception):
    """Base class for every typename resolution failure."""


class InvalidArgumentError(TypenameResolutionError):
    """Raised when a sequence is passed where a single value is expected."""


class UnknownTypeError(TypenameResolutionError):
    """Raised when a type name does not exist in the schema."""


class TypeMismatchError(TypenameResolutionError):
    """Raised when a parent type is not an object type."""


class UnknownFieldError(TypenameResolutionError):
    """Raised when a property is not declared as a field of its parent type."""


class MissingContextError(TypenameResolutionError):
    """Raised when only one half of the parent context is supplied."""


class NoViableTypeError(TypenameResolutionError):
    """Raised when no schema type declares every field of a value."""

    def __init__(self, message: str, value: object) -> None:
        super().__init__(message)
        self.value = value


class AmbiguousTypeError(TypenameResolutionError):
    """Raised when several schema types declare every field of a value."""

    def __init__(self, message: str, candidate_names: Sequence[str]) -> None:
        super().__init__(message)
        self.candidate_names = tuple(candidate_names)


class MissingResolverError(TypenameResolutionError):
    """Raised when an abstract type has no resolve_type function."""


class AsyncResolverUnsupportedError(TypenameResolutionError):
    """Raised when a resolve_type function returns an awaitable."""


class UnresolvedAbstractTypeError(TypenameResolutionError):
    """Raised when a resolve_type function returns nothing."""


class UnknownResolvedTypeError(TypenameResolutionError):
    """Raised when a resolve_type function names something other than an object type."""


class UnexpectedTypeError(TypenameResolutionError):
    """Raised when the resolved named type is of a kind that cannot be stamped."""
