"""Type resolution domain exports."""

from .candidate_search import find_candidates
from .resolution_errors import (
    AmbiguousTypeError,
    AsyncResolverUnsupportedError,
    InvalidArgumentError,
    MissingContextError,
    MissingResolverError,
    NoViableTypeError,
    TypeMismatchError,
    TypenameResolutionError,
    UnexpectedTypeError,
    UnknownFieldError,
    UnknownResolvedTypeError,
    UnknownTypeError,
    UnresolvedAbstractTypeError,
)
from .typename_annotation import annotate
from .value_shapes import TYPENAME_KEY, ValueShape, classify_value

__all__ = [
    "TYPENAME_KEY",
    "ValueShape",
    "classify_value",
    "find_candidates",
    "annotate",
    "TypenameResolutionError",
    "InvalidArgumentError",
    "UnknownTypeError",
    "TypeMismatchError",
    "UnknownFieldError",
    "MissingContextError",
    "NoViableTypeError",
    "AmbiguousTypeError",
    "MissingResolverError",
    "AsyncResolverUnsupportedError",
    "UnresolvedAbstractTypeError",
    "UnknownResolvedTypeError",
    "UnexpectedTypeError",
]
