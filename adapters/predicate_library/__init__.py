"""
Predicate library adapter package.

Public import:
    from adapters.predicate_library import BuiltinPredicateLibrary
"""

from adapters.predicate_library.builtin_library import (
    DEFAULT_PREDICATES,
    BuiltinPredicateLibrary,
    PredicateSpec,
    default_library,
)

__all__ = [
    "DEFAULT_PREDICATES",
    "BuiltinPredicateLibrary",
    "PredicateSpec",
    "default_library",
]
