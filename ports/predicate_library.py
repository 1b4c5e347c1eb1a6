"""
Port: PredicateLibrary
Odpowiedzialność: rozwiązywanie nazwy reguły (rule-kind) na predykat.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Protocol, runtime_checkable

# (value, options, attributes) -> True | False | None
Predicate = Callable[[Any, Any, Mapping[str, Any]], Optional[bool]]


@runtime_checkable
class PredicateLibrary(Protocol):
    def get(self, rule_kind: str) -> Optional[Predicate]:
        """Returns the predicate registered under rule_kind, or None."""
        ...

    def names(self) -> list[str]:
        """Sorted list of registered rule-kinds."""
        ...

    def __contains__(self, rule_kind: object) -> bool:
        ...
