"""
Port: FormValidator
Odpowiedzialność: walidacja danych jednego formularza (schemat + komunikaty + pola powiązane).
Nie zna DOM ani widżetów - operuje na już zserializowanej mapie pól.
"""
from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from contracts import ErrorCollection


@runtime_checkable
class FormValidator(Protocol):
    def validate(self, data: Mapping[str, Any]) -> ErrorCollection:
        """Validates the whole form record against the form's schema."""
        ...

    def is_valid(self, name: str, data: Mapping[str, Any]) -> bool:
        """
        Checks a single field, using only its own value and the values of its
        related fields. True when the field has no error entry.
        """
        ...

    def revalidate(self, name: str, data: Mapping[str, Any]) -> list[str]:
        """
        Re-checks a field together with its related fields after a change.
        Returns the names (field first, then related) that are now valid,
        i.e. whose error display can be cleared.
        """
        ...

    def error_messages(self, errors: ErrorCollection) -> dict[str, Optional[str]]:
        """
        Maps every failing attribute to its configured message (None when the
        form has no message for it), in first-failure order.
        """
        ...
