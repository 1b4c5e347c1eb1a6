"""
Adapter: SchemaFormValidator
Implementuje port FormValidator na bazie SchemaValidator.

Warstwa wywołującego silnik reguł:
  - komunikat per pole (string albo bezargumentowa funkcja, liczona leniwie)
  - walidacja pojedynczego pola razem z polami powiązanymi
    (np. "confirm" zależy od "pwd" przez regułę matches)
  - revalidate() mówi, które komunikaty można już schować
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from adapters.validator.schema_validator import SchemaValidator
from contracts import CompiledSchema, ErrorCollection

logger = logging.getLogger("formcheck.form_validator")

Message = Union[str, Callable[[], str]]


class SchemaFormValidator:
    """Walidator jednego formularza: schemat kompilowany raz przy tworzeniu."""

    def __init__(
        self,
        schema: Union[Mapping[str, Any], CompiledSchema],
        messages: Optional[Mapping[str, Message]] = None,
        related: Optional[Mapping[str, Iterable[str]]] = None,
        validator: Optional[SchemaValidator] = None,
    ) -> None:
        self._validator = validator or SchemaValidator()
        self.schema = self._validator.compile(schema)
        self.messages: dict[str, Message] = dict(messages or {})
        self.related: dict[str, list[str]] = {
            name: list(fields) for name, fields in (related or {}).items()
        }

    # -- FormValidator protocol --------------------------------------------

    def validate(self, data: Mapping[str, Any]) -> ErrorCollection:
        return self._validator.validate(data, self.schema)

    def is_valid(self, name: str, data: Mapping[str, Any]) -> bool:
        field_data = self.field_data(name, data)
        errors = self._validator.validate(field_data, self.schema.subset(list(field_data)))
        return errors.get(name) is False

    def revalidate(self, name: str, data: Mapping[str, Any]) -> list[str]:
        field_data = self.field_data(name, data)
        errors = self._validator.validate(field_data, self.schema.subset(list(field_data)))
        cleared = [key for key in field_data if errors.get(key) is False]
        logger.debug("Revalidated %r: cleared %s", name, cleared)
        return cleared

    def error_messages(self, errors: ErrorCollection) -> dict[str, Optional[str]]:
        result: dict[str, Optional[str]] = {}

        def _collect(kinds: tuple[str, ...], attribute: str) -> None:
            message = self.message_for(attribute)
            logger.debug("Error for %s (%s): %s", attribute, ", ".join(kinds), message)
            result[attribute] = message

        errors.each(_collect)
        return result

    # -- Dodatkowe ---------------------------------------------------------

    def related_fields(self, name: str) -> list[str]:
        return list(self.related.get(name, []))

    def field_data(self, name: str, data: Mapping[str, Any]) -> dict[str, Any]:
        """Wartość pola + wartości pól powiązanych (brakujące jako None)."""
        result = {name: data.get(name)}
        for field in self.related_fields(name):
            result[field] = data.get(field)
        return result

    def message_for(self, name: str) -> Optional[str]:
        message = self.messages.get(name)
        if callable(message):
            return message()
        return message
