"""
Adapter: RuleEvaluator
Ocenia JEDEN atrybut (CustomCheck albo RuleSet) i dopisuje błędy do kolekcji.

Interpretacja wyniku predykatu:
  CustomCheck / InlineRule / OptionsRule  -> błąd tylko gdy wynik `is False`
                                             (None = brak rozstrzygnięcia = OK)
  FlagRule                                -> wynik musi być DOKŁADNIE expected
                                             ({number: False} = "nie liczba")

Wszystkie reguły atrybutu są sprawdzane; jeden błąd nie przerywa kolejnych.
"""
from __future__ import annotations

from typing import Any, Mapping

from contracts import (
    CUSTOM_RULE_KIND,
    CustomCheck,
    ErrorCollection,
    FlagRule,
    InlineRule,
    OptionsRule,
    SchemaEntry,
    SchemaError,
)
from ports.predicate_library import PredicateLibrary


class RuleEvaluator:
    def __init__(self, library: PredicateLibrary) -> None:
        self._library = library

    def evaluate(
        self,
        entry: SchemaEntry,
        attributes: Mapping[str, Any],
        errors: ErrorCollection,
    ) -> None:
        value = attributes.get(entry.attribute)

        if isinstance(entry, CustomCheck):
            if entry.predicate(value, attributes) is False:
                errors.add(entry.attribute, CUSTOM_RULE_KIND)
            return

        for rule in entry.rules:
            if not self._passes(rule, value, attributes):
                errors.add(entry.attribute, rule.rule_kind)

    def evaluate_all(
        self,
        entries: list[SchemaEntry],
        attributes: Mapping[str, Any],
        errors: ErrorCollection,
    ) -> None:
        for entry in entries:
            self.evaluate(entry, attributes, errors)

    # -- Prywatne ----------------------------------------------------------

    def _passes(self, rule: Any, value: Any, attributes: Mapping[str, Any]) -> bool:
        if isinstance(rule, InlineRule):
            return rule.predicate(value, attributes) is not False

        predicate = self._library.get(rule.rule_kind)
        if predicate is None:
            # schemat skompilowany inną biblioteką
            raise SchemaError(
                f"Invalid validation type. Validation method doesn't exist: {rule.rule_kind}",
                rule_kind=rule.rule_kind,
            )

        if isinstance(rule, FlagRule):
            return predicate(value, rule.expected, attributes) is rule.expected
        if isinstance(rule, OptionsRule):
            return predicate(value, rule.options, attributes) is not False

        raise TypeError(f"Nieznany typ reguły: {type(rule)}")
