"""
Adapter: SchemaCompiler
Zamienia surowy schemat (atrybut -> reguły | funkcja) na CompiledSchema.

Klasyfikacja rule-value odbywa się RAZ, przy kompilacji:
  funkcja zamiast reguł      -> CustomCheck
  nieznany kind + funkcja    -> InlineRule
  nieznany kind + cokolwiek  -> SchemaError (literówka w nazwie reguły)
  znany kind + True/False    -> FlagRule
  znany kind + reszta        -> OptionsRule (opcje trafiają wprost do predykatu)
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from contracts import (
    CompiledRule,
    CompiledSchema,
    CustomCheck,
    FlagRule,
    InlineRule,
    OptionsRule,
    RuleSet,
    SchemaEntry,
    SchemaError,
)
from ports.predicate_library import PredicateLibrary

logger = logging.getLogger("formcheck.schema_compiler")


class SchemaCompiler:
    """Kompiluje schematy względem jednej biblioteki predykatów."""

    def __init__(self, library: PredicateLibrary) -> None:
        self._library = library

    def compile(self, schema: Mapping[str, Any]) -> CompiledSchema:
        if isinstance(schema, CompiledSchema):
            self._verify(schema)
            return schema
        if not isinstance(schema, Mapping):
            raise SchemaError(f"Schema must be a mapping, got {type(schema).__name__}.")
        entries = [self._compile_entry(attribute, rules) for attribute, rules in schema.items()]
        return CompiledSchema(entries=entries)

    # -- Prywatne ----------------------------------------------------------

    def _verify(self, schema: CompiledSchema) -> None:
        """Schemat skompilowany gdzie indziej musi znać tylko nasze rule-kindy."""
        for entry in schema.entries:
            for rule in getattr(entry, "rules", []):
                if isinstance(rule, InlineRule) or rule.rule_kind in self._library:
                    continue
                raise SchemaError(
                    f"Invalid validation type. Validation method doesn't exist: {rule.rule_kind}",
                    attribute=entry.attribute,
                    rule_kind=rule.rule_kind,
                )

    def _compile_entry(self, attribute: str, rules: Any) -> SchemaEntry:
        if callable(rules):
            return CustomCheck(attribute=attribute, predicate=rules)
        if not isinstance(rules, Mapping):
            raise SchemaError(
                f"Rules for {attribute!r} must be a mapping or a callable, "
                f"got {type(rules).__name__}.",
                attribute=attribute,
            )
        compiled = [
            self._compile_rule(attribute, rule_kind, rule_value)
            for rule_kind, rule_value in rules.items()
        ]
        return RuleSet(attribute=attribute, rules=compiled)

    def _compile_rule(self, attribute: str, rule_kind: str, rule_value: Any) -> CompiledRule:
        if rule_kind not in self._library:
            if callable(rule_value):
                return InlineRule(rule_kind=rule_kind, predicate=rule_value)
            logger.warning("Unknown rule-kind %r on attribute %r.", rule_kind, attribute)
            raise SchemaError(
                f"Invalid validation type. Validation method doesn't exist: {rule_kind}",
                attribute=attribute,
                rule_kind=rule_kind,
            )

        if rule_value is True or rule_value is False:
            return FlagRule(rule_kind=rule_kind, expected=rule_value)
        return OptionsRule(rule_kind=rule_kind, options=rule_value)
