"""
Adapter: SchemaValidator
Implementuje port Validator - punkt wejścia silnika reguł.

validate(attributes, schema):
  1. kompiluje schemat (SchemaError PRZED zapisaniem jakiegokolwiek błędu)
  2. dla każdego atrybutu ze SCHEMATU uruchamia RuleEvaluator
     (klucze obecne tylko w attributes nie są walidowane)
  3. zwraca świeżą, zapieczętowaną ErrorCollection

Brak stanu między wywołaniami: ten sam (attributes, schema) daje te same
wpisy w tej samej kolejności.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from adapters.predicate_library import default_library
from adapters.validator.rule_evaluator import RuleEvaluator
from adapters.validator.schema_compiler import SchemaCompiler
from contracts import CompiledSchema, ErrorCollection
from ports.predicate_library import PredicateLibrary

logger = logging.getLogger("formcheck.schema_validator")


class SchemaValidator:
    """Walidator płaskiej mapy atrybutów względem schematu reguł."""

    def __init__(self, library: Optional[PredicateLibrary] = None) -> None:
        self._library = library or default_library()
        self._compiler = SchemaCompiler(self._library)
        self._evaluator = RuleEvaluator(self._library)

    @property
    def library(self) -> PredicateLibrary:
        return self._library

    # -- Validator protocol ------------------------------------------------

    def compile(self, schema: Union[Mapping[str, Any], CompiledSchema]) -> CompiledSchema:
        return self._compiler.compile(schema)

    def validate(
        self,
        attributes: Mapping[str, Any],
        schema: Union[Mapping[str, Any], CompiledSchema],
    ) -> ErrorCollection:
        compiled = self.compile(schema)
        errors = ErrorCollection()
        self._evaluator.evaluate_all(compiled.entries, attributes, errors)

        logger.debug(
            "Validated %d attribute(s): %d error(s) %s",
            len(compiled.entries), len(errors), errors.as_dict(),
        )
        return errors.seal()


_DEFAULT_VALIDATOR: Optional[SchemaValidator] = None


def _default_validator() -> SchemaValidator:
    global _DEFAULT_VALIDATOR
    if _DEFAULT_VALIDATOR is None:
        _DEFAULT_VALIDATOR = SchemaValidator()
    return _DEFAULT_VALIDATOR


def validate(
    attributes: Mapping[str, Any],
    schema: Union[Mapping[str, Any], CompiledSchema],
) -> ErrorCollection:
    """Validates attributes against schema with the built-in predicate library."""
    return _default_validator().validate(attributes, schema)


def compile_schema(schema: Mapping[str, Any]) -> CompiledSchema:
    """Compiles a raw schema once so it can be reused across validate() calls."""
    return _default_validator().compile(schema)
