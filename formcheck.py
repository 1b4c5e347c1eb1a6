"""
formcheck.py - Publiczny interfejs silnika reguł walidacji.

Typowe użycie:
    from formcheck import validate

    errors = validate({"age": ""}, {"age": {"required": True}})
    if errors.length:
        errors.each(lambda kinds, name: print(name, kinds))
"""
from __future__ import annotations

from adapters.form import SchemaFormValidator as FormValidator
from adapters.predicate_library import (
    DEFAULT_PREDICATES,
    BuiltinPredicateLibrary,
    PredicateSpec,
    default_library,
)
from adapters.validator.schema_validator import SchemaValidator, compile_schema, validate
from contracts import CompiledSchema, ErrorCollection, ErrorEntry, SchemaError

__all__ = [
    "validate",
    "compile_schema",
    "SchemaValidator",
    "FormValidator",
    "BuiltinPredicateLibrary",
    "PredicateSpec",
    "DEFAULT_PREDICATES",
    "default_library",
    "CompiledSchema",
    "ErrorCollection",
    "ErrorEntry",
    "SchemaError",
]
