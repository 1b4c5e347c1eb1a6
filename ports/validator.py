"""
Port: Validator
Odpowiedzialność: walidacja płaskiej mapy atrybutów względem schematu reguł.
"""
from typing import Any, Mapping, Protocol, Union, runtime_checkable

from contracts import CompiledSchema, ErrorCollection


@runtime_checkable
class Validator(Protocol):
    def compile(self, schema: Mapping[str, Any]) -> CompiledSchema:
        """
        Classifies every rule-value of a raw schema once (flag / inline / options).
        Raises SchemaError for an unknown rule-kind with a non-callable value
        or for an entry that is neither a rule-set nor callable. Options are not
        checked here; unusable options make the rule fail during validate().
        """
        ...

    def validate(
        self,
        attributes: Mapping[str, Any],
        schema: Union[Mapping[str, Any], CompiledSchema],
    ) -> ErrorCollection:
        """
        Validates every attribute named in the schema (keys absent from the schema
        are never checked). Returns a fresh, sealed ErrorCollection;
        len(errors) == 0 means the data is valid.
        Raises SchemaError before recording any entry if the schema is malformed.
        """
        ...
