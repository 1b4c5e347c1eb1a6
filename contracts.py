"""
contracts.py - Jedyne źródło prawdy dla typów danych w FormCheck.
Wszystkie moduły importują typy WYŁĄCZNIE stąd. Nie modyfikować bez versioning.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterator, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

CONTRACTS_VERSION = "1.0.0"

# Rule-kind zapisywany dla funkcji walidującej cały atrybut
CUSTOM_RULE_KIND = "custom"


# ─────────────────────────── Errors ──────────────────────────────────────

class SchemaError(ValueError):
    """Błąd konfiguracji schematu (literówka w nazwie reguły, wpis ani reguły, ani funkcja)."""

    def __init__(
        self,
        message: str,
        attribute: Optional[str] = None,
        rule_kind: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.attribute = attribute
        self.rule_kind = rule_kind


# ─────────────────────────── ErrorCollection ─────────────────────────────

class ErrorEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    attribute: str
    rule_kind: str   # np. "required", "range", "custom"


class ErrorCollection(BaseModel):
    """
    Raport jednego wywołania validate(): uporządkowane wpisy (atrybut, reguła).
    Wpisy są krotką (niemutowalne); po seal() nie da się też dodać nowych.
    """
    entries: tuple[ErrorEntry, ...] = Field(default_factory=tuple)

    _index: Optional[dict[str, tuple[str, ...]]] = PrivateAttr(default=None)
    _indexed: Optional[tuple[ErrorEntry, ...]] = PrivateAttr(default=None)
    _sealed: bool = PrivateAttr(default=False)

    def add(self, attribute: str, rule_kind: str) -> None:
        if self._sealed:
            raise RuntimeError("ErrorCollection is sealed; entries cannot be added")
        self.entries = self.entries + (ErrorEntry(attribute=attribute, rule_kind=rule_kind),)

    def seal(self) -> ErrorCollection:
        self._grouped()
        self._sealed = True
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "entries" and getattr(self, "_sealed", False):
            raise RuntimeError("ErrorCollection is sealed; entries cannot be replaced")
        super().__setattr__(name, value)

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def length(self) -> int:
        return len(self.entries)

    def get(self, attribute: str) -> Union[Literal[False], tuple[str, ...]]:
        """False gdy atrybut jest poprawny, inaczej krotka nieudanych reguł."""
        return self._grouped().get(attribute, False)

    def each(self, callback: Callable[[tuple[str, ...], str], Any]) -> None:
        for attribute, kinds in self._grouped().items():
            callback(kinds, attribute)

    def as_dict(self) -> dict[str, list[str]]:
        return {attribute: list(kinds) for attribute, kinds in self._grouped().items()}

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def __iter__(self) -> Iterator[tuple[str, tuple[str, ...]]]:  # type: ignore[override]
        return iter(self._grouped().items())

    def _grouped(self) -> dict[str, tuple[str, ...]]:
        # indeks budowany raz dla danej krotki wpisów
        if self._index is None or self._indexed is not self.entries:
            self._index = self._build_index()
            self._indexed = self.entries
        return self._index

    def _build_index(self) -> dict[str, tuple[str, ...]]:
        # dict zachowuje kolejność pierwszego błędu
        grouped: dict[str, list[str]] = {}
        for entry in self.entries:
            grouped.setdefault(entry.attribute, []).append(entry.rule_kind)
        return {attribute: tuple(kinds) for attribute, kinds in grouped.items()}


# ─────────────────────────── Compiled schema ─────────────────────────────

class RuleValueKind(str, Enum):
    FLAG = "flag"        # {number: false}
    INLINE = "inline"    # {notBlank: lambda v, attrs: ...}
    OPTIONS = "options"  # {range: {"from": 1, "to": 5}}


class FlagRule(BaseModel):
    kind: Literal[RuleValueKind.FLAG] = RuleValueKind.FLAG
    rule_kind: str
    expected: bool


class InlineRule(BaseModel):
    kind: Literal[RuleValueKind.INLINE] = RuleValueKind.INLINE
    rule_kind: str
    predicate: Callable[..., Any]


class OptionsRule(BaseModel):
    kind: Literal[RuleValueKind.OPTIONS] = RuleValueKind.OPTIONS
    rule_kind: str
    options: Any = None


CompiledRule = Union[FlagRule, InlineRule, OptionsRule]


class RuleSet(BaseModel):
    attribute: str
    rules: list[CompiledRule] = Field(default_factory=list)


class CustomCheck(BaseModel):
    """Funkcja (value, attributes) -> bool walidująca cały atrybut."""
    attribute: str
    predicate: Callable[..., Any]


SchemaEntry = Union[RuleSet, CustomCheck]


class CompiledSchema(BaseModel):
    entries: list[SchemaEntry] = Field(default_factory=list)

    def attributes(self) -> list[str]:
        return [entry.attribute for entry in self.entries]

    def entry(self, attribute: str) -> Optional[SchemaEntry]:
        for entry in self.entries:
            if entry.attribute == attribute:
                return entry
        return None

    def subset(self, attributes: list[str]) -> CompiledSchema:
        """Schemat ograniczony do podanych atrybutów (kolejność schematu)."""
        wanted = set(attributes)
        return CompiledSchema(entries=[e for e in self.entries if e.attribute in wanted])
