"""
Adapter: BuiltinPredicateLibrary
Implementuje port PredicateLibrary - stały rejestr nazwanych predykatów.

Każdy predykat ma sygnaturę (value, options, attributes) i zwraca:
  True   - wartość poprawna
  False  - wartość niepoprawna
  None   - brak rozstrzygnięcia (np. pusta wartość dla url/date/username)

Reguły "wrażliwe na pustkę" (max, min, length, minlength, maxlength, range)
zwracają False dla wartości falsy ("" / 0 / None), niezależnie od porównania.
Dzięki temu łączą się z `required` bez podwójnej walidacji.

Nowy rule-kind = nowy wpis w DEFAULT_PREDICATES (albo `extra=` w konstruktorze).
Nazwy są małymi literami: reguły czytane z atrybutów HTML przychodzą lowercase.
"""
from __future__ import annotations

import numbers
import re
from dataclasses import dataclass
from datetime import date, datetime
from email.utils import parsedate_to_datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ports.predicate_library import Predicate

_PATTERNS = {
    "email": re.compile(r"^([a-zA-Z0-9_.\-+]+)@([\da-z.\-]+)\.([a-z.]{2,6})$", re.ASCII),
    "url": re.compile(r"^(https?://)?([\da-z.\-]+)\.([a-z.]{2,6})([/\w .\-]*)/?$", re.ASCII),
    "alphanumeric": re.compile(r"^\w+$", re.ASCII),
    "hex": re.compile(r"^#([a-fA-F0-9]{6}|[a-fA-F0-9]{3})$"),
    "dateofbirth": re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$", re.ASCII),
}

# Prefiks liczbowy w stylu parseFloat: "12abc" -> 12
_NUMERIC_PREFIX_RE = re.compile(
    r"^\s*[+-]?(Infinity|\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)"
)
# Pełna liczba: "12", "-1.5", "2e3"
_NUMERIC_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")

_DOB_FORMAT = "%d/%m/%Y"
_DATE_FORMATS = (
    "%m/%d/%Y",
    "%Y/%m/%d",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
)
_MIN_AGE_YEARS = 16


# ─────────────────────────── Helpers ─────────────────────────────────────

def _is_number(val: Any) -> bool:
    """Liczba rzeczywista, ale nie bool (True nie jest liczbą)."""
    return isinstance(val, numbers.Real) and not isinstance(val, bool)


def _to_number(val: Any) -> Optional[numbers.Real]:
    """Ścisła konwersja na liczbę; None gdy się nie da. Liczby bez konwersji (duże int)."""
    if _is_number(val):
        return val
    if isinstance(val, str) and _NUMERIC_RE.fullmatch(val.strip()):
        return float(val.strip())
    return None


def _length_of(val: Any) -> Optional[int]:
    if isinstance(val, (str, list, tuple)):
        return len(val)
    return None


def _strict_equals(a: Any, b: Any) -> bool:
    """Równość bez koercji typów: 1 != "1", True != 1, 1 == 1.0."""
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a is b
    if _is_number(a) and _is_number(b):
        return a == b
    if type(a) is not type(b):
        return False
    return a == b


def _deep_equal(a: Any, b: Any) -> bool:
    """Strukturalna równość (listy i słowniki rekurencyjnie, NaN == NaN)."""
    if _is_number(a) and _is_number(b):
        return a == b or (a != a and b != b)
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        return len(a) == len(b) and all(_deep_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        return a.keys() == b.keys() and all(_deep_equal(a[k], b[k]) for k in a)
    return _strict_equals(a, b)


def _parse_dmy(val: Any) -> Optional[date]:
    """'DD/MM/YYYY' -> date; None gdy format albo data kalendarzowa są złe."""
    if not isinstance(val, str) or not _PATTERNS["dateofbirth"].fullmatch(val):
        return None
    try:
        return datetime.strptime(val, _DOB_FORMAT).date()
    except ValueError:
        return None


def _today() -> date:
    return datetime.now().date()


def _add_years(d: date, years: int) -> date:
    try:
        return d.replace(year=d.year + years)
    except ValueError:
        # 29 lutego w roku nieprzestępnym
        return d.replace(year=d.year + years, day=28)


def _parse_date_string(val: str) -> bool:
    text = val.strip()
    if not text:
        return False
    try:
        datetime.fromisoformat(text.replace("Z", "+00:00"))
        return True
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            datetime.strptime(text, fmt)
            return True
        except ValueError:
            continue
    try:
        parsedate_to_datetime(text)
        return True
    except (TypeError, ValueError, IndexError):
        return False


# ─────────────────────────── Predicates ──────────────────────────────────

def required(val: Any, options: Any = None, attributes: Any = None) -> bool:
    return val is not None and val != ""


def equals(val: Any, options: Any = None, attributes: Any = None) -> bool:
    return _strict_equals(val, options)


def email(val: Any, options: Any = None, attributes: Any = None) -> bool:
    return isinstance(val, str) and bool(_PATTERNS["email"].fullmatch(val))


def url(val: Any, options: Any = None, attributes: Any = None) -> Optional[bool]:
    if not val:
        return None
    return isinstance(val, str) and bool(_PATTERNS["url"].fullmatch(val))


def alphanumeric(val: Any, options: Any = None, attributes: Any = None) -> bool:
    return isinstance(val, str) and bool(_PATTERNS["alphanumeric"].fullmatch(val))


def hex(val: Any, options: Any = None, attributes: Any = None) -> bool:  # noqa: A001
    return isinstance(val, str) and bool(_PATTERNS["hex"].fullmatch(val))


def string(val: Any, options: Any = None, attributes: Any = None) -> bool:
    return isinstance(val, str)


def number(val: Any, options: Any = None, attributes: Any = None) -> bool:
    """Liczba albo string z liczbowym prefiksem ("12", "3.5kg")."""
    if _is_number(val):
        return True
    return isinstance(val, str) and bool(_NUMERIC_PREFIX_RE.match(val))


def array(val: Any, options: Any = None, attributes: Any = None) -> bool:
    return isinstance(val, (list, tuple))


def date_(val: Any, options: Any = None, attributes: Any = None) -> Optional[bool]:
    """Obiekt date/datetime, timestamp albo string parsowalny jako data."""
    if not val:
        return None
    if isinstance(val, (date, datetime)):
        return True
    if _is_number(val):
        return True
    if isinstance(val, str):
        return _parse_date_string(val)
    return False


def boolean(val: Any, options: Any = None, attributes: Any = None) -> bool:
    return val is True or val is False


def username(val: Any, options: Any = None, attributes: Any = None) -> Optional[bool]:
    """Numer klienta albo adres email."""
    if not val:
        return None
    if isinstance(val, str) and "@" in val:
        return email(val)
    return number(val)


def dateofbirth(val: Any, options: Any = None, attributes: Any = None) -> Optional[bool]:
    if not val:
        return None
    return _parse_dmy(val) is not None


def over16(val: Any, options: Any = None, attributes: Any = None) -> Optional[bool]:
    if not val:
        return None
    born = _parse_dmy(val)
    if born is None:
        return False
    today = _today()
    return today >= _add_years(born, _MIN_AGE_YEARS)


def max_(val: Any, options: Any = None, attributes: Any = None) -> bool:
    if not val:
        return False
    value, bound = _to_number(val), _to_number(options)
    return value is not None and bound is not None and value <= bound


def min_(val: Any, options: Any = None, attributes: Any = None) -> bool:
    if not val:
        return False
    value, bound = _to_number(val), _to_number(options)
    return value is not None and bound is not None and value >= bound


def length(val: Any, options: Any = None, attributes: Any = None) -> bool:
    size, expected = _length_of(val), _to_number(options)
    if not val or not size or expected is None:
        return False
    return size == expected


def minlength(val: Any, options: Any = None, attributes: Any = None) -> bool:
    size, bound = _length_of(val), _to_number(options)
    if not val or not size or bound is None:
        return False
    return size >= bound


def maxlength(val: Any, options: Any = None, attributes: Any = None) -> bool:
    size, bound = _length_of(val), _to_number(options)
    if not val or not size or bound is None:
        return False
    return size <= bound


def range_(val: Any, options: Any = None, attributes: Any = None) -> bool:
    if not val or not isinstance(options, Mapping):
        return False
    value = _to_number(val)
    low, high = _to_number(options.get("from")), _to_number(options.get("to"))
    if value is None or low is None or high is None:
        return False
    return low <= value <= high


def in_(val: Any, options: Any = None, attributes: Any = None) -> bool:
    if isinstance(options, str):
        # reguła z atrybutu HTML: wyszukiwanie w tekście
        return isinstance(val, str) and val in options
    if not isinstance(options, (list, tuple, set, frozenset)):
        return False
    return any(_strict_equals(val, candidate) for candidate in options)


def matches(val: Any, options: Any = None, attributes: Optional[Mapping[str, Any]] = None) -> bool:
    """Porównanie z innym polem: options to nazwa pola w attributes."""
    other = (attributes or {}).get(options) if isinstance(options, str) else None
    return _deep_equal(val, other)


# ─────────────────────────── Registry ────────────────────────────────────

@dataclass(frozen=True)
class PredicateSpec:
    name: str
    predicate: Predicate


def _spec(name: str, predicate: Predicate) -> PredicateSpec:
    return PredicateSpec(name=name, predicate=predicate)


DEFAULT_PREDICATES: Mapping[str, PredicateSpec] = MappingProxyType({
    s.name: s
    for s in (
        _spec("required", required),
        _spec("equals", equals),
        _spec("username", username),
        _spec("dateofbirth", dateofbirth),
        _spec("over16", over16),
        _spec("email", email),
        _spec("url", url),
        _spec("alphanumeric", alphanumeric),
        _spec("hex", hex),
        _spec("string", string),
        _spec("number", number),
        _spec("array", array),
        _spec("date", date_),
        _spec("boolean", boolean),
        _spec("max", max_),
        _spec("min", min_),
        _spec("length", length),
        _spec("minlength", minlength),
        _spec("maxlength", maxlength),
        _spec("range", range_),
        _spec("in", in_),
        _spec("matches", matches),
    )
})


class BuiltinPredicateLibrary:
    """Rejestr predykatów tylko do odczytu; `extra` dokłada własne rule-kindy."""

    def __init__(
        self,
        extra: Optional[Mapping[str, Predicate | PredicateSpec]] = None,
    ) -> None:
        specs = dict(DEFAULT_PREDICATES)
        for name, item in (extra or {}).items():
            specs[name] = item if isinstance(item, PredicateSpec) else _spec(name, item)
        self._specs: Mapping[str, PredicateSpec] = MappingProxyType(specs)

    # -- PredicateLibrary protocol -----------------------------------------

    def get(self, rule_kind: str) -> Optional[Predicate]:
        spec = self._specs.get(rule_kind)
        return spec.predicate if spec else None

    def names(self) -> list[str]:
        return sorted(self._specs)

    def __contains__(self, rule_kind: object) -> bool:
        return rule_kind in self._specs

    # -- Dodatkowe ---------------------------------------------------------

    def spec(self, rule_kind: str) -> Optional[PredicateSpec]:
        return self._specs.get(rule_kind)


_DEFAULT_LIBRARY: Optional[BuiltinPredicateLibrary] = None


def default_library() -> BuiltinPredicateLibrary:
    """Współdzielona biblioteka z wbudowanymi predykatami."""
    global _DEFAULT_LIBRARY
    if _DEFAULT_LIBRARY is None:
        _DEFAULT_LIBRARY = BuiltinPredicateLibrary()
    return _DEFAULT_LIBRARY
