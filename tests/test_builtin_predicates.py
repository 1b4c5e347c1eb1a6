from __future__ import annotations

from datetime import date

from adapters.predicate_library import BuiltinPredicateLibrary, DEFAULT_PREDICATES
from adapters.predicate_library import builtin_library as lib


def test_required_rejects_only_missing_and_empty_string():
    assert lib.required(None) is False
    assert lib.required("") is False
    assert lib.required(0) is True
    assert lib.required(False) is True
    assert lib.required("x") is True


def test_email_accepts_plus_addressing_and_rejects_uppercase_domain():
    assert lib.email("john.doe+news@example.co.uk") is True
    assert lib.email("John@Example.com") is False
    assert lib.email("not-an-email") is False
    assert lib.email(42) is False


def test_url_is_inconclusive_for_empty_value():
    assert lib.url("") is None
    assert lib.url("https://example.com/path/to") is True
    assert lib.url("example.org") is True
    assert lib.url("no spaces") is False


def test_alphanumeric_and_hex_patterns():
    assert lib.alphanumeric("abc_123") is True
    assert lib.alphanumeric("abc-1") is False
    assert lib.hex("#fff") is True
    assert lib.hex("#A0b1C2") is True
    assert lib.hex("#ffff") is False
    assert lib.hex("fff") is False


def test_number_accepts_numeric_prefix_but_not_booleans():
    assert lib.number(0) is True
    assert lib.number("12") is True
    assert lib.number("3.5kg") is True
    assert lib.number("abc") is False
    assert lib.number(True) is False


def test_type_predicates():
    assert lib.string("") is True
    assert lib.string(1) is False
    assert lib.array([]) is True
    assert lib.array("ab") is False
    assert lib.boolean(False) is True
    assert lib.boolean("true") is False


def test_date_accepts_date_objects_and_parseable_strings():
    assert lib.date_(date(2020, 1, 1)) is True
    assert lib.date_("2024-02-29") is True
    assert lib.date_("12/25/2000") is True
    assert lib.date_("2024-02-30") is False
    assert lib.date_("banana") is False
    assert lib.date_("") is None


def test_username_is_customer_number_or_email():
    assert lib.username("12345") is True
    assert lib.username("someone@example.com") is True
    assert lib.username("someone@") is False
    assert lib.username("abc") is False
    assert lib.username("") is None


def test_dateofbirth_requires_real_calendar_date():
    assert lib.dateofbirth("31/12/1999") is True
    assert lib.dateofbirth("1/2/2000") is True
    assert lib.dateofbirth("31/02/2000") is False
    assert lib.dateofbirth("1999-12-31") is False
    assert lib.dateofbirth("") is None


def test_over16_counts_full_years(monkeypatch):
    monkeypatch.setattr(
        "adapters.predicate_library.builtin_library._today", lambda: date(2026, 10, 17)
    )

    assert lib.over16("17/10/2010") is True
    assert lib.over16("18/10/2010") is False
    assert lib.over16("01/01/1980") is True
    assert lib.over16("31/02/2000") is False
    assert lib.over16(None) is None


def test_bounds_treat_falsy_values_as_invalid():
    assert lib.max_("5", 10) is True
    assert lib.max_(11, 10) is False
    assert lib.max_(0, 10) is False
    assert lib.min_(0, -5) is False
    assert lib.min_("7", "5") is True
    assert lib.range_(5, {"from": 1, "to": 10}) is True
    assert lib.range_(0, {"from": -1, "to": 1}) is False
    assert lib.range_(11, {"from": 1, "to": 10}) is False


def test_length_family():
    assert lib.length("abcde", "5") is True
    assert lib.length([1, 2], 3) is False
    assert lib.length([], 0) is False
    assert lib.minlength("ab", 3) is False
    assert lib.maxlength("ab", 3) is True
    assert lib.maxlength(123, 3) is False


def test_in_and_equals_do_not_coerce_types():
    assert lib.in_("b", ["a", "b"]) is True
    assert lib.in_(1, [True]) is False
    assert lib.in_("1", [1]) is False
    assert lib.equals("yes", "yes") is True
    assert lib.equals(1, "1") is False
    assert lib.equals(1, 1.0) is True


def test_matches_compares_with_other_attribute():
    assert lib.matches("abc", "pwd", {"pwd": "abc"}) is True
    assert lib.matches("abc", "pwd", {"pwd": "xyz"}) is False
    assert lib.matches([1, {"a": 2}], "x", {"x": [1, {"a": 2}]}) is True
    assert lib.matches("a", "missing", {}) is False


def test_library_registers_every_builtin_kind():
    library = BuiltinPredicateLibrary()

    assert library.names() == sorted(DEFAULT_PREDICATES)
    assert {"required", "matches", "in", "range", "over16"} <= set(library.names())
    assert "bogus" not in library
    assert library.get("bogus") is None


def test_library_extra_kinds():
    library = BuiltinPredicateLibrary(extra={"even": lambda v, o, a: int(v) % 2 == 0})

    assert "even" in library
    assert library.get("even")(4, True, {}) is True
    assert "even" not in BuiltinPredicateLibrary()


def test_unusable_options_make_predicates_fail():
    assert lib.max_(5, None) is False
    assert lib.max_(5, "") is False
    assert lib.min_(5, lambda v, a: True) is False
    assert lib.range_(5, {"from": 1}) is False
    assert lib.range_(5, [1, 10]) is False
    assert lib.in_(5, 5) is False
    assert lib.matches(5, 5, {"5": 5}) is False


def test_in_with_string_options_matches_substrings():
    assert lib.in_("bc", "abc") is True
    assert lib.in_("x", "abc") is False
    assert lib.in_(5, "abc") is False


def test_integers_beyond_float_range_compare_exactly():
    assert lib.max_(10**400, 5) is False
    assert lib.min_(10**400, 5) is True
    assert lib.range_(10**400, {"from": 1, "to": 10**401}) is True
    assert lib.max_(5, 10**400) is True
