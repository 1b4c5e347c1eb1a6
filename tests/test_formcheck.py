from __future__ import annotations

import pytest

import formcheck


def test_public_validate_entry_point():
    errors = formcheck.validate({"age": ""}, {"age": {"required": True}})

    assert isinstance(errors, formcheck.ErrorCollection)
    assert errors.length == 1
    assert errors.get("age") == ("required",)


def test_public_schema_error_is_value_error():
    with pytest.raises(formcheck.SchemaError):
        formcheck.compile_schema({"x": {"bogusRule": "oops"}})
    assert issubclass(formcheck.SchemaError, ValueError)


def test_public_form_validator():
    form = formcheck.FormValidator({"pin": {"length": 4, "number": True}}, messages={"pin": "4 digits"})

    errors = form.validate({"pin": "12"})

    assert form.error_messages(errors) == {"pin": "4 digits"}
    assert form.is_valid("pin", {"pin": "1234"}) is True
