from __future__ import annotations

from fastapi.testclient import TestClient

from api.main import create_app
from config import Settings


def _client(**overrides) -> TestClient:
    return TestClient(create_app(Settings(**overrides)))


def test_health():
    response = _client(app_version="9.9.9").get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": "9.9.9"}


def test_rules_lists_builtin_kinds():
    response = _client().get("/rules")

    assert response.status_code == 200
    assert "matches" in response.json()["rule_kinds"]


def test_validate_reports_errors_and_messages():
    payload = {
        "attributes": {"pwd": "abc", "confirm": "xyz", "age": ""},
        "schema": {"confirm": {"matches": "pwd"}, "age": {"required": True, "min": 18}},
        "messages": {"confirm": "Passwords do not match"},
    }

    body = _client().post("/validate", json=payload).json()

    assert body["valid"] is False
    assert body["error_count"] == 3
    assert body["errors"] == {"confirm": ["matches"], "age": ["required", "min"]}
    assert body["messages"] == {"confirm": "Passwords do not match", "age": None}


def test_validate_valid_payload():
    payload = {"attributes": {"n": "abc"}, "schema": {"n": {"number": False}}}

    body = _client().post("/validate", json=payload).json()

    assert body == {"valid": True, "error_count": 0, "errors": {}, "messages": {}}


def test_unknown_rule_kind_is_unprocessable():
    payload = {"attributes": {"x": 5}, "schema": {"x": {"bogusRule": "oops"}}}

    response = _client().post("/validate", json=payload)

    assert response.status_code == 422
    assert response.json()["rule_kind"] == "bogusRule"
    assert response.json()["attribute"] == "x"


def test_schema_size_limit():
    payload = {"attributes": {}, "schema": {"a": {}, "b": {}, "c": {}}}

    response = _client(max_attributes=2).post("/validate", json=payload)

    assert response.status_code == 413
