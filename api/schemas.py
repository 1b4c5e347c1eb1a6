"""
schemas.py - Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


# ─────────────────────────── /validate ───────────────────────────

class ValidateRequest(BaseModel):
    attributes: dict[str, Any] = Field(default_factory=dict)
    # JSON nie przenosi funkcji: tylko flagi (true/false) i opcje
    schema_: dict[str, dict[str, Any]] = Field(default_factory=dict, alias="schema")
    messages: dict[str, str] = Field(default_factory=dict)


class ValidateResponse(BaseModel):
    valid: bool
    error_count: int
    errors: dict[str, list[str]]
    messages: dict[str, Optional[str]] = Field(default_factory=dict)


class SchemaErrorResponse(BaseModel):
    detail: str
    attribute: Optional[str] = None
    rule_kind: Optional[str] = None


# ─────────────────────────── /rules ──────────────────────────────

class RulesResponse(BaseModel):
    rule_kinds: list[str]


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
