"""
dependencies.py - FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni obiekt przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.validator.schema_validator import SchemaValidator
from config import Settings


def get_validator(request: Request) -> SchemaValidator:
    return request.app.state.validator


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
