"""
api/main.py - punkt wejścia FastAPI.

Walidator jest bezstanowy - tworzony raz w create_app() i współdzielony
przez wszystkie żądania (każde wywołanie validate() ma własną ErrorCollection).
SchemaError (zły schemat od klienta) -> 422 z nazwą atrybutu i reguły.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.validator.schema_validator import SchemaValidator
from api.routers import rules, validate
from api.schemas import HealthResponse
from config import Settings
from contracts import SchemaError

logger = logging.getLogger("formcheck")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
    )
    app.state.settings = settings
    app.state.validator = SchemaValidator()

    # Routers
    app.include_router(validate.router)
    app.include_router(rules.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    # Globalny handler błędów konfiguracji schematu
    @app.exception_handler(SchemaError)
    async def schema_error_handler(request: Request, exc: SchemaError):
        logger.info("Rejected schema: %s", exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "attribute": exc.attribute, "rule_kind": exc.rule_kind},
        )

    logger.info("FormCheck API ready (%d rule-kinds).", len(app.state.validator.library.names()))
    return app


app = create_app()
