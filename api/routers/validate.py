"""
Router: POST /validate
Waliduje płaską mapę atrybutów względem schematu przesłanego w JSON.
Schemat zawiera tylko flagi i opcje (funkcji nie da się przesłać).
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from adapters.form import SchemaFormValidator
from api.dependencies import get_settings, get_validator
from api.schemas import SchemaErrorResponse, ValidateRequest, ValidateResponse

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post(
    "",
    response_model=ValidateResponse,
    responses={422: {"model": SchemaErrorResponse}},
)
def validate(
    body: ValidateRequest,
    validator=Depends(get_validator),
    settings=Depends(get_settings),
) -> ValidateResponse:
    if len(body.schema_) > settings.max_attributes:
        raise HTTPException(
            status_code=413,
            detail=f"Schema has {len(body.schema_)} attributes (limit {settings.max_attributes}).",
        )

    form = SchemaFormValidator(body.schema_, messages=body.messages, validator=validator)
    errors = form.validate(body.attributes)

    return ValidateResponse(
        valid=len(errors) == 0,
        error_count=errors.length,
        errors=errors.as_dict(),
        messages=form.error_messages(errors) if body.messages else {},
    )
