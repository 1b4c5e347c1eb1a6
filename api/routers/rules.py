"""
Router: GET /rules
Lista rule-kindów zarejestrowanych w bibliotece predykatów walidatora.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from api.dependencies import get_validator
from api.schemas import RulesResponse

router = APIRouter(prefix="/rules", tags=["rules"])


@router.get("", response_model=RulesResponse)
def list_rules(validator=Depends(get_validator)) -> RulesResponse:
    return RulesResponse(rule_kinds=validator.library.names())
