"""
Endpoints de validación con plantilla.

Este módulo maneja:
- POST /api/validate-idea
- POST /api/validate-market-size
- POST /api/validate-problem-solution
- POST /api/validate-business-model
- POST /api/overall-validation-report

Ninguno persiste: arman el prompt, llaman al LLM y devuelven el texto.
"""

from fastapi import APIRouter, Depends

from idea_validator_core.config import Settings
from idea_validator_core.engine import generate_overall_report, validate_category
from idea_validator_core.llm_client import CompletionClient

from ..dependencies import get_app_settings, get_completion_client
from ..models.requests import (
    BusinessModelRequest,
    IdeaRequest,
    MarketSizeRequest,
    OverallReportRequest,
    OverallReportResponse,
    ProblemSolutionRequest,
    ValidationResponse,
)

router = APIRouter(prefix="/api", tags=["validations"])


@router.post("/validate-idea", response_model=ValidationResponse)
def validate_idea(
    request: IdeaRequest,
    client: CompletionClient = Depends(get_completion_client),
    settings: Settings = Depends(get_app_settings),
):
    """Valida la idea: product-market fit, escalabilidad y unicidad."""
    validation = validate_category(client, "idea", request.model_dump(), settings)
    return {"validation": validation}


@router.post("/validate-market-size", response_model=ValidationResponse)
def validate_market_size(
    request: MarketSizeRequest,
    client: CompletionClient = Depends(get_completion_client),
    settings: Settings = Depends(get_app_settings),
):
    validation = validate_category(client, "market-size", request.model_dump(), settings)
    return {"validation": validation}


@router.post("/validate-problem-solution", response_model=ValidationResponse)
def validate_problem_solution(
    request: ProblemSolutionRequest,
    client: CompletionClient = Depends(get_completion_client),
    settings: Settings = Depends(get_app_settings),
):
    validation = validate_category(client, "problem-solution", request.model_dump(), settings)
    return {"validation": validation}


@router.post("/validate-business-model", response_model=ValidationResponse)
def validate_business_model(
    request: BusinessModelRequest,
    client: CompletionClient = Depends(get_completion_client),
    settings: Settings = Depends(get_app_settings),
):
    validation = validate_category(client, "business-model", request.model_dump(), settings)
    return {"validation": validation}


@router.post("/overall-validation-report", response_model=OverallReportResponse)
def overall_validation_report(
    request: OverallReportRequest,
    client: CompletionClient = Depends(get_completion_client),
    settings: Settings = Depends(get_app_settings),
):
    """
    Reporte global a partir de las cuatro entradas.

    Requiere las cuatro; si falta alguna responde 400.
    """
    report = generate_overall_report(client, request.model_dump(), settings)
    return {"overallReport": report}
