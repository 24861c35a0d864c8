"""
Endpoints de reportes persistidos.

- POST /api/analysis-validation-report - Genera el reporte con el modelo elegido y lo guarda
- GET  /api/validation-reports          - Lista todos los reportes guardados
"""

from typing import List

from fastapi import APIRouter, Depends

from idea_validator_core.db.report_store import ReportStore
from idea_validator_core.engine import list_reports, run_analysis
from idea_validator_core.llm_client import CompletionClient

from ..dependencies import get_completion_client, get_report_store
from ..models.requests import AnalysisRequest, OverallReportResponse, ValidationReportResponse

router = APIRouter(prefix="/api", tags=["reports"])


@router.post("/analysis-validation-report", response_model=OverallReportResponse)
def analysis_validation_report(
    request: AnalysisRequest,
    client: CompletionClient = Depends(get_completion_client),
    store: ReportStore = Depends(get_report_store),
):
    """
    Genera un reporte con el modelo y tope de tokens que manda el usuario
    y lo persiste.

    Args:
        request: idea, modelName, maxToken (número o string numérico), testerName

    Returns:
        `{"overallReport": ...}`, el mismo texto que queda guardado
    """
    overall_report = run_analysis(client, store, request.model_dump())
    return {"overallReport": overall_report}


@router.get("/validation-reports", response_model=List[ValidationReportResponse])
def get_validation_reports(store: ReportStore = Depends(get_report_store)):
    """
    Lista todos los reportes guardados.

    Responde 404 si no hay ninguno.
    """
    return list_reports(store)
