from __future__ import annotations

"""
idea_validator_core.engine
==========================

Lógica de cada endpoint, sin HTTP.

Cada función recibe explícitamente sus colaboradores (cliente de completions,
almacén de reportes, settings) y:

1) valida presencia de campos (`ValidationError`),
2) arma el prompt,
3) llama al LLM,
4) (solo análisis) persiste el reporte.

Cualquier falla del LLM (`UpstreamError`), del almacén (`StorageError`) o
inesperada se registra acá y se relanza como `OperationError` con el mensaje
genérico de la ruta. La API solo traduce estos errores a respuestas JSON.
"""

import logging
from typing import Any, Dict, List, Mapping, Sequence

from .config import Settings
from .db.report_store import ReportStore
from .exceptions import (
    OperationError,
    ReportsNotFoundError,
    ValidationError,
)
from .llm_client import CompletionClient
from .prompts import (
    build_analysis_messages,
    build_category_messages,
    build_overall_messages,
)

logger = logging.getLogger(__name__)


# Campo requerido y mensajes por categoría
CATEGORY_FIELDS: Dict[str, Dict[str, str]] = {
    "idea": {
        "field": "ideaInput",
        "missing": "Idea input is required.",
        "failed": "Failed to validate idea.",
        "label": "idea",
    },
    "market-size": {
        "field": "marketSizeInput",
        "missing": "Market size input is required.",
        "failed": "Failed to validate market size.",
        "label": "market size",
    },
    "problem-solution": {
        "field": "problemSolutionInput",
        "missing": "Problem & solution input is required.",
        "failed": "Failed to validate problem & solution.",
        "label": "problem & solution",
    },
    "business-model": {
        "field": "businessModelInput",
        "missing": "Business model input is required.",
        "failed": "Failed to validate business model.",
        "label": "business model",
    },
}

OVERALL_FIELDS = ("ideaInput", "marketSizeInput", "problemSolutionInput", "businessModelInput")
OVERALL_MISSING = "All inputs (idea, market size, problem & solution, business model) are required."
OVERALL_FAILED = "Failed to generate overall validation report."

ANALYSIS_FIELDS = ("idea", "modelName", "maxToken", "testerName")
ANALYSIS_MISSING = "All inputs (idea, model name, max token, tester name) are required."
ANALYSIS_FAILED = "Failed to generate overall validation report."

MAX_TOKEN_INVALID = "maxToken must be a positive integer."
# Tope de la columna INTEGER del almacén
MAX_TOKEN_LIMIT = 2**31 - 1

LIST_FAILED = "Failed to fetch validation reports."
LIST_EMPTY = "No validation reports found."


def require_fields(payload: Mapping[str, Any], fields: Sequence[str], message: str) -> None:
    """Chequeo de presencia: cualquier valor falsy cuenta como ausente."""
    missing = [f for f in fields if not payload.get(f)]
    if missing:
        logger.info(f"Campos faltantes: {missing}")
        raise ValidationError(message)


def parse_max_token(value: Any) -> int:
    """
    Convierte `maxToken` (número JSON o string numérico) a entero positivo.

    Acepta espacios alrededor y solo dígitos ASCII; rechaza decimales, texto,
    separadores `_`, valores <= 0 y valores que no entran en la columna.
    """
    if isinstance(value, bool):
        raise ValidationError(MAX_TOKEN_INVALID)
    if isinstance(value, int):
        token = value
    else:
        raw = str(value).strip()
        if not (raw.isascii() and raw.isdigit()):
            raise ValidationError(MAX_TOKEN_INVALID)
        token = int(raw, 10)
    if token <= 0 or token > MAX_TOKEN_LIMIT:
        raise ValidationError(MAX_TOKEN_INVALID)
    return token


def validate_category(
    client: CompletionClient,
    category: str,
    payload: Mapping[str, Any],
    settings: Settings,
) -> str:
    """Valida una sola dimensión de la idea (idea, mercado, problema/solución o modelo de negocio)."""
    route = CATEGORY_FIELDS[category]
    require_fields(payload, [route["field"]], route["missing"])

    messages = build_category_messages(category, payload[route["field"]])
    try:
        return client.complete(
            messages,
            model=settings.openai_model_text,
            max_tokens=settings.max_tokens_for(category),
        )
    except Exception as e:
        logger.exception(f"Error generating {route['label']} validation: {e}")
        raise OperationError(route["failed"]) from e


def generate_overall_report(
    client: CompletionClient,
    payload: Mapping[str, Any],
    settings: Settings,
) -> str:
    """Reporte global a partir de las cuatro entradas. No persiste nada."""
    require_fields(payload, OVERALL_FIELDS, OVERALL_MISSING)

    messages = build_overall_messages(
        idea=payload["ideaInput"],
        market_size=payload["marketSizeInput"],
        problem_solution=payload["problemSolutionInput"],
        business_model=payload["businessModelInput"],
    )
    try:
        return client.complete(
            messages,
            model=settings.openai_model_text,
            max_tokens=settings.category_max_tokens,
        )
    except Exception as e:
        logger.exception(f"Error generating overall validation report: {e}")
        raise OperationError(OVERALL_FAILED) from e


def run_analysis(
    client: CompletionClient,
    store: ReportStore,
    payload: Mapping[str, Any],
) -> str:
    """
    Llama al LLM con el modelo y presupuesto elegidos por el usuario y guarda
    el resultado.

    El texto `idea` va sin plantilla. Si el LLM falla no se persiste nada.

    Returns
    -------
    str
        El reporte generado (idéntico al `overallReport` persistido).
    """
    require_fields(payload, ANALYSIS_FIELDS, ANALYSIS_MISSING)
    max_token = parse_max_token(payload["maxToken"])
    model_name = payload["modelName"]

    logger.info(f"Análisis solicitado por {payload['testerName']}: model={model_name}, max_token={max_token}")

    try:
        overall_report = client.complete(
            build_analysis_messages(payload["idea"]),
            model=model_name,
            max_tokens=max_token,
        )
        store.insert(
            idea=payload["idea"],
            model_name=model_name,
            max_token=max_token,
            overall_report=overall_report,
            tester_name=payload["testerName"],
        )
    except Exception as e:
        logger.exception(f"Error generating overall validation report: {e}")
        raise OperationError(ANALYSIS_FAILED) from e

    return overall_report


def list_reports(store: ReportStore) -> List[Dict[str, Any]]:
    """Todos los reportes guardados. Un listado vacío es `ReportsNotFoundError`."""
    logger.info("Fetching reports...")
    try:
        reports = store.list_all()
    except Exception as e:
        logger.exception(f"Error fetching validation reports: {e}")
        raise OperationError(LIST_FAILED) from e

    if not reports:
        raise ReportsNotFoundError(LIST_EMPTY)

    logger.info(f"Reports: {len(reports)}")
    return reports
