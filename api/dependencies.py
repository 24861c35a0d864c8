"""
Dependencias de FastAPI.

Los colaboradores (settings, cliente de completions, almacén de reportes) se
construyen una vez en `create_app` y quedan en `app.state`. Las rutas los
obtienen con `Depends`, así los tests pueden inyectar fakes.
"""

from fastapi import Request

from idea_validator_core.config import Settings
from idea_validator_core.db.report_store import ReportStore
from idea_validator_core.llm_client import CompletionClient


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_completion_client(request: Request) -> CompletionClient:
    return request.app.state.completion_client


def get_report_store(request: Request) -> ReportStore:
    """
    Almacén de reportes del proceso.

    Raises
    ------
    RuntimeError
        Si la app arrancó sin almacén (no pasó por el lifespan).
    """
    store = getattr(request.app.state, "report_store", None)
    if store is None:
        raise RuntimeError("ReportStore no inicializado. ¿Arrancó la app con su lifespan?")
    return store
