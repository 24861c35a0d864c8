"""
API HTTP principal para idea-validator-core.

Esta aplicación FastAPI expone los endpoints de validación de ideas de
startups. La lógica vive en `idea_validator_core.engine`; acá solo se arma
la app, se inyectan los colaboradores y se traducen errores a JSON.

Uso:
    uvicorn api.main:app --reload --port 4000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from idea_validator_core.config import Settings, get_settings
from idea_validator_core.db.report_store import ReportStore
from idea_validator_core.exceptions import OperationError, ReportsNotFoundError, ValidationError
from idea_validator_core.llm_client import CompletionClient

from .routes import reports, validations

logger = logging.getLogger(__name__)

SERVICE_NAME = "idea-validator-core-api"
VERSION = "0.1.0"


def _configure_logging(level_name: str) -> None:
    log_level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message})


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: el almacén se crea una vez por proceso, salvo que venga inyectado
    owns_store = app.state.report_store is None
    if owns_store:
        settings: Settings = app.state.settings
        store = ReportStore.from_url(settings.database_url)
        store.create_schema()
        app.state.report_store = store
        logger.info("✅ Almacén de reportes inicializado")
    yield
    # Shutdown
    if owns_store:
        app.state.report_store.dispose()
        app.state.report_store = None
        logger.info("Almacén de reportes cerrado")


def create_app(
    settings: Optional[Settings] = None,
    completion_client: Optional[CompletionClient] = None,
    report_store: Optional[ReportStore] = None,
) -> FastAPI:
    """
    Construye la app con sus colaboradores.

    Parameters
    ----------
    settings:
        Configuración. Por defecto `get_settings()`.
    completion_client:
        Cliente de completions. Por defecto uno real con la API key de settings.
    report_store:
        Almacén de reportes. Si no se pasa, el lifespan lo crea desde
        `DATABASE_URL` y crea el esquema.
    """
    settings = settings or get_settings()
    _configure_logging(settings.log_level)

    app = FastAPI(
        title="Idea Validator API",
        description="API para validar ideas de startups con un LLM y guardar los reportes",
        version=VERSION,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.completion_client = completion_client or CompletionClient(api_key=settings.openai_api_key)
    app.state.report_store = report_store

    # CORS: abierto a cualquier origen salvo que CORS_ORIGINS diga otra cosa
    cors_origins = list(settings.cors_origins)
    logger.info(f"🌐 CORS origins configurados: {cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials="*" not in cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        return _error(400, str(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        logger.info(f"Body inválido en {request.url.path}: {exc.errors()}")
        return _error(400, "Request body must be a JSON object with text fields.")

    @app.exception_handler(OperationError)
    async def handle_operation_error(request: Request, exc: OperationError):
        return _error(500, str(exc))

    @app.exception_handler(ReportsNotFoundError)
    async def handle_reports_not_found(request: Request, exc: ReportsNotFoundError):
        return JSONResponse(status_code=404, content={"message": str(exc)})

    # Registrar rutas
    app.include_router(validations.router)
    app.include_router(reports.router)

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"status": "ok", "service": SERVICE_NAME}

    @app.get("/health")
    async def health():
        """Health check detallado."""
        return {
            "status": "ok",
            "service": SERVICE_NAME,
            "version": VERSION,
        }

    return app


app = create_app()
