"""
Almacén de reportes de validación.

Dos operaciones: `insert` y `list_all`. Cualquier error de SQLAlchemy
(conexión, escritura, lectura) se traduce a `StorageError`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ..exceptions import StorageError
from .database import Base, create_db_engine, create_session_factory, session_scope
from .models import ValidationReport

logger = logging.getLogger(__name__)


class ReportStore:
    """
    Acceso a la tabla `validation_reports`.

    Se construye una vez por proceso (o por test) a partir de un engine y se
    inyecta en la API. Las sesiones son cortas: una por operación.
    """

    def __init__(self, engine: Engine, session_factory: sessionmaker | None = None):
        self.engine = engine
        self._session_factory = session_factory or create_session_factory(engine)

    @classmethod
    def from_url(cls, database_url: str, **engine_kwargs) -> "ReportStore":
        return cls(create_db_engine(database_url, **engine_kwargs))

    def create_schema(self) -> None:
        """Crea las tablas si no existen."""
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            raise StorageError(f"No se pudo crear el esquema: {e}") from e

    def insert(
        self,
        idea: str,
        model_name: str,
        max_token: int,
        overall_report: str,
        tester_name: str,
    ) -> Dict[str, Any]:
        """
        Persiste un reporte y devuelve el registro guardado,
        con `id` y `createdAt` asignados por el almacén.
        """
        report = ValidationReport(
            idea=idea,
            model_name=model_name,
            max_token=max_token,
            overall_report=overall_report,
            tester_name=tester_name,
        )
        try:
            with session_scope(self._session_factory) as session:
                session.add(report)
                session.flush()
                stored = report.to_dict()
        except (SQLAlchemyError, OverflowError) as e:
            raise StorageError(f"No se pudo guardar el reporte: {e}") from e

        logger.info(f"Reporte guardado: {stored['id']}")
        return stored

    def list_all(self) -> List[Dict[str, Any]]:
        """
        Devuelve todos los reportes, en el orden natural del almacén.

        Una tabla vacía devuelve `[]`: decidir qué significa es tarea del llamador.
        """
        try:
            with session_scope(self._session_factory) as session:
                reports = session.execute(select(ValidationReport)).scalars().all()
                return [r.to_dict() for r in reports]
        except SQLAlchemyError as e:
            raise StorageError(f"No se pudieron leer los reportes: {e}") from e

    def dispose(self) -> None:
        self.engine.dispose()
