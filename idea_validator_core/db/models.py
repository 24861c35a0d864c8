"""
Modelo persistido del servicio: el reporte de validación.

Cada registro corresponde a una corrida del endpoint de análisis.
Los registros son inmutables: no existe update ni delete.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import String, DateTime, Text, Integer
from sqlalchemy.orm import Mapped, mapped_column

from .database import Base


def _uuid() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _isoformat(value: datetime | None) -> str | None:
    if value is None:
        return None
    # SQLite devuelve datetimes naive aunque se guarden en UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


class ValidationReport(Base):
    """
    Reporte de validación generado por el LLM.

    Los nombres de columna son snake_case; `to_dict()` devuelve la forma
    camelCase que expone la API (`modelName`, `maxToken`, ...).
    """
    __tablename__ = "validation_reports"

    # Identidad
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)

    # Entrada
    idea: Mapped[str] = mapped_column(Text)
    model_name: Mapped[str] = mapped_column(String(100))
    max_token: Mapped[int] = mapped_column(Integer)
    tester_name: Mapped[str] = mapped_column(String(200))

    # Salida del LLM
    overall_report: Mapped[str] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "idea": self.idea,
            "modelName": self.model_name,
            "maxToken": self.max_token,
            "overallReport": self.overall_report,
            "testerName": self.tester_name,
            "createdAt": _isoformat(self.created_at),
        }
