"""
Modelos de request para la API.

Todos los campos son opcionales a propósito: la presencia se chequea en
`idea_validator_core.engine` para responder 400 con `{"error": ...}` y el
mensaje de cada ruta, en lugar del 422 por defecto de FastAPI.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field


class IdeaRequest(BaseModel):
    ideaInput: Optional[str] = Field(default=None, description="Descripción de la idea")


class MarketSizeRequest(BaseModel):
    marketSizeInput: Optional[str] = Field(default=None, description="Mercado, tamaño y audiencia")


class ProblemSolutionRequest(BaseModel):
    problemSolutionInput: Optional[str] = Field(default=None, description="Problema y solución propuesta")


class BusinessModelRequest(BaseModel):
    businessModelInput: Optional[str] = Field(default=None, description="Modelo de negocio y competidores")


class OverallReportRequest(BaseModel):
    """Las cuatro entradas juntas, para el reporte global."""

    ideaInput: Optional[str] = None
    marketSizeInput: Optional[str] = None
    problemSolutionInput: Optional[str] = None
    businessModelInput: Optional[str] = None


class AnalysisRequest(BaseModel):
    """
    Request del análisis persistido.

    `maxToken` puede llegar como número o como string numérico
    (los formularios web suelen mandar strings).
    """

    idea: Optional[str] = Field(default=None, description="Prompt completo enviado al modelo")
    modelName: Optional[str] = Field(default=None, description="Modelo de OpenAI a usar")
    maxToken: Optional[Union[int, str]] = Field(default=None, description="Tope de tokens generados")
    testerName: Optional[str] = Field(default=None, description="Nombre de quien envía la prueba")


class ValidationResponse(BaseModel):
    validation: str


class OverallReportResponse(BaseModel):
    overallReport: str


class ValidationReportResponse(BaseModel):
    """Forma de cada reporte devuelto por el listado."""

    id: str
    idea: str
    modelName: str
    maxToken: int
    overallReport: str
    testerName: str
    createdAt: Optional[str] = None
