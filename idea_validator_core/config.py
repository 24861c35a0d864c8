# idea_validator_core/config.py
from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv

"""
idea_validator_core.config
==========================

Configuración centralizada del servicio de validación de ideas.

Este módulo define:
- La estructura de configuración (`Settings`)
- La carga de variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Convenciones
------------
- Las variables de entorno se cargan desde un archivo `.env` si existe.
- Los defaults están pensados para desarrollo local.
- Ninguna credencial ni cadena de conexión vive en el código: todo viene
  del entorno.
- Si falta la API key, el error se lanza donde se usa (cliente LLM), no acá.
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()


@dataclass(frozen=True)
class Settings:
    """
    Contenedor tipado de configuración.

    Attributes
    ----------
    openai_api_key:
        API key de OpenAI. Se lee una sola vez al arrancar.
    openai_model_text:
        Modelo usado por los endpoints con plantilla (categorías y reporte global).
    idea_max_tokens:
        Presupuesto de tokens del endpoint de validación de idea.
    category_max_tokens:
        Presupuesto de tokens del resto de las categorías y del reporte global.
    database_url:
        URL SQLAlchemy del almacén de reportes.
    cors_origins:
        Orígenes permitidos por CORS. `("*",)` abre a cualquier origen.
    log_level:
        Nivel de logging de la API.
    """

    openai_api_key: str
    openai_model_text: str = "gpt-3.5-turbo"

    idea_max_tokens: int = 1000
    category_max_tokens: int = 500

    database_url: str = "sqlite:///data/idea_validator.sqlite"
    cors_origins: tuple = ("*",)
    log_level: str = "INFO"

    def max_tokens_for(self, category: str) -> int:
        """Presupuesto de tokens para una categoría de validación."""
        if category == "idea":
            return self.idea_max_tokens
        return self.category_max_tokens


def _parse_origins(raw: str) -> tuple:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - OPENAI_API_KEY
    - OPENAI_MODEL_TEXT (default: "gpt-3.5-turbo")
    - IDEA_MAX_TOKENS (default: 1000)
    - CATEGORY_MAX_TOKENS (default: 500)
    - DATABASE_URL (default: "sqlite:///data/idea_validator.sqlite")
    - CORS_ORIGINS (default: "*")
    - LOG_LEVEL (default: "INFO")
    """
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        openai_model_text=os.getenv("OPENAI_MODEL_TEXT", "gpt-3.5-turbo"),
        idea_max_tokens=int(os.getenv("IDEA_MAX_TOKENS", "1000")),
        category_max_tokens=int(os.getenv("CATEGORY_MAX_TOKENS", "500")),
        database_url=os.getenv(
            "DATABASE_URL",
            "sqlite:///data/idea_validator.sqlite"
        ),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS", "*")) or ("*",),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
