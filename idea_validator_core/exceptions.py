"""
Errores del servicio de validación.

Dos tipos llegan al cliente HTTP:
- `ValidationError` (falta un campo requerido) -> 400
- `OperationError` (falló el LLM o el almacén) -> 500, mensaje genérico

`UpstreamError` y `StorageError` son internos: la capa de servicio los
registra y los convierte en `OperationError`.
"""


class IdeaValidatorError(Exception):
    """Base de todos los errores del paquete."""


class ValidationError(IdeaValidatorError):
    """Falta un campo requerido o su valor no es utilizable."""


class OperationError(IdeaValidatorError):
    """Falló una operación externa (LLM o almacén)."""


class ReportsNotFoundError(IdeaValidatorError):
    """El listado de reportes está vacío."""


class UpstreamError(IdeaValidatorError):
    """La llamada al servicio de completions falló (causa no diferenciada)."""


class StorageError(IdeaValidatorError):
    """El almacén de reportes no pudo leer o escribir."""
