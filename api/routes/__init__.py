"""Rutas de la API."""

from . import reports, validations

__all__ = ["reports", "validations"]
