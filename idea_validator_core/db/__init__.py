"""Persistencia de reportes de validación (SQLAlchemy)."""
