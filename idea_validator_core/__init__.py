"""
idea_validator_core
===================

Núcleo del servicio de validación de ideas de startups: prompts, cliente
de completions, almacén de reportes y la lógica de cada endpoint.
"""
