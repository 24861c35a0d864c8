"""
API HTTP para idea-validator-core.

Esta capa expone endpoints REST que usan el core interno
(idea_validator_core.engine) para validar ideas de startups.
"""
