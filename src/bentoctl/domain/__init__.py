"""Domain layer — layout models, findings, and the validator.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
