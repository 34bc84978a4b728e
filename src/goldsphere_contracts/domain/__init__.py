"""Domain layer — enums, reference data, and entity contracts.

This layer depends only on stdlib and pydantic.
It must never import from services, validation, commands, or config.
"""
