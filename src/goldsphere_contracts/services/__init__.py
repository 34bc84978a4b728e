"""Service layer — batch processing and bulk registration over the validator.

Services may import from domain, validation, and config.
They must never import from commands or output.
"""
