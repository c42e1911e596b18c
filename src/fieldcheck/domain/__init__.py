"""Domain layer — record introspection, rule grammar, and error types.

This layer depends only on stdlib and pydantic.
It must never import from services or config.
"""
