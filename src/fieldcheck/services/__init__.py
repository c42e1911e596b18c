"""Service layer — the validation entry points.

Services may import from domain and config.
"""
