"""Locale detection: per-request locale resolution and persistence.

Subpackages:
- i18n: locale validation, Accept-Language parsing, resolution and commit
- configuration: pydantic settings
- logging: structlog setup
- services: singleton providers and FastAPI dependencies
"""
