"""
Contract Validation Module

Модуль для валидации JSON контракта сериализованной длины.
"""

from .validators import LENGTH_SCHEMA_PATH, validate_length

__all__ = [
    "LENGTH_SCHEMA_PATH",
    "validate_length",
]
