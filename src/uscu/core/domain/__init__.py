"""
Domain models and value objects.

Contains the Length value object.
"""

from uscu.core.domain.length import Length

__all__ = [
    "Length",
]
