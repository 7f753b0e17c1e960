"""
Core types, exceptions and logging for the Photo Assistant exposure engine.
"""

from photo_assistant.core.exceptions import (
    CatalogError,
    FilmNotFoundError,
    FilterNotFoundError,
    PhotoAssistantError,
)
from photo_assistant.core.types import ReciprocityModelType, SettingKind, StepMode

__all__ = [
    # Exceptions
    "CatalogError",
    "FilmNotFoundError",
    "FilterNotFoundError",
    "PhotoAssistantError",
    # Types
    "ReciprocityModelType",
    "SettingKind",
    "StepMode",
]
