"""
Film reciprocity models, catalog and correction engine.
"""

from photo_assistant.reciprocity.models import (
    FilmReciprocity,
    LookupPoint,
    LookupTableModel,
    NoneModel,
    PowerLawModel,
    ReciprocityModel,
    StopCorrectionModel,
    StopPoint,
)
from photo_assistant.reciprocity.engine import ReciprocityResult, correct, interpolate
from photo_assistant.reciprocity.catalog import FilmCatalog

__all__ = [
    "FilmReciprocity",
    "LookupPoint",
    "LookupTableModel",
    "NoneModel",
    "PowerLawModel",
    "ReciprocityModel",
    "StopCorrectionModel",
    "StopPoint",
    "ReciprocityResult",
    "correct",
    "interpolate",
    "FilmCatalog",
]
