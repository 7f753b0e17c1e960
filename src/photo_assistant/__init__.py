"""
Photo Assistant - exposure and film reciprocity calculations.

This package provides the calculation core behind the exposure tools:

- Camera-like aperture, shutter speed and ISO scales in full, half and
  third stops
- Film reciprocity correction (power law, lookup table, stop correction)
- Exposure composition with EV compensation and filter light loss
- Film and filter catalogs
- Explicit load/save of the last used selection
"""

__version__ = "1.0.0"

# Configuration
from photo_assistant.config import (
    ExposureSettings,
    Settings,
    configure,
    get_settings,
)

# Core
from photo_assistant.core.exceptions import (
    CatalogError,
    FilmNotFoundError,
    FilterNotFoundError,
    PhotoAssistantError,
)
from photo_assistant.core.types import ReciprocityModelType, SettingKind, StepMode

# Exposure
from photo_assistant.exposure import (
    Aperture,
    AttachedFilter,
    ExposureComposer,
    ExposureCompensationState,
    ExposureResult,
    FilterCatalog,
    FilterType,
    FilterVariant,
    ReciprocityInfo,
    Sensitivity,
    ShutterSpeed,
    aperture_scale,
    generate_scale,
    precomputed_scales,
    sensitivity_for_film,
    sensitivity_scale,
    shutter_scale,
)

# Reciprocity
from photo_assistant.reciprocity import (
    FilmCatalog,
    FilmReciprocity,
    LookupTableModel,
    NoneModel,
    PowerLawModel,
    ReciprocityModel,
    ReciprocityResult,
    StopCorrectionModel,
    correct,
)

# Preferences
from photo_assistant.session import (
    ExposurePreferences,
    load_preferences,
    preferences_from_state,
    restore_state,
    save_preferences,
    select_film,
)

__all__ = [
    "__version__",
    # Configuration
    "ExposureSettings",
    "Settings",
    "configure",
    "get_settings",
    # Core
    "CatalogError",
    "FilmNotFoundError",
    "FilterNotFoundError",
    "PhotoAssistantError",
    "ReciprocityModelType",
    "SettingKind",
    "StepMode",
    # Exposure
    "Aperture",
    "AttachedFilter",
    "ExposureComposer",
    "ExposureCompensationState",
    "ExposureResult",
    "FilterCatalog",
    "FilterType",
    "FilterVariant",
    "ReciprocityInfo",
    "Sensitivity",
    "ShutterSpeed",
    "aperture_scale",
    "generate_scale",
    "precomputed_scales",
    "sensitivity_for_film",
    "sensitivity_scale",
    "shutter_scale",
    # Reciprocity
    "FilmCatalog",
    "FilmReciprocity",
    "LookupTableModel",
    "NoneModel",
    "PowerLawModel",
    "ReciprocityModel",
    "ReciprocityResult",
    "StopCorrectionModel",
    "correct",
    # Preferences
    "ExposurePreferences",
    "load_preferences",
    "preferences_from_state",
    "restore_state",
    "save_preferences",
    "select_film",
]
