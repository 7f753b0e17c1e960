"""
Exposure settings, scales and composition.

Generate camera-like aperture/shutter/ISO scales and compose the final
exposure from metered settings, EV compensation, filters and film
reciprocity.
"""

from photo_assistant.exposure.settings import (
    Aperture,
    ExposureSetting,
    Sensitivity,
    ShutterSpeed,
    format_aperture,
    format_iso,
    format_shutter,
)

from photo_assistant.exposure.scales import (
    APERTURE_SPEC,
    SENSITIVITY_SPEC,
    ScaleSpec,
    aperture_scale,
    generate_scale,
    nearest_setting,
    precomputed_scales,
    sensitivity_scale,
    shutter_scale,
    shutter_spec,
    snap_to_table,
)

from photo_assistant.exposure.filters import (
    AttachedFilter,
    FilterCatalog,
    FilterType,
    FilterVariant,
    total_stops,
    total_stops_label,
)

from photo_assistant.exposure.composer import (
    OUT_OF_RANGE_LABEL,
    ExposureComposer,
    ExposureCompensationState,
    ExposureResult,
    ReciprocityInfo,
    sensitivity_for_film,
)

__all__ = [
    # Settings
    "Aperture",
    "ExposureSetting",
    "Sensitivity",
    "ShutterSpeed",
    "format_aperture",
    "format_iso",
    "format_shutter",
    # Scales
    "APERTURE_SPEC",
    "SENSITIVITY_SPEC",
    "ScaleSpec",
    "aperture_scale",
    "generate_scale",
    "nearest_setting",
    "precomputed_scales",
    "sensitivity_scale",
    "shutter_scale",
    "shutter_spec",
    "snap_to_table",
    # Filters
    "AttachedFilter",
    "FilterCatalog",
    "FilterType",
    "FilterVariant",
    "total_stops",
    "total_stops_label",
    # Composer
    "OUT_OF_RANGE_LABEL",
    "ExposureComposer",
    "ExposureCompensationState",
    "ExposureResult",
    "ReciprocityInfo",
    "sensitivity_for_film",
]
