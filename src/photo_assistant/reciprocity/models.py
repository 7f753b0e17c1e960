"""
Reciprocity models describing how a film departs from the reciprocity law.

All models use Pydantic for validation and serialization. The catalog JSON
uses camelCase keys; the models accept either the alias or the field name.

A ReciprocityModel is a closed union discriminated by its ``type`` field:

- ``none``            negligible reciprocity failure, never corrected
- ``powerLaw``        corrected = metered ** factor
- ``lookupTable``     (metered, corrected) pairs, interpolated
- ``stopCorrection``  (metered, stop adjustment) pairs, interpolated
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from photo_assistant.core.types import ReciprocityModelType


class _CatalogModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class LookupPoint(_CatalogModel):
    """A documented (metered, corrected) exposure pair in seconds."""

    metered: float = Field(..., description="Metered exposure time in seconds")
    corrected: float = Field(..., description="Corrected exposure time in seconds")


class StopPoint(_CatalogModel):
    """A documented stop adjustment for a metered exposure time."""

    metered: float = Field(..., description="Metered exposure time in seconds")
    stop_adjustment: float = Field(..., alias="stopAdjustment")


class NoneModel(_CatalogModel):
    """Film whose reciprocity failure is known to be negligible."""

    type: Literal["none"] = "none"
    cutoff_time: float = Field(..., alias="cutoffTime", ge=0.0)


class PowerLawModel(_CatalogModel):
    """Schwarzschild-style power law: corrected = metered ** factor."""

    type: Literal["powerLaw"] = "powerLaw"
    factor: float = Field(..., gt=0.0)
    cutoff_time: float = Field(..., alias="cutoffTime", ge=0.0)


class LookupTableModel(_CatalogModel):
    """Manufacturer table of metered vs corrected times."""

    type: Literal["lookupTable"] = "lookupTable"
    data_points: tuple[LookupPoint, ...] = Field(default=(), alias="dataPoints")
    color_filter_suggestion: Optional[str] = Field(default=None, alias="colorFilterSuggestion")
    cutoff_time: float = Field(..., alias="cutoffTime", ge=0.0)

    @property
    def max_metered(self) -> float:
        """Longest documented metered time (0.0 for an empty table)."""
        return max((p.metered for p in self.data_points), default=0.0)


class StopCorrectionModel(_CatalogModel):
    """Manufacturer table of metered times vs extra stops of exposure."""

    type: Literal["stopCorrection"] = "stopCorrection"
    data_points: tuple[StopPoint, ...] = Field(default=(), alias="dataPoints")
    color_filter_suggestion: Optional[str] = Field(default=None, alias="colorFilterSuggestion")
    cutoff_time: float = Field(..., alias="cutoffTime", ge=0.0)

    @property
    def max_metered(self) -> float:
        """Longest documented metered time (0.0 for an empty table)."""
        return max((p.metered for p in self.data_points), default=0.0)


ReciprocityModel = Annotated[
    Union[NoneModel, PowerLawModel, LookupTableModel, StopCorrectionModel],
    Field(discriminator="type"),
]


class FilmReciprocity(_CatalogModel):
    """A film stock and its documented reciprocity behaviour."""

    id: str = Field(..., min_length=1, description="Stable catalog id")
    name: str = Field(..., description="Display name")
    iso: int = Field(..., gt=0, description="Nominal box speed")
    model: ReciprocityModel

    @property
    def reciprocity_type(self) -> ReciprocityModelType:
        return ReciprocityModelType(self.model.type)
