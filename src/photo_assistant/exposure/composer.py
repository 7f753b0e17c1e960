"""
Exposure composer.

Combines the metered settings, EV compensation, filter light loss and film
reciprocity into the shutter time to actually use.

The aperture and ISO the photographer chose are kept; only the shutter time
moves. Working in EV:

    base_ev        = Av + Tv + Sv + compensation - filter_stops
    required_tv    = base_ev - Av - Sv
    required_time  = 2 ** -required_tv

The required time is snapped to the shutter scale for display, optionally
run through the film's reciprocity model, and snapped again.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from photo_assistant.config import ExposureSettings, get_settings
from photo_assistant.core.logging import LogContext, get_logger
from photo_assistant.exposure.filters import AttachedFilter, total_stops
from photo_assistant.exposure.scales import nearest_setting, shutter_scale
from photo_assistant.exposure.settings import Aperture, Sensitivity, ShutterSpeed
from photo_assistant.reciprocity.engine import correct
from photo_assistant.reciprocity.models import FilmReciprocity

logger = get_logger(__name__)

OUT_OF_RANGE_LABEL = "Out of Range"


@dataclass(frozen=True)
class ExposureCompensationState:
    """Everything the photographer has selected."""

    aperture: Aperture
    shutter_speed: ShutterSpeed
    sensitivity: Sensitivity
    film: Optional[FilmReciprocity] = None
    ev_compensation: float = 0.0
    attached_filters: tuple[AttachedFilter, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attached_filters", tuple(self.attached_filters))

    @property
    def total_filter_stops(self) -> float:
        return total_stops(self.attached_filters)

    @property
    def exposure_value(self) -> float:
        """EV of the metered settings, before compensation and filters."""
        return self.aperture.ev_offset + self.shutter_speed.ev_offset + self.sensitivity.ev_offset


@dataclass(frozen=True)
class ReciprocityInfo:
    """Shown alongside a result when the film needed correcting."""

    film_name: str
    metered_seconds: float
    beyond_documented_range: bool


@dataclass(frozen=True)
class ExposureResult:
    """Result of composing an exposure."""

    aperture: Aperture

    # Before reciprocity
    calculated_shutter_speed: ShutterSpeed
    calculated_seconds: float

    # After reciprocity (same as calculated without a film)
    shutter_speed: ShutterSpeed
    corrected_seconds: float

    sensitivity: Sensitivity
    reciprocity_info: Optional[ReciprocityInfo] = None

    # Raw times past the longest supported exposure
    calculated_out_of_range: bool = False
    corrected_out_of_range: bool = False

    @property
    def calculated_shutter_label(self) -> str:
        """Shutter label before reciprocity, or "Out of Range"."""
        if self.calculated_out_of_range:
            return OUT_OF_RANGE_LABEL
        return self.calculated_shutter_speed.label

    @property
    def corrected_shutter_label(self) -> str:
        """Shutter label after reciprocity, or "Out of Range"."""
        if self.corrected_out_of_range:
            return OUT_OF_RANGE_LABEL
        return self.shutter_speed.label

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        info = self.reciprocity_info
        return {
            "aperture": self.aperture.label,
            "iso": self.sensitivity.label,
            "calculated": {
                "shutter": self.calculated_shutter_label,
                "seconds": self.calculated_seconds,
                "out_of_range": self.calculated_out_of_range,
            },
            "corrected": {
                "shutter": self.corrected_shutter_label,
                "seconds": self.corrected_seconds,
                "out_of_range": self.corrected_out_of_range,
            },
            "reciprocity": None
            if info is None
            else {
                "film": info.film_name,
                "metered_seconds": info.metered_seconds,
                "beyond_documented_range": info.beyond_documented_range,
            },
        }


class ExposureComposer:
    """Compose final exposures against a fixed shutter scale.

    The composer holds no selection state; callers pass an
    ExposureCompensationState to every call.
    """

    def __init__(
        self,
        settings: Optional[ExposureSettings] = None,
        shutter_speeds: Optional[Sequence[ShutterSpeed]] = None,
    ):
        """Initialize the composer.

        Args:
            settings: Exposure settings. If None, uses the global settings.
            shutter_speeds: Scale used for snapping. If None, the scale for
                the configured default step mode.
        """
        self.settings = settings or get_settings().exposure
        if shutter_speeds is None:
            shutter_speeds = shutter_scale(step_mode=self.settings.default_step_mode)
        self.shutter_speeds: tuple[ShutterSpeed, ...] = tuple(shutter_speeds)

    def closest_shutter_speed(self, seconds: float) -> ShutterSpeed:
        """Nearest scale entry by raw seconds; the raw time if the scale is empty."""
        closest = nearest_setting(self.shutter_speeds, seconds)
        if closest is None:
            return ShutterSpeed(seconds)
        return closest

    def is_out_of_range(self, seconds: float) -> bool:
        return seconds > self.settings.max_shutter_seconds

    def compose(self, state: ExposureCompensationState) -> ExposureResult:
        """Compute the shutter time that keeps the exposure.

        Args:
            state: Selected settings, compensation, filters and film.

        Returns:
            ExposureResult with times before and after reciprocity.
        """
        aperture = state.aperture
        sensitivity = state.sensitivity

        base_ev = state.exposure_value + state.ev_compensation - state.total_filter_stops

        required_shutter_ev = base_ev - aperture.ev_offset - sensitivity.ev_offset
        required_seconds = 2.0 ** (-required_shutter_ev)

        calculated = self.closest_shutter_speed(required_seconds)

        film = state.film
        reciprocity_info: Optional[ReciprocityInfo] = None

        if film is None:
            final = calculated
            corrected_seconds = required_seconds
        else:
            with LogContext(film_id=film.id):
                reciprocity = correct(required_seconds, film.model)
            corrected_seconds = reciprocity.corrected_seconds
            final = self.closest_shutter_speed(corrected_seconds)

            if reciprocity.correction_applied:
                reciprocity_info = ReciprocityInfo(
                    film_name=film.name,
                    metered_seconds=reciprocity.metered_seconds,
                    beyond_documented_range=reciprocity.beyond_documented_range,
                )

        result = ExposureResult(
            aperture=aperture,
            calculated_shutter_speed=calculated,
            calculated_seconds=required_seconds,
            shutter_speed=final,
            corrected_seconds=corrected_seconds,
            sensitivity=sensitivity,
            reciprocity_info=reciprocity_info,
            calculated_out_of_range=self.is_out_of_range(required_seconds),
            corrected_out_of_range=self.is_out_of_range(corrected_seconds),
        )

        if result.corrected_out_of_range:
            logger.warning(
                f"Exposure of {corrected_seconds:.0f}s exceeds the "
                f"{self.settings.max_shutter_seconds:.0f}s maximum"
            )
        logger.debug(
            f"Composed {aperture.label} ISO {sensitivity.label}: "
            f"{calculated.label} -> {final.label}",
            extra={"operation": "compose"},
        )
        return result


def sensitivity_for_film(
    film: Optional[FilmReciprocity],
    sensitivities: Sequence[Sensitivity],
) -> Optional[Sensitivity]:
    """Pick the ISO entry matching a film's box speed.

    An exact match wins, otherwise the closest entry. Without a film (digital)
    ISO 100 is used when available, else the first entry.

    Returns:
        The matching sensitivity, or None for an empty scale.
    """
    if not sensitivities:
        return None

    if film is None:
        for sensitivity in sensitivities:
            if sensitivity.value == 100.0:
                return sensitivity
        return sensitivities[0]

    target = float(film.iso)
    for sensitivity in sensitivities:
        if sensitivity.value == target:
            return sensitivity
    return nearest_setting(sensitivities, target)
