"""
Reciprocity correction engine.

Given a metered exposure time and a film's reciprocity model, compute the
exposure time that actually needs to be given. Every model shares the same
cutoff gate: metered times shorter than the model's cutoff are returned
unchanged and flagged as uncorrected.
"""

from dataclasses import dataclass
from typing import Sequence, assert_never

from photo_assistant.core.logging import get_logger
from photo_assistant.reciprocity.models import (
    LookupTableModel,
    NoneModel,
    PowerLawModel,
    ReciprocityModel,
    StopCorrectionModel,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReciprocityResult:
    """Outcome of running a metered time through a reciprocity model."""

    metered_seconds: float
    corrected_seconds: float
    correction_applied: bool
    beyond_documented_range: bool

    @property
    def correction_factor(self) -> float:
        """Ratio of corrected to metered time."""
        return self.corrected_seconds / self.metered_seconds

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "metered_seconds": self.metered_seconds,
            "corrected_seconds": self.corrected_seconds,
            "correction_applied": self.correction_applied,
            "beyond_documented_range": self.beyond_documented_range,
        }


def interpolate(
    points: Sequence[tuple[float, float]],
    x: float,
    *,
    extrapolate: bool,
    empty: float,
) -> float:
    """Piecewise linear interpolation over ordered (x, y) points.

    Args:
        points: Points ordered by ascending x. Order is not re-checked.
        x: Query value.
        extrapolate: Past the last point, continue along the slope of the
            final segment instead of holding the last y.
        empty: Value returned for an empty point list, or when no segment
            brackets ``x`` (only possible with unordered points).

    Returns:
        The interpolated y value.
    """
    if not points:
        return empty

    first_x, first_y = points[0]
    last_x, last_y = points[-1]

    if x <= first_x:
        return first_y

    if x >= last_x:
        if extrapolate and len(points) >= 2:
            prev_x, prev_y = points[-2]
            if last_x == prev_x:
                return last_y
            slope = (last_y - prev_y) / (last_x - prev_x)
            return last_y + slope * (x - last_x)
        return last_y

    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        if x1 <= x <= x2:
            if x2 == x1:
                return y1
            ratio = (x - x1) / (x2 - x1)
            return y1 + ratio * (y2 - y1)

    return empty


def _uncorrected(metered_seconds: float) -> ReciprocityResult:
    return ReciprocityResult(
        metered_seconds=metered_seconds,
        corrected_seconds=metered_seconds,
        correction_applied=False,
        beyond_documented_range=False,
    )


def correct(metered_seconds: float, model: ReciprocityModel) -> ReciprocityResult:
    """Apply a film's reciprocity model to a metered exposure time.

    Args:
        metered_seconds: Exposure time before correction, in seconds.
        model: One of the four reciprocity model variants.

    Returns:
        ReciprocityResult with the corrected time and status flags.
    """
    if metered_seconds < model.cutoff_time:
        return _uncorrected(metered_seconds)

    match model:
        case NoneModel():
            # Known but negligible failure: nothing to correct
            return _uncorrected(metered_seconds)

        case PowerLawModel(factor=factor):
            corrected = metered_seconds**factor
            beyond = False

        case LookupTableModel():
            points = [(p.metered, p.corrected) for p in model.data_points]
            corrected = interpolate(
                points, metered_seconds, extrapolate=True, empty=metered_seconds
            )
            beyond = metered_seconds > model.max_metered

        case StopCorrectionModel():
            points = [(p.metered, p.stop_adjustment) for p in model.data_points]
            stops = interpolate(points, metered_seconds, extrapolate=False, empty=0.0)
            corrected = metered_seconds * 2.0**stops
            beyond = metered_seconds > model.max_metered

        case _:
            assert_never(model)

    logger.debug(
        f"Reciprocity ({model.type}): {metered_seconds:.3f}s -> {corrected:.3f}s"
        + (" beyond documented range" if beyond else ""),
        extra={"metered_seconds": metered_seconds, "corrected_seconds": corrected},
    )

    return ReciprocityResult(
        metered_seconds=metered_seconds,
        corrected_seconds=corrected,
        correction_applied=True,
        beyond_documented_range=beyond,
    )
