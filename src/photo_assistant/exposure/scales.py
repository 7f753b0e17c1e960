"""
EV scale generation for aperture, shutter and sensitivity pickers.

A scale is produced by walking EV space in full, half or third stop
increments, converting each tick back to a raw setting value, snapping that
value to the nearest photographer-friendly number and dropping ticks whose
label repeats the previous one.

The walk is the same for every kind of setting; a ScaleSpec supplies the
parts that differ (EV formula, canonical tables, walk direction).
"""

import math
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Callable, Optional, Sequence, TypeVar

import numpy as np

from photo_assistant.config import get_settings
from photo_assistant.core.logging import get_logger
from photo_assistant.core.types import SettingKind, StepMode
from photo_assistant.exposure import canonical
from photo_assistant.exposure.settings import (
    Aperture,
    ExposureSetting,
    Sensitivity,
    ShutterSpeed,
)

logger = get_logger(__name__)

S = TypeVar("S", bound=ExposureSetting)

# Tolerance for accumulated EV so the closing endpoint is not lost
_EV_EPSILON = 1e-9


@dataclass(frozen=True)
class SnapOverride:
    """Secondary snap table applied to raw values inside [low, high]."""

    tables: dict[StepMode, tuple[float, ...]]
    low: float
    high: float

    def applies_to(self, raw: float) -> bool:
        return self.low <= raw <= self.high


@dataclass(frozen=True)
class ScaleSpec:
    """Everything the scale walk needs to know about one kind of setting."""

    kind: SettingKind
    to_ev: Callable[[float], float]
    from_ev: Callable[[float], float]
    factory: Callable[[float], ExposureSetting]
    tables: dict[StepMode, tuple[float, ...]]
    # True when the walk runs from low EV to high EV
    ascending: bool = True
    override: Optional[SnapOverride] = field(default=None)


def snap_to_table(raw: float, table: Sequence[float], ev_step: float | None = None) -> float:
    """Snap a raw value to the nearest entry of a canonical table.

    Ties resolve to the entry listed first. When ``ev_step`` is given, values
    more than half a step outside the table's span are returned unchanged
    rather than being pulled onto the closest end of the table.

    Args:
        raw: Exact value computed from EV.
        table: Canonical values.
        ev_step: Step size in EV used to bound the table's domain.

    Returns:
        The snapped value, or ``raw`` for an empty table or out-of-domain value.
    """
    if len(table) == 0:
        return raw

    values = np.asarray(table, dtype=float)

    if ev_step is not None:
        margin = 2.0 ** (ev_step / 2.0)
        if raw < values.min() / margin or raw > values.max() * margin:
            return raw

    return float(values[int(np.argmin(np.abs(values - raw)))])


def _snap(spec: ScaleSpec, raw: float, step_mode: StepMode) -> float:
    override = spec.override
    if override is not None and override.applies_to(raw):
        return snap_to_table(raw, override.tables.get(step_mode, ()))
    return snap_to_table(raw, spec.tables.get(step_mode, ()), step_mode.ev_step)


def generate_scale(
    spec: ScaleSpec,
    start: float,
    end: float,
    step_mode: StepMode = StepMode.THIRD,
) -> list[ExposureSetting]:
    """Generate an ordered scale of settings between two endpoints.

    Endpoints are given in the walk direction of the kind: low to high for
    aperture and sensitivity, fastest to slowest for shutter. Endpoints in
    the opposite order produce an empty scale.

    Args:
        spec: Description of the setting kind.
        start: First endpoint as a raw setting value.
        end: Last endpoint as a raw setting value.
        step_mode: Full, half or third stop increments.

    Returns:
        Settings in walk order with no two adjacent entries sharing a label.
    """
    start_ev = spec.to_ev(start)
    end_ev = spec.to_ev(end)
    step = step_mode.ev_step if spec.ascending else -step_mode.ev_step

    result: list[ExposureSetting] = []
    last_label: Optional[str] = None

    index = 0
    ev = start_ev
    while (ev <= end_ev + _EV_EPSILON) if spec.ascending else (ev >= end_ev - _EV_EPSILON):
        raw = spec.from_ev(ev)
        setting = spec.factory(_snap(spec, raw, step_mode))

        # Several ticks can land on the same canonical value
        if setting.label != last_label:
            result.append(setting)
            last_label = setting.label

        index += 1
        ev = start_ev + index * step

    logger.debug(
        f"Generated {spec.kind.value} scale: {len(result)} values "
        f"({step_mode.value} stops, {start} -> {end})"
    )
    return result


APERTURE_SPEC = ScaleSpec(
    kind=SettingKind.APERTURE,
    to_ev=lambda n: math.log2(n * n),
    from_ev=lambda ev: math.sqrt(2.0**ev),
    factory=Aperture,
    tables=canonical.APERTURE_TABLES,
    ascending=True,
)

SENSITIVITY_SPEC = ScaleSpec(
    kind=SettingKind.SENSITIVITY,
    to_ev=lambda iso: math.log2(iso / 100.0),
    from_ev=lambda ev: 100.0 * 2.0**ev,
    factory=Sensitivity,
    tables=canonical.ISO_TABLES,
    ascending=True,
)


def shutter_spec(override_low: float = 0.24, override_high: float = 2.1) -> ScaleSpec:
    """Build the shutter ScaleSpec with the given override window."""
    return ScaleSpec(
        kind=SettingKind.SHUTTER,
        to_ev=lambda t: -math.log2(t),
        from_ev=lambda ev: 2.0 ** (-ev),
        factory=ShutterSpeed,
        tables=canonical.SHUTTER_TABLES,
        ascending=False,
        override=SnapOverride(
            tables=canonical.SHUTTER_OVERRIDE_TABLES,
            low=override_low,
            high=override_high,
        ),
    )


@lru_cache(maxsize=64)
def _aperture_scale(start: float, end: float, step_mode: StepMode) -> tuple[Aperture, ...]:
    return tuple(generate_scale(APERTURE_SPEC, start, end, step_mode))


@lru_cache(maxsize=64)
def _sensitivity_scale(start: float, end: float, step_mode: StepMode) -> tuple[Sensitivity, ...]:
    return tuple(generate_scale(SENSITIVITY_SPEC, start, end, step_mode))


@lru_cache(maxsize=64)
def _shutter_scale(
    start: float,
    end: float,
    step_mode: StepMode,
    override_low: float,
    override_high: float,
) -> tuple[ShutterSpeed, ...]:
    spec = shutter_spec(override_low, override_high)
    return tuple(generate_scale(spec, start, end, step_mode))


def aperture_scale(
    min_aperture: Optional[float] = None,
    max_aperture: Optional[float] = None,
    step_mode: StepMode = StepMode.THIRD,
) -> list[Aperture]:
    """Aperture scale from the widest to the narrowest f-number."""
    exposure = get_settings().exposure
    start = min_aperture if min_aperture is not None else exposure.min_aperture
    end = max_aperture if max_aperture is not None else exposure.max_aperture
    return list(_aperture_scale(start, end, StepMode(step_mode)))


def shutter_scale(
    fastest_seconds: Optional[float] = None,
    slowest_seconds: Optional[float] = None,
    step_mode: StepMode = StepMode.THIRD,
) -> list[ShutterSpeed]:
    """Shutter scale from the fastest to the slowest time."""
    exposure = get_settings().exposure
    start = fastest_seconds if fastest_seconds is not None else exposure.fastest_shutter_seconds
    end = slowest_seconds if slowest_seconds is not None else exposure.slowest_shutter_seconds
    return list(
        _shutter_scale(
            start,
            end,
            StepMode(step_mode),
            exposure.shutter_override_min,
            exposure.shutter_override_max,
        )
    )


def sensitivity_scale(
    min_iso: Optional[float] = None,
    max_iso: Optional[float] = None,
    step_mode: StepMode = StepMode.THIRD,
) -> list[Sensitivity]:
    """Sensitivity scale from the lowest to the highest ISO."""
    exposure = get_settings().exposure
    start = min_iso if min_iso is not None else exposure.min_iso
    end = max_iso if max_iso is not None else exposure.max_iso
    return list(_sensitivity_scale(start, end, StepMode(step_mode)))


_SCALE_BUILDERS: dict[SettingKind, Callable[..., list]] = {
    SettingKind.APERTURE: aperture_scale,
    SettingKind.SHUTTER: shutter_scale,
    SettingKind.SENSITIVITY: sensitivity_scale,
}


def precomputed_scales(kind: SettingKind) -> dict[StepMode, list[ExposureSetting]]:
    """Full, half and third stop scales for one kind over the default range."""
    builder = _SCALE_BUILDERS[SettingKind(kind)]
    return {mode: builder(step_mode=mode) for mode in StepMode}


def nearest_setting(candidates: Sequence[S], value: float) -> Optional[S]:
    """Return the candidate whose raw value is closest to ``value``.

    The first of several equally close candidates wins, so the result
    depends on scale order.
    """
    if not candidates:
        return None
    distances = np.abs(np.array([c.value for c in candidates], dtype=float) - value)
    return candidates[int(np.argmin(distances))]
