"""
Exposure setting value types.

Each setting knows its own EV offset and its display label:

- Aperture:    EV = log2(N^2), relative to f/1.0
- Shutter:     EV = -log2(t), relative to 1 second
- Sensitivity: EV = log2(ISO / 100), relative to ISO 100

Higher EV always means less light reaching the sensor for a given scene,
so a faster shutter, a smaller aperture (larger f-number) and a higher ISO
all move the value up the scale.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


def _round_half_up(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _clean(value: float) -> str:
    """Whole numbers without decimals, anything else with one decimal."""
    if value == math.floor(value):
        return f"{value:.0f}"
    return f"{value:.1f}"


def format_aperture(value: float) -> str:
    """Format an f-number, e.g. 2.8 -> "f/2.8", 8.0 -> "f/8"."""
    rounded = _round_half_up(value * 10) / 10.0
    return f"f/{_clean(rounded)}"


def format_iso(value: float) -> str:
    """Format an ISO number, e.g. 400 -> "400"."""
    return _clean(value)


def format_shutter(seconds: float) -> str:
    """Format a shutter time the way a camera displays it.

    Times under 1/4s show only the denominator. Everything else is rounded
    to tenths of a second first and then split into units, so 59.96 reads
    "1m" rather than "60s".

    Examples: 1/8000 -> "8000", 0.4 -> "0.4s", 2.5 -> "2.5s",
    200 -> "3m 20s", 4080 -> "1h 8m".
    """
    if seconds < 0.25:
        return _format_fraction(seconds)

    tenths = round(seconds, 1)
    if tenths < 60:
        return f"{_clean(tenths)}s"

    total = int(_round_half_up(seconds))
    if total < 3600:
        return _format_minutes(total)
    return _format_hours(total)


def _format_fraction(seconds: float) -> str:
    # Only the denominator is shown, e.g. "125" for 1/125s
    return str(int(_round_half_up(1.0 / seconds)))


def _format_minutes(total: int) -> str:
    minutes, sec = divmod(total, 60)
    if sec == 0:
        return f"{minutes}m"
    return f"{minutes}m {sec}s"


def _format_hours(total: int) -> str:
    hours, remaining = divmod(total, 3600)
    minutes, sec = divmod(remaining, 60)
    if minutes == 0 and sec == 0:
        return f"{hours}h"
    if sec == 0:
        return f"{hours}h {minutes}m"
    return f"{hours}h {minutes}m {sec}s"


@dataclass(frozen=True)
class ExposureSetting(ABC):
    """Common behaviour for the three exposure settings."""

    value: float

    def __post_init__(self) -> None:
        if not self.value > 0:
            raise ValueError(f"{type(self).__name__} value must be positive, got {self.value!r}")
        object.__setattr__(self, "value", float(self.value))

    @property
    @abstractmethod
    def ev_offset(self) -> float:
        """EV offset of the value."""

    @property
    @abstractmethod
    def label(self) -> str:
        """Display label of the value."""

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Aperture(ExposureSetting):
    """Lens aperture as an f-number (e.g. 2.8, 5.6)."""

    @property
    def ev_offset(self) -> float:
        """EV offset relative to f/1.0."""
        return math.log2(self.value * self.value)

    @property
    def label(self) -> str:
        return format_aperture(self.value)


@dataclass(frozen=True)
class ShutterSpeed(ExposureSetting):
    """Shutter time in seconds (e.g. 0.008 for 1/125)."""

    @property
    def seconds(self) -> float:
        return self.value

    @property
    def ev_offset(self) -> float:
        """EV offset relative to 1 second."""
        return -math.log2(self.value)

    @property
    def label(self) -> str:
        return format_shutter(self.value)


@dataclass(frozen=True)
class Sensitivity(ExposureSetting):
    """Sensor or film sensitivity as an ISO number."""

    @property
    def ev_offset(self) -> float:
        """EV offset relative to ISO 100."""
        return math.log2(self.value / 100.0)

    @property
    def label(self) -> str:
        return format_iso(self.value)
