"""
Domain-specific types and enumerations for exposure calculation.
"""

from enum import Enum


class StepMode(str, Enum):
    """Increment between adjacent entries of an exposure scale."""

    FULL = "full"  # 1-stop steps
    HALF = "half"  # 1/2-stop steps
    THIRD = "third"  # 1/3-stop steps

    @property
    def ev_step(self) -> float:
        """Size of one step in EV."""
        if self is StepMode.FULL:
            return 1.0
        if self is StepMode.HALF:
            return 0.5
        return 1.0 / 3.0


class SettingKind(str, Enum):
    """The three exposure controls a camera exposes."""

    APERTURE = "aperture"
    SHUTTER = "shutter"
    SENSITIVITY = "sensitivity"


class ReciprocityModelType(str, Enum):
    """Discriminator values used by the film catalog."""

    NONE = "none"
    POWER_LAW = "powerLaw"
    LOOKUP_TABLE = "lookupTable"
    STOP_CORRECTION = "stopCorrection"
