"""
Canonical "camera-like" values used to snap exact EV results.

Real cameras do not display 5.657 or 1/128 s; they show f/5.6 and 1/125.
The tables below hold the values photographers expect for each step mode.
"""

from photo_assistant.core.types import StepMode

# Aperture (f-numbers), f/1.0 -> f/64
APERTURE_FULL_STOPS: tuple[float, ...] = (
    1.0, 1.4, 2.0, 2.8, 4.0, 5.6,
    8.0, 11.0, 16.0, 22.0, 32.0, 45.0, 64.0,
)

APERTURE_HALF_STOPS: tuple[float, ...] = (
    1.0, 1.2, 1.4, 1.7, 2.0, 2.4,
    2.8, 3.4, 4.0, 4.8, 5.6, 6.7,
    8.0, 9.5, 11.0, 13.5, 16.0, 19.0,
    22.0, 27.0, 32.0, 38.0, 45.0, 54.0, 64.0,
)

APERTURE_THIRD_STOPS: tuple[float, ...] = (
    1.0, 1.1, 1.2, 1.4, 1.6, 1.8, 2.0,
    2.2, 2.5, 2.8, 3.2, 3.5, 4.0, 4.5,
    5.0, 5.6, 6.3, 7.1, 8.0, 9.0, 10.0,
    11.0, 13.0, 14.0, 16.0, 18.0, 20.0,
    22.0, 25.0, 29.0, 32.0, 36.0, 40.0,
    45.0, 51.0, 57.0, 64.0,
)

# Sensitivity (ISO), 25 -> 102400
ISO_FULL_STOPS: tuple[float, ...] = (
    25, 50, 100, 200, 400, 800,
    1600, 3200, 6400, 12800, 25600, 51200, 102400,
)

ISO_HALF_STOPS: tuple[float, ...] = (
    25, 32, 40, 50, 64, 80,
    100, 125, 160, 200, 250, 320,
    400, 500, 640, 800, 1000, 1250,
    1600, 2000, 2500, 3200, 4000, 5000,
    6400, 8000, 10000, 12800, 16000, 20000,
    25600, 32000, 40000, 51200, 64000, 80000,
    102400,
)

ISO_THIRD_STOPS: tuple[float, ...] = (
    25, 32, 40, 50, 64, 80, 100, 125,
    160, 200, 250, 320, 400, 500, 640, 800,
    1000, 1250, 1600, 2000, 2500, 3200, 4000, 5000,
    6400, 8000, 10000, 12800, 16000, 20000, 25600, 32000,
    40000, 51200, 64000, 80000, 102400,
)


def _fractions(*denominators: int) -> tuple[float, ...]:
    return tuple(1.0 / d for d in denominators)


# Shutter (seconds), 1/8000s -> 30s. Longer times have no canonical series.
SHUTTER_FULL_STOPS: tuple[float, ...] = _fractions(
    8000, 4000, 2000, 1000, 500, 250, 125, 60, 30, 15, 8, 4, 2,
) + (1.0, 2.0, 4.0, 8.0, 15.0, 30.0)

SHUTTER_HALF_STOPS: tuple[float, ...] = _fractions(
    8000, 6000, 4000, 3000, 2000, 1500, 1000, 750, 500, 350, 250, 180,
    125, 90, 60, 45, 30, 20, 15, 10, 8, 6, 4, 3, 2,
) + (1.0, 1.5, 2.0, 3.0, 4.0, 6.0, 8.0, 10.0, 15.0, 20.0, 30.0)

SHUTTER_THIRD_STOPS: tuple[float, ...] = _fractions(
    8000, 6400, 5000, 4000, 3200, 2500, 2000, 1600, 1250,
    1000, 800, 640, 500, 400, 320, 250, 200, 160,
    125, 100, 80, 60, 50, 40, 30, 25, 20,
    15, 13, 10, 8, 6, 5, 4, 3, 2,
) + (
    1.0, 1.3, 1.6, 2.0, 2.5, 3.2, 4.0, 5.0, 6.0,
    8.0, 10.0, 13.0, 15.0, 20.0, 25.0, 30.0,
)

# Around 1/4s - 2s the familiar speeds (0.3s, 0.4s, 0.6s) do not sit on a
# clean EV lattice, so this region is snapped against its own table first.
SHUTTER_NEAR_ONE_THIRD_STOPS: tuple[float, ...] = (
    0.25, 0.3, 0.4, 0.5, 0.6, 0.8, 1.0, 1.3, 1.6, 2.0,
)

SHUTTER_NEAR_ONE_HALF_STOPS: tuple[float, ...] = (
    0.25, 0.3, 0.5, 0.7, 1.0, 1.4, 2.0,
)

SHUTTER_NEAR_ONE_FULL_STOPS: tuple[float, ...] = (
    0.25, 0.5, 1.0, 2.0,
)


APERTURE_TABLES: dict[StepMode, tuple[float, ...]] = {
    StepMode.FULL: APERTURE_FULL_STOPS,
    StepMode.HALF: APERTURE_HALF_STOPS,
    StepMode.THIRD: APERTURE_THIRD_STOPS,
}

ISO_TABLES: dict[StepMode, tuple[float, ...]] = {
    StepMode.FULL: ISO_FULL_STOPS,
    StepMode.HALF: ISO_HALF_STOPS,
    StepMode.THIRD: ISO_THIRD_STOPS,
}

SHUTTER_TABLES: dict[StepMode, tuple[float, ...]] = {
    StepMode.FULL: SHUTTER_FULL_STOPS,
    StepMode.HALF: SHUTTER_HALF_STOPS,
    StepMode.THIRD: SHUTTER_THIRD_STOPS,
}

SHUTTER_OVERRIDE_TABLES: dict[StepMode, tuple[float, ...]] = {
    StepMode.FULL: SHUTTER_NEAR_ONE_FULL_STOPS,
    StepMode.HALF: SHUTTER_NEAR_ONE_HALF_STOPS,
    StepMode.THIRD: SHUTTER_NEAR_ONE_THIRD_STOPS,
}
