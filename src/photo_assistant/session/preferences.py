"""
Persisted exposure preferences.

The calculation core is stateless; the caller loads the last selection
before composing and saves it afterwards. Only raw numbers and ids are
stored, never setting objects.
"""

import json
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from pydantic import BaseModel, Field, ValidationError

from photo_assistant.config import get_settings
from photo_assistant.core.logging import get_logger
from photo_assistant.exposure.composer import ExposureCompensationState, sensitivity_for_film
from photo_assistant.exposure.filters import AttachedFilter
from photo_assistant.exposure.settings import Aperture, Sensitivity, ShutterSpeed
from photo_assistant.reciprocity.catalog import FilmCatalog

logger = get_logger(__name__)

# Selections are matched back onto the scales with these tolerances
APERTURE_TOLERANCE = 0.1
SHUTTER_TOLERANCE = 0.0001

DEFAULT_APERTURE = 5.6
DEFAULT_SHUTTER_SECONDS = 1.0 / 125.0
DEFAULT_ISO = 100.0


class ExposurePreferences(BaseModel):
    """Last used exposure selection. Zero means "not set"."""

    aperture: float = Field(default=0.0, ge=0.0)
    shutter_seconds: float = Field(default=0.0, ge=0.0)
    iso: float = Field(default=0.0, ge=0.0)
    ev_compensation: float = Field(default=0.0)
    film_id: Optional[str] = Field(default=None)
    attached_filters: list[AttachedFilter] = Field(default_factory=list)


def _default_path(path: Optional[Path]) -> Path:
    if path is not None:
        return Path(path)
    return get_settings().preferences_path


def load_preferences(path: Optional[Path] = None) -> ExposurePreferences:
    """Load preferences, falling back to defaults when missing or unreadable."""
    path = _default_path(path)
    if not path.exists():
        return ExposurePreferences()

    try:
        with open(path) as f:
            data = json.load(f)
        return ExposurePreferences.model_validate(data)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.warning(f"Ignoring unreadable preferences at {path}: {e}")
        return ExposurePreferences()


def save_preferences(preferences: ExposurePreferences, path: Optional[Path] = None) -> Path:
    """Write preferences as JSON.

    Returns:
        Path to the saved file
    """
    path = _default_path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        f.write(preferences.model_dump_json(indent=2))
    logger.debug(f"Saved exposure preferences to {path}")
    return path


def preferences_from_state(state: ExposureCompensationState) -> ExposurePreferences:
    """Capture the persistable parts of a selection."""
    return ExposurePreferences(
        aperture=state.aperture.value,
        shutter_seconds=state.shutter_speed.value,
        iso=state.sensitivity.value,
        ev_compensation=state.ev_compensation,
        film_id=state.film.id if state.film else None,
        attached_filters=list(state.attached_filters),
    )


def restore_state(
    preferences: ExposurePreferences,
    apertures: Sequence[Aperture],
    shutter_speeds: Sequence[ShutterSpeed],
    sensitivities: Sequence[Sensitivity],
    films: Optional[FilmCatalog] = None,
) -> ExposureCompensationState:
    """Rebuild a selection from preferences and the picker scales.

    Stored values are matched onto the scales; anything unset or no longer
    on a scale falls back to f/5.6, 1/125s and ISO 100. A stored film id
    missing from the catalog is dropped.
    """
    aperture = _match(apertures, preferences.aperture, APERTURE_TOLERANCE) or _match(
        apertures, DEFAULT_APERTURE, APERTURE_TOLERANCE
    )
    shutter = _match(shutter_speeds, preferences.shutter_seconds, SHUTTER_TOLERANCE) or _match(
        shutter_speeds, DEFAULT_SHUTTER_SECONDS, SHUTTER_TOLERANCE
    )
    sensitivity = _match(sensitivities, preferences.iso, 0.0) or _match(
        sensitivities, DEFAULT_ISO, 0.0
    )

    film = films.find(preferences.film_id) if films is not None else None
    if preferences.film_id and film is None:
        logger.warning(f"Saved film {preferences.film_id!r} is not in the catalog")

    return ExposureCompensationState(
        aperture=aperture or _first(apertures, Aperture(DEFAULT_APERTURE)),
        shutter_speed=shutter or _first(shutter_speeds, ShutterSpeed(DEFAULT_SHUTTER_SECONDS)),
        sensitivity=sensitivity or _first(sensitivities, Sensitivity(DEFAULT_ISO)),
        film=film,
        ev_compensation=preferences.ev_compensation,
        attached_filters=tuple(preferences.attached_filters),
    )


def select_film(
    state: ExposureCompensationState,
    film_id: Optional[str],
    films: FilmCatalog,
    sensitivities: Sequence[Sensitivity],
) -> ExposureCompensationState:
    """Return a new selection with ``film_id`` chosen and ISO set to match it.

    Passing None selects digital capture, which resets ISO to 100.
    """
    film = films.get(film_id) if film_id is not None else None
    sensitivity = sensitivity_for_film(film, sensitivities) or state.sensitivity
    return replace(state, film=film, sensitivity=sensitivity)


def _match(candidates, value: float, tolerance: float):
    if value <= 0:
        return None
    for candidate in candidates:
        difference = abs(candidate.value - value)
        if difference < tolerance or difference == 0:
            return candidate
    return None


def _first(candidates, fallback):
    return candidates[0] if candidates else fallback
