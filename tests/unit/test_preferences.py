"""Tests for persisted exposure preferences."""

import json
import logging

import pytest

from photo_assistant.config import ExposureSettings, configure
from photo_assistant.core.exceptions import FilmNotFoundError
from photo_assistant.core.types import StepMode
from photo_assistant.exposure.composer import ExposureCompensationState
from photo_assistant.exposure.filters import AttachedFilter
from photo_assistant.exposure.scales import aperture_scale, sensitivity_scale, shutter_scale
from photo_assistant.exposure.settings import Aperture, Sensitivity, ShutterSpeed
from photo_assistant.session.preferences import (
    ExposurePreferences,
    load_preferences,
    preferences_from_state,
    restore_state,
    save_preferences,
    select_film,
)


@pytest.fixture
def scales():
    """Third-stop picker scales."""
    return {
        "apertures": aperture_scale(step_mode=StepMode.THIRD),
        "shutter_speeds": shutter_scale(step_mode=StepMode.THIRD),
        "sensitivities": sensitivity_scale(step_mode=StepMode.THIRD),
    }


class TestPreferencesFile:
    """Test saving and loading preferences."""

    def test_missing_file_gives_defaults(self, tmp_path):
        """No file means nothing has been selected yet."""
        prefs = load_preferences(tmp_path / "prefs.json")
        assert prefs == ExposurePreferences()
        assert prefs.film_id is None

    def test_save_and_load(self, tmp_path):
        """Saved preferences load back unchanged."""
        nd = AttachedFilter(filter_type="nd", filter_name="ND", variant_id="ND8", stops=3.0)
        prefs = ExposurePreferences(
            aperture=11.0,
            shutter_seconds=0.5,
            iso=400.0,
            ev_compensation=-0.7,
            film_id="hp5_plus",
            attached_filters=[nd],
        )
        path = save_preferences(prefs, tmp_path / "nested" / "prefs.json")

        assert path.exists()
        loaded = load_preferences(path)
        assert loaded == prefs
        assert loaded.attached_filters[0].id == nd.id

    def test_unreadable_file_gives_defaults(self, tmp_path, caplog):
        """Corrupt preferences are ignored with a warning."""
        path = tmp_path / "prefs.json"
        path.write_text("{not json")

        with caplog.at_level(logging.WARNING, logger="photo_assistant"):
            prefs = load_preferences(path)

        assert prefs == ExposurePreferences()
        assert "Ignoring" in caplog.text

    def test_invalid_values_give_defaults(self, tmp_path):
        """Negative values fail validation."""
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"aperture": -1}))
        assert load_preferences(path) == ExposurePreferences()

    def test_default_path_from_settings(self, tmp_path):
        """Without a path the configured data directory is used."""
        configure(data_dir=tmp_path)
        path = save_preferences(ExposurePreferences(aperture=8.0))

        assert path == tmp_path / "exposure_preferences.json"
        assert load_preferences().aperture == 8.0

    def test_relative_preferences_file(self, tmp_path):
        """Relative preference files live under the data directory."""
        configure(
            data_dir=tmp_path,
            exposure=ExposureSettings(preferences_file="custom/prefs.json"),
        )
        path = save_preferences(ExposurePreferences())
        assert path == tmp_path / "custom" / "prefs.json"


class TestRestoreState:
    """Test rebuilding a selection from preferences."""

    def test_defaults(self, scales):
        """Unset values fall back to f/5.6, 1/125 and ISO 100."""
        state = restore_state(ExposurePreferences(), **scales)

        assert state.aperture.label == "f/5.6"
        assert state.shutter_speed.label == "125"
        assert state.sensitivity.label == "100"
        assert state.film is None
        assert state.attached_filters == ()

    def test_matches_saved_values(self, scales, film_catalog):
        """Saved values are matched back onto the scales."""
        prefs = ExposurePreferences(
            aperture=11.05,
            shutter_seconds=0.5,
            iso=400.0,
            ev_compensation=0.3,
            film_id="portra_400",
        )
        state = restore_state(prefs, films=film_catalog, **scales)

        assert state.aperture == Aperture(11.0)
        assert state.shutter_speed == ShutterSpeed(0.5)
        assert state.sensitivity == Sensitivity(400.0)
        assert state.ev_compensation == 0.3
        assert state.film.name == "Kodak Portra 400"

    def test_value_off_scale_uses_default(self, scales):
        """Values no longer on a scale fall back to the defaults."""
        prefs = ExposurePreferences(aperture=100.0, iso=333.0)
        state = restore_state(prefs, **scales)

        assert state.aperture.label == "f/5.6"
        assert state.sensitivity.label == "100"

    def test_unknown_film_dropped(self, scales, film_catalog, caplog):
        """A film removed from the catalog is not restored."""
        prefs = ExposurePreferences(film_id="discontinued")
        with caplog.at_level(logging.WARNING, logger="photo_assistant"):
            state = restore_state(prefs, films=film_catalog, **scales)

        assert state.film is None
        assert "discontinued" in caplog.text

    def test_empty_scales(self):
        """Empty scales restore the default values themselves."""
        state = restore_state(ExposurePreferences(), [], [], [])

        assert state.aperture == Aperture(5.6)
        assert state.shutter_speed == ShutterSpeed(1.0 / 125.0)
        assert state.sensitivity == Sensitivity(100.0)

    def test_round_trip_through_state(self, scales, film_catalog):
        """A selection survives capture and restore."""
        state = ExposureCompensationState(
            aperture=Aperture(8.0),
            shutter_speed=ShutterSpeed(1.0 / 250.0),
            sensitivity=Sensitivity(400.0),
            film=film_catalog.get("hp5_plus"),
            ev_compensation=-1.0,
            attached_filters=(AttachedFilter(filter_type="uv", filter_name="UV", stops=0.0),),
        )
        prefs = preferences_from_state(state)
        restored = restore_state(prefs, films=film_catalog, **scales)

        assert prefs.film_id == "hp5_plus"
        assert restored == state


class TestSelectFilm:
    """Test choosing a film for the current selection."""

    def test_select_sets_iso(self, base_state, film_catalog):
        """Choosing a film moves ISO to its box speed."""
        state = select_film(base_state, "hp5_plus", film_catalog, sensitivity_scale())

        assert state.film.id == "hp5_plus"
        assert state.sensitivity == Sensitivity(400.0)
        assert state.aperture == base_state.aperture

    def test_digital_resets_iso(self, base_state, film_catalog):
        """Clearing the film returns to ISO 100."""
        state = select_film(base_state, "velvia_50", film_catalog, sensitivity_scale())
        state = select_film(state, None, film_catalog, sensitivity_scale())

        assert state.film is None
        assert state.sensitivity == Sensitivity(100.0)

    def test_unknown_film(self, base_state, film_catalog):
        """Unknown ids raise."""
        with pytest.raises(FilmNotFoundError):
            select_film(base_state, "trix_400", film_catalog, sensitivity_scale())

    def test_empty_scale_keeps_iso(self, base_state, film_catalog):
        """Without a scale the current ISO is kept."""
        state = select_film(base_state, "hp5_plus", film_catalog, [])
        assert state.sensitivity == base_state.sensitivity
