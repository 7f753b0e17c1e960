"""
Shared fixtures for Photo Assistant tests.
"""

import pytest

from photo_assistant.config import configure
from photo_assistant.exposure.composer import ExposureComposer, ExposureCompensationState
from photo_assistant.exposure.filters import FilterCatalog
from photo_assistant.exposure.settings import Aperture, Sensitivity, ShutterSpeed
from photo_assistant.reciprocity.catalog import FilmCatalog


@pytest.fixture(autouse=True)
def reset_settings():
    """Give every test freshly loaded global settings."""
    configure()
    yield
    configure()


@pytest.fixture
def film_records():
    """Decoded film catalog records, one per reciprocity model type."""
    return [
        {
            "id": "hp5_plus",
            "name": "Ilford HP5 Plus",
            "iso": 400,
            "model": {"type": "powerLaw", "factor": 1.31, "cutoffTime": 1.0},
        },
        {
            "id": "portra_400",
            "name": "Kodak Portra 400",
            "iso": 400,
            "model": {
                "type": "stopCorrection",
                "dataPoints": [
                    {"metered": 1, "stopAdjustment": 0.0},
                    {"metered": 10, "stopAdjustment": 0.5},
                    {"metered": 100, "stopAdjustment": 1.5},
                ],
                "cutoffTime": 1.0,
            },
        },
        {
            "id": "velvia_50",
            "name": "Fujichrome Velvia 50",
            "iso": 50,
            "model": {
                "type": "lookupTable",
                "dataPoints": [
                    {"metered": 1, "corrected": 1},
                    {"metered": 10, "corrected": 22},
                    {"metered": 100, "corrected": 400},
                ],
                "colorFilterSuggestion": "5M",
                "cutoffTime": 1.0,
            },
        },
        {
            "id": "acros_ii",
            "name": "Fujifilm Acros II",
            "iso": 100,
            "model": {"type": "none", "cutoffTime": 120.0},
        },
    ]


@pytest.fixture
def film_catalog(film_records):
    """Validated film catalog."""
    return FilmCatalog.from_records(film_records)


@pytest.fixture
def filter_records():
    """Decoded filter catalog in its top-level wrapper."""
    return {
        "filters": [
            {"id": "uv", "name": "UV", "category": "protection", "compensationStops": 0.0},
            {
                "id": "cpl",
                "name": "Circular Polarizer",
                "category": "polarizer",
                "compensationStopsMin": 1.0,
                "compensationStopsMax": 2.0,
            },
            {
                "id": "nd",
                "name": "ND",
                "category": "neutral_density",
                "variants": [
                    {"nd": "ND8", "opticalDensity": 0.9, "stops": 3},
                    {"nd": "ND1000", "opticalDensity": 3.0, "stops": 10},
                ],
            },
            {
                "id": "gnd",
                "name": "Graduated ND",
                "category": "neutral_density",
                "variants": [{"gnd": "GND0.6", "opticalDensity": 0.6, "stops": 2}],
            },
            {
                "id": "ir",
                "name": "Infrared",
                "category": "infrared",
                "variants": [{"filter": "720nm", "stopsMin": 4.0, "stopsMax": 6.0}],
            },
        ]
    }


@pytest.fixture
def filter_catalog(filter_records):
    """Validated filter catalog."""
    return FilterCatalog.from_records(filter_records)


@pytest.fixture
def composer():
    """Composer snapping to the default third-stop shutter scale."""
    return ExposureComposer()


@pytest.fixture
def base_state():
    """f/8, 1s, ISO 100 with no compensation, filters or film."""
    return ExposureCompensationState(
        aperture=Aperture(8.0),
        shutter_speed=ShutterSpeed(1.0),
        sensitivity=Sensitivity(100.0),
    )
