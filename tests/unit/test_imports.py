"""
Tests for module imports and package structure.

Ensures all public modules can be imported correctly.
"""

import pytest


class TestCoreImports:
    """Test core module imports."""

    def test_import_core_types(self):
        """Import core types."""
        from photo_assistant.core.types import ReciprocityModelType, SettingKind, StepMode

        assert StepMode is not None
        assert SettingKind is not None
        assert ReciprocityModelType.POWER_LAW.value == "powerLaw"

    def test_import_exceptions(self):
        """Import exception hierarchy."""
        from photo_assistant.core.exceptions import (
            CatalogError,
            FilmNotFoundError,
            FilterNotFoundError,
            PhotoAssistantError,
        )

        assert issubclass(CatalogError, PhotoAssistantError)
        assert issubclass(FilmNotFoundError, CatalogError)
        assert issubclass(FilterNotFoundError, KeyError)


class TestPackageImports:
    """Test top-level package exports."""

    def test_version(self):
        """Package exposes a version."""
        import photo_assistant

        assert photo_assistant.__version__ == "1.0.0"

    @pytest.mark.parametrize("name", __import__("photo_assistant").__all__)
    def test_all_exports_resolve(self, name):
        """Every name in __all__ exists."""
        import photo_assistant

        assert getattr(photo_assistant, name) is not None

    @pytest.mark.parametrize(
        "module",
        [
            "photo_assistant.exposure",
            "photo_assistant.reciprocity",
            "photo_assistant.session",
        ],
    )
    def test_subpackage_exports_resolve(self, module):
        """Every subpackage name in __all__ exists."""
        import importlib

        package = importlib.import_module(module)
        for name in package.__all__:
            assert hasattr(package, name), name
