"""Tests for the film catalog."""

import json

import pytest

from photo_assistant.core.exceptions import CatalogError, FilmNotFoundError
from photo_assistant.core.types import ReciprocityModelType
from photo_assistant.reciprocity.catalog import FilmCatalog
from photo_assistant.reciprocity.models import LookupTableModel, PowerLawModel


class TestFilmCatalog:
    """Test building and querying the film catalog."""

    def test_sorted_by_name(self, film_catalog):
        """Films are listed by display name."""
        assert [film.name for film in film_catalog] == [
            "Fujichrome Velvia 50",
            "Fujifilm Acros II",
            "Ilford HP5 Plus",
            "Kodak Portra 400",
        ]

    def test_len_and_contains(self, film_catalog):
        """Catalog supports len and membership by id."""
        assert len(film_catalog) == 4
        assert "hp5_plus" in film_catalog
        assert "trix_400" not in film_catalog

    def test_get(self, film_catalog):
        """Films are looked up by id."""
        film = film_catalog.get("hp5_plus")
        assert film.iso == 400
        assert isinstance(film.model, PowerLawModel)

    def test_get_unknown_raises(self, film_catalog):
        """Unknown ids raise FilmNotFoundError, which is also a KeyError."""
        with pytest.raises(FilmNotFoundError) as exc_info:
            film_catalog.get("trix_400")
        assert isinstance(exc_info.value, KeyError)
        assert "trix_400" in str(exc_info.value)

    def test_find(self, film_catalog):
        """find returns None instead of raising."""
        assert film_catalog.find("trix_400") is None
        assert film_catalog.find(None) is None
        assert film_catalog.find("velvia_50").name == "Fujichrome Velvia 50"

    def test_color_filter_suggestion(self, film_catalog):
        """Lookup table films keep their filter suggestion."""
        model = film_catalog.get("velvia_50").model
        assert isinstance(model, LookupTableModel)
        assert model.color_filter_suggestion == "5M"

    def test_invalid_record(self, film_records):
        """A bad record fails the whole catalog."""
        film_records.append({"id": "bad", "name": "Bad", "iso": 100, "model": {"type": "magic"}})
        with pytest.raises(CatalogError):
            FilmCatalog.from_records(film_records)

    def test_load(self, tmp_path, film_records):
        """Catalogs load from a JSON array."""
        path = tmp_path / "films.json"
        path.write_text(json.dumps(film_records))
        assert len(FilmCatalog.load(path)) == 4

    def test_load_requires_array(self, tmp_path):
        """The file must hold a list of films."""
        path = tmp_path / "films.json"
        path.write_text(json.dumps({"films": []}))
        with pytest.raises(CatalogError) as exc_info:
            FilmCatalog.load(path)
        assert exc_info.value.source == str(path)

    def test_load_missing_file(self, tmp_path):
        """A missing file is a catalog error."""
        with pytest.raises(CatalogError):
            FilmCatalog.load(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path):
        """Malformed JSON is a catalog error."""
        path = tmp_path / "films.json"
        path.write_text("[{")
        with pytest.raises(CatalogError):
            FilmCatalog.load(path)

    def test_empty_catalog(self):
        """An empty catalog is valid."""
        catalog = FilmCatalog()
        assert len(catalog) == 0
        assert catalog.films == ()

    def test_reciprocity_type(self, film_catalog):
        """Films report which model describes them."""
        assert film_catalog.get("portra_400").reciprocity_type is ReciprocityModelType.STOP_CORRECTION
        assert film_catalog.get("acros_ii").reciprocity_type is ReciprocityModelType.NONE
