"""
Film catalog: validated, read-only collection of FilmReciprocity records.

Records arrive as decoded JSON objects (one per film) and are validated with
Pydantic. The catalog is immutable once built and sorted by display name.
"""

import json
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional

from pydantic import TypeAdapter, ValidationError

from photo_assistant.core.exceptions import CatalogError, FilmNotFoundError
from photo_assistant.core.logging import get_logger
from photo_assistant.reciprocity.models import FilmReciprocity

logger = get_logger(__name__)

_FILM_LIST = TypeAdapter(list[FilmReciprocity])


class FilmCatalog:
    """Films available for reciprocity correction, sorted by name."""

    def __init__(self, films: Iterable[FilmReciprocity] = ()):
        self._films: tuple[FilmReciprocity, ...] = tuple(sorted(films, key=lambda f: f.name))
        self._by_id = {film.id: film for film in self._films}

    @classmethod
    def from_records(
        cls, records: Iterable[dict[str, Any]], source: Optional[str] = None
    ) -> "FilmCatalog":
        """Validate decoded catalog records.

        Args:
            records: JSON-shaped film records.
            source: Description of where the records came from, for errors.

        Returns:
            A new FilmCatalog.

        Raises:
            CatalogError: If any record is malformed or has an unknown model type.
        """
        try:
            films = _FILM_LIST.validate_python(list(records))
        except ValidationError as e:
            raise CatalogError(f"Invalid film catalog: {e}", source=source) from e

        logger.debug(f"Loaded {len(films)} films" + (f" from {source}" if source else ""))
        return cls(films)

    @classmethod
    def load(cls, path: Path) -> "FilmCatalog":
        """Load a catalog from a JSON file holding an array of film records."""
        path = Path(path)
        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogError(f"Cannot read film catalog: {e}", source=str(path)) from e

        if not isinstance(data, list):
            raise CatalogError("Film catalog must be a JSON array", source=str(path))

        return cls.from_records(data, source=str(path))

    def __iter__(self) -> Iterator[FilmReciprocity]:
        return iter(self._films)

    def __len__(self) -> int:
        return len(self._films)

    def __contains__(self, film_id: object) -> bool:
        return film_id in self._by_id

    @property
    def films(self) -> tuple[FilmReciprocity, ...]:
        return self._films

    def find(self, film_id: Optional[str]) -> Optional[FilmReciprocity]:
        """Return the film with ``film_id``, or None when absent."""
        if film_id is None:
            return None
        return self._by_id.get(film_id)

    def get(self, film_id: str) -> FilmReciprocity:
        """Return the film with ``film_id``.

        Raises:
            FilmNotFoundError: If the id is not in the catalog.
        """
        film = self._by_id.get(film_id)
        if film is None:
            raise FilmNotFoundError(film_id)
        return film
