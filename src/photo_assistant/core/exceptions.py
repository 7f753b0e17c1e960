"""
Exceptions for catalog loading and lookup.

The calculation core itself does not raise for out-of-range exposures;
those conditions are reported as flags on the results.
"""


class PhotoAssistantError(Exception):
    """Base exception for photo_assistant errors."""

    pass


class CatalogError(PhotoAssistantError):
    """Raised when a film or filter catalog record cannot be decoded."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        if source:
            message = f"{message} (source: {source})"
        super().__init__(message)


class FilmNotFoundError(CatalogError, KeyError):
    """Raised when a film id is not present in the catalog."""

    def __init__(self, film_id: str):
        self.film_id = film_id
        super().__init__(f"Unknown film id: {film_id!r}")

    def __str__(self) -> str:
        return self.args[0]


class FilterNotFoundError(CatalogError, KeyError):
    """Raised when a filter or filter variant id is not present in the catalog."""

    def __init__(self, filter_id: str, variant_id: str | None = None):
        self.filter_id = filter_id
        self.variant_id = variant_id
        if variant_id is None:
            message = f"Unknown filter id: {filter_id!r}"
        else:
            message = f"Unknown variant {variant_id!r} for filter {filter_id!r}"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]
