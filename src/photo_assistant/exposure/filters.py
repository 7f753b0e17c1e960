"""
Lens filters and the light they cost.

A filter family (UV, CPL, ND, GND, IR, ...) either has a fixed compensation,
a compensation range the photographer picks from, or a list of variants
(ND2, ND1000, 720nm, ...) each with its own fixed or ranged stops. Resolving
a selection yields an AttachedFilter carrying a plain ``stops`` number, which
is all the exposure composer needs.
"""

import json
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, model_validator

from photo_assistant.core.exceptions import CatalogError, FilterNotFoundError
from photo_assistant.core.logging import get_logger

logger = get_logger(__name__)

# Keys the catalog uses to name a variant, in order of precedence
_VARIANT_LABEL_KEYS = ("nd", "gnd", "filter")


class AttachedFilter(BaseModel):
    """A filter mounted on the lens, with its light loss already resolved."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    filter_type: str = Field(..., description="FilterType id")
    filter_name: str = Field(..., description="FilterType display name")
    variant_id: Optional[str] = Field(default=None)
    variant_name: Optional[str] = Field(default=None)
    stops: float = Field(..., description="Light loss in stops")

    @property
    def display_name(self) -> str:
        if self.variant_name:
            return f"{self.filter_name} {self.variant_name}"
        return self.filter_name

    @property
    def stops_label(self) -> str:
        """E.g. "1.0 stop", "3.0 stops"."""
        return f"{self.stops:.1f} stop{'' if self.stops == 1.0 else 's'}"


def total_stops(filters: Iterable[AttachedFilter]) -> float:
    """Combined light loss of a filter stack."""
    return sum((f.stops for f in filters), 0.0)


def total_stops_label(filters: Iterable[AttachedFilter]) -> str:
    """E.g. "+3.5"."""
    return f"+{total_stops(filters):.1f}"


class FilterVariant(BaseModel):
    """One strength of a filter family, e.g. ND8 or 720nm."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    optical_density: Optional[float] = Field(default=None, alias="opticalDensity")
    stops: Optional[float] = Field(default=None)
    stops_min: Optional[float] = Field(default=None, alias="stopsMin")
    stops_max: Optional[float] = Field(default=None, alias="stopsMax")

    @model_validator(mode="before")
    @classmethod
    def resolve_label(cls, data: Any) -> Any:
        """Take the variant id from its nd/gnd/filter key when present."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for key in _VARIANT_LABEL_KEYS:
            label = data.get(key)
            if isinstance(label, str):
                data["id"] = label
                data["name"] = label
                break
        else:
            if "id" in data and "name" not in data:
                data["name"] = data["id"]
        return data

    @property
    def is_range(self) -> bool:
        return self.stops_min is not None and self.stops_max is not None


class FilterType(BaseModel):
    """A filter family from the catalog."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    category: str = Field(default="")
    compensation_stops: Optional[float] = Field(default=None, alias="compensationStops")
    compensation_stops_min: Optional[float] = Field(default=None, alias="compensationStopsMin")
    compensation_stops_max: Optional[float] = Field(default=None, alias="compensationStopsMax")
    variants: Optional[tuple[FilterVariant, ...]] = Field(default=None)

    @property
    def has_variants(self) -> bool:
        return bool(self.variants)

    @property
    def is_simple(self) -> bool:
        return self.compensation_stops is not None

    @property
    def is_range(self) -> bool:
        return self.compensation_stops_min is not None and self.compensation_stops_max is not None

    def variant(self, variant_id: str) -> FilterVariant:
        """Look up a variant by id.

        Raises:
            FilterNotFoundError: If the family has no such variant.
        """
        for variant in self.variants or ():
            if variant.id == variant_id:
                return variant
        raise FilterNotFoundError(self.id, variant_id)

    def resolve(
        self,
        variant_id: Optional[str] = None,
        custom_stops: Optional[float] = None,
    ) -> AttachedFilter:
        """Turn a selection into an AttachedFilter.

        Ranged filters use ``custom_stops`` when given, otherwise the middle
        of the range. A selection with nothing to resolve costs 0 stops.

        Args:
            variant_id: Selected variant for families with variants.
            custom_stops: Photographer's choice for ranged filters.

        Returns:
            AttachedFilter with resolved stops.
        """
        if variant_id is not None:
            variant = self.variant(variant_id)
            if variant.stops is not None:
                stops = variant.stops
            elif variant.is_range:
                stops = _ranged(variant.stops_min, variant.stops_max, custom_stops)
            else:
                stops = 0.0
            return AttachedFilter(
                filter_type=self.id,
                filter_name=self.name,
                variant_id=variant.id,
                variant_name=variant.name,
                stops=stops,
            )

        if self.compensation_stops is not None:
            stops = self.compensation_stops
        elif self.is_range:
            stops = _ranged(self.compensation_stops_min, self.compensation_stops_max, custom_stops)
        else:
            stops = 0.0

        return AttachedFilter(filter_type=self.id, filter_name=self.name, stops=stops)


def _ranged(low: float, high: float, custom: Optional[float]) -> float:
    if custom is None:
        return (low + high) / 2.0
    return min(max(custom, low), high)


_FILTER_LIST = TypeAdapter(list[FilterType])


class FilterCatalog:
    """Filter families available to attach, in catalog order."""

    def __init__(self, filters: Iterable[FilterType] = ()):
        self._filters: tuple[FilterType, ...] = tuple(filters)
        self._by_id = {f.id: f for f in self._filters}

    @classmethod
    def from_records(cls, data: Any, source: Optional[str] = None) -> "FilterCatalog":
        """Validate decoded catalog data.

        Accepts either ``{"filters": [...]}`` or a bare list of filter records.

        Raises:
            CatalogError: If the data is malformed.
        """
        if isinstance(data, dict):
            data = data.get("filters")
        if not isinstance(data, list):
            raise CatalogError("Filter catalog must contain a list of filters", source=source)

        try:
            filters = _FILTER_LIST.validate_python(data)
        except ValidationError as e:
            raise CatalogError(f"Invalid filter catalog: {e}", source=source) from e

        logger.debug(f"Loaded {len(filters)} filter types" + (f" from {source}" if source else ""))
        return cls(filters)

    @classmethod
    def load(cls, path: Path) -> "FilterCatalog":
        """Load a catalog from a JSON file."""
        path = Path(path)
        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogError(f"Cannot read filter catalog: {e}", source=str(path)) from e
        return cls.from_records(data, source=str(path))

    def __iter__(self) -> Iterator[FilterType]:
        return iter(self._filters)

    def __len__(self) -> int:
        return len(self._filters)

    def get(self, filter_id: str) -> FilterType:
        """Return the filter family with ``filter_id``.

        Raises:
            FilterNotFoundError: If the id is not in the catalog.
        """
        found = self._by_id.get(filter_id)
        if found is None:
            raise FilterNotFoundError(filter_id)
        return found

    def attach(
        self,
        filter_id: str,
        variant_id: Optional[str] = None,
        custom_stops: Optional[float] = None,
    ) -> AttachedFilter:
        """Resolve a filter selection by ids."""
        return self.get(filter_id).resolve(variant_id=variant_id, custom_stops=custom_stops)
