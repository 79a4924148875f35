"""Browser types.

Defines the filter, route, and result types exchanged between the route
model, the catalog query service, and presentation code.

Routes and results are closed sum types: a route is a single dataclass
tagged by :class:`RouteType`, and a result is one of the five result
dataclasses collected in :data:`RouteResult`, each carrying a ``type``
tag string.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar, Union

from satbrowser._record import SatelliteRecord


class SortBy(Enum):
    """Sort key for browser listings.

    ``LAUNCH_DATE`` is accepted but inert: the catalog carries no launch
    dates, so every pair of records compares equal under it.
    """

    NAME = "name"
    TYPE = "type"
    LAUNCH_DATE = "launchDate"

    def as_str(self) -> str:
        """Return the query parameter value."""
        return self.value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"SortBy.{_SORT_BY_DISPLAY[self]}"


_SORT_BY_DISPLAY = {
    SortBy.NAME: "Name",
    SortBy.TYPE: "Type",
    SortBy.LAUNCH_DATE: "LaunchDate",
}


class SortOrder(Enum):
    """Sort direction for browser listings."""

    ASC = "asc"
    DESC = "desc"

    def as_str(self) -> str:
        """Return the query parameter value."""
        return self.value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"SortOrder.{self.name.capitalize()}"


class RouteType(Enum):
    """Browser route kind. The value is the path segment after ``browser``."""

    CATEGORY = "category"
    SATELLITE = "satellite"
    SEARCH = "search"

    def as_str(self) -> str:
        """Return the path segment for this route type."""
        return self.value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"RouteType.{self.name.capitalize()}"


@dataclass(frozen=True)
class BrowserFilters:
    """Optional constraints and ordering for a listing.

    An unset field means "no constraint" (or "no explicit order" for the
    sort fields). ``launch_date_from`` and ``launch_date_to`` are carried
    on the value but never serialized into URLs and currently have no
    effect on filtering.
    """

    name: str | None = None
    type: str | None = None
    sort_by: SortBy | None = None
    sort_order: SortOrder | None = None
    launch_date_from: datetime.date | None = None
    launch_date_to: datetime.date | None = None

    def strip_unsupported(self) -> BrowserFilters:
        """Return a copy holding only the fields that survive URL encoding."""
        return replace(self, launch_date_from=None, launch_date_to=None)

    def is_empty(self) -> bool:
        """Return True if no field is set."""
        return self == BrowserFilters()


@dataclass(frozen=True)
class BrowserRoute:
    """A typed navigation intent.

    - ``CATEGORY`` without ``category``: list all categories.
    - ``CATEGORY`` with ``category``: records of one category.
    - ``SATELLITE``: detail of ``satellite_id``.
    - ``SEARCH``: filtered listing over the whole catalog.
    """

    type: RouteType
    category: str | None = None
    satellite_id: str | None = None
    filters: BrowserFilters | None = None

    def strip_unsupported(self) -> BrowserRoute:
        """Return a copy whose filters hold only URL-serializable fields."""
        if self.filters is None:
            return self
        return replace(self, filters=self.filters.strip_unsupported())


@dataclass(frozen=True)
class CategoryInfo:
    """Summary of one catalog category, derived on demand."""

    id: str
    display_name: str
    description: str
    count: int


@dataclass(frozen=True)
class BrowseResult:
    """Records matching a category browse or a search."""

    satellites: list[SatelliteRecord]
    total_count: int
    category: str | None = None


@dataclass(frozen=True)
class CategoriesResult:
    type: ClassVar[str] = "categories"
    data: list[CategoryInfo]


@dataclass(frozen=True)
class CategoryResults:
    type: ClassVar[str] = "category-results"
    data: BrowseResult


@dataclass(frozen=True)
class SearchResults:
    type: ClassVar[str] = "search-results"
    data: BrowseResult


@dataclass(frozen=True)
class SatelliteDetail:
    type: ClassVar[str] = "satellite-detail"
    data: SatelliteRecord


@dataclass(frozen=True)
class RouteError:
    type: ClassVar[str] = "error"
    message: str


RouteResult = Union[
    CategoriesResult, CategoryResults, SearchResults, SatelliteDetail, RouteError
]
"""Result of resolving a :class:`BrowserRoute`."""
