"""Browser route model.

Parses navigation paths into :class:`BrowserRoute` values, resolves routes
against a :class:`CatalogQueryService`, and generates canonical paths from
routes. Recognized paths::

    /browser
    /browser/category
    /browser/category/<category>
    /browser/satellite/<satellite-id>
    /browser/search

each optionally followed by
``?name=<str>&type=<str>&sortBy=name|type|launchDate&sortOrder=asc|desc``.

Parsing is permissive: unknown or out-of-range ``sortBy`` / ``sortOrder``
values are dropped rather than rejected, so stale bookmarks still resolve.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Union
from urllib.parse import parse_qs, quote, unquote, urlencode

from satbrowser.browser._service import CatalogQueryService
from satbrowser.browser._types import (
    BrowserFilters,
    BrowserRoute,
    CategoriesResult,
    CategoryResults,
    RouteError,
    RouteResult,
    RouteType,
    SatelliteDetail,
    SearchResults,
    SortBy,
    SortOrder,
)

logger = logging.getLogger(__name__)

ROOT_SEGMENT = "browser"
"""First path segment of every browser route."""

QueryParams = Union[Mapping[str, Union[str, Sequence[str]]], str]
"""Query parameters: a mapping of names to values, or a raw query string."""


def _first(value: str | Sequence[str] | None) -> str | None:
    """Return the first value of a query parameter."""
    if value is None or isinstance(value, str):
        return value
    return value[0] if value else None


def _normalize_params(params: QueryParams | None) -> Mapping[str, str | Sequence[str]]:
    if params is None:
        return {}
    if isinstance(params, str):
        return parse_qs(params.lstrip("?"))
    return params


def parse_filters(params: QueryParams | None) -> BrowserFilters:
    """Parse browser filters from query parameters.

    Empty values are ignored. Values of ``sortBy`` and ``sortOrder`` outside
    their enums are ignored.

    Args:
        params: Query parameters, or None.

    Returns:
        Parsed filters (possibly empty).
    """
    values = _normalize_params(params)

    name = _first(values.get("name")) or None
    category = _first(values.get("type")) or None

    sort_by = None
    raw_sort_by = _first(values.get("sortBy"))
    if raw_sort_by:
        try:
            sort_by = SortBy(raw_sort_by)
        except ValueError:
            logger.debug("Ignoring unknown sortBy value %r", raw_sort_by)

    sort_order = None
    raw_sort_order = _first(values.get("sortOrder"))
    if raw_sort_order:
        try:
            sort_order = SortOrder(raw_sort_order)
        except ValueError:
            logger.debug("Ignoring unknown sortOrder value %r", raw_sort_order)

    return BrowserFilters(
        name=name, type=category, sort_by=sort_by, sort_order=sort_order
    )


def build_query_string(filters: BrowserFilters | None) -> str:
    """Build the query string for *filters*, without the leading ``?``.

    Only ``name``, ``type``, ``sortBy`` and ``sortOrder`` are emitted, in
    that order, and only when set.

    Args:
        filters: Filters to encode, or None.

    Returns:
        URL-encoded query string (e.g. ``"name=iss&sortBy=name"``).
    """
    if filters is None:
        return ""

    params: list[tuple[str, str]] = []

    if filters.name:
        params.append(("name", filters.name))

    if filters.type:
        params.append(("type", filters.type))

    if filters.sort_by is not None:
        params.append(("sortBy", filters.sort_by.as_str()))

    if filters.sort_order is not None:
        params.append(("sortOrder", filters.sort_order.as_str()))

    return urlencode(params)


def parse_route(path: str, params: QueryParams | None = None) -> BrowserRoute | None:
    """Parse a browser path into a route.

    If *params* is None and *path* contains ``?``, the part after it is
    parsed as the query string. Empty path segments count as absent, so
    ``/browser/satellite/`` has no satellite id.

    Args:
        path: Navigation path (e.g. ``"/browser/category/weather"``).
        params: Query parameters.

    Returns:
        The parsed route, or None if *path* is not a browser route.
    """
    if "?" in path:
        path, _, query = path.partition("?")
        if params is None:
            params = query

    segments = [unquote(s) for s in path.strip("/").split("/")]

    if len(segments) < 2 or segments[0] != ROOT_SEGMENT:
        return None

    third = segments[2] if len(segments) >= 3 and segments[2] else None

    try:
        route_type = RouteType(segments[1])
    except ValueError:
        return None

    if route_type is RouteType.CATEGORY:
        if third is None:
            return BrowserRoute(type=RouteType.CATEGORY)
        return BrowserRoute(
            type=RouteType.CATEGORY, category=third, filters=parse_filters(params)
        )

    if route_type is RouteType.SATELLITE:
        if third is None:
            return None
        return BrowserRoute(type=RouteType.SATELLITE, satellite_id=third)

    return BrowserRoute(type=RouteType.SEARCH, filters=parse_filters(params))


def generate_url(route: BrowserRoute) -> str:
    """Generate the canonical path for *route*.

    Path segments are percent-encoded. Filter fields that have no query
    parameter (the launch date bounds) are dropped.

    Args:
        route: Route to encode.

    Returns:
        Path with optional query string
        (e.g. ``"/browser/search?name=iss"``).
    """
    path = f"/{ROOT_SEGMENT}"

    if route.type is RouteType.CATEGORY:
        path += "/category"
        if route.category:
            path += f"/{quote(route.category, safe='')}"
    elif route.type is RouteType.SATELLITE:
        if route.satellite_id:
            path += f"/satellite/{quote(route.satellite_id, safe='')}"
    elif route.type is RouteType.SEARCH:
        path += "/search"

    query = build_query_string(route.filters)
    if query:
        path += f"?{query}"

    return path


class BrowserRouter:
    """Resolve browser routes against a catalog query service.

    Args:
        service: Query service used to resolve routes.
    """

    def __init__(self, service: CatalogQueryService) -> None:
        self._service = service

    @property
    def service(self) -> CatalogQueryService:
        """The query service routes are resolved against."""
        return self._service

    parse_route = staticmethod(parse_route)
    generate_url = staticmethod(generate_url)

    def handle_route(self, route: BrowserRoute) -> RouteResult:
        """Resolve *route* into a result.

        Missing entities are reported as :class:`RouteError` results, never
        as exceptions. Empty listings are successful results.

        Args:
            route: Route to resolve.

        Returns:
            The typed result.
        """
        if route.type is RouteType.CATEGORY:
            if not route.category:
                return CategoriesResult(data=self._service.get_categories())
            return CategoryResults(
                data=self._service.browse_by_category(route.category, route.filters)
            )

        if route.type is RouteType.SATELLITE:
            if not route.satellite_id:
                return RouteError(message="Satellite ID required")
            satellite = self._service.get_satellite_by_id(route.satellite_id)
            if satellite is None:
                return RouteError(message=f"Satellite '{route.satellite_id}' not found")
            return SatelliteDetail(data=satellite)

        if route.type is RouteType.SEARCH:
            return SearchResults(
                data=self._service.search_satellites(route.filters or BrowserFilters())
            )

        return RouteError(message="Invalid route type")
