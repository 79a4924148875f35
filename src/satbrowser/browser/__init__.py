"""Browser module.

Provides the route model, catalog query service, and navigation state for
exploring the catalog by category, search, and detail lookup.
"""

from satbrowser.browser._filter import apply_filters, apply_order, matches_name
from satbrowser.browser._navigator import BrowserNavigator
from satbrowser.browser._router import (
    BrowserRouter,
    build_query_string,
    generate_url,
    parse_filters,
    parse_route,
)
from satbrowser.browser._service import (
    CATEGORY_DESCRIPTIONS,
    CatalogQueryService,
    category_description,
    default_category_description,
    format_category_name,
)
from satbrowser.browser._types import (
    BrowseResult,
    BrowserFilters,
    BrowserRoute,
    CategoriesResult,
    CategoryInfo,
    CategoryResults,
    RouteError,
    RouteResult,
    RouteType,
    SatelliteDetail,
    SearchResults,
    SortBy,
    SortOrder,
)

__all__ = [
    # Enums
    "RouteType",
    "SortBy",
    "SortOrder",
    # Filters and routes
    "BrowserFilters",
    "BrowserRoute",
    # Results
    "BrowseResult",
    "CategoryInfo",
    "CategoriesResult",
    "CategoryResults",
    "SearchResults",
    "SatelliteDetail",
    "RouteError",
    "RouteResult",
    # Query service
    "CatalogQueryService",
    "CATEGORY_DESCRIPTIONS",
    "category_description",
    "default_category_description",
    "format_category_name",
    # Filtering
    "apply_filters",
    "apply_order",
    "matches_name",
    # Routing
    "BrowserRouter",
    "BrowserNavigator",
    "parse_route",
    "parse_filters",
    "generate_url",
    "build_query_string",
]
