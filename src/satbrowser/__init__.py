"""
satbrowser is a query, routing, and rendering-selection engine over an in-memory satellite catalog.
"""

from .config import (
    PollConfig,
    SelectionConfig,
    get_selection_config,
    set_selection_config,
)

from ._record import Dimensions, Position, SatelliteRecord

from .catalog import (
    CatalogChange,
    CatalogProvider,
    CatalogRefreshPoller,
    InMemoryCatalog,
)

from .browser import (
    BrowserFilters,
    BrowserNavigator,
    BrowserRoute,
    BrowserRouter,
    CatalogQueryService,
    RouteType,
    SortBy,
    SortOrder,
    generate_url,
    parse_route,
)

from .rendering import (
    ViewportBounds,
    for_performance,
    for_rendering,
    select_for_frame,
    should_render_as_icon,
)

__all__ = [
    # Config
    "SelectionConfig",
    "PollConfig",
    "set_selection_config",
    "get_selection_config",
    # Records
    "SatelliteRecord",
    "Position",
    "Dimensions",
    # Catalog
    "CatalogProvider",
    "CatalogChange",
    "InMemoryCatalog",
    "CatalogRefreshPoller",
    # Browser
    "BrowserFilters",
    "BrowserRoute",
    "RouteType",
    "SortBy",
    "SortOrder",
    "CatalogQueryService",
    "BrowserRouter",
    "BrowserNavigator",
    "parse_route",
    "generate_url",
    # Rendering
    "ViewportBounds",
    "for_rendering",
    "for_performance",
    "select_for_frame",
    "should_render_as_icon",
]
