"""Rendering selection module.

Provides the composable filters a renderer applies to the catalog every
frame or viewport change: type, tracking, viewport, search, loading
priority, capacity, and the icon-versus-marker decision.
"""

from satbrowser.rendering._filters import (
    by_enabled_types,
    by_loading_priority,
    by_search_query,
    by_tracking_status,
    by_viewport_bounds,
    for_performance,
    for_rendering,
    select_for_frame,
    viewport_mask,
)
from satbrowser.rendering._icons import (
    ALWAYS_SHOWN_ID,
    default_icon_key,
    icon_draws,
    icon_mask,
    icon_probability,
    is_always_shown,
    should_render_as_icon,
)
from satbrowser.rendering._priority import loading_priority
from satbrowser.rendering._types import ViewportBounds

__all__ = [
    # Types
    "ViewportBounds",
    # Filters
    "by_enabled_types",
    "by_tracking_status",
    "by_viewport_bounds",
    "viewport_mask",
    "for_rendering",
    "by_search_query",
    "by_loading_priority",
    "loading_priority",
    "for_performance",
    "select_for_frame",
    # Level of detail
    "ALWAYS_SHOWN_ID",
    "should_render_as_icon",
    "icon_mask",
    "icon_probability",
    "icon_draws",
    "default_icon_key",
    "is_always_shown",
]
