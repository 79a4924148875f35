"""Navigation state for the browser.

:class:`BrowserNavigator` owns the single "current route" slot. Each
navigation replaces the slot; resolution is synchronous, so there is no
pending work to cancel when a newer navigation supersedes an older one.
"""

from __future__ import annotations

import logging

from satbrowser.browser._router import BrowserRouter, QueryParams, generate_url, parse_route
from satbrowser.browser._types import BrowserRoute, RouteError, RouteResult

logger = logging.getLogger(__name__)


class BrowserNavigator:
    """Parse, resolve, and remember browser navigations.

    Args:
        router: Router used to resolve routes.
    """

    def __init__(self, router: BrowserRouter) -> None:
        self._router = router
        self._current: BrowserRoute | None = None

    @property
    def current_route(self) -> BrowserRoute | None:
        """The most recently accepted route, or None before any navigation."""
        return self._current

    def current_url(self) -> str | None:
        """Return the canonical path of the current route, if any."""
        if self._current is None:
            return None
        return generate_url(self._current)

    def navigate(self, path: str, params: QueryParams | None = None) -> RouteResult:
        """Parse *path* and resolve it.

        An unparseable path yields ``RouteError("Invalid route")`` and leaves
        the current route unchanged.

        Args:
            path: Navigation path.
            params: Query parameters.

        Returns:
            The resolved result.
        """
        route = parse_route(path, params)
        if route is None:
            logger.debug("Rejected navigation to %r", path)
            return RouteError(message="Invalid route")
        return self.navigate_to(route)

    def navigate_to(self, route: BrowserRoute) -> RouteResult:
        """Make *route* current and resolve it.

        Args:
            route: Route to navigate to.

        Returns:
            The resolved result.
        """
        self._current = route
        return self._router.handle_route(route)

    def refresh(self) -> RouteResult | None:
        """Re-resolve the current route against the live catalog.

        Returns:
            The fresh result, or None if nothing has been navigated to yet.
        """
        if self._current is None:
            return None
        return self._router.handle_route(self._current)
