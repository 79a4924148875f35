"""Type definitions for the rendering selection pipeline.

Provides :class:`ViewportBounds`, the geographic extent of the renderer's
current view. It is a :class:`~typing.NamedTuple`, which JAX treats as a
pytree automatically.
"""

from __future__ import annotations

from typing import NamedTuple


class ViewportBounds(NamedTuple):
    """Geographic bounds of a viewport in degrees.

    Attributes:
        west: Western longitude.
        east: Eastern longitude.
        south: Southern latitude.
        north: Northern latitude.
    """

    west: float
    east: float
    south: float
    north: float

    def expand(self, margin: float) -> ViewportBounds:
        """Return bounds grown by *margin* degrees.

        Longitude grows by the full margin on each side and latitude by
        half of it, compensating for the typical map aspect ratio.

        Args:
            margin: Longitude margin in degrees.

        Returns:
            The expanded bounds.
        """
        return ViewportBounds(
            west=self.west - margin,
            east=self.east + margin,
            south=self.south - margin / 2,
            north=self.north + margin / 2,
        )

    def contains(self, lat: float, lng: float) -> bool:
        """Return True if the point lies inside the bounds (inclusive)."""
        return self.west <= lng <= self.east and self.south <= lat <= self.north
