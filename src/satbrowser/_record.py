"""Satellite catalog record dataclass.

Shared data type for catalog entries consumed by both the browser query
service and the rendering selection pipeline. Records are immutable; only
the catalog provider creates or replaces them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

_DEFAULT_CATEGORY = "communication"


def _flex_float(val: object) -> float | None:
    """Convert a value to float, handling both numeric and string JSON values."""
    if val is None:
        return None
    try:
        return float(val)
    except (ValueError, TypeError):
        return None


class Position(NamedTuple):
    """Sub-satellite point in degrees."""

    lat: float = 0.0
    lng: float = 0.0


class Dimensions(NamedTuple):
    """Physical size of the spacecraft in meters."""

    length: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class SatelliteRecord:
    """A single orbiting object in the catalog.

    ``category`` is an open set of kebab-case keys such as
    ``"earth-observation"``, ``"communication"``, ``"scientific"``,
    ``"navigation"`` or ``"weather"``.
    """

    id: str
    name: str
    category: str = _DEFAULT_CATEGORY
    shortname: str | None = None
    alternate_name: str | None = None
    position: Position = field(default_factory=Position)
    altitude: float = 0.0
    velocity: float = 0.0
    dimensions: Dimensions = field(default_factory=Dimensions)
    tle1: str = ""
    tle2: str = ""
    image: str | None = None
    default_bearing: float | None = None
    default_zoom: float | None = None
    default_pitch: float | None = None
    scale_factor: float | None = None

    @classmethod
    def from_json_dict(cls, d: dict) -> SatelliteRecord:
        """Create a SatelliteRecord from a JSON dict with camelCase keys.

        The category may be given as ``"type"`` or ``"category"``. Numeric
        values may be numbers or numeric strings. A missing name falls back
        to the id.

        Args:
            d: Dictionary as produced by the catalog loader.

        Returns:
            A new SatelliteRecord instance.

        Raises:
            KeyError: If ``"id"`` is missing.
        """
        sat_id = str(d["id"])

        pos = d.get("position") or {}
        position = Position(
            lat=_flex_float(pos.get("lat")) or 0.0,
            lng=_flex_float(pos.get("lng")) or 0.0,
        )

        dims = d.get("dimensions") or {}
        dimensions = Dimensions(
            length=_flex_float(dims.get("length")) or 0.0,
            width=_flex_float(dims.get("width")) or 0.0,
            height=_flex_float(dims.get("height")) or 0.0,
        )

        return cls(
            id=sat_id,
            name=d.get("name") or sat_id,
            category=d.get("type") or d.get("category") or _DEFAULT_CATEGORY,
            shortname=d.get("shortname"),
            alternate_name=d.get("alternateName"),
            position=position,
            altitude=_flex_float(d.get("altitude")) or 0.0,
            velocity=_flex_float(d.get("velocity")) or 0.0,
            dimensions=dimensions,
            tle1=d.get("tle1") or "",
            tle2=d.get("tle2") or "",
            image=d.get("image"),
            default_bearing=_flex_float(d.get("defaultBearing")),
            default_zoom=_flex_float(d.get("defaultZoom")),
            default_pitch=_flex_float(d.get("defaultPitch")),
            scale_factor=_flex_float(d.get("scaleFactor")),
        )

    def __str__(self) -> str:
        return f"SatelliteRecord(id={self.id!r}, name={self.name!r})"

    def __repr__(self) -> str:
        return self.__str__()
