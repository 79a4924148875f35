"""Loading priority scores.

Records are scored by the first matching rule below, checked in order.
Name keywords are matched against the upper-cased name.

====================================================  =====
Rule                                                  Score
====================================================  =====
Name contains ``ISS`` or ``ZARYA``                     1000
Name contains ``HUBBLE``, ``JWST`` or ``KEPLER``        950
Name contains ``LANDSAT``, ``SENTINEL`` or ``MODIS``    900
Category ``navigation``, or ``GPS`` / ``GALILEO``       700
Category ``scientific``                                 800
Category ``communication``                              600
Name contains ``CUBESAT`` or ``YAM``                    400
Name contains ``STARLINK``                              100
Anything else                                           200
====================================================  =====
"""

from __future__ import annotations

from satbrowser._record import SatelliteRecord

PRIORITY_FLAGSHIP = 1000
PRIORITY_SCIENCE_MISSION = 950
PRIORITY_EARTH_OBSERVATION_MISSION = 900
PRIORITY_SCIENTIFIC = 800
PRIORITY_NAVIGATION = 700
PRIORITY_COMMUNICATION = 600
PRIORITY_SMALL_SATELLITE = 400
PRIORITY_DEFAULT = 200
PRIORITY_MEGA_CONSTELLATION = 100

_FLAGSHIP_KEYWORDS = ("ISS", "ZARYA")
_SCIENCE_MISSION_KEYWORDS = ("HUBBLE", "JWST", "KEPLER")
_EARTH_OBSERVATION_KEYWORDS = ("LANDSAT", "SENTINEL", "MODIS")
_NAVIGATION_KEYWORDS = ("GPS", "GALILEO")
_SMALL_SATELLITE_KEYWORDS = ("CUBESAT", "YAM")
_MEGA_CONSTELLATION_KEYWORDS = ("STARLINK",)


def _contains_any(name: str, keywords: tuple[str, ...]) -> bool:
    return any(k in name for k in keywords)


def loading_priority(record: SatelliteRecord) -> int:
    """Return the loading priority score of *record*.

    Args:
        record: Record to score.

    Returns:
        Priority score; higher loads first.
    """
    name = record.name.upper()

    if _contains_any(name, _FLAGSHIP_KEYWORDS):
        return PRIORITY_FLAGSHIP
    if _contains_any(name, _SCIENCE_MISSION_KEYWORDS):
        return PRIORITY_SCIENCE_MISSION
    if _contains_any(name, _EARTH_OBSERVATION_KEYWORDS):
        return PRIORITY_EARTH_OBSERVATION_MISSION
    if record.category == "navigation" or _contains_any(name, _NAVIGATION_KEYWORDS):
        return PRIORITY_NAVIGATION
    if record.category == "scientific":
        return PRIORITY_SCIENTIFIC
    if record.category == "communication":
        return PRIORITY_COMMUNICATION
    if _contains_any(name, _SMALL_SATELLITE_KEYWORDS):
        return PRIORITY_SMALL_SATELLITE
    if _contains_any(name, _MEGA_CONSTELLATION_KEYWORDS):
        return PRIORITY_MEGA_CONSTELLATION
    return PRIORITY_DEFAULT
