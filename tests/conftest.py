import pytest

from satbrowser import InMemoryCatalog, Position, SatelliteRecord


@pytest.fixture
def records() -> list[SatelliteRecord]:
    """A small mixed catalog, in insertion order."""
    return [
        SatelliteRecord(
            id="iss-zarya-25544",
            name="ISS (ZARYA)",
            shortname="ISS",
            category="scientific",
            position=Position(lat=51.0, lng=10.0),
            image="iss.png",
        ),
        SatelliteRecord(
            id="landsat-9",
            name="LANDSAT 9",
            category="earth-observation",
            position=Position(lat=-20.0, lng=40.0),
            image="landsat.png",
        ),
        SatelliteRecord(
            id="starlink-1007",
            name="STARLINK-1007",
            category="communication",
            position=Position(lat=5.0, lng=-120.0),
        ),
        SatelliteRecord(
            id="gps-biir-2",
            name="GPS BIIR-2",
            alternate_name="NAVSTAR 43",
            category="navigation",
            position=Position(lat=30.0, lng=100.0),
        ),
        SatelliteRecord(
            id="goes-16",
            name="GOES 16",
            category="weather",
            position=Position(lat=0.0, lng=-75.0),
        ),
        SatelliteRecord(
            id="intelsat-901",
            name="Intelsat 901",
            shortname="IS-901",
            category="communication",
            position=Position(lat=0.0, lng=-18.0),
        ),
    ]


@pytest.fixture
def catalog(records) -> InMemoryCatalog:
    """An in-memory catalog holding :func:`records`."""
    return InMemoryCatalog(records)
