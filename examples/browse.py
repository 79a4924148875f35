# /// script
# requires-python = ">=3.10"
# dependencies = ["typer>=0.9.0", "satbrowser"]
#
# [tool.uv.sources]
# satbrowser = { path = ".." }
# ///
"""Browse a satellite catalog from the command line.

Loads a JSON array of catalog records, resolves a browser path against it,
and optionally runs the per-frame rendering selection for a viewport.

Requires satbrowser to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/browse.py CATALOG.json PATH [OPTIONS]

Examples:
    # List categories
    uv run examples/browse.py catalog.json /browser/category

    # Communication satellites sorted by name, descending
    uv run examples/browse.py catalog.json "/browser/category/communication?sortBy=name&sortOrder=desc"

    # Detail view
    uv run examples/browse.py catalog.json /browser/satellite/iss-zarya-25544

    # Rendering selection for a viewport over Europe, tracking the ISS
    uv run examples/browse.py catalog.json /browser/search \\
        --viewport -10,40,35,70 --max-count 50 --tracked iss-zarya-25544
"""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from satbrowser import (
    BrowserNavigator,
    BrowserRouter,
    CatalogQueryService,
    InMemoryCatalog,
    SatelliteRecord,
    ViewportBounds,
    select_for_frame,
)
from satbrowser.browser import (
    CategoriesResult,
    CategoryResults,
    RouteError,
    SatelliteDetail,
    SearchResults,
)


def _load_catalog(path: Path) -> InMemoryCatalog:
    raw = json.loads(path.read_text())
    return InMemoryCatalog(
        (SatelliteRecord.from_json_dict(d) for d in raw), fully_loaded=True
    )


def _parse_viewport(text: str) -> ViewportBounds:
    west, east, south, north = (float(v) for v in text.split(","))
    return ViewportBounds(west=west, east=east, south=south, north=north)


def main(
    catalog_file: Annotated[Path, typer.Argument(help="JSON array of catalog records")],
    path: Annotated[str, typer.Argument(help="Browser path, e.g. /browser/category")],
    viewport: Annotated[
        str | None,
        typer.Option(help="Viewport as west,east,south,north in degrees"),
    ] = None,
    max_count: Annotated[
        int | None, typer.Option(help="Maximum records to render (default from config)")
    ] = None,
    tracked: Annotated[str | None, typer.Option(help="Id of the tracked satellite")] = None,
    exclusive: Annotated[bool, typer.Option(help="Render only the tracked satellite")] = False,
    verbose: Annotated[bool, typer.Option(help="Enable debug logging")] = False,
) -> None:
    """Resolve a browser path against a catalog file."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    catalog = _load_catalog(catalog_file)
    navigator = BrowserNavigator(BrowserRouter(CatalogQueryService(catalog)))

    result = navigator.navigate(path)

    if isinstance(result, RouteError):
        print(f"ERROR: {result.message}")
        sys.exit(1)

    print(f"── {navigator.current_url()} ({result.type}) ──")
    if isinstance(result, CategoriesResult):
        for info in result.data:
            print(f"  {info.display_name:<20} {info.count:>6}  {info.description}")
    elif isinstance(result, (CategoryResults, SearchResults)):
        for record in result.data.satellites:
            print(f"  {record.id:<30} {record.name:<30} {record.category}")
        print(f"  {result.data.total_count} satellites")
    elif isinstance(result, SatelliteDetail):
        record = result.data
        print(f"  {record.name} [{record.category}]")
        print(f"  lat={record.position.lat:.3f} lng={record.position.lng:.3f}")
        print(f"  altitude={record.altitude:.1f} km velocity={record.velocity:.2f} km/s")

    if viewport is not None:
        selection = select_for_frame(
            catalog.get_all(),
            enabled_types={r.category for r in catalog.get_all()},
            max_count=max_count,
            tracked_id=tracked,
            exclusive=exclusive,
            bounds=_parse_viewport(viewport),
        )
        print(f"\n── Rendering selection: {len(selection)} satellites ──")
        for record in selection:
            print(f"  {record.id}")


if __name__ == "__main__":
    typer.run(main)
