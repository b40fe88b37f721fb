"""
Command-line interface for geojson-s2.

Usage:
    geojson-s2 info <geometry.geojson> [--json]
    geojson-s2 cells <geometry.geojson> [--level LEVEL]
    geojson-s2 wkt <geometry.geojson>
"""

import json
import logging
import sys
from pathlib import Path

import click
from shapely.errors import ShapelyError

from .converters import to_wkt
from .decoder import DEFAULT_MAX_DEPTH, GeoJSONDecoder
from .errors import CollectionDecodeError, GeoJSONError
from .geometry import Geometry, GeometryCollection
from .spherical import SphericalBuilder

logger = logging.getLogger(__name__)


def _load(path: str, max_depth: int) -> Geometry:
    """Decode a geometry file, exiting with status 1 on bad input."""
    data = Path(path).read_bytes()
    logger.debug("Decoding %s (%d bytes)", path, len(data))
    try:
        return GeoJSONDecoder(max_depth).decode(data)
    except CollectionDecodeError as e:
        click.echo(f"Error decoding geometry: {e}", err=True)
        click.echo(
            f"Decoded {len(e.partial.geometries)} of "
            f"{len(e.partial.raw_children)} children before the failure",
            err=True,
        )
        sys.exit(1)
    except GeoJSONError as e:
        click.echo(f"Error decoding geometry: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(package_name="geojson-s2")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """
    Decode GeoJSON geometries and map them onto the sphere.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("geometry", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option(
    "--max-depth",
    type=int,
    default=DEFAULT_MAX_DEPTH,
    show_default=True,
    help="Deepest GeometryCollection nesting to accept",
)
def info(geometry: str, output_json: bool, max_depth: int):
    """
    Display information about a GeoJSON geometry file.

    Shows the geometry type, vertex count, bounds and collection children.
    """
    geom = _load(geometry, max_depth)
    bounds = geom.bounds
    vertex_count = sum(1 for _ in geom.iter_coordinates())

    if output_json:
        data: dict[str, str | int | bool | list[float] | list[str] | None] = {
            "path": geometry,
            "type": geom.type_name,
            "vertices": vertex_count,
            "has_z": geom.has_z,
            "bounds": list(bounds) if bounds else None,
        }
        if isinstance(geom, GeometryCollection):
            data["children"] = [g.type_name for g in geom.geometries]
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(f"Geometry: {Path(geometry).name}")
    click.echo(f"Type: {geom.type_name}")
    click.echo(f"Vertices: {vertex_count:,}")
    if bounds:
        click.echo(
            f"Bounds: {bounds.xmin}, {bounds.ymin}, {bounds.xmax}, {bounds.ymax}"
        )
    if isinstance(geom, GeometryCollection):
        click.echo(f"Children: {len(geom.geometries)}")
        for i, child in enumerate(geom.geometries):
            click.echo(f"  {i}: {child.type_name}")


@main.command()
@click.argument("geometry", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--level",
    "-l",
    type=click.IntRange(0, 30),
    help="Cell level (default: leaf cells)",
)
def cells(geometry: str, level: int | None):
    """
    Print the S2 cell token of every vertex.

    One token per line, in document order. Suitable for scripting.

    Example:
        geojson-s2 cells river.geojson --level 12
    """
    geom = _load(geometry, DEFAULT_MAX_DEPTH)
    for cell_id in SphericalBuilder().cell_ids(geom, level):
        click.echo(cell_id.to_token())


@main.command()
@click.argument("geometry", type=click.Path(exists=True, dir_okay=False))
def wkt(geometry: str):
    """
    Print a GeoJSON geometry as Well-Known Text.
    """
    geom = _load(geometry, DEFAULT_MAX_DEPTH)
    try:
        click.echo(to_wkt(geom))
    except (ValueError, ShapelyError) as e:
        click.echo(f"Error converting geometry: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
