"""
Output format converters for decoded geometry records.

This module provides functions to convert records to:
- GeoJSON geometry dictionaries
- Shapely geometries
- WKT (Well-Known Text, via Shapely)
"""

from typing import Any

import msgspec
from shapely.geometry import (
    GeometryCollection as ShapelyGeometryCollection,
)
from shapely.geometry import (
    LineString as ShapelyLineString,
)
from shapely.geometry import (
    MultiLineString as ShapelyMultiLineString,
)
from shapely.geometry import (
    MultiPoint as ShapelyMultiPoint,
)
from shapely.geometry import (
    MultiPolygon as ShapelyMultiPolygon,
)
from shapely.geometry import (
    Point as ShapelyPoint,
)
from shapely.geometry import (
    Polygon as ShapelyPolygon,
)
from shapely.geometry.base import BaseGeometry

from .geometry import (
    Coordinate,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Ring,
)


def to_geojson_geometry(geom: Geometry) -> dict[str, Any]:
    """
    Convert a record back to a GeoJSON geometry dictionary.

    Coordinates are emitted exactly as decoded, including any altitude.

    Example:
        >>> to_geojson_geometry(Point((102.0, 0.5)))
        {'type': 'Point', 'coordinates': [102.0, 0.5]}
    """
    if isinstance(geom, GeometryCollection):
        return {
            "type": "GeometryCollection",
            "geometries": [to_geojson_geometry(g) for g in geom.geometries],
        }
    return msgspec.json.decode(msgspec.json.encode(geom))


def _shapely_coord(coord: Coordinate) -> tuple[float, ...]:
    # Shapely handles at most x, y, z
    return tuple(coord[:3])


def _ring_coords(ring: Ring) -> list[tuple[float, ...]]:
    return [_shapely_coord(c) for c in ring]


def _polygon_to_shapely(rings: tuple[Ring, ...]) -> ShapelyPolygon:
    """Convert polygon rings to a Shapely Polygon."""
    if not rings:
        return ShapelyPolygon()
    shell = _ring_coords(rings[0])
    holes = [_ring_coords(ring) for ring in rings[1:]]
    return ShapelyPolygon(shell, holes if holes else None)


def geometry_to_shapely(geom: Geometry) -> BaseGeometry:
    """
    Convert a record to a Shapely geometry.

    Args:
        geom: Decoded geometry record

    Returns:
        Corresponding Shapely geometry object
    """
    if isinstance(geom, Point):
        return ShapelyPoint(_shapely_coord(geom.coordinates))

    if isinstance(geom, LineString):
        return ShapelyLineString(_ring_coords(geom.coordinates))

    if isinstance(geom, Polygon):
        return _polygon_to_shapely(geom.rings)

    if isinstance(geom, MultiPoint):
        return ShapelyMultiPoint(_ring_coords(geom.coordinates))

    if isinstance(geom, MultiLineString):
        return ShapelyMultiLineString([_ring_coords(line) for line in geom.coordinates])

    if isinstance(geom, MultiPolygon):
        return ShapelyMultiPolygon(
            [_polygon_to_shapely(rings) for rings in geom.coordinates]
        )

    # GeometryCollection is the only remaining case
    assert isinstance(geom, GeometryCollection)
    return ShapelyGeometryCollection([geometry_to_shapely(g) for g in geom.geometries])


def to_wkt(geom: Geometry) -> str:
    """
    Convert a record to Well-Known Text (WKT) format.

    Example:
        >>> to_wkt(Point((-122.0, 47.0)))
        'POINT (-122 47)'
    """
    return geometry_to_shapely(geom).wkt
