"""
Conversion of decoded GeoJSON records into spherical-geometry primitives.

GeoJSON positions are ``[longitude, latitude]``. The spherical backend takes
``(latitude, longitude)``, so every projection passes ``coordinate[1]`` first
and ``coordinate[0]`` second. Nothing else in this module reorders axes.

Rings are turned into loops with the closing position dropped: GeoJSON rings
repeat their first position at the end, spherical loops are implicitly closed.
A loop needs at least 3 points after that, and a polygon can currently be
built from exactly one loop; both limits are checked here before the backend
is called.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

import s2sphere

from .errors import StructuralError, TypeMismatchError, UnsupportedOperationError
from .geometry import (
    Geometry,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

logger = logging.getLogger(__name__)

# Fewest distinct vertices a spherical loop can have
MIN_LOOP_POINTS = 3


@dataclass(frozen=True)
class SphericalLoop:
    """A closed loop of unit-sphere points; the last point joins the first"""

    vertices: tuple[s2sphere.Point, ...]

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[s2sphere.Point]:
        return iter(self.vertices)


@dataclass(frozen=True)
class SphericalPolygon:
    """A spherical polygon; only single-loop polygons are supported"""

    loops: tuple[SphericalLoop, ...]

    @property
    def loop(self) -> SphericalLoop:
        return self.loops[0]

    @property
    def num_loops(self) -> int:
        return len(self.loops)


class SphericalBackend(Protocol):
    """The spherical-geometry operations the builder depends on"""

    def latlng_from_degrees(self, lat: float, lng: float) -> Any: ...

    def point_from_latlng(self, latlng: Any) -> Any: ...

    def latlng_from_point(self, point: Any) -> Any: ...

    def loop_from_points(self, points: Sequence[Any]) -> Any: ...

    def polygon_from_loops(self, loops: Sequence[Any]) -> Any: ...

    def cell_id_from_latlng(self, latlng: Any, level: int | None = None) -> Any: ...


class S2SphereBackend:
    """
    Spherical backend built on s2sphere.

    s2sphere provides points, lat/lngs and cell ids; loops and polygons are
    the immutable ``SphericalLoop`` / ``SphericalPolygon`` values above.
    """

    def latlng_from_degrees(self, lat: float, lng: float) -> s2sphere.LatLng:
        return s2sphere.LatLng.from_degrees(lat, lng)

    def point_from_latlng(self, latlng: s2sphere.LatLng) -> s2sphere.Point:
        return latlng.to_point()

    def latlng_from_point(self, point: s2sphere.Point) -> s2sphere.LatLng:
        return s2sphere.LatLng.from_point(point)

    def loop_from_points(self, points: Sequence[s2sphere.Point]) -> SphericalLoop:
        if len(points) < MIN_LOOP_POINTS:
            raise StructuralError(
                f"A loop needs at least {MIN_LOOP_POINTS} points, got {len(points)}"
            )
        return SphericalLoop(vertices=tuple(points))

    def polygon_from_loops(self, loops: Sequence[SphericalLoop]) -> SphericalPolygon:
        if not loops:
            raise StructuralError("A polygon needs at least one loop")
        if len(loops) > 1:
            raise UnsupportedOperationError(
                f"Polygons with more than one loop are not supported, got {len(loops)}"
            )
        return SphericalPolygon(loops=tuple(loops))

    def cell_id_from_latlng(
        self, latlng: s2sphere.LatLng, level: int | None = None
    ) -> s2sphere.CellId:
        cell_id = s2sphere.CellId.from_lat_lng(latlng)
        if level is not None:
            cell_id = cell_id.parent(level)
        return cell_id


class SphericalBuilder:
    """
    Builds spherical points, loops and polygons from decoded records.

    Example:
        >>> builder = SphericalBuilder()
        >>> line = LineString(((102.0, 0.0), (103.0, 1.0)))
        >>> len(builder.points_from(line.coordinates))
        2
    """

    def __init__(self, backend: SphericalBackend | None = None):
        """
        Initialize the builder.

        Args:
            backend: Spherical-geometry implementation. If None, uses
                ``S2SphereBackend``.
        """
        self.backend = backend or S2SphereBackend()

    def latlng(self, coordinate: Sequence[float]) -> Any:
        """Backend lat/lng for a GeoJSON ``[lng, lat]`` position"""
        return self.backend.latlng_from_degrees(coordinate[1], coordinate[0])

    def project(self, coordinate: Sequence[float]) -> Any:
        """
        Project one GeoJSON position onto the unit sphere.

        Values outside the valid latitude/longitude ranges are passed through
        to the backend unchanged.
        """
        return self.backend.point_from_latlng(self.latlng(coordinate))

    def points_from(self, coordinates: Iterable[Sequence[float]]) -> list[Any]:
        """Project every position, keeping order and duplicates"""
        return [self.project(c) for c in coordinates]

    def loop_from(self, ring: Sequence[Sequence[float]]) -> Any:
        """
        Build a loop from a ring.

        The last position is dropped when it repeats the first one.

        Raises:
            StructuralError: If fewer than 3 points remain
        """
        if len(ring) > 1 and tuple(ring[0][:2]) == tuple(ring[-1][:2]):
            ring = ring[:-1]
        points = self.points_from(ring)
        if len(points) < MIN_LOOP_POINTS:
            raise StructuralError(
                f"A loop needs at least {MIN_LOOP_POINTS} distinct points, "
                f"got {len(points)}"
            )
        return self.backend.loop_from_points(points)

    def polygon_from(self, polygon: Polygon) -> Any:
        """
        Build a spherical polygon from a Polygon record.

        Raises:
            TypeMismatchError: If ``polygon`` is not a Polygon record
            StructuralError: If the polygon has no rings or a ring is too short
            UnsupportedOperationError: If the polygon has holes; the backend
                only builds single-loop polygons
        """
        if not isinstance(polygon, Polygon):
            raise TypeMismatchError("Polygon", polygon.type_name)
        if not polygon.rings:
            raise StructuralError("Polygon has no rings")
        loops = [self.loop_from(ring) for ring in polygon.rings]
        if len(loops) > 1:
            raise UnsupportedOperationError(
                f"Polygons with more than one ring are not supported, got {len(loops)}"
            )
        return self.backend.polygon_from_loops(loops)

    def multi_linestring_points(self, record: MultiLineString) -> list[list[Any]]:
        """Project every line of a MultiLineString, one point list per line"""
        if not isinstance(record, MultiLineString):
            raise TypeMismatchError("MultiLineString", record.type_name)
        return [self.points_from(line) for line in record.coordinates]

    def multi_polygon_polygons(self, record: MultiPolygon) -> list[Any]:
        """Build one spherical polygon per member of a MultiPolygon"""
        if not isinstance(record, MultiPolygon):
            raise TypeMismatchError("MultiPolygon", record.type_name)
        return [self.polygon_from(poly) for poly in record.polygons]

    def point_from(self, geom: Geometry) -> Any:
        """Spherical point for a Point record"""
        if not isinstance(geom, Point):
            raise TypeMismatchError("Point", geom.type_name)
        return self.project(geom.coordinates)

    def point_sequence(self, geom: Geometry) -> list[Any]:
        """Spherical points for a LineString or MultiPoint record"""
        if not isinstance(geom, LineString | MultiPoint):
            raise TypeMismatchError("LineString or MultiPoint", geom.type_name)
        return self.points_from(geom.coordinates)

    def cell_ids(self, geom: Geometry, level: int | None = None) -> list[Any]:
        """
        Cell id of every vertex of a geometry, in document order.

        Collections are flattened. Ring closing positions are included.

        Args:
            geom: Any decoded record
            level: Cell level to return; None for leaf cells
        """
        cells = [
            self.backend.cell_id_from_latlng(self.latlng(c), level)
            for c in geom.iter_coordinates()
        ]
        logger.debug("Computed %d cell ids for %s", len(cells), geom.type_name)
        return cells


# Module-level convenience functions using the default backend.
_default = SphericalBuilder()


def project(coordinate: Sequence[float]) -> Any:
    return _default.project(coordinate)


def points_from(coordinates: Iterable[Sequence[float]]) -> list[Any]:
    return _default.points_from(coordinates)


def loop_from(ring: Sequence[Sequence[float]]) -> Any:
    return _default.loop_from(ring)


def polygon_from(polygon: Polygon) -> Any:
    return _default.polygon_from(polygon)


def multi_linestring_points(record: MultiLineString) -> list[list[Any]]:
    return _default.multi_linestring_points(record)


def multi_polygon_polygons(record: MultiPolygon) -> list[Any]:
    return _default.multi_polygon_polygons(record)


def cell_ids(geom: Geometry, level: int | None = None) -> list[Any]:
    return _default.cell_ids(geom, level)
