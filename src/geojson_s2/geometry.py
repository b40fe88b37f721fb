"""
Typed records for the seven GeoJSON geometry kinds.

Records are frozen ``msgspec.Struct`` types tagged with their GeoJSON ``type``
name, so they can be strictly decoded straight from the raw document bytes.
Coordinates are kept exactly as the document declares them: ``(x, y[, z])``
with x = longitude and y = latitude.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Annotated

import msgspec

# A position is two or more numbers; anything past the second is carried along
# untouched (usually altitude).
Coordinate = Annotated[tuple[float, ...], msgspec.Meta(min_length=2)]
CoordinateSequence = tuple[Coordinate, ...]
Ring = CoordinateSequence

GEOMETRY_TYPES = (
    "Point",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeometryCollection",
)


@dataclass(frozen=True)
class BoundingBox:
    """Geometry bounding box in document coordinates"""

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.xmin, self.ymin, self.xmax, self.ymax))


def _bounds_of(coords: Iterator[Coordinate]) -> BoundingBox | None:
    xs: list[float] = []
    ys: list[float] = []
    for c in coords:
        xs.append(c[0])
        ys.append(c[1])
    if not xs:
        return None
    return BoundingBox(min(xs), min(ys), max(xs), max(ys))


class _Record(msgspec.Struct, frozen=True):
    @property
    def type_name(self) -> str:
        """The GeoJSON ``type`` this record was decoded from"""
        return self.__struct_config__.tag

    def iter_coordinates(self) -> Iterator[Coordinate]:
        """Yield every position in document order"""
        raise NotImplementedError

    @property
    def has_z(self) -> bool:
        return any(len(c) > 2 for c in self.iter_coordinates())

    @property
    def bounds(self) -> BoundingBox | None:
        """Bounding box of every vertex, or None for an empty geometry"""
        return _bounds_of(self.iter_coordinates())


class Point(_Record, frozen=True, tag=True):
    """A single position"""

    coordinates: Coordinate

    @property
    def x(self) -> float:
        return self.coordinates[0]

    @property
    def y(self) -> float:
        return self.coordinates[1]

    @property
    def z(self) -> float | None:
        return self.coordinates[2] if len(self.coordinates) > 2 else None

    def iter_coordinates(self) -> Iterator[Coordinate]:
        yield self.coordinates


class LineString(_Record, frozen=True, tag=True):
    """A path; coordinate order is the path order"""

    coordinates: CoordinateSequence

    def iter_coordinates(self) -> Iterator[Coordinate]:
        return iter(self.coordinates)

    def __len__(self) -> int:
        return len(self.coordinates)


class MultiPoint(_Record, frozen=True, tag=True):
    """An ordered set of positions"""

    coordinates: CoordinateSequence

    def iter_coordinates(self) -> Iterator[Coordinate]:
        return iter(self.coordinates)

    def __len__(self) -> int:
        return len(self.coordinates)

    def __iter__(self) -> Iterator[Point]:
        return (Point(c) for c in self.coordinates)


class Polygon(_Record, frozen=True, tag=True):
    """A polygon: ring 0 is the exterior, the rest are holes"""

    coordinates: tuple[Ring, ...]

    @property
    def rings(self) -> tuple[Ring, ...]:
        return self.coordinates

    @property
    def exterior(self) -> Ring:
        """The exterior ring (first ring)"""
        return self.coordinates[0] if self.coordinates else ()

    @property
    def interiors(self) -> tuple[Ring, ...]:
        """Interior rings (holes)"""
        return self.coordinates[1:]

    def iter_coordinates(self) -> Iterator[Coordinate]:
        for ring in self.coordinates:
            yield from ring


class MultiLineString(_Record, frozen=True, tag=True):
    """Multiple line strings"""

    coordinates: tuple[CoordinateSequence, ...]

    @property
    def lines(self) -> tuple[LineString, ...]:
        return tuple(LineString(line) for line in self.coordinates)

    def iter_coordinates(self) -> Iterator[Coordinate]:
        for line in self.coordinates:
            yield from line

    def __len__(self) -> int:
        return len(self.coordinates)

    def __iter__(self) -> Iterator[LineString]:
        return iter(self.lines)


class MultiPolygon(_Record, frozen=True, tag=True):
    """Multiple polygons"""

    coordinates: tuple[tuple[Ring, ...], ...]

    @property
    def polygons(self) -> tuple[Polygon, ...]:
        return tuple(Polygon(rings) for rings in self.coordinates)

    def iter_coordinates(self) -> Iterator[Coordinate]:
        for rings in self.coordinates:
            for ring in rings:
                yield from ring

    def __len__(self) -> int:
        return len(self.coordinates)

    def __iter__(self) -> Iterator[Polygon]:
        return iter(self.polygons)


class GeometryCollection(_Record, frozen=True, tag=True):
    """
    A heterogeneous collection of geometries.

    Attributes:
        raw_children: Every child exactly as it appeared in the document
        geometries: The decoded children, in document order. Shorter than
            ``raw_children`` only when expansion stopped on a bad child.
    """

    raw_children: tuple[bytes, ...] = ()
    geometries: "tuple[Geometry, ...]" = ()

    @property
    def complete(self) -> bool:
        return len(self.geometries) == len(self.raw_children)

    def iter_coordinates(self) -> Iterator[Coordinate]:
        for geom in self.geometries:
            yield from geom.iter_coordinates()

    def __len__(self) -> int:
        return len(self.geometries)

    def __iter__(self) -> "Iterator[Geometry]":
        return iter(self.geometries)


# Type alias for any geometry
Geometry = (
    Point
    | LineString
    | Polygon
    | MultiPoint
    | MultiLineString
    | MultiPolygon
    | GeometryCollection
)
