"""
geojson-s2

Decode GeoJSON geometries into typed records and build S2 spherical
primitives from them.

Decoding is two-phase: an ``Envelope`` sniffs the declared ``type`` and keeps
the raw bytes, then a kind-specific decoder strictly decodes them.

Example:
    >>> from geojson_s2 import Envelope, decode, SphericalBuilder
    >>>
    >>> env = Envelope.from_bytes(b'{"type": "LineString", "coordinates": [[102, 0], [103, 1]]}')
    >>> line = decode(env)
    >>> points = SphericalBuilder().points_from(line.coordinates)

CLI Example:
    $ geojson-s2 info river.geojson
    $ geojson-s2 cells river.geojson --level 12
"""

__version__ = "0.1.0"

from .geometry import (
    GEOMETRY_TYPES,
    BoundingBox,
    Coordinate,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

from .errors import (
    CollectionDecodeError,
    GeoJSONError,
    NestingDepthError,
    ParseError,
    StructuralError,
    TypeMismatchError,
    UnknownGeometryTypeError,
    UnsupportedOperationError,
)

from .envelope import (
    Envelope,
    as_map,
)

from .decoder import (
    DEFAULT_MAX_DEPTH,
    GeoJSONDecoder,
    decode,
    decode_collection,
    decode_geometry,
    decode_linestring,
    decode_multilinestring,
    decode_multipoint,
    decode_multipolygon,
    decode_point,
    decode_polygon,
)

from .spherical import (
    S2SphereBackend,
    SphericalBackend,
    SphericalBuilder,
    SphericalLoop,
    SphericalPolygon,
)

from .converters import (
    geometry_to_shapely,
    to_geojson_geometry,
    to_wkt,
)

__all__ = [
    # Version
    "__version__",
    # Geometry types
    "GEOMETRY_TYPES",
    "BoundingBox",
    "Coordinate",
    "Geometry",
    "GeometryCollection",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    # Errors
    "CollectionDecodeError",
    "GeoJSONError",
    "NestingDepthError",
    "ParseError",
    "StructuralError",
    "TypeMismatchError",
    "UnknownGeometryTypeError",
    "UnsupportedOperationError",
    # Envelope
    "Envelope",
    "as_map",
    # Decoder
    "DEFAULT_MAX_DEPTH",
    "GeoJSONDecoder",
    "decode",
    "decode_collection",
    "decode_geometry",
    "decode_linestring",
    "decode_multilinestring",
    "decode_multipoint",
    "decode_multipolygon",
    "decode_point",
    "decode_polygon",
    # Spherical
    "S2SphereBackend",
    "SphericalBackend",
    "SphericalBuilder",
    "SphericalLoop",
    "SphericalPolygon",
    # Converters
    "geometry_to_shapely",
    "to_geojson_geometry",
    "to_wkt",
]
