"""
Strict decoders for GeoJSON geometry envelopes.

Decoding happens in two phases. ``Envelope.from_bytes`` sniffs the declared
``type``; the functions here then decode the untouched bytes into exactly one
record kind. Each ``decode_<kind>`` function is pure: it takes only the
envelope, checks the tag, and lets msgspec enforce the coordinate nesting
depth for that kind:

    Point                       0 (a single position)
    LineString, MultiPoint      1
    Polygon, MultiLineString    2
    MultiPolygon                3

GeometryCollections are expanded eagerly and recursively through the same
dispatch used at the top level, with an explicit nesting limit.
"""

import logging
from collections.abc import Callable

import msgspec

from .envelope import Envelope
from .errors import (
    CollectionDecodeError,
    GeoJSONError,
    NestingDepthError,
    ParseError,
    TypeMismatchError,
    UnknownGeometryTypeError,
)
from .geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

logger = logging.getLogger(__name__)

# Maximum GeometryCollection nesting accepted by default
DEFAULT_MAX_DEPTH = 32


class _RawCollection(msgspec.Struct):
    geometries: list[msgspec.Raw]


_record_decoders = {
    kind.__struct_config__.tag: msgspec.json.Decoder(kind)
    for kind in (Point, LineString, Polygon, MultiPoint, MultiLineString, MultiPolygon)
}
_collection_decoder = msgspec.json.Decoder(_RawCollection)


def _check_type(envelope: Envelope, expected: str) -> None:
    if envelope.type_tag != expected:
        raise TypeMismatchError(expected, envelope.type_tag)


def _decode_record(envelope: Envelope, kind: str):
    _check_type(envelope, kind)
    try:
        return _record_decoders[kind].decode(envelope.raw)
    except (msgspec.DecodeError, RecursionError) as e:
        raise ParseError(f"Invalid {kind}: {e}") from e


def decode_point(envelope: Envelope) -> Point:
    """
    Decode a Point envelope.

    Raises:
        TypeMismatchError: If the envelope is not a Point
        ParseError: If ``coordinates`` is missing or is not a single position
    """
    return _decode_record(envelope, "Point")


def decode_linestring(envelope: Envelope) -> LineString:
    """Decode a LineString envelope (a sequence of positions)."""
    return _decode_record(envelope, "LineString")


def decode_polygon(envelope: Envelope) -> Polygon:
    """Decode a Polygon envelope (a sequence of rings)."""
    return _decode_record(envelope, "Polygon")


def decode_multipoint(envelope: Envelope) -> MultiPoint:
    return _decode_record(envelope, "MultiPoint")


def decode_multilinestring(envelope: Envelope) -> MultiLineString:
    return _decode_record(envelope, "MultiLineString")


def decode_multipolygon(envelope: Envelope) -> MultiPolygon:
    """Decode a MultiPolygon envelope (a sequence of polygons' rings)."""
    return _decode_record(envelope, "MultiPolygon")


_KIND_DECODERS: dict[str, Callable[[Envelope], Geometry]] = {
    "Point": decode_point,
    "LineString": decode_linestring,
    "Polygon": decode_polygon,
    "MultiPoint": decode_multipoint,
    "MultiLineString": decode_multilinestring,
    "MultiPolygon": decode_multipolygon,
}


def _dispatch(envelope: Envelope, max_depth: int, depth: int) -> Geometry:
    if envelope.type_tag == "GeometryCollection":
        return _expand(envelope, max_depth, depth + 1)
    try:
        decoder = _KIND_DECODERS[envelope.type_tag]
    except KeyError:
        raise UnknownGeometryTypeError(envelope.type_tag) from None
    return decoder(envelope)


def _expand(envelope: Envelope, max_depth: int, depth: int) -> GeometryCollection:
    _check_type(envelope, "GeometryCollection")
    if depth > max_depth:
        logger.debug("GeometryCollection nesting limit %d reached", max_depth)
        raise NestingDepthError(max_depth)

    try:
        raw_collection = _collection_decoder.decode(envelope.raw)
    except (msgspec.DecodeError, RecursionError) as e:
        raise ParseError(f"Invalid GeometryCollection: {e}") from e

    raw_children = tuple(bytes(child) for child in raw_collection.geometries)
    logger.debug(
        "Expanding GeometryCollection at depth %d with %d children",
        depth,
        len(raw_children),
    )

    geometries: list[Geometry] = []
    for index, fragment in enumerate(raw_children):
        try:
            child = Envelope.from_bytes(fragment)
            geometries.append(_dispatch(child, max_depth, depth))
        except GeoJSONError as e:
            logger.debug("Child %d of GeometryCollection failed: %s", index, e)
            partial = GeometryCollection(
                raw_children=raw_children, geometries=tuple(geometries)
            )
            raise CollectionDecodeError(partial, index, e) from e

    return GeometryCollection(raw_children=raw_children, geometries=tuple(geometries))


def decode_collection(
    envelope: Envelope, max_depth: int = DEFAULT_MAX_DEPTH
) -> GeometryCollection:
    """
    Decode a GeometryCollection envelope and every child it contains.

    Children are decoded in document order through the same dispatch as
    ``decode``, so nested collections are expanded too. Expansion stops at
    the first child that fails; nothing is retried.

    Args:
        envelope: Envelope tagged ``GeometryCollection``
        max_depth: Deepest collection nesting accepted (this collection is 1)

    Returns:
        The collection with ``raw_children`` and fully decoded ``geometries``

    Raises:
        TypeMismatchError: If the envelope is not a GeometryCollection
        ParseError: If ``geometries`` is missing or malformed
        NestingDepthError: If collections nest deeper than ``max_depth``
        CollectionDecodeError: If a child fails; ``partial`` holds the
            children decoded before it
    """
    return _expand(envelope, max_depth, 1)


def decode(envelope: Envelope, max_depth: int = DEFAULT_MAX_DEPTH) -> Geometry:
    """
    Decode an envelope into the record matching its declared type.

    Raises:
        UnknownGeometryTypeError: If the type is not a geometry kind
        ParseError: If the bytes do not have the shape of that kind
    """
    return _dispatch(envelope, max_depth, 0)


class GeoJSONDecoder:
    """
    Decoder for GeoJSON geometry documents.

    Example:
        >>> decoder = GeoJSONDecoder(max_depth=4)
        >>> geom = decoder.decode(b'{"type": "Point", "coordinates": [102.0, 0.5]}')
        >>> geom.coordinates
        (102.0, 0.5)
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize the decoder.

        Args:
            max_depth: Deepest GeometryCollection nesting to accept
        """
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self.max_depth = max_depth

    def decode(self, data: bytes | bytearray | memoryview | str) -> Geometry:
        """Sniff and decode a GeoJSON geometry document"""
        return self.decode_envelope(Envelope.from_bytes(data))

    def decode_envelope(self, envelope: Envelope) -> Geometry:
        return decode(envelope, max_depth=self.max_depth)


def decode_geometry(
    data: bytes | bytearray | memoryview | str,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Geometry:
    """
    Convenience function to decode a GeoJSON geometry document.

    Example:
        >>> geom = decode_geometry(b'{"type": "LineString", "coordinates": [[0, 0], [1, 1]]}')
        >>> geom.type_name
        'LineString'
    """
    return GeoJSONDecoder(max_depth).decode(data)
