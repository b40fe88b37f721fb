"""Shared GeoJSON fixtures (RFC 7946 appendix examples)."""

import pytest

POINT = b"""{
    "type": "Point",
    "coordinates": [102.0, 0.5]
}"""

LINESTRING = b"""{
    "type": "LineString",
    "coordinates": [
        [102.0, 0.0],
        [103.0, 1.0],
        [104.0, 0.0],
        [105.0, 1.0]
    ]
}"""

POLYGON = b"""{
    "type": "Polygon",
    "coordinates": [
        [
            [100.0, 0.0],
            [101.0, 0.0],
            [101.0, 1.0],
            [100.0, 1.0],
            [100.0, 0.0]
        ]
    ]
}"""

POLYGON_WITH_HOLE = b"""{
    "type": "Polygon",
    "coordinates": [
        [[100.0, 0.0], [101.0, 0.0], [101.0, 1.0], [100.0, 1.0], [100.0, 0.0]],
        [[100.8, 0.8], [100.8, 0.2], [100.2, 0.2], [100.2, 0.8], [100.8, 0.8]]
    ]
}"""

MULTIPOINT = b"""{
    "type": "MultiPoint",
    "coordinates": [
        [100.0, 0.0],
        [101.0, 1.0]
    ]
}"""

MULTILINESTRING = b"""{
    "type": "MultiLineString",
    "coordinates": [
        [[100.0, 0.0], [101.0, 1.0]],
        [[102.0, 2.0], [103.0, 3.0]]
    ]
}"""

MULTIPOLYGON = b"""{
    "type": "MultiPolygon",
    "coordinates": [
        [
            [
                [180.0, 40.0], [180.0, 50.0], [170.0, 50.0],
                [170.0, 40.0], [180.0, 40.0]
            ]
        ],
        [
            [
                [-170.0, 40.0], [-170.0, 50.0], [-180.0, 50.0],
                [-180.0, 40.0], [-170.0, 40.0]
            ]
        ]
    ]
}"""

GEOMETRY_COLLECTION = b"""{
    "type": "GeometryCollection",
    "geometries": [{
        "type": "Point",
        "coordinates": [100.0, 0.0]
    }, {
        "type": "LineString",
        "coordinates": [
            [101.0, 0.0],
            [102.0, 1.0]
        ]
    }]
}"""

FIXTURES = {
    "Point": POINT,
    "LineString": LINESTRING,
    "Polygon": POLYGON,
    "MultiPoint": MULTIPOINT,
    "MultiLineString": MULTILINESTRING,
    "MultiPolygon": MULTIPOLYGON,
    "GeometryCollection": GEOMETRY_COLLECTION,
}


@pytest.fixture
def geojson_fixtures() -> dict[str, bytes]:
    """Well-formed documents keyed by their geometry type."""
    return dict(FIXTURES)


@pytest.fixture
def polygon_with_hole() -> bytes:
    return POLYGON_WITH_HOLE


def nested_collection(depth: int) -> bytes:
    """A GeometryCollection nested ``depth`` levels deep around one Point."""
    doc = b'{"type": "Point", "coordinates": [1.0, 2.0]}'
    for _ in range(depth):
        doc = b'{"type": "GeometryCollection", "geometries": [' + doc + b"]}"
    return doc


@pytest.fixture
def make_nested_collection():
    return nested_collection
