"""Tests for type sniffing and the generic map view."""

import pytest

from geojson_s2 import GEOMETRY_TYPES, Envelope, ParseError, as_map


class TestEnvelope:
    @pytest.mark.parametrize("kind", GEOMETRY_TYPES)
    def test_sniffs_type_and_keeps_raw(self, geojson_fixtures, kind):
        data = geojson_fixtures[kind]
        env = Envelope.from_bytes(data)
        assert env.type_tag == kind
        assert env.raw == data

    def test_str_input_is_utf8_encoded(self):
        env = Envelope.from_bytes('{"type": "Point", "coordinates": [1, 2]}')
        assert env.raw == b'{"type": "Point", "coordinates": [1, 2]}'

    def test_bytearray_input_is_copied(self):
        data = bytearray(b'{"type": "Point", "coordinates": [1, 2]}')
        env = Envelope.from_bytes(data)
        data[0:1] = b" "
        assert env.raw.startswith(b"{")

    def test_unknown_type_is_sniffed(self):
        env = Envelope.from_bytes(b'{"type": "Feature", "geometry": null}')
        assert env.type_tag == "Feature"

    def test_missing_type(self):
        with pytest.raises(ParseError):
            Envelope.from_bytes(b'{"coordinates": [1, 2]}')

    def test_non_string_type(self):
        with pytest.raises(ParseError):
            Envelope.from_bytes(b'{"type": 7, "coordinates": [1, 2]}')

    def test_malformed_json(self):
        with pytest.raises(ParseError):
            Envelope.from_bytes(b'{"type": "Point", "coordinates": [1,')

    def test_not_an_object(self):
        with pytest.raises(ParseError):
            Envelope.from_bytes(b"[1, 2]")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            Envelope.from_bytes(b"")

    def test_envelope_is_immutable(self, geojson_fixtures):
        env = Envelope.from_bytes(geojson_fixtures["Point"])
        with pytest.raises(AttributeError):
            env.type_tag = "LineString"


class TestAsMap:
    def test_point_coordinates_unchanged(self, geojson_fixtures):
        env = Envelope.from_bytes(geojson_fixtures["Point"])
        geomap = as_map(env)
        assert geomap["type"] == "Point"
        assert geomap["coordinates"] == [102.0, 0.5]

    def test_keeps_unknown_fields(self):
        env = Envelope.from_bytes(
            b'{"type": "Point", "coordinates": [1, 2], "bbox": [1, 2, 1, 2]}'
        )
        assert as_map(env)["bbox"] == [1, 2, 1, 2]

    def test_collection_children_are_plain_dicts(self, geojson_fixtures):
        env = Envelope.from_bytes(geojson_fixtures["GeometryCollection"])
        geomap = as_map(env)
        assert [g["type"] for g in geomap["geometries"]] == ["Point", "LineString"]

    def test_malformed_raw(self):
        env = Envelope(type_tag="Point", raw=b'{"type": "Point", "coord')
        with pytest.raises(ParseError):
            as_map(env)

    def test_deeply_nested_raw(self):
        deep = b"[" * 200_000 + b"]" * 200_000
        raw = b'{"type": "Point", "coordinates": ' + deep + b"}"
        env = Envelope(type_tag="Point", raw=raw)
        with pytest.raises(ParseError):
            as_map(env)
