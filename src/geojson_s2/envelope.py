"""
Type sniffing for raw GeoJSON geometry documents.

An ``Envelope`` pairs the declared ``type`` of a document with the document's
original bytes. Building one decodes nothing but the ``type`` field; strict
decoding into a record is deferred to the kind-specific decoders.
"""

from dataclasses import dataclass
from typing import Any

import msgspec

from .errors import ParseError


class _TypeField(msgspec.Struct):
    type: str


_type_decoder = msgspec.json.Decoder(_TypeField)
_map_decoder = msgspec.json.Decoder(dict[str, Any])


@dataclass(frozen=True)
class Envelope:
    """
    A GeoJSON document's declared type plus its untouched bytes.

    Attributes:
        type_tag: Value of the document's ``type`` field
        raw: The document exactly as given, never re-encoded

    Example:
        >>> env = Envelope.from_bytes(b'{"type": "Point", "coordinates": [1, 2]}')
        >>> env.type_tag
        'Point'
    """

    type_tag: str
    raw: bytes

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview | str) -> "Envelope":
        """
        Sniff the ``type`` of a GeoJSON document.

        Args:
            data: The encoded document. ``str`` input is UTF-8 encoded.

        Returns:
            An Envelope holding the type tag and a copy of the input bytes

        Raises:
            ParseError: If the input is not a JSON object with a string
                ``type`` field
        """
        raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        try:
            header = _type_decoder.decode(raw)
        except (msgspec.DecodeError, RecursionError) as e:
            raise ParseError(f"Invalid GeoJSON geometry: {e}") from e
        return cls(type_tag=header.type, raw=raw)

    def __repr__(self) -> str:
        return f"Envelope(type_tag={self.type_tag!r}, raw=<{len(self.raw)} bytes>)"


def as_map(envelope: Envelope) -> dict[str, Any]:
    """
    Decode an envelope into a plain dict for ad hoc field access.

    Nothing is checked against the strict record shapes; coordinates come
    back as nested lists in document order.

    Raises:
        ParseError: If the raw bytes are not a JSON object
    """
    try:
        return _map_decoder.decode(envelope.raw)
    except (msgspec.DecodeError, RecursionError) as e:
        raise ParseError(f"Invalid GeoJSON geometry: {e}") from e
