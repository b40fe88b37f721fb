"""
Exception hierarchy for GeoJSON decoding and spherical construction.

All errors derive from ``GeoJSONError``, which is a ``ValueError`` so callers
that already guard bad input with ``except ValueError`` keep working.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .geometry import GeometryCollection


class GeoJSONError(ValueError):
    """Base class for all errors raised by this library"""


class ParseError(GeoJSONError):
    """Input is not well-formed JSON or does not have the expected shape"""


class UnknownGeometryTypeError(ParseError):
    """The declared ``type`` is not one of the seven geometry kinds"""

    def __init__(self, type_tag: str):
        super().__init__(f"Unsupported geometry type: {type_tag!r}")
        self.type_tag = type_tag


class NestingDepthError(ParseError):
    """GeometryCollections are nested deeper than the configured limit"""

    def __init__(self, max_depth: int):
        super().__init__(
            f"GeometryCollection nesting exceeds maximum depth of {max_depth}"
        )
        self.max_depth = max_depth


class CollectionDecodeError(ParseError):
    """
    A child of a GeometryCollection failed to decode.

    Expansion stops at the first failing child. The children decoded before
    it are kept in ``partial`` so callers can still use them.

    Attributes:
        partial: Collection holding every raw child and the decoded prefix
        index: Position of the failing child
        error: The child's own error
    """

    def __init__(
        self, partial: "GeometryCollection", index: int, error: GeoJSONError
    ):
        super().__init__(f"Child geometry {index} failed to decode: {error}")
        self.partial = partial
        self.index = index
        self.error = error


class TypeMismatchError(GeoJSONError):
    """A kind-specific operation was given a geometry of another kind"""

    def __init__(self, expected: str, actual: str):
        super().__init__(f"Can't create a {expected} from type={actual!r}")
        self.expected = expected
        self.actual = actual


class StructuralError(GeoJSONError):
    """Geometry is well-formed but cannot be built on the sphere"""


class UnsupportedOperationError(GeoJSONError):
    """Conversion exceeds what the spherical-geometry layer supports"""
