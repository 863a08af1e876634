# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Typed tag values

A Value is an already-decoded TIFF/EXIF tag value: a type code plus one or
more elements. The outer IFD parser builds Values; the MakerNote printers
only read them. Values are immutable and safe to share between threads.

Copyright 2025 DNAi inc.
"""

import struct
from enum import IntEnum
from typing import Any, Tuple, Union

from mnexif.exceptions import InvalidValueError


class TypeId(IntEnum):
    """EXIF tag data types"""
    BYTE = 1
    ASCII = 2
    SHORT = 3
    LONG = 4
    RATIONAL = 5
    SBYTE = 6
    UNDEFINED = 7
    SSHORT = 8
    SLONG = 9
    SRATIONAL = 10
    FLOAT = 11
    DOUBLE = 12


# EXIF tag sizes in bytes (per element)
TYPE_SIZES = {
    TypeId.BYTE: 1,
    TypeId.ASCII: 1,
    TypeId.SHORT: 2,
    TypeId.LONG: 4,
    TypeId.RATIONAL: 8,
    TypeId.SBYTE: 1,
    TypeId.UNDEFINED: 1,
    TypeId.SSHORT: 2,
    TypeId.SLONG: 4,
    TypeId.SRATIONAL: 8,
    TypeId.FLOAT: 4,
    TypeId.DOUBLE: 8,
}

# struct format characters for one element
_STRUCT_CODES = {
    TypeId.BYTE: 'B',
    TypeId.SHORT: 'H',
    TypeId.LONG: 'I',
    TypeId.RATIONAL: 'II',
    TypeId.SBYTE: 'b',
    TypeId.UNDEFINED: 'B',
    TypeId.SSHORT: 'h',
    TypeId.SLONG: 'i',
    TypeId.SRATIONAL: 'ii',
    TypeId.FLOAT: 'f',
    TypeId.DOUBLE: 'd',
}

INTEGER_TYPES = frozenset({
    TypeId.BYTE, TypeId.SHORT, TypeId.LONG, TypeId.SBYTE,
    TypeId.UNDEFINED, TypeId.SSHORT, TypeId.SLONG,
})
RATIONAL_TYPES = frozenset({TypeId.RATIONAL, TypeId.SRATIONAL})
FLOAT_TYPES = frozenset({TypeId.FLOAT, TypeId.DOUBLE})
BYTE_TYPES = frozenset({TypeId.BYTE, TypeId.UNDEFINED})

Element = Union[int, float, Tuple[int, int]]


def _coerce_type(type_id: Any) -> TypeId:
    try:
        return TypeId(type_id)
    except ValueError:
        raise InvalidValueError(f"Unsupported tag type: {type_id!r}")


class Value:
    """
    Immutable typed tag value.

    Elements are stored according to the type:
    - integer types: ints (BYTE/UNDEFINED may be given as bytes)
    - RATIONAL/SRATIONAL: (numerator, denominator) pairs
    - FLOAT/DOUBLE: floats
    - ASCII: a single text string; count() is its length in characters
    """

    __slots__ = ('_type_id', '_elements', '_text', '_byte_order')

    def __init__(self, type_id: Any, elements: Any, byte_order: str = '<'):
        """
        Initialize a value.

        Args:
            type_id: TIFF/EXIF type code (TypeId or int)
            elements: Element sequence, a single scalar, or text/bytes
            byte_order: Byte order of the original payload ('<' or '>'),
                        used when raw bytes are reinterpreted

        Raises:
            InvalidValueError: If the type or elements are malformed
        """
        self._type_id = _coerce_type(type_id)
        if byte_order not in ('<', '>'):
            raise InvalidValueError(f"Invalid byte order: {byte_order!r}")
        self._byte_order = byte_order
        self._text = None
        if self._type_id == TypeId.ASCII:
            self._text = self._normalize_text(elements)
            self._elements = tuple(ord(c) for c in self._text)
        else:
            self._elements = self._normalize_elements(self._type_id, elements)

    @staticmethod
    def _normalize_text(elements: Any) -> str:
        if isinstance(elements, str):
            return elements
        if isinstance(elements, (bytes, bytearray)):
            return bytes(elements).decode('ascii', errors='replace')
        raise InvalidValueError("ASCII values must be given as str or bytes")

    @staticmethod
    def _normalize_elements(type_id: TypeId, elements: Any) -> Tuple[Element, ...]:
        if isinstance(elements, (bytes, bytearray)):
            if type_id not in BYTE_TYPES:
                raise InvalidValueError(f"Raw bytes given for {type_id.name} value, use Value.from_bytes")
            return tuple(elements)

        if type_id in RATIONAL_TYPES:
            # A single (num, den) pair is a scalar rational
            if isinstance(elements, tuple) and len(elements) == 2 and all(isinstance(p, int) for p in elements):
                elements = [elements]
            normalized = []
            for item in elements:
                if not isinstance(item, (tuple, list)) or len(item) != 2:
                    raise InvalidValueError(f"Rational element must be a (num, den) pair, got {item!r}")
                num, den = item
                if isinstance(num, bool) or isinstance(den, bool) or not isinstance(num, int) or not isinstance(den, int):
                    raise InvalidValueError(f"Rational parts must be integers, got {item!r}")
                normalized.append((num, den))
            return tuple(normalized)

        if isinstance(elements, (int, float)):
            elements = [elements]

        normalized = []
        for item in elements:
            if type_id in FLOAT_TYPES:
                if isinstance(item, bool) or not isinstance(item, (int, float)):
                    raise InvalidValueError(f"Float element expected, got {item!r}")
                normalized.append(float(item))
            else:
                if isinstance(item, bool) or not isinstance(item, int):
                    raise InvalidValueError(f"Integer element expected, got {item!r}")
                normalized.append(item)
        return tuple(normalized)

    @classmethod
    def scalar(cls, type_id: Any, element: Any, byte_order: str = '<') -> 'Value':
        """Build a single-element value."""
        return cls(type_id, [element], byte_order)

    @classmethod
    def from_bytes(cls, type_id: Any, data: bytes, byte_order: str = '<') -> 'Value':
        """
        Decode a packed payload into a value.

        Args:
            type_id: TIFF/EXIF type code of the elements
            data: Raw payload bytes
            byte_order: '<' for little-endian, '>' for big-endian

        Returns:
            Value holding every whole element found in data; trailing bytes
            that do not fill an element are dropped
        """
        tag_type = _coerce_type(type_id)
        if byte_order not in ('<', '>'):
            raise InvalidValueError(f"Invalid byte order: {byte_order!r}")
        if tag_type == TypeId.ASCII or tag_type in BYTE_TYPES:
            return cls(tag_type, bytes(data), byte_order)

        size = TYPE_SIZES[tag_type]
        count = len(data) // size
        code = _STRUCT_CODES[tag_type]
        raw = struct.unpack(f'{byte_order}{code * count}', bytes(data[:count * size]))
        if tag_type in RATIONAL_TYPES:
            elements = [(raw[i], raw[i + 1]) for i in range(0, len(raw), 2)]
        else:
            elements = list(raw)
        return cls(tag_type, elements, byte_order)

    @property
    def type_id(self) -> TypeId:
        return self._type_id

    @property
    def byte_order(self) -> str:
        return self._byte_order

    @property
    def elements(self) -> Tuple[Element, ...]:
        return self._elements

    def count(self) -> int:
        """Number of components (characters for ASCII)."""
        return len(self._elements)

    def to_int64(self, n: int = 0) -> int:
        """
        Component n as an integer.

        Rationals are truncated towards zero; a zero denominator gives 0.
        """
        item = self._elements[n]
        if self._type_id in RATIONAL_TYPES:
            num, den = item
            if den == 0:
                return 0
            quotient = abs(num) // abs(den)
            return quotient if (num < 0) == (den < 0) else -quotient
        return int(item)

    def to_float(self, n: int = 0) -> float:
        """Component n as a float; a rational with zero denominator gives 0.0."""
        item = self._elements[n]
        if self._type_id in RATIONAL_TYPES:
            num, den = item
            if den == 0:
                return 0.0
            return num / den
        return float(item)

    def to_rational(self, n: int = 0) -> Tuple[int, int]:
        """Component n as a (numerator, denominator) pair."""
        item = self._elements[n]
        if self._type_id in RATIONAL_TYPES:
            return item
        return int(item), 1

    def to_bytes(self) -> bytes:
        """
        Raw payload bytes in this value's byte order.

        Returns:
            Packed element data (ASCII text is encoded as-is)
        """
        if self._type_id == TypeId.ASCII:
            return self._text.encode('ascii', errors='replace')
        if self._type_id in BYTE_TYPES:
            return bytes(v & 0xFF for v in self._elements)
        code = _STRUCT_CODES[self._type_id]
        if self._type_id in RATIONAL_TYPES:
            flat = [part for pair in self._elements for part in pair]
        else:
            flat = list(self._elements)
        try:
            return struct.pack(f'{self._byte_order}{code * len(self._elements)}', *flat)
        except (struct.error, OverflowError):
            # Elements outside the type's range cannot be packed
            return b''

    def __str__(self) -> str:
        """Default print: components space-separated, rationals as num/den."""
        if self._type_id == TypeId.ASCII:
            # Stop at the first NUL terminator
            return self._text.split('\x00', 1)[0]
        if self._type_id in RATIONAL_TYPES:
            return ' '.join(f"{num}/{den}" for num, den in self._elements)
        if self._type_id in FLOAT_TYPES:
            return ' '.join(f"{v:g}" for v in self._elements)
        return ' '.join(str(v) for v in self._elements)

    def __repr__(self) -> str:
        if self._type_id == TypeId.ASCII:
            return f"Value({self._type_id.name}, {self._text!r})"
        return f"Value({self._type_id.name}, {list(self._elements)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return (self._type_id == other._type_id
                and self._elements == other._elements)

    def __hash__(self) -> int:
        return hash((self._type_id, self._elements))
