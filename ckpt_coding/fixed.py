# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Fixed-width 32/64-bit integer encoding/decoding.

Byte order is chosen per call. LITTLE puts the least significant byte
first, BIG the most significant byte first.
"""

from enum import IntEnum
from typing import Union

from .errors import BoundsError
from .varint import BytesLike, as_unsigned


class Endianness(IntEnum):
    """Byte order of a fixed-width integer."""
    LITTLE = 0
    BIG = 1

    def __str__(self) -> str:
        return self.name

    @property
    def byteorder(self) -> str:
        """Name understood by int.to_bytes / int.from_bytes."""
        return "little" if self == Endianness.LITTLE else "big"


EndiannessLike = Union[Endianness, str]


def _resolve(endianness: EndiannessLike) -> Endianness:
    if isinstance(endianness, Endianness):
        return endianness
    if isinstance(endianness, str):
        try:
            return Endianness[endianness.upper()]
        except KeyError:
            pass
    raise ValueError(f"Unknown endianness: {endianness!r}")


def _encode(value: int, width: int, endianness: EndiannessLike) -> bytes:
    value = as_unsigned(value, width * 8)
    return value.to_bytes(width, _resolve(endianness).byteorder)


def _decode(data: BytesLike, offset: int, width: int, endianness: EndiannessLike) -> int:
    order = _resolve(endianness).byteorder
    if offset < 0 or offset + width > len(data):
        raise BoundsError(
            f"Fixed{width * 8} decode: need {width} bytes at offset {offset}, "
            f"buffer has {len(data)}"
        )
    return int.from_bytes(bytes(data[offset:offset + width]), order)


def encode_fixed32(value: int, endianness: EndiannessLike = Endianness.LITTLE) -> bytes:
    """
    Encode a 32-bit value in exactly 4 bytes.

    Args:
        value: 32-bit integer, negative values are treated as unsigned
        endianness: Byte order (default little-endian)

    Returns:
        4 encoded bytes
    """
    return _encode(value, 4, endianness)


def decode_fixed32(
    data: BytesLike,
    offset: int = 0,
    endianness: EndiannessLike = Endianness.LITTLE,
) -> int:
    """
    Decode 4 bytes at offset as an unsigned 32-bit value.

    Raises:
        BoundsError: If fewer than 4 bytes are available at offset
    """
    return _decode(data, offset, 4, endianness)


def encode_fixed64(value: int, endianness: EndiannessLike = Endianness.LITTLE) -> bytes:
    """Encode a 64-bit value in exactly 8 bytes."""
    return _encode(value, 8, endianness)


def decode_fixed64(
    data: BytesLike,
    offset: int = 0,
    endianness: EndiannessLike = Endianness.LITTLE,
) -> int:
    """
    Decode 8 bytes at offset as an unsigned 64-bit value.

    Raises:
        BoundsError: If fewer than 8 bytes are available at offset
    """
    return _decode(data, offset, 8, endianness)
