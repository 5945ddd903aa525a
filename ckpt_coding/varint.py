# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Varint32 encoding/decoding (base-128, low group first).

Each byte carries 7 payload bits; the high bit is set when more bytes
follow. A 32-bit value takes 1 to 5 bytes.
"""

from typing import Tuple, Union

from .errors import BoundsError, MalformedVarintError

BytesLike = Union[bytes, bytearray, memoryview]

MAX_VARINT32_BYTES = 5


def as_unsigned(value: int, bits: int = 32) -> int:
    """
    Reinterpret an integer as an unsigned bit pattern.

    Negative values are taken as two's complement, so -1 becomes
    0xFFFFFFFF for 32 bits.

    Args:
        value: Integer in [-2**(bits-1), 2**bits - 1]
        bits: Width of the pattern

    Returns:
        Unsigned value in [0, 2**bits - 1]

    Raises:
        TypeError: If value is not an integer
        ValueError: If value does not fit in the given width
    """
    if not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    if value < -(1 << (bits - 1)) or value >= (1 << bits):
        raise ValueError(f"Value {value} does not fit in {bits} bits")
    return value & ((1 << bits) - 1)


def encode_varint32(value: int) -> bytes:
    """
    Encode a 32-bit value as a varint.

    Args:
        value: 32-bit integer, negative values are treated as unsigned

    Returns:
        Varint-encoded bytes (1 to 5 bytes)
    """
    value = as_unsigned(value)

    result = []
    while value >= 0x80:
        result.append((value & 0x7F) | 0x80)
        value >>= 7
    result.append(value)
    return bytes(result)


def varint_length(value: int) -> int:
    """Return the number of bytes encode_varint32(value) produces."""
    value = as_unsigned(value)

    length = 1
    while value >= 0x80:
        value >>= 7
        length += 1
    return length


def decode_varint32(data: BytesLike, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a varint32 from bytes.

    At most 5 bytes are read. Bits of the fifth byte that land above
    bit 31 are dropped.

    Args:
        data: Bytes containing the varint
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, number of bytes consumed)

    Raises:
        MalformedVarintError: If the varint is empty, truncated or too long
        BoundsError: If offset is negative
    """
    if offset < 0:
        raise BoundsError(f"Varint decode: negative offset {offset}")

    end = min(len(data), offset + MAX_VARINT32_BYTES)
    if offset >= end:
        raise MalformedVarintError("Varint decode: unexpected end of data")

    value = 0
    shift = 0
    position = offset
    byte = 0x80

    while byte & 0x80 and position < end:
        byte = data[position]
        value |= (byte & 0x7F) << shift
        position += 1
        shift += 7

    if byte & 0x80:
        if position - offset == MAX_VARINT32_BYTES:
            raise MalformedVarintError("Varint decode: value too large")
        raise MalformedVarintError("Varint decode: unexpected end of data")

    return value & 0xFFFFFFFF, position - offset
