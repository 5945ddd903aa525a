# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Multi-string records.

Layout: the UTF-8 byte length of every string as a varint, in order,
followed by the UTF-8 bytes of every string, in the same order. There is
no count and no terminator; the reader must know how many strings to
expect.
"""

from typing import List, Tuple

from .errors import BoundsError, CodingError
from .varint import BytesLike, decode_varint32, encode_varint32


def encode_strings(*values: str) -> bytes:
    """
    Encode strings as a length table followed by their payloads.

    Args:
        values: Strings to encode

    Returns:
        Encoded record (empty for no strings)
    """
    payloads = []
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"Expected str, got {type(value).__name__}")
        payloads.append(value.encode("utf-8"))

    lengths = b"".join(encode_varint32(len(p)) for p in payloads)
    return lengths + b"".join(payloads)


def decode_strings(data: BytesLike, count: int, offset: int = 0) -> Tuple[List[str], int]:
    """
    Decode a record of count strings.

    Args:
        data: Bytes containing the record
        count: Number of strings in the record
        offset: Starting offset in data

    Returns:
        Tuple of (decoded strings, number of bytes consumed)

    Raises:
        MalformedVarintError: If a length is malformed
        BoundsError: If the payloads run past the end of data
        CodingError: If a payload is not valid UTF-8
    """
    if count < 0:
        raise ValueError(f"Negative string count: {count}")

    position = offset
    lengths = []
    for _ in range(count):
        length, consumed = decode_varint32(data, position)
        lengths.append(length)
        position += consumed

    total = sum(lengths)
    if position + total > len(data):
        raise BoundsError(
            f"String record: payload needs {total} bytes, "
            f"{len(data) - position} available"
        )

    values = []
    for index, length in enumerate(lengths):
        raw = bytes(data[position:position + length])
        try:
            values.append(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise CodingError(f"String record: entry {index} is not valid UTF-8") from e
        position += length

    return values, position - offset
