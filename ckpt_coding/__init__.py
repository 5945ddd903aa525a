# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Checkpoint record codec.

Encodes and decodes the byte-level pieces of checkpoint metadata records:
varint32 lengths, fixed-width 32/64-bit integers and multi-string records.

Example usage:
    from ckpt_coding import encode_strings, decode_strings, decode_fixed64

    record = encode_strings("global_step", "weights")
    names, consumed = decode_strings(record, count=2)

    step = decode_fixed64(header, offset=8)
"""

from .errors import CodingError, MalformedVarintError, BoundsError
from .fixed import (
    Endianness,
    encode_fixed32,
    decode_fixed32,
    encode_fixed64,
    decode_fixed64,
)
from .strings import encode_strings, decode_strings
from .varint import encode_varint32, decode_varint32, varint_length

__version__ = "0.1.0"

__all__ = [
    # Errors
    "CodingError",
    "MalformedVarintError",
    "BoundsError",
    # Varint
    "encode_varint32",
    "decode_varint32",
    "varint_length",
    # Fixed-width
    "Endianness",
    "encode_fixed32",
    "decode_fixed32",
    "encode_fixed64",
    "decode_fixed64",
    # String records
    "encode_strings",
    "decode_strings",
]
