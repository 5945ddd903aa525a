# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command-line tool for inspecting checkpoint record bytes.

Usage:
    ckpt-coding varint-encode 300
    ckpt-coding varint-decode ac02
    ckpt-coding fixed-encode 0x12345678 --width 32 --endian big
    ckpt-coding fixed-decode 78563412 --width 32
    ckpt-coding strings-encode ab c
    ckpt-coding strings-decode 020161 6263 --count 2
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .fixed import decode_fixed32, decode_fixed64, encode_fixed32, encode_fixed64
from .strings import decode_strings, encode_strings
from .varint import decode_varint32, encode_varint32


def parse_int(text: str) -> int:
    """Parse a decimal or 0x-prefixed integer."""
    return int(text, 0)


def parse_hex(parts: List[str]) -> bytes:
    """
    Join hex fragments into bytes.

    Whitespace and a leading 0x on each fragment are ignored.
    """
    text = ""
    for part in parts:
        part = "".join(part.split())
        if part[:2].lower() == "0x":
            part = part[2:]
        text += part
    try:
        return bytes.fromhex(text)
    except ValueError:
        raise ValueError(f"Invalid hex input: {text!r}") from None


def cmd_varint_encode(args):
    """Encode a value as a varint."""
    encoded = encode_varint32(args.value)
    print(f"{encoded.hex()} ({len(encoded)} bytes)")


def cmd_varint_decode(args):
    """Decode a varint."""
    value, consumed = decode_varint32(parse_hex(args.hex), args.offset)
    print(f"Value:    {value} (0x{value:x})")
    print(f"Consumed: {consumed} bytes")


def cmd_fixed_encode(args):
    """Encode a fixed-width integer."""
    encode = encode_fixed32 if args.width == 32 else encode_fixed64
    print(encode(args.value, args.endian).hex())


def cmd_fixed_decode(args):
    """Decode a fixed-width integer."""
    decode = decode_fixed32 if args.width == 32 else decode_fixed64
    value = decode(parse_hex(args.hex), args.offset, args.endian)
    print(f"{value} (0x{value:x})")


def cmd_strings_encode(args):
    """Encode a multi-string record."""
    print(encode_strings(*args.strings).hex())


def cmd_strings_decode(args):
    """Decode a multi-string record."""
    values, consumed = decode_strings(parse_hex(args.hex), args.count)
    for value in values:
        print(value)
    print(f"Consumed: {consumed} bytes", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ckpt-coding",
        description="Encode and decode checkpoint record bytes",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # varint commands
    p = subparsers.add_parser("varint-encode", help="Encode a 32-bit value as a varint")
    p.add_argument("value", type=parse_int, help="Value (decimal or 0x hex)")
    p.set_defaults(func=cmd_varint_encode)

    p = subparsers.add_parser("varint-decode", help="Decode a varint from hex")
    p.add_argument("hex", nargs="+", help="Hex bytes")
    p.add_argument("--offset", "-o", type=int, default=0, help="Starting byte offset")
    p.set_defaults(func=cmd_varint_decode)

    # fixed-width commands
    encode_parser = subparsers.add_parser("fixed-encode", help="Encode a fixed-width integer")
    encode_parser.add_argument("value", type=parse_int, help="Value (decimal or 0x hex)")
    encode_parser.set_defaults(func=cmd_fixed_encode)

    decode_parser = subparsers.add_parser("fixed-decode", help="Decode a fixed-width integer from hex")
    decode_parser.add_argument("hex", nargs="+", help="Hex bytes")
    decode_parser.add_argument("--offset", "-o", type=int, default=0, help="Starting byte offset")
    decode_parser.set_defaults(func=cmd_fixed_decode)

    for p in (encode_parser, decode_parser):
        p.add_argument("--width", "-w", type=int, default=32, choices=[32, 64],
                       help="Width in bits (default 32)")
        p.add_argument("--endian", "-e", default="little", choices=["little", "big"],
                       help="Byte order (default little)")

    # string record commands
    p = subparsers.add_parser("strings-encode", help="Encode a multi-string record")
    p.add_argument("strings", nargs="*", help="Strings to encode")
    p.set_defaults(func=cmd_strings_encode)

    p = subparsers.add_parser("strings-decode", help="Decode a multi-string record from hex")
    p.add_argument("hex", nargs="+", help="Hex bytes")
    p.add_argument("--count", "-n", type=int, required=True, help="Number of strings")
    p.set_defaults(func=cmd_strings_decode)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        args.func(args)
    except ValueError as e:  # CodingError included
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
