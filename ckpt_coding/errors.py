# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Exceptions raised by the checkpoint record codec.
"""


class CodingError(ValueError):
    """Base exception for encode/decode errors."""
    pass


class MalformedVarintError(CodingError):
    """Varint is truncated or longer than 5 bytes."""
    pass


class BoundsError(CodingError, IndexError):
    """Read would go past the end of the supplied buffer."""
    pass
