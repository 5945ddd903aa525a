# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration for codec tests."""

import random

import pytest

# Values on either side of each varint length boundary
BOUNDARY_VALUES = [
    0, 1, 127, 128, 255, 256,
    16383, 16384,
    2097151, 2097152,
    268435455, 268435456,
    0x7FFFFFFF, 0x80000000,
    0xFFFFFFFF,
]


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--varint-sweep",
        action="store",
        type=int,
        default=0,
        help="Number of extra random 32-bit values to round-trip",
    )


@pytest.fixture(scope="session")
def sweep_values(request):
    """Boundary values plus a seeded random sample of 32-bit values."""
    count = request.config.getoption("--varint-sweep")
    rng = random.Random(0x5EED)
    return BOUNDARY_VALUES + [rng.getrandbits(32) for _ in range(count)]
