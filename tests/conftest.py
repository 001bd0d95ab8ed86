"""Shared test fixtures."""

import pytest

from braillefb.demos import from_pattern


# ⣇⠽
# ⡛⡼
TWO_ROWS = from_pattern("""
# . # #
# . . #
# . # #
# # . .
# # . #
# # . #
. . # #
# . # .
""")

# ⠇⠅
# ⠉⠁
PADDED = from_pattern("""
# . #
# . .
# . #
. . .
# # #
""")


def flatten(frame):
    return [bool(v) for v in frame.ravel()]


@pytest.fixture
def two_rows():
    return flatten(TWO_ROWS)


@pytest.fixture
def padded():
    return flatten(PADDED)
