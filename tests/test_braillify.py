"""Tests for the block encoder."""

import numpy as np
import pytest

from braillefb.braillify import CHARS, braille_cell, braillify, encode_block, to_char
from braillefb.framebuffer import Framebuffer
from braillefb.demos import mandelbrot
from tests.conftest import PADDED, TWO_ROWS


# (x, y) of dots 1..8 inside a 2x4 block
DOT_POSITIONS = [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2), (0, 3), (1, 3)]


def cell_for_mask(mask):
    cell = [0] * 8
    for bit, (x, y) in enumerate(DOT_POSITIONS):
        if mask & (1 << bit):
            cell[x + 2 * y] = 1
    return cell


def test_chars_table():
    assert len(CHARS) == 256
    assert list(CHARS) == [chr(0x2800 + i) for i in range(256)]
    assert CHARS[0] == '⠀'
    assert CHARS[255] == '⣿'


def test_every_bit_pattern():
    for mask in range(256):
        cell = cell_for_mask(mask)
        assert encode_block(cell, 0, 0, 2, 4) == chr(0x2800 + mask)
        assert to_char(cell) == chr(0x2800 + mask)


def test_braille_cell_matches_encode_block():
    for mask in range(256):
        cell = cell_for_mask(mask)
        assert braille_cell(np.array(cell).reshape(4, 2)) == to_char(cell)


def test_to_char():
    assert to_char([
        True, False,
        True, True,
        True, False,
        False, True,
    ]) == '⢗'


def test_to_char_wrong_size():
    with pytest.raises(ValueError):
        to_char([1, 0, 1])


def test_pixel_values_coerced():
    assert to_char([2, 0, 0, 0, 0, 0, 0, 0]) == '⠁'
    assert to_char(b'\x01\x00\x01\x00\x01\x00\x01\x00') == '⡇'
    assert to_char(np.array([0.5, 0, 0, 0, 0, 0, 0, 0])) == '⠁'


def test_encode_block_padding():
    buffer = [bool(v) for v in PADDED.ravel()]
    assert encode_block(buffer, 0, 0, 3, 5) == '⠇'
    assert encode_block(buffer, 2, 0, 3, 5) == '⠅'
    assert encode_block(buffer, 0, 4, 3, 5) == '⠉'
    assert encode_block(buffer, 2, 4, 3, 5) == '⠁'


def test_encode_block_fully_outside():
    assert encode_block([1] * 4, 2, 2, 2, 2) == '⠀'


def test_braillify():
    assert braillify(TWO_ROWS) == ['⣇⠽', '⡛⡼']
    assert braillify(PADDED) == ['⠇⠅', '⠉⠁']


def test_braillify_matches_framebuffer_rows():
    for frame in (TWO_ROWS, PADDED, mandelbrot(37, 23)):
        assert braillify(frame) == Framebuffer.from_array(frame).rows()
