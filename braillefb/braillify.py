"""
Braille unicode for refining console graphics

http://www.alanwood.net/unicode/braille_patterns.html
https://github.com/asciimoo/drawille

dots:
   ,___,
   |1 4|
   |2 5|
   |3 6|
   |7 8|
   `````

A pattern's codepoint is BRAILLE_OFFSET plus a mask whose bits are the dots
8..1 read from the most significant bit down:

   0b00000000
     87654321
"""

import numpy as np

from typing import List, Sequence


BRAILLE_OFFSET = 0x2800
H_STEP = 2
V_STEP = 4
PIXEL_MAP = np.array([
    [0x01, 0x08],
    [0x02, 0x10],
    [0x04, 0x20],
    [0x40, 0x80]
])

# (dx, dy) of each dot inside a block, visited from dot 8 down to dot 1
BIT_OFFSETS = (
    (1, 3),  # 8
    (0, 3),  # 7
    (1, 2),  # 6
    (1, 1),  # 5
    (1, 0),  # 4
    (0, 2),  # 3
    (0, 1),  # 2
    (0, 0),  # 1
)

CHARS = tuple(chr(BRAILLE_OFFSET + i) for i in range(256))


def pixel_bit(value) -> int:
    return 1 if value else 0


def encode_block(buffer: Sequence, x_offset: int, y_offset: int,
                 width: int, height: int) -> str:
    """
    Encode the 2x4 block whose top-left pixel is (x_offset, y_offset).
    Dots that fall outside the width x height buffer read as 0.
    """
    mask = 0
    for dx, dy in BIT_OFFSETS:
        mask <<= 1
        x = x_offset + dx
        y = y_offset + dy
        if x >= width or y >= height:
            continue
        mask |= pixel_bit(buffer[x + y * width])
    return CHARS[mask]


def to_char(cell: Sequence) -> str:
    """
    Encode a single block given as 8 row-major values:

        to_char([1, 0,
                 1, 1,
                 1, 0,
                 0, 1]) == '⢗'
    """
    if len(cell) != H_STEP * V_STEP:
        raise ValueError(f'a braille cell holds {H_STEP * V_STEP} pixels, got {len(cell)}')
    return encode_block(cell, 0, 0, H_STEP, V_STEP)


def braille_cell(cell: np.array) -> str:
    value = np.sum((np.asarray(cell) != 0) * PIXEL_MAP)
    return CHARS[int(value)]


def braillify(frame: np.array) -> List[str]:
    """
    Numpy rendition of a whole 2D frame, one string per character row.
    The frame is zero-padded up to a multiple of the block size.
    """
    rows, cols = frame.shape
    pad_rows = -rows % V_STEP
    pad_cols = -cols % H_STEP
    padded = np.pad(np.asarray(frame) != 0, ((0, pad_rows), (0, pad_cols)))

    braille = []
    for row in range(0, rows, V_STEP):
        braille_row = ''
        for col in range(0, cols, H_STEP):
            braille_row += braille_cell(padded[row:row+V_STEP, col:col+H_STEP])
        braille.append(braille_row)

    return braille
