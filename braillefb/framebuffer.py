from __future__ import annotations

import logging
import numpy as np

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Sequence

from .braillify import encode_block, H_STEP, V_STEP


logger = logging.getLogger(__name__)

LINEBREAK = '\n'


def round_up(value: int, multiple: int) -> int:
    return ((value + multiple - 1) // multiple) * multiple


class OffsetKind(Enum):
    CHAR = auto()
    LINEBREAK = auto()
    END = auto()


@dataclass(frozen=True)
class Offsets:
    kind: OffsetKind
    x: int = 0
    y: int = 0


class Framebuffer:
    """
    Read-only view that turns a flat, row-major pixel buffer into braille
    characters, 2x4 pixels per character, with a linebreak closing every
    character row.

    The buffer is borrowed, not copied: it must not change while the view
    is in use. Any value with a truthiness works as a pixel.

        fb = Framebuffer([1, 0, 1, 1,
                          1, 0, 0, 1,
                          1, 0, 1, 1,
                          1, 1, 0, 0], 4, 4)
        fb.get(0) == '⣇'
        fb[1] == '⠽'
        fb.get(2) == '\\n'
        fb.get(3) is None
        fb.render() == '⣇⠽\\n'
    """

    def __init__(self, buffer: Sequence, width: int, height: int) -> None:
        if len(buffer) != width * height:
            raise ValueError(f'supplied buffer does not match width * height: '
                             f'len={len(buffer)}, size={width}x{height}')

        self._buffer = buffer
        self._width = width
        self._height = height
        # + 1 for linebreaks
        self._chars_per_row = round_up(width, H_STEP) // H_STEP + 1
        self._char_rows = round_up(height, V_STEP) // V_STEP

        logger.debug(f'Creating framebuffer, size={width}x{height}, '
                     f'chars={self._chars_per_row}x{self._char_rows}')

    @classmethod
    def from_array(cls, frame: np.array) -> Framebuffer:
        height, width = frame.shape
        return cls(np.ravel(frame), width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def chars_per_row(self) -> int:
        """Number of characters across the image, trailing linebreak included."""
        return self._chars_per_row

    @property
    def char_rows(self) -> int:
        """Number of characters down the image."""
        return self._char_rows

    def __len__(self) -> int:
        return self._char_rows * self._chars_per_row

    def is_empty(self) -> bool:
        return len(self._buffer) == 0

    def offsets(self, index: int) -> Offsets:
        # negative positions come before the first row, nothing lives there
        if index < 0:
            return Offsets(OffsetKind.END)

        if index > 0 and (index + 1) % self._chars_per_row == 0:
            return Offsets(OffsetKind.LINEBREAK)

        row = index // self._chars_per_row
        y_offset = row * V_STEP
        if y_offset >= self._height:
            return Offsets(OffsetKind.END)

        col = index % self._chars_per_row
        x_offset = col * H_STEP
        return Offsets(OffsetKind.CHAR, x_offset, y_offset)

    def get(self, index: int) -> Optional[str]:
        """
        Returns the character at index: a braille pattern, a linebreak,
        or None once all rows are exhausted.
        """
        offsets = self.offsets(index)
        if offsets.kind == OffsetKind.CHAR:
            return encode_block(self._buffer, offsets.x, offsets.y,
                                self._width, self._height)
        elif offsets.kind == OffsetKind.LINEBREAK:
            return LINEBREAK
        elif offsets.kind == OffsetKind.END:
            return None
        else:
            assert False, "unreachable"

    def __getitem__(self, index: int) -> str:
        char = self.get(index) if 0 <= index < len(self) else None
        if char is None:
            raise IndexError(f'index out of bounds: the len is {len(self)} '
                             f'but the index is {index}')
        return char

    def __iter__(self) -> FramebufferIterator:
        return FramebufferIterator(self)

    def traverse(self) -> FramebufferIterator:
        return iter(self)

    def render(self) -> str:
        return ''.join(self)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f'<Framebuffer: size={self._width}x{self._height}, len={len(self)}>'

    def rows(self) -> List[str]:
        """
        Rendered character rows without their linebreaks
        """
        row_length = self._chars_per_row - 1
        return [''.join(self[start + col] for col in range(row_length))
                for start in range(0, len(self), self._chars_per_row)]


class FramebufferIterator:
    """
    Forward cursor over a Framebuffer. Each iteration over the framebuffer
    gets its own cursor, so traversals are independent and restartable.
    """

    def __init__(self, framebuffer: Framebuffer) -> None:
        self.framebuffer = framebuffer
        self.index = 0

    def __iter__(self) -> FramebufferIterator:
        return self

    def __next__(self) -> str:
        # zero-width images would otherwise yield linebreaks forever
        if self.index >= len(self.framebuffer):
            raise StopIteration

        char = self.framebuffer.get(self.index)
        if char is None:
            raise StopIteration

        self.index += 1
        return char

    def __length_hint__(self) -> int:
        return max(len(self.framebuffer) - self.index, 0)
