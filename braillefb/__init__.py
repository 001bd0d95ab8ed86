from .braillify import BRAILLE_OFFSET, CHARS, H_STEP, V_STEP, braille_cell, braillify, encode_block, to_char
from .framebuffer import Framebuffer, FramebufferIterator, OffsetKind, Offsets
