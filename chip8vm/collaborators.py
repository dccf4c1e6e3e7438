"""Interfaces the core calls out to, plus the default implementations.

The machine only ever talks to these through the protocols below, so tests
and front ends can hand in their own stand-ins.
"""

import random
from typing import Optional, Protocol

import numpy as np

from .config import KEY_COUNT, height, width


class RandomByteSource(Protocol):
    def random_byte(self) -> int: ...


class KeyInput(Protocol):
    def is_key_down(self, key: int) -> bool: ...

    def await_key(self) -> Optional[int]: ...


class Display(Protocol):
    def clear(self) -> None: ...

    def draw(self, x: int, y: int, sprite: bytes) -> bool: ...


class RandomSource:
    def __init__(self, seed=None):
        self._rng = random.Random(seed)

    def random_byte(self):
        return self._rng.getrandbits(8)


class KeyState:
    """Pressed/released state of the 16-key hex keypad."""

    def __init__(self):
        self.keys = np.zeros(KEY_COUNT, dtype=np.uint8)

    def _check(self, key):
        if not 0 <= key < KEY_COUNT:
            raise ValueError("No such key: %r" % key)

    def press(self, key):
        self._check(key)
        self.keys[key] = 1

    def release(self, key):
        self._check(key)
        self.keys[key] = 0

    def release_all(self):
        self.keys.fill(0)

    def is_key_down(self, key):
        self._check(key)
        return bool(self.keys[key])

    def await_key(self):
        # lowest pressed key, if any
        pressed = np.flatnonzero(self.keys)
        if len(pressed) == 0:
            return None
        return int(pressed[0])


class FrameBuffer:
    """64x32 one-bit pixel plane, row major (``pixels[y, x]``)."""

    def __init__(self, width=width, height=height):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width), dtype=np.uint8)
        self.dirty = True

    def clear(self):
        self.pixels.fill(0)
        self.dirty = True

    def draw(self, x, y, sprite):
        """XOR an 8-pixel-wide sprite in at (x, y), wrapping at the edges.

        Returns True if any lit pixel was turned off.
        """
        x %= self.width
        y %= self.height
        collision = False
        for row, bits in enumerate(sprite):
            if bits == 0:
                continue
            py = (y + row) % self.height
            for bit in range(8):
                if bits & (0x80 >> bit):
                    px = (x + bit) % self.width
                    if self.pixels[py, px]:
                        collision = True
                    self.pixels[py, px] ^= 1
        self.dirty = True
        return collision
