import pytest

from chip8vm import Chip8, KeyState, Quirks


class FixedRandom:
    def __init__(self, *values):
        self.values = list(values) or [0xFF]

    def random_byte(self):
        return self.values.pop(0) if len(self.values) > 1 else self.values[0]


class RecordingDisplay:
    def __init__(self, collide=False):
        self.collide = collide
        self.draws = []
        self.clears = 0

    def clear(self):
        self.clears += 1

    def draw(self, x, y, sprite):
        self.draws.append((x, y, bytes(sprite)))
        return self.collide


def words_to_bytes(*words):
    out = bytearray()
    for w in words:
        out += bytes(((w >> 8) & 0xFF, w & 0xFF))
    return bytes(out)


def make_machine(*words, quirks=None, collide=False, randoms=(0xFF,)):
    machine = Chip8(
        random_source=FixedRandom(*randoms),
        keys=KeyState(),
        display=RecordingDisplay(collide),
        quirks=quirks or Quirks(),
    )
    machine.load_program(words_to_bytes(*words))
    return machine


@pytest.fixture
def machine_factory():
    return make_machine
