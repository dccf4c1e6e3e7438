# CHIP8 front end:
# Input - physical keys are mapped onto the 16-key hex keypad and stored per cycle.
# Output - the 64x32 frame buffer is upscaled with numpy and blitted as one image.
# Pacing - pyglet.clock drives CPU cycles and the 60Hz timer tick.
# No sound is produced; the sound timer still counts down.

import logging
import sys

import numpy as np
import pyglet
from pyglet.window import key

from . import config
from .collaborators import FrameBuffer, KeyState
from .config import CPU_HZ, TIMER_HZ, height, scale, width, window_height, window_width
from .errors import Chip8Error
from .machine import Chip8

logger = logging.getLogger(__name__)

# map binding keys
keymap = {
    key._1: 0x1, key._2: 0x2, key._3: 0x3, key._4: 0xC,
    key.Q: 0x4, key.W: 0x5, key.E: 0x6, key.R: 0xD,
    key.A: 0x7, key.S: 0x8, key.D: 0x9, key.F: 0xE,
    key.Z: 0xA, key.X: 0x0, key.C: 0xB, key.V: 0xF,
}


def load_rom(path):
    logger.info("Loading ROM: %s", path)
    with open(path, "rb") as f:
        return f.read()


class Chip8Window(pyglet.window.Window):

    def __init__(self, rom, quirks=None):
        super().__init__(
            width=window_width,
            height=window_height,
            caption="CHIP-8 Emulator",
            vsync=False
        )

        self.framebuffer = FrameBuffer()
        self.keys = KeyState()
        self.machine = Chip8(keys=self.keys, display=self.framebuffer, quirks=quirks)
        self.machine.load_program(rom)
        self.has_exit = False

        # Pre-allocated small framebuffer (64x32 RGBA), upscaled with numpy.repeat
        self._small_framebuf = np.zeros((height, width, 4), dtype=np.uint8)
        self._small_framebuf[..., 3] = 255
        self.image = pyglet.image.ImageData(
            window_width,
            window_height,
            'RGBA',
            bytes(window_width * window_height * 4)
        )

        # Performance tracking counters
        self._fps_counter = 0
        self._last_cycle_count = 0
        self.fps_label = pyglet.text.Label(
            "FPS: 0",
            font_size=12,
            x=5,
            y=window_height - 15,
            anchor_x='left',
            anchor_y='center',
            color=(255, 255, 255, 255)
        )
        self.cps_label = pyglet.text.Label(
            "Cycles/s: 0",
            font_size=12,
            x=5,
            y=window_height - 30,
            anchor_x='left',
            anchor_y='center',
            color=(255, 255, 255, 255)
        )

        # Schedule the loops
        pyglet.clock.schedule_interval(self._cpu_tick, 1 / CPU_HZ)
        pyglet.clock.schedule_interval(self._timer_tick, 1 / TIMER_HZ)
        pyglet.clock.schedule_interval(self._update_bench, 1.0)

    # FPS / CPS
    def _update_bench(self, dt):
        self.fps_label.text = f"FPS: {self._fps_counter / dt:.1f}"
        cycles = self.machine.cycle_count
        self.cps_label.text = f"Cycles/s: {cycles - self._last_cycle_count}"
        self._fps_counter = 0
        self._last_cycle_count = cycles

    # ---- CPU cycle ----
    def _cpu_tick(self, dt):
        if self.has_exit:
            return
        try:
            self.machine.run_one_cycle()
        except Chip8Error as e:
            logger.error("Emulation error: %s", e)
            logger.error("%s", self.machine.inspect_state())
            self.has_exit = True
            self.close()

    # ---- timers ----
    def _timer_tick(self, dt):
        self.machine.tick_timers()

    # ---- Drawing ----
    def on_draw(self):
        self.clear()
        fb = self.framebuffer
        if fb.dirty:
            # pyglet's origin is bottom-left, the frame buffer's is top-left
            lit = fb.pixels[::-1] * 255
            self._small_framebuf[..., 0] = lit
            self._small_framebuf[..., 1] = lit
            self._small_framebuf[..., 2] = lit
            scaled = np.repeat(np.repeat(self._small_framebuf, scale, axis=0), scale, axis=1)
            self.image.set_data('RGBA', window_width * 4, scaled.tobytes())
            fb.dirty = False
        self.image.blit(0, 0)

        self.fps_label.draw()
        self.cps_label.draw()
        self._fps_counter += 1

    # ---- Input ----
    def on_key_press(self, symbol, modifiers):
        if symbol == key.ESCAPE:
            self.has_exit = True
            self.close()
        if symbol in keymap:
            self.keys.press(keymap[symbol])
        if symbol == key.F1:
            root = logging.getLogger()
            root.setLevel(logging.INFO if root.level == logging.DEBUG else logging.DEBUG)
            logger.info("Debug logs: %s", root.level == logging.DEBUG)

    def on_key_release(self, symbol, modifiers):
        if symbol in keymap:
            self.keys.release(keymap[symbol])


# ---- Entry point ----
def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(
        level=logging.DEBUG if config.LOGS_ON else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    if len(argv) < 1:
        print("Usage: chip8vm <rom-file>")
        return 1
    try:
        rom = load_rom(argv[0])
        Chip8Window(rom)
    except (OSError, Chip8Error) as e:
        logger.error("Could not start: %s", e)
        return 1
    pyglet.app.run()
    return 0
