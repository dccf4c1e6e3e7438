# ---- Configuration ----
# Memory - 4096 bytes holding the font (reserved area) and the loaded ROM.
# Display - 64x32 monochrome, scaled up by the front end.
# CPU/timers - paced by the caller, the core owns no clock.

from dataclasses import dataclass

MEMORY_SIZE = 4096
PROGRAM_START = 0x200
MAX_PROGRAM_SIZE = MEMORY_SIZE - PROGRAM_START
FONT_BASE = 0x000
FONT_GLYPH_SIZE = 5
STACK_DEPTH = 16
REGISTER_COUNT = 16
KEY_COUNT = 16

scale = 10
width, height = 64, 32
window_width, window_height = width * scale, height * scale
CPU_HZ = 600
TIMER_HZ = 60

# make it true if you want the logs
LOGS_ON = False

# set fonts (binary pixel patterns)
FONTSET = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])  # notice 80 bytes


@dataclass(frozen=True)
class Quirks:
    """Behaviour switches for instructions that interpreters disagree on.

    The defaults keep the flag-preserving arithmetic and the unmasked
    index addition; set the switches to get the common interpreter
    behaviour instead.
    """

    # 8XY4/8XY5/8XY7 write VF=0 when there is no carry/borrow
    clear_flag_on_no_carry: bool = False
    # FX1E wraps I at 0x1000 instead of keeping the full 16 bits
    wrap_index: bool = False
    # 8XY6/8XYE shift VY into VX; False shifts VX in place
    shift_uses_vy: bool = True
