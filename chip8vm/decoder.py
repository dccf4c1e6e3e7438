"""Instruction decoding.

The table is scanned top to bottom and the first ``(word & mask) == pattern``
row wins, so the literal 00E0/00EE rows must stay ahead of the 0NNN
catch-all. Operand layouts:

- ``nnn``  bits 11-0 as an address
- ``xnn``  X register, bits 7-0 immediate
- ``xy``   X and Y registers
- ``xyn``  X and Y registers, bits 3-0 immediate
- ``x``    X register only
"""

from .errors import DecodeFailure
from .instructions import Instruction, Op
from .registers import Register

# dispatch table
DECODE_TABLE = [
    (0xFFFF, 0x00E0, Op.CLEAR_SCREEN, None),
    (0xFFFF, 0x00EE, Op.RETURN, None),
    (0xF000, 0x0000, Op.SYS_CALL, "nnn"),

    (0xF000, 0x1000, Op.JUMP, "nnn"),
    (0xF000, 0x2000, Op.CALL, "nnn"),
    (0xF000, 0x3000, Op.SKIP_IF_EQUAL, "xnn"),
    (0xF000, 0x4000, Op.SKIP_IF_NOT_EQUAL, "xnn"),
    (0xF00F, 0x5000, Op.SKIP_IF_REGISTERS_EQUAL, "xy"),
    (0xF000, 0x6000, Op.SET_IMMEDIATE, "xnn"),
    (0xF000, 0x7000, Op.ADD_IMMEDIATE, "xnn"),

    (0xF00F, 0x8000, Op.COPY_REGISTER, "xy"),
    (0xF00F, 0x8001, Op.BITWISE_OR, "xy"),
    (0xF00F, 0x8002, Op.BITWISE_AND, "xy"),
    (0xF00F, 0x8003, Op.BITWISE_XOR, "xy"),
    (0xF00F, 0x8004, Op.ADD_WITH_CARRY, "xy"),
    (0xF00F, 0x8005, Op.SUB_WITH_BORROW, "xy"),
    (0xF00F, 0x8006, Op.SHIFT_RIGHT, "xy"),
    (0xF00F, 0x8007, Op.REVERSE_SUB, "xy"),
    (0xF00F, 0x800E, Op.SHIFT_LEFT, "xy"),

    (0xF00F, 0x9000, Op.SKIP_IF_REGISTERS_NOT_EQUAL, "xy"),
    (0xF000, 0xA000, Op.SET_INDEX, "nnn"),
    (0xF000, 0xB000, Op.JUMP_PLUS_V0, "nnn"),
    (0xF000, 0xC000, Op.RANDOM_MASKED, "xnn"),
    (0xF000, 0xD000, Op.DRAW_SPRITE, "xyn"),

    (0xF0FF, 0xE09E, Op.SKIP_IF_KEY_DOWN, "x"),
    (0xF0FF, 0xE0A1, Op.SKIP_IF_KEY_UP, "x"),

    (0xF0FF, 0xF007, Op.SET_REGISTER_FROM_DELAY, "x"),
    (0xF0FF, 0xF00A, Op.WAIT_FOR_KEY, "x"),
    (0xF0FF, 0xF015, Op.SET_DELAY, "x"),
    (0xF0FF, 0xF018, Op.SET_SOUND, "x"),
    (0xF0FF, 0xF01E, Op.ADD_TO_INDEX, "x"),
    (0xF0FF, 0xF029, Op.LOAD_SPRITE_ADDRESS, "x"),
    (0xF0FF, 0xF033, Op.STORE_BCD, "x"),
    (0xF0FF, 0xF055, Op.DUMP_REGISTERS, "x"),
    (0xF0FF, 0xF065, Op.LOAD_REGISTERS, "x"),
]


def _build(op, layout, word):
    # nibbles only ever name V0..VF, so I and PC cannot reach the executor
    x = Register((word >> 8) & 0xF)
    y = Register((word >> 4) & 0xF)
    if layout is None:
        return Instruction(op, word=word)
    if layout == "nnn":
        return Instruction(op, address=word & 0x0FFF, word=word)
    if layout == "xnn":
        return Instruction(op, x=x, value=word & 0xFF, word=word)
    if layout == "xy":
        return Instruction(op, x=x, y=y, word=word)
    if layout == "xyn":
        return Instruction(op, x=x, y=y, value=word & 0xF, word=word)
    return Instruction(op, x=x, word=word)


def decode(word, address=None):
    """Map a 16-bit instruction word to an Instruction.

    Raises DecodeFailure when no row matches; ``address`` is only carried
    along for the error message.
    """
    if not 0 <= word <= 0xFFFF:
        raise DecodeFailure(word, address)
    for mask, pattern, op, layout in DECODE_TABLE:
        if (word & mask) == pattern:
            return _build(op, layout, word)
    raise DecodeFailure(word, address)
