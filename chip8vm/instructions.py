from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from .registers import Register


class Op(Enum):
    # no operand
    CLEAR_SCREEN = auto()
    RETURN = auto()
    # address operand
    SYS_CALL = auto()
    JUMP = auto()
    CALL = auto()
    JUMP_PLUS_V0 = auto()
    SET_INDEX = auto()
    # register + immediate
    SKIP_IF_EQUAL = auto()
    SKIP_IF_NOT_EQUAL = auto()
    SET_IMMEDIATE = auto()
    ADD_IMMEDIATE = auto()
    RANDOM_MASKED = auto()
    # register + register
    SKIP_IF_REGISTERS_EQUAL = auto()
    SKIP_IF_REGISTERS_NOT_EQUAL = auto()
    COPY_REGISTER = auto()
    BITWISE_OR = auto()
    BITWISE_AND = auto()
    BITWISE_XOR = auto()
    ADD_WITH_CARRY = auto()
    SUB_WITH_BORROW = auto()
    SHIFT_RIGHT = auto()
    REVERSE_SUB = auto()
    SHIFT_LEFT = auto()
    DRAW_SPRITE = auto()
    # single register
    SKIP_IF_KEY_DOWN = auto()
    SKIP_IF_KEY_UP = auto()
    SET_REGISTER_FROM_DELAY = auto()
    WAIT_FOR_KEY = auto()
    SET_DELAY = auto()
    SET_SOUND = auto()
    ADD_TO_INDEX = auto()
    LOAD_SPRITE_ADDRESS = auto()
    STORE_BCD = auto()
    DUMP_REGISTERS = auto()
    LOAD_REGISTERS = auto()


@dataclass(frozen=True)
class Instruction:
    """One decoded instruction word.

    Only the operand fields the op uses are filled in: ``address`` for the
    NNN family, ``value`` for NN immediates and the DXYN height.
    """

    op: Op
    x: Optional[Register] = None
    y: Optional[Register] = None
    value: int = 0
    address: int = 0
    word: int = field(default=0, compare=False)

    def __str__(self):
        parts = [self.op.name]
        if self.x is not None:
            parts.append(self.x.name)
        if self.y is not None:
            parts.append(self.y.name)
        if self.op in (Op.SYS_CALL, Op.JUMP, Op.CALL, Op.JUMP_PLUS_V0, Op.SET_INDEX):
            parts.append("0x%03X" % self.address)
        elif self.op in (Op.SKIP_IF_EQUAL, Op.SKIP_IF_NOT_EQUAL, Op.SET_IMMEDIATE,
                         Op.ADD_IMMEDIATE, Op.RANDOM_MASKED, Op.DRAW_SPRITE):
            parts.append("0x%02X" % self.value)
        return " ".join(parts)
