from enum import IntEnum

from .config import REGISTER_COUNT


class Register(IntEnum):
    """Register identifiers.

    V0..VF map straight onto the 16 general-purpose slots; I and PC share
    the same lookup surface but live in their own 16-bit cells.
    """

    V0 = 0x0
    V1 = 0x1
    V2 = 0x2
    V3 = 0x3
    V4 = 0x4
    V5 = 0x5
    V6 = 0x6
    V7 = 0x7
    V8 = 0x8
    V9 = 0x9
    VA = 0xA
    VB = 0xB
    VC = 0xC
    VD = 0xD
    VE = 0xE
    VF = 0xF
    I = 0x10
    PC = 0x11

    @property
    def is_general(self):
        return self < REGISTER_COUNT


# carry / borrow / collision flag
FLAG = Register.VF


class RegisterFile:
    def __init__(self):
        self.v = [0] * REGISTER_COUNT  # 16 general-purpose registers
        self.index = 0                 # I register (memory pointer)
        self.pc = 0                    # program counter

    def reset(self):
        self.v = [0] * REGISTER_COUNT
        self.index = 0
        self.pc = 0

    # the identifier is the slot index, V0..VF go straight to the list
    def __getitem__(self, reg):
        if reg < REGISTER_COUNT:
            return self.v[reg]
        if reg == Register.I:
            return self.index
        return self.pc

    def __setitem__(self, reg, value):
        if reg < REGISTER_COUNT:
            self.v[reg] = value & 0xFF
        elif reg == Register.I:
            self.index = value & 0xFFFF
        else:
            self.pc = value & 0xFFFF
