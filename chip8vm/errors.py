"""Errors raised by the machine.

Every one of these is a deterministic property of the program being run;
the caller decides whether to reset the machine or stop.
"""


class Chip8Error(Exception):
    """Base class for all machine errors."""


class DecodeFailure(Chip8Error):
    def __init__(self, word, address=None):
        self.word = word
        self.address = address
        if address is None:
            super().__init__("Unknown opcode: %04X" % word)
        else:
            super().__init__("Unknown opcode: %04X at 0x%03X" % (word, address))


class StackOverflow(Chip8Error):
    def __init__(self, address, depth):
        self.address = address
        self.depth = depth
        super().__init__("Stack overflow on CALL to 0x%03X (depth %d)" % (address, depth))


class StackUnderflow(Chip8Error):
    def __init__(self):
        super().__init__("Stack underflow on 00EE")


class OutOfBoundsAccess(Chip8Error):
    def __init__(self, address, length=1):
        self.address = address
        self.length = length
        super().__init__("Memory access out of bounds: 0x%X (+%d)" % (address, length))


class ProgramTooLarge(Chip8Error):
    def __init__(self, size, limit):
        self.size = size
        self.limit = limit
        super().__init__("Program is %d bytes, only %d fit in memory" % (size, limit))
