from .config import FONT_BASE, FONTSET, MAX_PROGRAM_SIZE, MEMORY_SIZE, PROGRAM_START
from .errors import OutOfBoundsAccess, ProgramTooLarge


class Memory:
    """Flat 4096-byte address space.

    Every access is range checked before anything is read or written, so a
    failed block transfer leaves memory untouched.
    """

    def __init__(self):
        self.data = bytearray(MEMORY_SIZE)
        self.reset()

    def __len__(self):
        return len(self.data)

    def reset(self):
        self.data[:] = bytes(MEMORY_SIZE)
        # Load fontset into the reserved area
        self.data[FONT_BASE:FONT_BASE + len(FONTSET)] = FONTSET

    def check(self, address, length=1):
        if address < 0 or length < 0 or address + length > MEMORY_SIZE:
            raise OutOfBoundsAccess(address, length)

    def read(self, address):
        self.check(address)
        return self.data[address]

    def write(self, address, value):
        self.check(address)
        self.data[address] = value & 0xFF

    def read_word(self, address):
        self.check(address, 2)
        return (self.data[address] << 8) | self.data[address + 1]

    def read_block(self, address, length):
        self.check(address, length)
        return bytes(self.data[address:address + length])

    def write_block(self, address, values):
        values = bytes(values)
        self.check(address, len(values))
        self.data[address:address + len(values)] = values

    @staticmethod
    def check_program(image):
        if len(image) > MAX_PROGRAM_SIZE:
            raise ProgramTooLarge(len(image), MAX_PROGRAM_SIZE)

    def load_program(self, image):
        image = bytes(image)
        self.check_program(image)
        self.data[PROGRAM_START:PROGRAM_START + len(image)] = image
