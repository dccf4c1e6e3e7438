import logging

from .collaborators import FrameBuffer, KeyState, RandomSource
from .config import KEY_COUNT, PROGRAM_START, Quirks
from .decoder import decode
from .errors import Chip8Error
from .executor import Executor
from .registers import Register
from .state import MachineState

logger = logging.getLogger(__name__)


class Chip8:
    """One CHIP-8 machine: state, executor and the fetch/decode/execute loop.

    The caller drives it one cycle at a time and ticks the timers at its own
    rate. FX0A does not block; it leaves the machine awaiting a key until
    one shows up through the key input or supply_key().
    """

    def __init__(self, random_source=None, keys=None, display=None, quirks=None):
        self.random_source = random_source if random_source is not None else RandomSource()
        self.keys = keys if keys is not None else KeyState()
        self.display = display if display is not None else FrameBuffer()
        self.quirks = quirks or Quirks()
        self.state = MachineState()
        self.executor = Executor(self.random_source, self.keys, self.display, self.quirks)
        self.cycle_count = 0

    @property
    def pc(self):
        return self.state.registers.pc

    def reset(self):
        self.state.reset()
        self.display.clear()
        self.cycle_count = 0
        logger.debug("Machine reset")

    def load_program(self, image):
        image = bytes(image)
        # rejected before the reset so a bad image leaves the machine alone
        self.state.memory.check_program(image)
        self.reset()
        self.state.memory.load_program(image)
        self.state.registers[Register.PC] = PROGRAM_START
        logger.info("Loaded %d byte program at 0x%03X", len(image), PROGRAM_START)

    def is_awaiting_key(self):
        return self.state.awaiting_key is not None

    def supply_key(self, key):
        """Resume a pending FX0A with ``key``. Returns False if nothing was waiting."""
        if not 0 <= key < KEY_COUNT:
            raise ValueError("No such key: %r" % key)
        reg = self.state.awaiting_key
        if reg is None:
            logger.debug("Key %X supplied while not waiting, ignored", key)
            return False
        self.state.registers[reg] = key
        self.state.awaiting_key = None
        logger.debug("Stored key %X in %s, resuming", key, reg.name)
        return True

    def tick_timers(self):
        self.state.timers.tick()

    def inspect_state(self):
        return self.state.snapshot()

    # ---- Cycle ----
    def run_one_cycle(self):
        """Fetch, decode and execute one instruction.

        Returns the executed Instruction, or None while stalled on FX0A.
        Any Chip8Error leaves PC on the faulting instruction.
        """
        if self.is_awaiting_key():
            key = self.keys.await_key()
            if key is not None:
                self.supply_key(key)
            return None

        registers = self.state.registers
        address = registers.pc
        word = self.state.memory.read_word(address)
        ins = decode(word, address)
        registers[Register.PC] = address + 2
        try:
            self.executor.execute(self.state, ins)
        except Chip8Error:
            registers[Register.PC] = address
            raise
        self.cycle_count += 1
        return ins

    def run(self, max_cycles):
        """Run up to ``max_cycles`` cycles, stopping early on a key wait."""
        executed = 0
        while executed < max_cycles:
            if self.run_one_cycle() is None:
                break
            executed += 1
        return executed
