from dataclasses import dataclass, field
from typing import Optional, Tuple

from .memory import Memory
from .registers import Register, RegisterFile
from .stack import Stack
from .timers import TimerBank


@dataclass(frozen=True)
class MachineSnapshot:
    """Read-only copy of everything the machine holds."""

    v: Tuple[int, ...]
    index: int
    pc: int
    stack: Tuple[int, ...]
    delay: int
    sound: int
    memory: bytes
    awaiting_key: Optional[Register] = None

    def __str__(self):
        regs = " ".join("V%X=%02X" % (i, val) for i, val in enumerate(self.v))
        return "PC=%04X I=%04X %s DT=%d ST=%d stack=[%s]" % (
            self.pc, self.index, regs, self.delay, self.sound,
            ", ".join("%03X" % a for a in self.stack))


@dataclass
class MachineState:
    memory: Memory = field(default_factory=Memory)
    registers: RegisterFile = field(default_factory=RegisterFile)
    stack: Stack = field(default_factory=Stack)
    timers: TimerBank = field(default_factory=TimerBank)
    # register FX0A is waiting to fill, None when running
    awaiting_key: Optional[Register] = None

    def reset(self):
        self.memory.reset()
        self.registers.reset()
        self.stack.reset()
        self.timers.reset()
        self.awaiting_key = None

    def snapshot(self):
        return MachineSnapshot(
            v=tuple(self.registers.v),
            index=self.registers.index,
            pc=self.registers.pc,
            stack=self.stack.entries(),
            delay=self.timers.delay,
            sound=self.timers.sound,
            memory=bytes(self.memory.data),
            awaiting_key=self.awaiting_key,
        )
