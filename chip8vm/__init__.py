"""CHIP-8 virtual machine core.

The pyglet front end lives in ``chip8vm.frontend`` and is not imported here,
so the core runs without a display.
"""

from .collaborators import FrameBuffer, KeyState, RandomSource
from .config import Quirks
from .decoder import decode
from .errors import (
    Chip8Error,
    DecodeFailure,
    OutOfBoundsAccess,
    ProgramTooLarge,
    StackOverflow,
    StackUnderflow,
)
from .instructions import Instruction, Op
from .machine import Chip8
from .registers import Register
from .state import MachineSnapshot

__version__ = "0.1.0"

__all__ = [
    "Chip8",
    "Chip8Error",
    "DecodeFailure",
    "FrameBuffer",
    "Instruction",
    "KeyState",
    "MachineSnapshot",
    "Op",
    "OutOfBoundsAccess",
    "ProgramTooLarge",
    "Quirks",
    "RandomSource",
    "Register",
    "StackOverflow",
    "StackUnderflow",
    "decode",
]
