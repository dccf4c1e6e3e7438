import numpy as np

from .config import STACK_DEPTH
from .errors import StackOverflow, StackUnderflow


class Stack:
    """Return-address stack used only by CALL/RET."""

    def __init__(self, depth=STACK_DEPTH):
        self.slots = np.zeros(depth, dtype=np.uint16)
        self.sp = 0

    def __len__(self):
        return self.sp

    def reset(self):
        self.slots.fill(0)
        self.sp = 0

    def push(self, address, target=0):
        if self.sp >= len(self.slots):
            raise StackOverflow(target, self.sp)
        self.slots[self.sp] = address
        self.sp += 1

    def pop(self):
        if self.sp == 0:
            raise StackUnderflow()
        self.sp -= 1
        return int(self.slots[self.sp])

    def entries(self):
        return tuple(int(a) for a in self.slots[:self.sp])
