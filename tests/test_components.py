import pytest

from chip8vm import OutOfBoundsAccess, ProgramTooLarge, Register, StackOverflow, StackUnderflow
from chip8vm.config import MAX_PROGRAM_SIZE, MEMORY_SIZE, PROGRAM_START
from chip8vm.memory import Memory
from chip8vm.registers import RegisterFile
from chip8vm.stack import Stack
from chip8vm.timers import TimerBank


# ---- Memory ----
def test_memory_size_and_word_order():
    mem = Memory()
    assert len(mem) == MEMORY_SIZE
    mem.write_block(0x300, b"\xa2\x1e")
    assert mem.read_word(0x300) == 0xA21E


def test_memory_write_masks_to_a_byte():
    mem = Memory()
    mem.write(0x300, 0x1FF)
    assert mem.read(0x300) == 0xFF


@pytest.mark.parametrize("address,length", [(-1, 1), (MEMORY_SIZE, 1), (MEMORY_SIZE - 1, 2), (0xFF0, 0x20)])
def test_memory_bounds(address, length):
    mem = Memory()
    with pytest.raises(OutOfBoundsAccess) as exc:
        mem.read_block(address, length)
    assert exc.value.address == address


def test_memory_last_byte_is_addressable():
    mem = Memory()
    mem.write(MEMORY_SIZE - 1, 0x42)
    assert mem.read(MEMORY_SIZE - 1) == 0x42


def test_memory_program_limits():
    mem = Memory()
    mem.load_program(b"\x01" * MAX_PROGRAM_SIZE)
    assert mem.read(MEMORY_SIZE - 1) == 1
    assert mem.read(PROGRAM_START - 1) == 0
    with pytest.raises(ProgramTooLarge):
        mem.load_program(bytes(MAX_PROGRAM_SIZE + 1))


# ---- RegisterFile ----
def test_general_registers_wrap():
    regs = RegisterFile()
    regs[Register.V3] = 0x1FF
    assert regs[Register.V3] == 0xFF
    assert regs.v[3] == 0xFF


def test_index_and_pc_share_lookup():
    regs = RegisterFile()
    regs[Register.I] = 0x1234
    regs[Register.PC] = 0x10200
    assert regs[Register.I] == regs.index == 0x1234
    assert regs[Register.PC] == regs.pc == 0x0200


def test_register_identifier_is_the_slot():
    regs = RegisterFile()
    for reg in Register:
        if reg.is_general:
            regs[reg] = reg.value + 1
    assert regs.v == list(range(1, 17))
    assert regs.index == 0 and regs.pc == 0


def test_register_kinds():
    assert Register.VF.is_general
    assert not Register.I.is_general
    assert not Register.PC.is_general


# ---- Stack ----
def test_stack_is_lifo():
    stack = Stack()
    stack.push(0x202)
    stack.push(0x304)
    assert stack.entries() == (0x202, 0x304)
    assert stack.pop() == 0x304
    assert stack.pop() == 0x202
    assert len(stack) == 0


def test_stack_bounds():
    stack = Stack(depth=2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackOverflow):
        stack.push(3)
    stack.reset()
    with pytest.raises(StackUnderflow):
        stack.pop()


# ---- TimerBank ----
def test_timers_count_down_and_clamp():
    timers = TimerBank()
    timers.set_delay(2)
    timers.set_sound(1)
    assert timers.sound_active
    timers.tick()
    assert (timers.delay, timers.sound) == (1, 0)
    assert not timers.sound_active
    timers.tick()
    timers.tick()
    assert (timers.delay, timers.sound) == (0, 0)
