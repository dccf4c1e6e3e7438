import logging

from .config import FONT_BASE, FONT_GLYPH_SIZE, Quirks
from .instructions import Op
from .registers import FLAG, Register

logger = logging.getLogger(__name__)


class Executor:
    """Applies decoded instructions to a MachineState.

    The random source, key input and display are injected here; nothing in
    this class reaches for global state.
    """

    def __init__(self, random_source, keys, display, quirks=None):
        self.random_source = random_source
        self.keys = keys
        self.display = display
        self.quirks = quirks or Quirks()
        self.setup_funcmap()

    # ---- Opcode function map ----
    def setup_funcmap(self):
        self.funcmap = {
            Op.CLEAR_SCREEN: self.op_CLS,                          # 00E0
            Op.RETURN: self.op_RET,                                # 00EE
            Op.SYS_CALL: self.op_SYS,                              # 0NNN
            Op.JUMP: self.op_JP,                                   # 1NNN
            Op.CALL: self.op_CALL,                                 # 2NNN
            Op.SKIP_IF_EQUAL: self.op_SE_Vx_kk,                    # 3XKK
            Op.SKIP_IF_NOT_EQUAL: self.op_SNE_Vx_kk,               # 4XKK
            Op.SKIP_IF_REGISTERS_EQUAL: self.op_SE_Vx_Vy,          # 5XY0
            Op.SET_IMMEDIATE: self.op_LD_Vx_kk,                    # 6XKK
            Op.ADD_IMMEDIATE: self.op_ADD_Vx_kk,                   # 7XKK
            Op.COPY_REGISTER: self.op_LD_Vx_Vy,                    # 8XY0
            Op.BITWISE_OR: self.op_OR,                             # 8XY1
            Op.BITWISE_AND: self.op_AND,                           # 8XY2
            Op.BITWISE_XOR: self.op_XOR,                           # 8XY3
            Op.ADD_WITH_CARRY: self.op_ADD,                        # 8XY4
            Op.SUB_WITH_BORROW: self.op_SUB,                       # 8XY5
            Op.SHIFT_RIGHT: self.op_SHR,                           # 8XY6
            Op.REVERSE_SUB: self.op_SUBN,                          # 8XY7
            Op.SHIFT_LEFT: self.op_SHL,                            # 8XYE
            Op.SKIP_IF_REGISTERS_NOT_EQUAL: self.op_SNE_Vx_Vy,     # 9XY0
            Op.SET_INDEX: self.op_LD_I,                            # ANNN
            Op.JUMP_PLUS_V0: self.op_JP_V0,                        # BNNN
            Op.RANDOM_MASKED: self.op_RND,                         # CXKK
            Op.DRAW_SPRITE: self.op_DRW,                           # DXYN
            Op.SKIP_IF_KEY_DOWN: self.op_SKP,                      # EX9E
            Op.SKIP_IF_KEY_UP: self.op_SKNP,                       # EXA1
            Op.SET_REGISTER_FROM_DELAY: self.op_LD_Vx_DT,          # FX07
            Op.WAIT_FOR_KEY: self.op_WAITKEY,                      # FX0A
            Op.SET_DELAY: self.op_LD_DT_Vx,                        # FX15
            Op.SET_SOUND: self.op_LD_ST_Vx,                        # FX18
            Op.ADD_TO_INDEX: self.op_ADD_I_Vx,                     # FX1E
            Op.LOAD_SPRITE_ADDRESS: self.op_FONT,                  # FX29
            Op.STORE_BCD: self.op_BCD,                             # FX33
            Op.DUMP_REGISTERS: self.op_STORE,                      # FX55
            Op.LOAD_REGISTERS: self.op_LOAD,                       # FX65
        }

    def execute(self, state, ins):
        """Run one instruction. PC must already point past it."""
        self.funcmap[ins.op](state, ins)

    # ---- helpers ----
    @staticmethod
    def _skip(state):
        state.registers[Register.PC] = state.registers.pc + 2

    @staticmethod
    def _check_target(state, target):
        # the next fetch must fit in memory
        state.memory.check(target, 2)

    def _set_flag_after(self, state, hit):
        if hit:
            state.registers[FLAG] = 1
        elif self.quirks.clear_flag_on_no_carry:
            state.registers[FLAG] = 0

    def _shift_source(self, ins):
        return ins.y if self.quirks.shift_uses_vy else ins.x

    # ---- control flow ----
    def op_CLS(self, state, ins):
        self.display.clear()
        logger.debug("Clear the display")

    def op_RET(self, state, ins):
        addr = state.stack.pop()
        state.registers[Register.PC] = addr
        logger.debug("Return to 0x%03X", addr)

    def op_SYS(self, state, ins):
        # 0nnn is ignored on modern interpreters
        logger.debug("SYS call to 0x%03X ignored", ins.address)

    def op_JP(self, state, ins):
        self._check_target(state, ins.address)
        state.registers[Register.PC] = ins.address
        logger.debug("Jump to address 0x%03X", ins.address)

    def op_CALL(self, state, ins):
        self._check_target(state, ins.address)
        state.stack.push(state.registers.pc, ins.address)
        state.registers[Register.PC] = ins.address
        logger.debug("Call subroutine at 0x%03X", ins.address)

    def op_JP_V0(self, state, ins):
        target = ins.address + state.registers[Register.V0]
        self._check_target(state, target)
        state.registers[Register.PC] = target
        logger.debug("Jump to address V0 + 0x%03X = 0x%03X", ins.address, target)

    def op_SE_Vx_kk(self, state, ins):
        if state.registers[ins.x] == ins.value:
            self._skip(state)

    def op_SNE_Vx_kk(self, state, ins):
        if state.registers[ins.x] != ins.value:
            self._skip(state)

    def op_SE_Vx_Vy(self, state, ins):
        if state.registers[ins.x] == state.registers[ins.y]:
            self._skip(state)

    def op_SNE_Vx_Vy(self, state, ins):
        if state.registers[ins.x] != state.registers[ins.y]:
            self._skip(state)

    # ---- data ----
    def op_LD_Vx_kk(self, state, ins):
        state.registers[ins.x] = ins.value
        logger.debug("Set %s = 0x%02X", ins.x.name, ins.value)

    def op_ADD_Vx_kk(self, state, ins):
        # carry flag is untouched here
        r = state.registers
        r[ins.x] = r[ins.x] + ins.value
        logger.debug("Add 0x%02X to %s: 0x%02X", ins.value, ins.x.name, r[ins.x])

    def op_LD_Vx_Vy(self, state, ins):
        state.registers[ins.x] = state.registers[ins.y]

    def op_OR(self, state, ins):
        r = state.registers
        r[ins.x] = r[ins.x] | r[ins.y]

    def op_AND(self, state, ins):
        r = state.registers
        r[ins.x] = r[ins.x] & r[ins.y]

    def op_XOR(self, state, ins):
        r = state.registers
        r[ins.x] = r[ins.x] ^ r[ins.y]

    def op_ADD(self, state, ins):
        r = state.registers
        total = r[ins.x] + r[ins.y]
        r[ins.x] = total
        self._set_flag_after(state, total > 0xFF)
        logger.debug("Add %s to %s: result 0x%02X, carry=%d", ins.y.name, ins.x.name, r[ins.x], r[FLAG])

    def op_SUB(self, state, ins):
        r = state.registers
        vx, vy = r[ins.x], r[ins.y]
        r[ins.x] = vx - vy
        self._set_flag_after(state, vy > vx)
        logger.debug("Subtract %s from %s: result 0x%02X, borrow=%d", ins.y.name, ins.x.name, r[ins.x], r[FLAG])

    def op_SUBN(self, state, ins):
        r = state.registers
        vx, vy = r[ins.x], r[ins.y]
        r[ins.x] = vy - vx
        self._set_flag_after(state, vx > vy)
        logger.debug("Set %s = %s - %s: result 0x%02X, borrow=%d", ins.x.name, ins.y.name, ins.x.name, r[ins.x], r[FLAG])

    def op_SHR(self, state, ins):
        r = state.registers
        src = r[self._shift_source(ins)]
        r[FLAG] = src & 1
        r[ins.x] = src >> 1
        logger.debug("Shift right into %s: 0x%02X", ins.x.name, r[ins.x])

    def op_SHL(self, state, ins):
        r = state.registers
        src = r[self._shift_source(ins)]
        r[FLAG] = (src >> 7) & 1
        r[ins.x] = src << 1
        logger.debug("Shift left into %s: 0x%02X", ins.x.name, r[ins.x])

    def op_LD_I(self, state, ins):
        state.registers[Register.I] = ins.address
        logger.debug("Set I = 0x%03X", ins.address)

    def op_ADD_I_Vx(self, state, ins):
        r = state.registers
        new_i = r.index + r[ins.x]
        if self.quirks.wrap_index:
            new_i &= 0xFFF
        r[Register.I] = new_i

    def op_RND(self, state, ins):
        state.registers[ins.x] = self.random_source.random_byte() & ins.value
        logger.debug("Set %s = random_byte & 0x%02X", ins.x.name, ins.value)

    # ---- I/O ----
    def op_DRW(self, state, ins):
        r = state.registers
        sprite = state.memory.read_block(r.index, ins.value)
        collided = self.display.draw(r[ins.x], r[ins.y], sprite)
        r[FLAG] = 1 if collided else 0
        logger.debug("Drew sprite, collision=%d", r[FLAG])

    def op_SKP(self, state, ins):
        if self.keys.is_key_down(state.registers[ins.x] & 0xF):
            self._skip(state)

    def op_SKNP(self, state, ins):
        if not self.keys.is_key_down(state.registers[ins.x] & 0xF):
            self._skip(state)

    def op_LD_Vx_DT(self, state, ins):
        state.registers[ins.x] = state.timers.delay

    def op_WAITKEY(self, state, ins):
        state.awaiting_key = ins.x
        logger.debug("Waiting for a key press into %s", ins.x.name)

    def op_LD_DT_Vx(self, state, ins):
        state.timers.set_delay(state.registers[ins.x])

    def op_LD_ST_Vx(self, state, ins):
        state.timers.set_sound(state.registers[ins.x])

    def op_FONT(self, state, ins):
        state.registers[Register.I] = FONT_BASE + FONT_GLYPH_SIZE * state.registers[ins.x]

    def op_BCD(self, state, ins):
        r = state.registers
        val = r[ins.x]
        state.memory.write_block(r.index, (val // 100, (val // 10) % 10, val % 10))

    def op_STORE(self, state, ins):
        r = state.registers
        state.memory.write_block(r.index, r.v[:ins.x + 1])

    def op_LOAD(self, state, ins):
        r = state.registers
        values = state.memory.read_block(r.index, ins.x + 1)
        for i, b in enumerate(values):
            r[Register(i)] = b
