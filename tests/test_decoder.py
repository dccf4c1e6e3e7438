from dataclasses import FrozenInstanceError

import pytest

from chip8vm import DecodeFailure, Instruction, Op, Register, decode
from chip8vm.decoder import DECODE_TABLE


def test_set_immediate_operands():
    ins = decode(0x6A3C)
    assert ins == Instruction(Op.SET_IMMEDIATE, x=Register.VA, value=0x3C)
    assert ins.word == 0x6A3C


@pytest.mark.parametrize("word,op", [
    (0x00E0, Op.CLEAR_SCREEN),
    (0x00EE, Op.RETURN),
    (0x0123, Op.SYS_CALL),
    (0x0000, Op.SYS_CALL),
    (0x1ABC, Op.JUMP),
    (0x2ABC, Op.CALL),
    (0x3A12, Op.SKIP_IF_EQUAL),
    (0x4A12, Op.SKIP_IF_NOT_EQUAL),
    (0x5AB0, Op.SKIP_IF_REGISTERS_EQUAL),
    (0x6A12, Op.SET_IMMEDIATE),
    (0x7A12, Op.ADD_IMMEDIATE),
    (0x8AB0, Op.COPY_REGISTER),
    (0x8AB1, Op.BITWISE_OR),
    (0x8AB2, Op.BITWISE_AND),
    (0x8AB3, Op.BITWISE_XOR),
    (0x8AB4, Op.ADD_WITH_CARRY),
    (0x8AB5, Op.SUB_WITH_BORROW),
    (0x8AB6, Op.SHIFT_RIGHT),
    (0x8AB7, Op.REVERSE_SUB),
    (0x8ABE, Op.SHIFT_LEFT),
    (0x9AB0, Op.SKIP_IF_REGISTERS_NOT_EQUAL),
    (0xAABC, Op.SET_INDEX),
    (0xBABC, Op.JUMP_PLUS_V0),
    (0xCA12, Op.RANDOM_MASKED),
    (0xDAB5, Op.DRAW_SPRITE),
    (0xEA9E, Op.SKIP_IF_KEY_DOWN),
    (0xEAA1, Op.SKIP_IF_KEY_UP),
    (0xFA07, Op.SET_REGISTER_FROM_DELAY),
    (0xFA0A, Op.WAIT_FOR_KEY),
    (0xFA15, Op.SET_DELAY),
    (0xFA18, Op.SET_SOUND),
    (0xFA1E, Op.ADD_TO_INDEX),
    (0xFA29, Op.LOAD_SPRITE_ADDRESS),
    (0xFA33, Op.STORE_BCD),
    (0xFA55, Op.DUMP_REGISTERS),
    (0xFA65, Op.LOAD_REGISTERS),
])
def test_every_family_decodes(word, op):
    assert decode(word).op is op


def test_table_covers_every_op_once():
    ops = [row[2] for row in DECODE_TABLE]
    assert sorted(o.name for o in ops) == sorted(o.name for o in Op)


def test_address_operand_is_twelve_bits():
    ins = decode(0x2FFF)
    assert ins.address == 0xFFF
    assert ins.x is None and ins.y is None


def test_register_pair_operands():
    ins = decode(0x8C34)
    assert ins.x is Register.VC
    assert ins.y is Register.V3


def test_draw_operands():
    ins = decode(0xD12F)
    assert (ins.x, ins.y, ins.value) == (Register.V1, Register.V2, 0xF)


def test_decoded_registers_are_always_general():
    for word in (0x3F00, 0x8FF4, 0xFF65, 0xEF9E):
        ins = decode(word)
        assert ins.x.is_general
        if ins.y is not None:
            assert ins.y.is_general


@pytest.mark.parametrize("word", [
    0x5AB1,  # 5XY? needs a zero low nibble
    0x9AB1,
    0x8AB8,
    0x8ABF,
    0xEA00,
    0xEA9F,
    0xFA00,
    0xFA99,
])
def test_unknown_words_fail(word):
    with pytest.raises(DecodeFailure) as exc:
        decode(word, 0x2A4)
    assert exc.value.word == word
    assert exc.value.address == 0x2A4
    assert "%04X" % word in str(exc.value)


def test_out_of_range_word_fails():
    with pytest.raises(DecodeFailure):
        decode(0x10000)


def test_instruction_is_immutable():
    ins = decode(0x6A3C)
    with pytest.raises(FrozenInstanceError):
        ins.value = 1


def test_instruction_str():
    assert str(decode(0x6A3C)) == "SET_IMMEDIATE VA 0x3C"
    assert str(decode(0x1234)) == "JUMP 0x234"
    assert str(decode(0x00EE)) == "RETURN"
