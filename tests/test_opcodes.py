from aiwdisasm import OPCODE_TABLE, OperandShape
from aiwdisasm.opcodes import MAX_OPCODE, iter_opcodes, lookup, placeholder_mnemonic


NAMED = {
    0x00: "nop",
    0x01: "jump_false",
    0x02: "jump_false_rel_8",
    0x03: "jump",
    0x04: "jump_rel_8",
    0x05: "call",
    0x06: "call_rel_8",
    0x07: "ret",
    0x08: "pop_call",
    0x0A: "call_script",
    0x0B: "ret_script",
    0x0C: "exit_script",
    0x0D: "push",
    0x0E: "push",
    0x12: "pop",
    0x22: "neg",
    0x23: "add",
    0x24: "sub",
    0x25: "mul",
    0x26: "div",
    0x27: "mod",
    0x28: "or",
    0x29: "and",
    0x2A: "xor",
    0x2B: "not",
    0x2C: "logical_or",
    0x2D: "logical_and",
    0x2E: "is_zero",
    0x2F: "equal",
    0x30: "not_equal",
    0x31: "greater",
    0x32: "less",
    0x33: "greater_equal",
    0x34: "less_equal",
    0x37: "clear_string",
    0x38: "strcpy",
    0x39: "strcat",
    0x3A: "strcmp",
    0x3C: "update_tick",
    0x77: "pop",
    0x7A: "pop",
    0x83: "pop",
}

SHAPES = {
    0x01: OperandShape.ABSOLUTE,
    0x03: OperandShape.ABSOLUTE,
    0x05: OperandShape.ABSOLUTE,
    0x02: OperandShape.RELATIVE,
    0x04: OperandShape.RELATIVE,
    0x06: OperandShape.RELATIVE,
    0x09: OperandShape.DISCARD_DWORD,
    0x0A: OperandShape.DISCARD_DWORD,
    0x7B: OperandShape.DISCARD_DWORD,
    0x0F: OperandShape.DISCARD_BYTE,
    0x10: OperandShape.DISCARD_BYTE,
    0x11: OperandShape.DISCARD_BYTE,
    0x93: OperandShape.DISCARD_BYTE,
    0x94: OperandShape.DISCARD_BYTE,
    0x95: OperandShape.DISCARD_BYTE,
    0x0D: OperandShape.PUSH_DWORD,
    0x0E: OperandShape.PUSH_BYTE,
}


def test_table_covers_every_defined_opcode() -> None:
    assert sorted(OPCODE_TABLE) == list(range(0xB3))
    assert MAX_OPCODE == 0xB2
    assert lookup(0xB3) is None
    assert lookup(0xFF) is None


def test_named_mnemonics_are_exact() -> None:
    named = {spec.opcode: spec.mnemonic for spec in iter_opcodes() if not spec.is_placeholder}
    assert named == NAMED


def test_operand_shapes() -> None:
    for spec in iter_opcodes():
        expected = SHAPES.get(spec.opcode, OperandShape.NONE)
        assert spec.shape is expected, f"opcode 0x{spec.opcode:02X}"


def test_instruction_sizes() -> None:
    assert OPCODE_TABLE[0x00].size == 1
    assert OPCODE_TABLE[0x01].size == 5
    assert OPCODE_TABLE[0x04].size == 2
    assert OPCODE_TABLE[0x0D].size == 5
    assert OPCODE_TABLE[0x0E].size == 2
    assert OPCODE_TABLE[0x7B].size == 5
    assert OPCODE_TABLE[0x95].size == 2


def test_placeholder_mnemonics() -> None:
    assert placeholder_mnemonic(0x09) == "opcode_9"
    assert OPCODE_TABLE[0x0F].mnemonic == "opcode_F"
    assert OPCODE_TABLE[0x13].mnemonic == "opcode_13"
    assert OPCODE_TABLE[0xB2].mnemonic == "opcode_B2"


def test_engine_metadata() -> None:
    nop = OPCODE_TABLE[0x00]
    assert (nop.handler, nop.handler2, nop.flags, nop.time_cost) == (0x40D760, 0, 0, 1)

    mirrored = OPCODE_TABLE[0x95]
    assert mirrored.flags == 1
    assert mirrored.handler2 == OPCODE_TABLE[0x0F].handler2 == 0x40DCE0


def test_raw_table_has_one_row_per_opcode() -> None:
    from aiwdisasm.opcodes import _RAW_TABLE

    assert len(_RAW_TABLE) == len(OPCODE_TABLE)
