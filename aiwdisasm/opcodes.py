"""Static decode table for the ``ADV_98`` script interpreter.

Every opcode the interpreter dispatches on (``0x00``-``0xB2``) has an entry.
The entry fixes how many operand bytes follow the opcode and how they are
rendered; anything above ``0xB2`` is not a valid opcode.  Opcodes without a
known meaning still need to be consumed correctly, so they carry a
placeholder mnemonic derived from the opcode value.

The handler columns are the addresses of the engine routines that execute
each opcode.  ``handler2`` is used by the opcodes dispatched through the
secondary table, and the opcodes with ``flags`` set reuse a handler from the
``0x0F``-``0x7F`` range.  ``time_cost`` is the number of ticks the
interpreter charges for the instruction.  None of these affect decoding.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Iterator, Optional


class OperandShape(enum.Enum):
    """Number and interpretation of the operand bytes after an opcode."""

    NONE = ("none", 0)
    ABSOLUTE = ("absolute", 4)
    RELATIVE = ("relative", 1)
    DISCARD_DWORD = ("discarded", 4)
    DISCARD_BYTE = ("discarded", 1)
    PUSH_DWORD = ("value", 4)
    PUSH_BYTE = ("value", 1)

    def __init__(self, kind: str, size: int) -> None:
        self.kind = kind
        self.size = size

    @property
    def is_push(self) -> bool:
        return self.kind == "value"


@dataclass(frozen=True)
class OpcodeSpec:
    opcode: int
    name: Optional[str]
    shape: OperandShape
    handler: int = 0
    handler2: int = 0
    flags: int = 0
    time_cost: int = 0

    @property
    def mnemonic(self) -> str:
        return self.name if self.name is not None else placeholder_mnemonic(self.opcode)

    @property
    def is_placeholder(self) -> bool:
        return self.name is None

    @property
    def size(self) -> int:
        """Total encoded size of the instruction in bytes."""

        return 1 + self.shape.size


def placeholder_mnemonic(opcode: int) -> str:
    return f"opcode_{opcode:X}"


NONE = OperandShape.NONE
ABSOLUTE = OperandShape.ABSOLUTE
RELATIVE = OperandShape.RELATIVE
DISCARD_DWORD = OperandShape.DISCARD_DWORD
DISCARD_BYTE = OperandShape.DISCARD_BYTE
PUSH_DWORD = OperandShape.PUSH_DWORD
PUSH_BYTE = OperandShape.PUSH_BYTE


# (opcode, mnemonic, shape, handler, handler2, flags, time_cost)
_RAW_TABLE = (
    (0x00, "nop", NONE, 0x40D760, 0x000000, 0, 1),
    (0x01, "jump_false", ABSOLUTE, 0x40D770, 0x000000, 0, 8),
    (0x02, "jump_false_rel_8", RELATIVE, 0x40D7C0, 0x000000, 0, 8),
    (0x03, "jump", ABSOLUTE, 0x40D820, 0x000000, 0, 4),
    (0x04, "jump_rel_8", RELATIVE, 0x40D870, 0x000000, 0, 4),
    (0x05, "call", ABSOLUTE, 0x40D8C0, 0x000000, 0, 4),
    (0x06, "call_rel_8", RELATIVE, 0x40D940, 0x000000, 0, 4),
    (0x07, "ret", NONE, 0x40D9B0, 0x000000, 0, 4),
    (0x08, "pop_call", NONE, 0x40DA00, 0x000000, 0, 2),
    (0x09, None, DISCARD_DWORD, 0x40DA40, 0x000000, 0, 64),
    (0x0A, "call_script", DISCARD_DWORD, 0x40DB90, 0x000000, 0, 64),
    (0x0B, "ret_script", NONE, 0x40DBD0, 0x000000, 0, 64),
    (0x0C, "exit_script", NONE, 0x40DC30, 0x000000, 0, 64),
    (0x0D, "push", PUSH_DWORD, 0x40DC40, 0x000000, 0, 2),
    (0x0E, "push", PUSH_BYTE, 0x40DC90, 0x000000, 0, 2),
    (0x0F, None, DISCARD_BYTE, 0x000000, 0x40DCE0, 0, 2),
    (0x10, None, DISCARD_BYTE, 0x000000, 0x40DD40, 0, 2),
    (0x11, None, DISCARD_BYTE, 0x000000, 0x40DDA0, 0, 2),
    (0x12, "pop", NONE, 0x410430, 0x000000, 0, 2),
    (0x13, None, NONE, 0x000000, 0x40DE00, 0, 4),
    (0x14, None, NONE, 0x000000, 0x40DE20, 0, 4),
    (0x15, None, NONE, 0x000000, 0x40DE40, 0, 4),
    (0x16, None, NONE, 0x000000, 0x40DE60, 0, 4),
    (0x17, None, NONE, 0x000000, 0x40DE90, 0, 4),
    (0x18, None, NONE, 0x000000, 0x40DEC0, 0, 4),
    (0x19, None, NONE, 0x000000, 0x40DEF0, 0, 4),
    (0x1A, None, NONE, 0x000000, 0x40DF20, 0, 4),
    (0x1B, None, NONE, 0x000000, 0x40DF50, 0, 4),
    (0x1C, None, NONE, 0x000000, 0x40DF80, 0, 4),
    (0x1D, None, NONE, 0x000000, 0x40DFB0, 0, 4),
    (0x1E, None, NONE, 0x000000, 0x40DFE0, 0, 4),
    (0x1F, None, NONE, 0x000000, 0x40E010, 0, 4),
    (0x20, None, NONE, 0x000000, 0x40E030, 0, 4),
    (0x21, None, NONE, 0x000000, 0x40E050, 0, 4),
    (0x22, "neg", NONE, 0x40E070, 0x000000, 0, 2),
    (0x23, "add", NONE, 0x40E080, 0x000000, 0, 2),
    (0x24, "sub", NONE, 0x40E0A0, 0x000000, 0, 2),
    (0x25, "mul", NONE, 0x40E0C0, 0x000000, 0, 4),
    (0x26, "div", NONE, 0x40E0E0, 0x000000, 0, 4),
    (0x27, "mod", NONE, 0x40E100, 0x000000, 0, 4),
    (0x28, "or", NONE, 0x40E120, 0x000000, 0, 2),
    (0x29, "and", NONE, 0x40E140, 0x000000, 0, 2),
    (0x2A, "xor", NONE, 0x40E160, 0x000000, 0, 2),
    (0x2B, "not", NONE, 0x40E180, 0x000000, 0, 2),
    (0x2C, "logical_or", NONE, 0x40E190, 0x000000, 0, 2),
    (0x2D, "logical_and", NONE, 0x40E1C0, 0x000000, 0, 2),
    (0x2E, "is_zero", NONE, 0x40E200, 0x000000, 0, 2),
    (0x2F, "equal", NONE, 0x40E220, 0x000000, 0, 2),
    (0x30, "not_equal", NONE, 0x40E240, 0x000000, 0, 2),
    (0x31, "greater", NONE, 0x40E260, 0x000000, 0, 2),
    (0x32, "less", NONE, 0x40E280, 0x000000, 0, 2),
    (0x33, "greater_equal", NONE, 0x40E2A0, 0x000000, 0, 2),
    (0x34, "less_equal", NONE, 0x40E2C0, 0x000000, 0, 2),
    (0x35, None, NONE, 0x000000, 0x40E2E0, 0, 4),
    (0x36, None, NONE, 0x000000, 0x40E300, 0, 4),
    (0x37, "clear_string", NONE, 0x40E330, 0x000000, 0, 4),
    (0x38, "strcpy", NONE, 0x40E350, 0x000000, 0, 4),
    (0x39, "strcat", NONE, 0x40E380, 0x000000, 0, 4),
    (0x3A, "strcmp", NONE, 0x40E3B0, 0x000000, 0, 4),
    (0x3B, None, NONE, 0x40E3E0, 0x000000, 0, 64),
    (0x3C, "update_tick", NONE, 0x40E4D0, 0x000000, 0, 64),
    (0x3D, None, NONE, 0x40E4F0, 0x000000, 0, 64),
    (0x3E, None, NONE, 0x40E560, 0x000000, 0, 64),
    (0x3F, None, NONE, 0x40E670, 0x000000, 0, 64),
    (0x40, None, NONE, 0x40E7E0, 0x000000, 0, 64),
    (0x41, None, NONE, 0x40E990, 0x000000, 0, 64),
    (0x42, None, NONE, 0x40E910, 0x000000, 0, 64),
    (0x43, None, NONE, 0x40E930, 0x000000, 0, 64),
    (0x44, None, NONE, 0x40E950, 0x000000, 0, 8),
    (0x45, None, NONE, 0x40EA70, 0x000000, 0, 64),
    (0x46, None, NONE, 0x40EAB0, 0x000000, 0, 64),
    (0x47, None, NONE, 0x40EBF0, 0x000000, 0, 64),
    (0x48, None, NONE, 0x40EB10, 0x000000, 0, 64),
    (0x49, None, NONE, 0x40EC40, 0x000000, 0, 2),
    (0x4A, None, NONE, 0x40EC50, 0x000000, 0, 2),
    (0x4B, None, NONE, 0x40EC70, 0x000000, 0, 64),
    (0x4C, None, NONE, 0x40EDA0, 0x000000, 0, 2),
    (0x4D, None, NONE, 0x40EDC0, 0x000000, 0, 2),
    (0x4E, None, NONE, 0x40EE00, 0x000000, 0, 64),
    (0x4F, None, NONE, 0x40F180, 0x000000, 0, 64),
    (0x50, None, NONE, 0x40F190, 0x000000, 0, 64),
    (0x51, None, NONE, 0x40F1D0, 0x000000, 0, 64),
    (0x52, None, NONE, 0x40F210, 0x000000, 0, 8),
    (0x53, None, NONE, 0x40F220, 0x000000, 0, 4),
    (0x54, None, NONE, 0x40F250, 0x000000, 0, 4),
    (0x55, None, NONE, 0x40F250, 0x000000, 0, 4),
    (0x56, None, NONE, 0x40FC90, 0x000000, 0, 64),
    (0x57, None, NONE, 0x40F260, 0x000000, 0, 2),
    (0x58, None, NONE, 0x40F2A0, 0x000000, 0, 8),
    (0x59, None, NONE, 0x40F300, 0x000000, 0, 8),
    (0x5A, None, NONE, 0x40F380, 0x000000, 0, 8),
    (0x5B, None, NONE, 0x40F3F0, 0x000000, 0, 8),
    (0x5C, None, NONE, 0x40F490, 0x000000, 0, 64),
    (0x5D, None, NONE, 0x40F720, 0x000000, 0, 64),
    (0x5E, None, NONE, 0x40F7B0, 0x000000, 0, 64),
    (0x5F, None, NONE, 0x40F840, 0x000000, 0, 8),
    (0x60, None, NONE, 0x40F8B0, 0x000000, 0, 8),
    (0x61, None, NONE, 0x40F8C0, 0x000000, 0, 8),
    (0x62, None, NONE, 0x40F8F0, 0x000000, 0, 8),
    (0x63, None, NONE, 0x40F900, 0x000000, 0, 16),
    (0x64, None, NONE, 0x40F990, 0x000000, 0, 16),
    (0x65, None, NONE, 0x40FA40, 0x000000, 0, 64),
    (0x66, None, NONE, 0x40FAE0, 0x000000, 0, 16),
    (0x67, None, NONE, 0x40FBE0, 0x000000, 0, 16),
    (0x68, None, NONE, 0x40FC40, 0x000000, 0, 16),
    (0x69, None, NONE, 0x40FE50, 0x000000, 0, 2),
    (0x6A, None, NONE, 0x40FE70, 0x000000, 0, 2),
    (0x6B, None, NONE, 0x40FE90, 0x000000, 0, 2),
    (0x6C, None, NONE, 0x40FEA0, 0x000000, 0, 64),
    (0x6D, None, NONE, 0x40FEE0, 0x000000, 0, 64),
    (0x6E, None, NONE, 0x40FF40, 0x000000, 0, 64),
    (0x6F, None, NONE, 0x40FF50, 0x000000, 0, 2),
    (0x70, None, NONE, 0x40FF80, 0x000000, 0, 64),
    (0x71, None, NONE, 0x40FFA0, 0x000000, 0, 64),
    (0x72, None, NONE, 0x410070, 0x000000, 0, 64),
    (0x73, None, NONE, 0x410080, 0x000000, 0, 64),
    (0x74, None, NONE, 0x4100D0, 0x000000, 0, 64),
    (0x75, None, NONE, 0x4100E0, 0x000000, 0, 64),
    (0x76, None, NONE, 0x410140, 0x000000, 0, 64),
    (0x77, "pop", NONE, 0x410430, 0x000000, 0, 8),
    (0x78, None, NONE, 0x410150, 0x000000, 0, 64),
    (0x79, None, NONE, 0x410200, 0x000000, 0, 64),
    (0x7A, "pop", NONE, 0x410430, 0x000000, 0, 8),
    (0x7B, None, DISCARD_DWORD, 0x410250, 0x000000, 0, 64),
    (0x7C, None, NONE, 0x410300, 0x000000, 0, 64),
    (0x7D, None, NONE, 0x410380, 0x000000, 0, 64),
    (0x7E, None, NONE, 0x000000, 0x4103A0, 0, 2),
    (0x7F, None, NONE, 0x000000, 0x4103C0, 0, 2),
    (0x80, None, NONE, 0x4103E0, 0x000000, 0, 1),
    (0x81, None, NONE, 0x4103F0, 0x000000, 0, 32),
    (0x82, None, NONE, 0x410410, 0x000000, 0, 32),
    (0x83, "pop", NONE, 0x410430, 0x000000, 0, 64),
    (0x84, None, NONE, 0x410440, 0x000000, 0, 64),
    (0x85, None, NONE, 0x410450, 0x000000, 0, 64),
    (0x86, None, NONE, 0x4104A0, 0x000000, 0, 64),
    (0x87, None, NONE, 0x4104E0, 0x000000, 0, 64),
    (0x88, None, NONE, 0x410490, 0x000000, 0, 64),
    (0x89, None, NONE, 0x410610, 0x000000, 0, 64),
    (0x8A, None, NONE, 0x4105E0, 0x000000, 0, 64),
    (0x8B, None, NONE, 0x000000, 0x40E050, 1, 4),
    (0x8C, None, NONE, 0x000000, 0x40E030, 1, 4),
    (0x8D, None, NONE, 0x000000, 0x40E010, 1, 4),
    (0x8E, None, NONE, 0x000000, 0x40E300, 1, 4),
    (0x8F, None, NONE, 0x000000, 0x40E2E0, 1, 4),
    (0x90, None, NONE, 0x000000, 0x40DFE0, 1, 4),
    (0x91, None, NONE, 0x000000, 0x40DFB0, 1, 4),
    (0x92, None, NONE, 0x000000, 0x40DF80, 1, 4),
    (0x93, None, DISCARD_BYTE, 0x000000, 0x40DDA0, 1, 2),
    (0x94, None, DISCARD_BYTE, 0x000000, 0x40DD40, 1, 2),
    (0x95, None, DISCARD_BYTE, 0x000000, 0x40DCE0, 1, 2),
    (0x96, None, NONE, 0x000000, 0x40DE40, 1, 4),
    (0x97, None, NONE, 0x000000, 0x40DE20, 1, 4),
    (0x98, None, NONE, 0x000000, 0x40DE00, 1, 4),
    (0x99, None, NONE, 0x000000, 0x40DEC0, 1, 4),
    (0x9A, None, NONE, 0x000000, 0x40DE90, 1, 4),
    (0x9B, None, NONE, 0x000000, 0x40DE60, 1, 4),
    (0x9C, None, NONE, 0x000000, 0x40DF50, 1, 4),
    (0x9D, None, NONE, 0x000000, 0x40DF20, 1, 4),
    (0x9E, None, NONE, 0x000000, 0x40DEF0, 1, 4),
    (0x9F, None, NONE, 0x000000, 0x4103A0, 1, 2),
    (0xA0, None, NONE, 0x000000, 0x4103C0, 1, 2),
    (0xA1, None, NONE, 0x410C50, 0x000000, 0, 64),
    (0xA2, None, NONE, 0x410810, 0x000000, 0, 64),
    (0xA3, None, NONE, 0x410C70, 0x000000, 0, 64),
    (0xA4, None, NONE, 0x410D60, 0x000000, 0, 64),
    (0xA5, None, NONE, 0x40F020, 0x000000, 0, 64),
    (0xA6, None, NONE, 0x411420, 0x000000, 0, 64),
    (0xA7, None, NONE, 0x411520, 0x000000, 0, 64),
    (0xA8, None, NONE, 0x4115E0, 0x000000, 0, 64),
    (0xA9, None, NONE, 0x40EEF0, 0x000000, 0, 16),
    (0xAA, None, NONE, 0x411660, 0x000000, 0, 4),
    (0xAB, None, NONE, 0x4116F0, 0x000000, 0, 64),
    (0xAC, None, NONE, 0x411A60, 0x000000, 0, 64),
    (0xAD, None, NONE, 0x411780, 0x000000, 0, 64),
    (0xAE, None, NONE, 0x411A90, 0x000000, 0, 64),
    (0xAF, None, NONE, 0x411AD0, 0x000000, 0, 64),
    (0xB0, None, NONE, 0x40F250, 0x000000, 0, 64),
    (0xB1, None, NONE, 0x40F250, 0x000000, 0, 64),
    (0xB2, None, NONE, 0x40EB50, 0x000000, 0, 64),
)


OPCODE_TABLE: Dict[int, OpcodeSpec] = {
    row[0]: OpcodeSpec(*row) for row in _RAW_TABLE
}

MAX_OPCODE = max(OPCODE_TABLE)


def lookup(opcode: int) -> Optional[OpcodeSpec]:
    """Return the table entry for *opcode* or ``None`` when it is unassigned."""

    return OPCODE_TABLE.get(opcode)


def iter_opcodes() -> Iterator[OpcodeSpec]:
    for opcode in sorted(OPCODE_TABLE):
        yield OPCODE_TABLE[opcode]


__all__ = [
    "MAX_OPCODE",
    "OPCODE_TABLE",
    "OpcodeSpec",
    "OperandShape",
    "iter_opcodes",
    "lookup",
    "placeholder_mnemonic",
]
