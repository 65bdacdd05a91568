"""Representation of decoded script instructions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .opcodes import OpcodeSpec, OperandShape
from .text import escape_text


@dataclass(frozen=True)
class DecodedInstruction:
    address: int
    spec: OpcodeSpec
    operand: Optional[int] = None
    string: Optional[str] = None
    mnemonic_override: Optional[str] = None

    @property
    def opcode(self) -> int:
        return self.spec.opcode

    @property
    def shape(self) -> OperandShape:
        return self.spec.shape

    @property
    def mnemonic(self) -> str:
        return self.mnemonic_override or self.spec.mnemonic

    @property
    def operand_kind(self) -> str:
        return self.spec.shape.kind

    @property
    def size(self) -> int:
        return self.spec.size

    @property
    def end(self) -> int:
        """Address of the byte following this instruction."""

        return self.address + self.spec.size

    @property
    def target(self) -> Optional[int]:
        """Branch target for the absolute and relative jump/call forms."""

        if self.spec.shape is OperandShape.ABSOLUTE:
            return self.operand
        if self.spec.shape is OperandShape.RELATIVE and self.operand is not None:
            return self.address + 1 + self.operand
        return None

    @property
    def is_string_reference(self) -> bool:
        return self.string is not None

    def body(self) -> str:
        """Render the text that follows the address column."""

        shape = self.spec.shape
        if shape is OperandShape.ABSOLUTE or shape is OperandShape.RELATIVE:
            return f"{self.mnemonic} {_dword(self.target)}"
        if shape.is_push:
            # resolved string references always use the dword spelling
            if self.string is not None:
                return f'{self.mnemonic} dword 0x{_dword(self.operand)} ; offset "{escape_text(self.string)}"'
            if shape is OperandShape.PUSH_BYTE:
                return f"{self.mnemonic} byte 0x{self.operand & 0xFF:02X}"
            return f"{self.mnemonic} dword 0x{_dword(self.operand)}"
        return self.mnemonic

    def format(self) -> str:
        return f"{self.address:08X} | {self.body()}"


def _dword(value: Optional[int]) -> str:
    return f"{(value or 0) & 0xFFFFFFFF:08X}"


__all__ = ["DecodedInstruction"]
