"""Exception hierarchy raised while disassembling ``ADV_98`` scripts.

Every failure is fatal for the run: the listing is all-or-nothing, so callers
only need to catch :class:`DisassemblyError` to report a problem.  Each error
keeps the absolute file offset it refers to so the message can be followed
up in a hex editor.
"""

from __future__ import annotations

from typing import Optional


class DisassemblyError(Exception):
    """Base class for all fatal disassembly failures."""

    def __init__(self, message: str, *, address: Optional[int] = None) -> None:
        self.message = message
        self.address = address
        super().__init__(self._format())

    def _format(self) -> str:
        if self.address is None:
            return self.message
        return f"{self.message} at 0x{self.address & 0xFFFFFFFF:08X}"


class FormatError(DisassemblyError):
    """The input is not a well formed script container."""


class UnknownOpcodeError(DisassemblyError):
    """An opcode byte with no entry in the decode table was encountered."""

    def __init__(self, opcode: int, address: int) -> None:
        self.opcode = opcode
        super().__init__(f"unknown opcode 0x{opcode:02X}", address=address)


class OutOfRangeError(DisassemblyError):
    """A read or offset falls outside the region it must stay within."""


__all__ = [
    "DisassemblyError",
    "FormatError",
    "UnknownOpcodeError",
    "OutOfRangeError",
]
