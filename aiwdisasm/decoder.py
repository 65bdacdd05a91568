"""Sequential instruction decoder for the bytecode region."""

from __future__ import annotations

import logging
from typing import Iterator, List, Mapping, Optional

from .container import ScriptContainer
from .errors import OutOfRangeError, UnknownOpcodeError
from .instruction import DecodedInstruction
from .knowledge import KnowledgeBase
from .opcodes import OPCODE_TABLE, OpcodeSpec
from .resolver import ReferenceResolver


logger = logging.getLogger(__name__)


class InstructionDecoder:
    """Walk ``[start, end)`` of *data* one instruction at a time.

    Decoding never follows branches: every byte of the region belongs to
    exactly one instruction, in address order.
    """

    def __init__(
        self,
        data: bytes,
        start: int,
        end: int,
        resolver: ReferenceResolver,
        *,
        table: Mapping[int, OpcodeSpec] = OPCODE_TABLE,
        knowledge: Optional[KnowledgeBase] = None,
    ) -> None:
        if not (0 <= start <= end <= len(data)):
            raise OutOfRangeError(
                f"code region [0x{start:08X}, 0x{end:08X}) exceeds data size {len(data)}",
                address=start,
            )
        self.data = data
        self.start = start
        self.end = end
        self.resolver = resolver
        self.table = table
        self.knowledge = knowledge

    @classmethod
    def for_container(
        cls,
        container: ScriptContainer,
        resolver: ReferenceResolver,
        *,
        knowledge: Optional[KnowledgeBase] = None,
    ) -> "InstructionDecoder":
        return cls(
            container.data,
            container.code_offset,
            container.pool_offset,
            resolver,
            knowledge=knowledge,
        )

    def iter_instructions(self) -> Iterator[DecodedInstruction]:
        cursor = self.start
        while cursor < self.end:
            instruction = self._decode_at(cursor)
            yield instruction
            cursor = instruction.end

    def decode(self) -> List[DecodedInstruction]:
        instructions = list(self.iter_instructions())
        logger.debug(
            "decoded %d instruction(s) in [0x%08X, 0x%08X)",
            len(instructions),
            self.start,
            self.end,
        )
        return instructions

    def _decode_at(self, address: int) -> DecodedInstruction:
        opcode = self.data[address]
        spec = self.table.get(opcode)
        if spec is None:
            raise UnknownOpcodeError(opcode, address)

        operand = self._read_operand(spec, address + 1)

        string = None
        if spec.shape.is_push and operand is not None:
            string = self.resolver.resolve(operand)

        override = None
        if self.knowledge is not None and spec.is_placeholder:
            override = self.knowledge.mnemonic_for(opcode)

        return DecodedInstruction(address, spec, operand, string, override)

    def _read_operand(self, spec: OpcodeSpec, position: int) -> Optional[int]:
        size = spec.shape.size
        if size == 0:
            return None
        if position + size > self.end:
            raise OutOfRangeError(
                f"opcode 0x{spec.opcode:02X} needs {size} operand byte(s) but only "
                f"{self.end - position} remain before 0x{self.end:08X}",
                address=position - 1,
            )
        # discarded operands are kept on the record but never rendered
        return int.from_bytes(self.data[position : position + size], "little", signed=True)


__all__ = ["InstructionDecoder"]
