"""Public package exports for the ``ADV_98`` script disassembler."""

from .container import ScriptContainer, ScriptHeader
from .decoder import InstructionDecoder
from .disassembler import Disassembler, Disassembly
from .errors import DisassemblyError, FormatError, OutOfRangeError, UnknownOpcodeError
from .instruction import DecodedInstruction
from .knowledge import KnowledgeBase, OpcodeInfo
from .opcodes import OPCODE_TABLE, OpcodeSpec, OperandShape
from .resolver import ReferenceResolver, is_string_candidate
from .string_pool import StringPool
from .text import escape_text, make_decoder

__all__ = [
    "ScriptContainer",
    "ScriptHeader",
    "InstructionDecoder",
    "Disassembler",
    "Disassembly",
    "DisassemblyError",
    "FormatError",
    "OutOfRangeError",
    "UnknownOpcodeError",
    "DecodedInstruction",
    "KnowledgeBase",
    "OpcodeInfo",
    "OPCODE_TABLE",
    "OpcodeSpec",
    "OperandShape",
    "ReferenceResolver",
    "is_string_candidate",
    "StringPool",
    "escape_text",
    "make_decoder",
]
