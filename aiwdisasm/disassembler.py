"""Instruction listing utilities."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set

from .container import ScriptContainer, ScriptHeader
from .decoder import InstructionDecoder
from .instruction import DecodedInstruction
from .knowledge import KnowledgeBase
from .resolver import ReferenceResolver
from .string_pool import StringPool
from .text import DEFAULT_ENCODING, TextDecoder, escape_text, make_decoder


logger = logging.getLogger(__name__)

STRINGS_MARKER = "; Strings"


@dataclass
class Disassembly:
    """Everything decoded from a single script."""

    header: ScriptHeader
    instructions: List[DecodedInstruction]
    strings: StringPool
    referenced_strings: Set[int] = field(default_factory=set)

    def render_lines(self) -> List[str]:
        lines = [instruction.format() for instruction in self.instructions]
        lines.append(f"{self.header.pool_offset:08X} | {STRINGS_MARKER}")
        for address, text in self.strings.items_by_address():
            lines.append(f'{address:08X} | string "{escape_text(text)}"')
        return lines

    def render_text(self) -> str:
        return "\n".join(self.render_lines()) + "\n"


class Disassembler:
    """Decode script containers and render textual disassembly listings."""

    def __init__(
        self,
        decoder: Optional[TextDecoder] = None,
        *,
        knowledge: Optional[KnowledgeBase] = None,
    ) -> None:
        self.decoder = decoder or make_decoder(DEFAULT_ENCODING)
        self.knowledge = knowledge

    def disassemble(self, container: ScriptContainer) -> Disassembly:
        strings = StringPool.from_bytes(
            container.pool_bytes, self.decoder, base=container.pool_offset
        )
        resolver = ReferenceResolver(strings)
        instructions = InstructionDecoder.for_container(
            container, resolver, knowledge=self.knowledge
        ).decode()

        logger.debug(
            "%d of %d pool string(s) referenced by push instructions",
            len(resolver.referenced),
            len(strings),
        )
        return Disassembly(container.header, instructions, strings, set(resolver.referenced))

    def generate_listing(self, container: ScriptContainer) -> str:
        return self.disassemble(container).render_text()

    def write_listing(self, container: ScriptContainer, output_path: Path) -> None:
        listing = self.generate_listing(container)
        Path(output_path).write_text(listing, "utf-8")
