"""Optional opcode annotations loaded from a JSON file.

Most opcodes in the decode table only have a placeholder mnemonic.  Reverse
engineering sessions gradually work out what they do, and the findings are
recorded in an annotation file instead of the table itself::

    {
        "push_variable": {"opcodes": ["0x13", "0x98"], "name": "push_var"},
        "7E": {"name": "wait_frames", "summary": "Sleep for N ticks."}
    }

An entry either lists its opcodes explicitly under ``"opcodes"`` or uses the
opcode itself as the key.  Opcodes are written as ``0x``-prefixed hex, bare
hex containing a letter, or decimal.  Only placeholder mnemonics can be
renamed; the named mnemonics and every operand shape are fixed.
"""

from __future__ import annotations

import json
import logging
import string
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional

from .opcodes import OPCODE_TABLE


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpcodeInfo:
    """Manual annotation for a single opcode."""

    mnemonic: str
    summary: Optional[str] = None

    @classmethod
    def from_json(cls, mnemonic: str, entry: Mapping[str, Any]) -> "OpcodeInfo":
        summary = entry.get("summary")
        return cls(mnemonic=mnemonic, summary=str(summary) if summary else None)


class KnowledgeBase:
    """Resolve opcode values to :class:`OpcodeInfo` entries."""

    def __init__(self, annotations: Mapping[int, OpcodeInfo]) -> None:
        self._annotations: Dict[int, OpcodeInfo] = dict(annotations)

    @classmethod
    def empty(cls) -> "KnowledgeBase":
        return cls({})

    @classmethod
    def load(cls, path: Optional[Path]) -> "KnowledgeBase":
        """Load annotations from *path*; a missing file yields an empty base."""

        if path is None or not Path(path).exists():
            return cls.empty()
        data = json.loads(Path(path).read_text("utf-8"))
        return cls.from_mapping(data)

    @classmethod
    def from_mapping(cls, data: Any) -> "KnowledgeBase":
        annotations: Dict[int, OpcodeInfo] = {}
        if not isinstance(data, Mapping):
            logger.warning("annotation data must be a JSON object, got %s", type(data).__name__)
            return cls(annotations)

        for key, entry in data.items():
            if not isinstance(entry, Mapping):
                continue
            mnemonic = str(entry.get("name") or entry.get("mnemonic") or key)
            info = OpcodeInfo.from_json(mnemonic, entry)

            labels = entry.get("opcodes")
            if not isinstance(labels, Iterable) or isinstance(labels, (str, bytes)) or not labels:
                labels = [key]

            for label in labels:
                opcode = _parse_opcode(label)
                if opcode is None:
                    logger.warning("skipping annotation %r: cannot parse opcode %r", key, label)
                    continue
                spec = OPCODE_TABLE.get(opcode)
                if spec is None:
                    logger.warning("skipping annotation %r: opcode 0x%02X is not defined", key, opcode)
                    continue
                if not spec.is_placeholder:
                    logger.warning(
                        "skipping annotation %r: opcode 0x%02X is already named %s",
                        key,
                        opcode,
                        spec.mnemonic,
                    )
                    continue
                annotations[opcode] = info

        return cls(annotations)

    def lookup(self, opcode: int) -> Optional[OpcodeInfo]:
        return self._annotations.get(opcode)

    def mnemonic_for(self, opcode: int) -> Optional[str]:
        info = self._annotations.get(opcode)
        return info.mnemonic if info else None

    def __len__(self) -> int:
        return len(self._annotations)


def _parse_opcode(label: Any) -> Optional[int]:
    if isinstance(label, int) and not isinstance(label, bool):
        value = label
    elif isinstance(label, str):
        try:
            value = _parse_component(label)
        except ValueError:
            return None
    else:
        return None
    if not 0 <= value <= 0xFF:
        return None
    return value


def _parse_component(component: str) -> int:
    """Parse a single opcode component which may be hex or decimal."""

    token = component.strip()
    if not token:
        raise ValueError("empty component")

    if token.lower().startswith("0x"):
        return int(token, 16)

    if any(ch in string.hexdigits[10:] for ch in token):
        return int(token, 16)

    return int(token, 10)


__all__ = ["KnowledgeBase", "OpcodeInfo"]
