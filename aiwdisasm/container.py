"""Binary container helpers for ``ADV_98`` script files."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .errors import FormatError, OutOfRangeError


logger = logging.getLogger(__name__)

SIGNATURE = b"ADV_98 \0"

# signature, two reserved words, code offset, pool offset
_HEADER = struct.Struct("<8siiii")
HEADER_SIZE = _HEADER.size


@dataclass(frozen=True)
class ScriptHeader:
    """Fixed 24 byte header found at the start of every script."""

    reserved: Tuple[int, int]
    code_offset: int
    pool_offset: int

    @property
    def code_length(self) -> int:
        return self.pool_offset - self.code_offset


class ScriptContainer:
    """Reader object that exposes the header and the two data regions."""

    def __init__(self, data: bytes, header: ScriptHeader, path: Optional[Path] = None) -> None:
        self.data = data
        self.header = header
        self.path = path

    @classmethod
    def load(cls, script_path: Path) -> "ScriptContainer":
        return cls.from_bytes(Path(script_path).read_bytes(), path=Path(script_path))

    @classmethod
    def from_bytes(cls, data: bytes, *, path: Optional[Path] = None) -> "ScriptContainer":
        data = bytes(data)
        header = parse_header(data)
        logger.debug(
            "script header: code=0x%08X pool=0x%08X size=%d",
            header.code_offset,
            header.pool_offset,
            len(data),
        )
        return cls(data, header, path)

    @property
    def code_offset(self) -> int:
        return self.header.code_offset

    @property
    def pool_offset(self) -> int:
        return self.header.pool_offset

    @property
    def code_bytes(self) -> bytes:
        return self.data[self.header.code_offset : self.header.pool_offset]

    @property
    def pool_bytes(self) -> bytes:
        return self.data[self.header.pool_offset :]

    def __len__(self) -> int:
        return len(self.data)


def parse_header(data: bytes) -> ScriptHeader:
    """Validate the signature and return the section offsets of *data*."""

    if data[: len(SIGNATURE)] != SIGNATURE:
        raise FormatError("not a recognized script container")
    if len(data) < HEADER_SIZE:
        raise OutOfRangeError(
            f"header needs {HEADER_SIZE} bytes but the file holds {len(data)}",
            address=len(data),
        )

    _, reserved_a, reserved_b, code_offset, pool_offset = _HEADER.unpack_from(data, 0)

    total = len(data)
    if code_offset < 0 or code_offset > total:
        raise OutOfRangeError(
            f"code offset exceeds file size {total}", address=code_offset
        )
    if pool_offset < code_offset or pool_offset > total:
        raise OutOfRangeError(
            f"string pool offset outside [0x{code_offset:08X}, 0x{total:08X}]",
            address=pool_offset,
        )

    return ScriptHeader((reserved_a, reserved_b), code_offset, pool_offset)


__all__ = ["HEADER_SIZE", "SIGNATURE", "ScriptContainer", "ScriptHeader", "parse_header"]
