"""Indexer for the null-terminated string pool at the end of a script."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Mapping, Tuple

from .errors import FormatError
from .text import TextDecoder


logger = logging.getLogger(__name__)


class StringPool(Mapping[int, str]):
    """Read-only mapping of pool-relative offsets to decoded text.

    Keys are produced by walking the pool from offset 0 and consuming one
    null-terminated run per entry, so iteration is always in ascending key
    order.
    """

    def __init__(self, entries: Mapping[int, str], base: int = 0) -> None:
        self._entries: Dict[int, str] = dict(sorted(entries.items()))
        self.base = base

    @classmethod
    def from_bytes(cls, data: bytes, decoder: TextDecoder, *, base: int = 0) -> "StringPool":
        pool = cls(parse_string_pool(data, decoder, base=base), base)
        logger.debug("indexed %d pool string(s) from %d byte(s)", len(pool), len(data))
        return pool

    def __getitem__(self, key: int) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def address_of(self, key: int) -> int:
        """Absolute file offset of the entry stored under *key*."""

        return self.base + key

    def items_by_address(self) -> List[Tuple[int, str]]:
        return [(self.base + key, text) for key, text in self._entries.items()]


def parse_string_pool(data: bytes, decoder: TextDecoder, *, base: int = 0) -> Dict[int, str]:
    """Split *data* into ``{offset: text}`` entries.

    *base* is only used to report the absolute address of an unterminated
    trailing run.
    """

    entries: Dict[int, str] = {}
    position = 0
    length = len(data)
    while position < length:
        terminator = data.find(b"\0", position)
        if terminator < 0:
            raise FormatError(
                f"string pool entry of {length - position} byte(s) is missing its terminator",
                address=base + position,
            )
        try:
            entries[position] = decoder(data[position:terminator])
        except UnicodeDecodeError as exc:
            raise FormatError(
                f"cannot decode string pool entry: {exc.reason}",
                address=base + position,
            ) from exc
        position = terminator + 1
    return entries


__all__ = ["StringPool", "parse_string_pool"]
