"""Heuristic that links push literals to string pool entries.

Push operands double as string pool offsets, but small negative values are
used for something else by the engine and must never be resolved, even when
a matching key exists.  The exclusion is kept as the two numeric checks the
interpreter performs rather than a single range test.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Set


logger = logging.getLogger(__name__)


def is_string_candidate(value: int) -> bool:
    """Return ``True`` when *value* may name a string pool entry.

    Values in ``[-64, -1]`` are never candidates.
    """

    if not (value <= -65 or value >= -32):
        return False
    return (value & 0xFFFFFFFF) < 0xFFFFFFE0


class ReferenceResolver:
    """Resolve push operands against a string pool and remember the hits."""

    def __init__(self, pool: Mapping[int, str]) -> None:
        self.pool = pool
        self.referenced: Set[int] = set()

    def resolve(self, value: int) -> Optional[str]:
        if not is_string_candidate(value):
            return None
        text = self.pool.get(value)
        if text is not None:
            self.referenced.add(value)
        return text

    def unreferenced(self) -> Set[int]:
        return set(self.pool) - self.referenced


__all__ = ["ReferenceResolver", "is_string_candidate"]
