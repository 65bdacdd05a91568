"""Text helpers shared by the string pool indexer and the renderer."""

from __future__ import annotations

import codecs
from typing import Callable, Dict


TextDecoder = Callable[[bytes], str]

DEFAULT_ENCODING = "shift_jis"

_ESCAPES: Dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def make_decoder(encoding: str = DEFAULT_ENCODING, errors: str = "replace") -> TextDecoder:
    """Return a ``bytes -> str`` callable for *encoding*.

    The codec is resolved eagerly so an unknown name raises :class:`LookupError`
    before any decoding work starts.
    """

    info = codecs.lookup(encoding)
    codecs.lookup_error(errors)

    def decode(data: bytes) -> str:
        text, _ = info.decode(data, errors)
        return text

    return decode


def escape_text(text: str) -> str:
    """Escape *text* so it fits on a single listing line inside quotes."""

    pieces = []
    for char in text:
        replacement = _ESCAPES.get(char)
        if replacement is not None:
            pieces.append(replacement)
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            pieces.append(f"\\x{ord(char):02X}")
        elif char in "\u2028\u2029\x85":
            pieces.append(f"\\u{ord(char):04X}")
        else:
            pieces.append(char)
    return "".join(pieces)


__all__ = ["DEFAULT_ENCODING", "TextDecoder", "escape_text", "make_decoder"]
