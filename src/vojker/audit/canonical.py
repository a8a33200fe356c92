"""Canonical single-line JSON writer.

Objects are written in the insertion order of the mapping given, with no
whitespace. String escaping is fixed: backslash, quote, ``\\n``, ``\\r``, ``\\t``
get short escapes and every other code point below 0x20 becomes ``\\u00xx``.
Everything else, non-ASCII included, is written as-is.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_SHORT_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_ESCAPE_TABLE = {
    code: _SHORT_ESCAPES.get(chr(code), f"\\u{code:04x}") for code in range(0x20)
}
_ESCAPE_TABLE[ord("\\")] = _SHORT_ESCAPES["\\"]
_ESCAPE_TABLE[ord('"')] = _SHORT_ESCAPES['"']


def escape_string(value: str) -> str:
    return value.translate(_ESCAPE_TABLE)


def quote(value: str) -> str:
    return f'"{escape_string(value)}"'


def _write(value: Any, out: list[str]) -> None:
    if isinstance(value, str):
        out.append(quote(value))
    elif isinstance(value, bool):
        out.append("true" if value else "false")
    elif isinstance(value, Mapping):
        out.append("{")
        for idx, (key, item) in enumerate(value.items()):
            if idx:
                out.append(",")
            out.append(quote(key))
            out.append(":")
            _write(item, out)
        out.append("}")
    elif isinstance(value, Sequence):
        out.append("[")
        for idx, item in enumerate(value):
            if idx:
                out.append(",")
            _write(item, out)
        out.append("]")
    else:
        # Audit documents carry strings and booleans only
        raise TypeError(f"unsupported value in canonical document: {type(value).__name__}")


def dumps_canonical(document: Mapping[str, Any]) -> str:
    out: list[str] = []
    _write(document, out)
    return "".join(out)


def encode_canonical(document: Mapping[str, Any]) -> bytes:
    """UTF-8 bytes of the canonical form. Lone surrogates become ``?``."""
    return dumps_canonical(document).encode("utf-8", errors="replace")
