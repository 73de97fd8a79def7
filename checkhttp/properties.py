"""
Reader for Java-style ``.properties`` files and the pointer file that names one.
"""
from __future__ import annotations

import logging
import re
import string
from pathlib import Path

from checkhttp.errors import ResourceError

logger = logging.getLogger(__name__)

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_SEPARATORS = "=:"
_WHITESPACE = " \t\f"
_LINE_END = re.compile(r"\r\n|\r|\n")


def _read_text(path: str | Path) -> str:
    p = Path(path)
    if not p.is_file():
        raise ResourceError(f"file not found: {p}")
    try:
        return p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceError(f"unable to read {p}: {exc}") from exc


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str):
    pending: str | None = None
    for raw in _LINE_END.split(text):
        line = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in "#!":
                continue
        if _continues(line):
            pending = (pending or "") + line[:-1]
            continue
        yield (pending or "") + line
        pending = None
    if pending is not None:
        yield pending


def _unescape(s: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(s):
        ch = s[i]
        if ch != "\\" or i + 1 >= len(s):
            out.append(ch)
            i += 1
            continue
        nxt = s[i + 1]
        digits = s[i + 2 : i + 6]
        if nxt == "u" and len(digits) == 4 and all(c in string.hexdigits for c in digits):
            out.append(chr(int(digits, 16)))
            i += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def _split(line: str) -> tuple[str, str]:
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in _SEPARATORS or ch in _WHITESPACE:
            break
        i += 1
    key = line[:i]
    rest = line[i:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:]
    return _unescape(key), _unescape(rest.lstrip(_WHITESPACE))


def parse_properties(text: str) -> dict[str, str]:
    out: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split(line)
        out[key.strip()] = value.strip()
    return out


def load_properties(path: str | Path) -> dict[str, str]:
    props = parse_properties(_read_text(path))
    logger.debug("loaded %d properties from %s", len(props), path)
    return props


def read_pointer(path: str | Path) -> str:
    """
    Return the configuration path recorded in a pointer file.

    Only the first non-blank line counts. An empty file gives "".
    """
    for line in _LINE_END.split(_read_text(path)):
        if line.strip():
            return line.strip()
    return ""
