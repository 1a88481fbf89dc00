"""
Struct Tag Parser

Parses Go struct tags of the conventional form:

    `json:"name,omitempty" db:"user_name"`

Only keys from a closed set are reported, and only the first comma-separated
segment of each value is kept. Malformed input never raises: parsing stops at
the first malformed pair and keeps what was read before it. A value with an
invalid escape leaves its key absent without affecting the other keys.
"""

import re
from typing import Iterable, Iterator, Optional

from structdoc.configs.constants import RECOGNIZED_TAG_KEYS

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
}

_ESCAPE_RE = re.compile(r"\\(x[0-9a-fA-F]{2}|u[0-9a-fA-F]{4}|U[0-9a-fA-F]{8}|[0-7]{3}|.)", re.S)


def _unescape(body: str) -> Optional[str]:
    """
    Decode the escapes of a double-quoted Go string.

    \\x and octal escapes produce raw bytes, so the result is assembled as
    UTF-8 and decoded once; invalid byte sequences become U+FFFD.
    Returns None on an invalid escape, including surrogate code points.
    """
    data = bytearray()
    pos = 0
    for match in _ESCAPE_RE.finditer(body):
        data += body[pos:match.start()].encode("utf-8")
        pos = match.end()

        seq = match.group(1)
        if seq in _SIMPLE_ESCAPES:
            data += _SIMPLE_ESCAPES[seq].encode("utf-8")
        elif seq[0] == "x" and len(seq) > 1:
            data.append(int(seq[1:], 16))
        elif len(seq) == 3 and seq.isdigit() and int(seq, 8) <= 0o377:
            data.append(int(seq, 8))
        elif seq[0] in "uU" and len(seq) > 1:
            code = int(seq[1:], 16)
            if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
                return None
            data += chr(code).encode("utf-8")
        else:
            return None

    data += body[pos:].encode("utf-8")
    return data.decode("utf-8", errors="replace")


def _strip_literal(raw: str) -> Optional[str]:
    """Remove Go string literal quoting around a tag, if present."""
    if len(raw) >= 2 and raw[0] == "`" and raw[-1] == "`":
        return raw[1:-1]
    if len(raw) >= 2 and raw[0] == '"' and raw[-1] == '"':
        return _unescape(raw[1:-1])
    return raw


def _iter_pairs(tag: str) -> Iterator[tuple[str, str]]:
    """Yield (key, quoted value) pairs until the tag ends or is malformed."""
    while tag:
        tag = tag.lstrip(" ")
        if not tag:
            return

        i = 0
        while i < len(tag) and tag[i] > " " and tag[i] not in ':"\x7f':
            i += 1
        if i == 0 or i + 1 >= len(tag) or tag[i] != ":" or tag[i + 1] != '"':
            return
        key = tag[:i]
        tag = tag[i + 1:]

        # Scan the quoted value, honoring backslash escapes
        i = 1
        while i < len(tag) and tag[i] != '"':
            if tag[i] == "\\":
                i += 1
            i += 1
        if i >= len(tag):
            return

        yield key, tag[:i + 1]
        tag = tag[i + 1:]


def parse_tag(raw: Optional[str], keys: Iterable[str] = RECOGNIZED_TAG_KEYS) -> dict[str, str]:
    """
    Parse a raw struct tag into a mapping of recognized keys.

    Args:
        raw: Tag text, with or without its surrounding backticks/quotes
        keys: Recognized tag keys; all others are ignored

    Returns:
        Mapping from key to the first comma-separated segment of its value.
        Empty when the tag is absent or malformed from the start.
    """
    tags: dict[str, str] = {}
    if not raw:
        return tags

    tag = _strip_literal(raw.strip())
    if tag is None:
        return tags

    wanted = set(keys)
    seen: set[str] = set()
    for key, quoted in _iter_pairs(tag):
        if key not in wanted or key in seen:
            continue
        seen.add(key)
        value = _unescape(quoted[1:-1])
        if value is None:
            # A bad value hides only its own key
            continue
        # Modifiers such as omitempty are dropped
        tags[key] = value.split(",", 1)[0]

    return tags


def field_display_name(declared_name: str, tags: dict[str, str], field_name_tag: Optional[str]) -> str:
    """Pick a field's display name: the configured tag's value, else the identifier."""
    if not field_name_tag:
        return declared_name
    value = tags.get(field_name_tag)
    if value:
        return value
    return declared_name
