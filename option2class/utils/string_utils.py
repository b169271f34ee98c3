"""
String utility functions.
"""

import hashlib
import json
import re
from typing import Iterable, Tuple

IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def capitalize(text: str) -> str:
    """Upper-case the first character only (``objId`` -> ``ObjId``)."""
    return text[:1].upper() + text[1:]


def to_pascal_case(text: str) -> str:
    """Convert string to PascalCase."""
    # Remove special characters and split
    words = re.findall(r"[a-zA-Z0-9]+", text)
    return "".join(capitalize(word) for word in words)


def strip_non_alnum(text: str) -> str:
    return re.sub(r"[^a-zA-Z0-9]", "", text)


def short_hash(text: str, length: int = 4) -> str:
    """Stable hex digest prefix of ``text``."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()[:length]


def is_identifier(text: str) -> bool:
    return bool(IDENTIFIER_RE.match(text))


def to_property_name(text: str) -> str:
    """Render ``text`` as a class member / object key, quoting when needed."""
    if is_identifier(text) or (text.startswith("[") and text.endswith("]")):
        return text
    return json.dumps(text)


def to_string_literal(text: str) -> str:
    return json.dumps(text)


def pick_line_break_marker(text: str) -> str:
    """A private-use character that does not occur in ``text``."""
    for code in range(0xE000, 0xF900):
        if chr(code) not in text:
            return chr(code)
    raise ValueError("no free private-use character for line break masking")


def mask_line_breaks(text: str, spans: Iterable[Tuple[int, int]], marker: str) -> str:
    """
    Replace every line break that starts a line inside one of ``spans`` with
    ``marker``.

    ``reindent`` then treats such lines as part of the line before them, so
    the whitespace of a multi-line template literal is never touched. The
    result has the same length as ``text``; offsets stay valid.
    """
    chars = list(text)
    for start, end in spans:
        pos = text.find("\n", start, end)
        while pos != -1 and pos + 1 < end:
            chars[pos] = marker
            pos = text.find("\n", pos + 1, end)
    return "".join(chars)


def restore_line_breaks(text: str, marker: str) -> str:
    return text.replace(marker, "\n") if marker else text


def reindent(text: str, indent: str) -> str:
    """
    Re-indent a source fragment sliced out of its original position.

    The first line is left alone (it continues whatever precedes it); the
    remaining lines lose their common leading whitespace and get ``indent``.

    Args:
        text: Fragment such as a ``{ ... }`` block or a multi-line expression
        indent: Indentation of the line the fragment starts on

    Returns:
        The re-indented fragment
    """
    lines = text.split("\n")
    if len(lines) == 1:
        return text

    rest = lines[1:]
    widths = [len(ln) - len(ln.lstrip()) for ln in rest if ln.strip()]
    common = min(widths) if widths else 0

    out = [lines[0]]
    for ln in rest:
        if not ln.strip():
            out.append("")
        else:
            out.append(indent + ln[common:])
    return "\n".join(out)
