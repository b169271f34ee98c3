"""
Locates the ``<script>`` block of a Vue single-file component.
"""

import re
from dataclasses import dataclass
from typing import Optional

SCRIPT_OPEN_RE = re.compile(r"<script(?P<attrs>(?:\s[^>]*)?)>", re.IGNORECASE)
SCRIPT_CLOSE_RE = re.compile(r"</script\s*>", re.IGNORECASE)
LANG_RE = re.compile(r"""\blang\s*=\s*["']?([\w-]+)""", re.IGNORECASE)
SETUP_RE = re.compile(r"\bsetup\b", re.IGNORECASE)


@dataclass
class ScriptBlock:
    """The script block's content and where it sits in the file."""

    content: str
    lang: str = "js"
    start: int = 0
    end: int = 0


def extract_script_block(sfc_text: str) -> Optional[ScriptBlock]:
    """
    Find the first non-``setup`` script block.

    Args:
        sfc_text: Full text of a ``.vue`` file

    Returns:
        The block (``start``/``end`` delimit ``content`` inside ``sfc_text``),
        or None when the file has no script block
    """
    pos = 0
    while True:
        opening = SCRIPT_OPEN_RE.search(sfc_text, pos)
        if not opening:
            return None

        closing = SCRIPT_CLOSE_RE.search(sfc_text, opening.end())
        if not closing:
            return None

        attrs = opening.group("attrs") or ""
        if SETUP_RE.search(attrs):
            pos = closing.end()
            continue

        lang = LANG_RE.search(attrs)
        return ScriptBlock(
            content=sfc_text[opening.end():closing.start()],
            lang=lang.group(1).lower() if lang else "js",
            start=opening.end(),
            end=closing.start(),
        )
