"""
State threaded through one conversion pass.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .component_info import ComponentInfo
from .mappings import VueClassMappings
from ..utils.diagnostics import Diagnostics
from ..utils.string_utils import mask_line_breaks, pick_line_break_marker, restore_line_breaks

Node = Dict[str, Any]

# tokens whose text is a runtime value, their line breaks are never re-indented
VERBATIM_TOKENS = ("Template", "String")


@dataclass
class TransformContext:
    """
    Everything a handler needs: the aggregator it writes into, the raw
    snippet (nodes only carry ranges) and the warning channel.

    ``text()`` slices a copy of the snippet in which line breaks inside
    template literals and continued strings are replaced by
    ``component.line_break_marker``; the generator puts them back.
    """

    source: str
    file_uri: str = ""
    component: ComponentInfo = field(default_factory=ComponentInfo)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    mappings: VueClassMappings = field(default_factory=VueClassMappings)
    keep_unsupported_options: bool = True
    tokens: List[Node] = field(default_factory=list)

    def __post_init__(self):
        spans = [
            tuple(t["range"])
            for t in self.tokens
            if t.get("type") in VERBATIM_TOKENS and t.get("range")
        ]
        self.masked_source = self.source
        if any("\n" in self.source[start:end] for start, end in spans):
            marker = pick_line_break_marker(self.source)
            self.masked_source = mask_line_breaks(self.source, spans, marker)
            # not a component option, so it bypasses set()
            self.component.line_break_marker = marker

    def text(self, node: Optional[Node]) -> str:
        """Source text of ``node``, with verbatim line breaks masked."""
        if not node or not node.get("range"):
            return ""
        start, end = node["range"]
        return self.masked_source[start:end]

    def line(self, node: Optional[Node]) -> Optional[int]:
        """1-based line ``node`` starts on."""
        if not node or not node.get("range"):
            return None
        return self.source.count("\n", 0, node["range"][0]) + 1

    def warn(self, node: Optional[Node], message: str) -> None:
        message = restore_line_breaks(message, self.component.line_break_marker)
        self.diagnostics.warn(self.file_uri, self.line(node), message)
