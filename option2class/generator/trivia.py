"""
Comments around top-level statements.

esprima keeps comments in one flat ``comments`` list on the Program node.
They are attached here by position:

    /* eslint-disable */          header: before the first statement
    import a from "a"; // trails  trailing: starts on the statement's last line
    // leads                      leading: on its own lines before a statement
    const b = 1;
"""

from typing import Any, Dict, List, Optional, Tuple

Node = Dict[str, Any]


def _comments(ast: Node) -> List[Tuple[int, int]]:
    return sorted(tuple(c["range"]) for c in ast.get("comments") or [] if c.get("range"))


def header_comments(ast: Node, source: str) -> Optional[str]:
    """Comments before the first statement (license headers, eslint directives)."""
    body = ast.get("body") or []
    limit = body[0]["range"][0] if body else len(source)
    header = [c for c in _comments(ast) if c[1] <= limit]
    if not header:
        return None
    return source[header[0][0]:header[-1][1]]


def leading_start(ast: Node, source: str, index: int) -> int:
    """Offset where statement ``index`` begins, counting comments that lead it."""
    body = ast["body"]
    start = body[index]["range"][0]
    if index == 0:
        # everything before the first statement is the header
        return start
    prev_end = body[index - 1]["range"][1]
    for c_start, c_end in _comments(ast):
        if prev_end <= c_start and c_end <= start and "\n" in source[prev_end:c_start]:
            return c_start
    return start


def statement_bounds(ast: Node, source: str, index: int) -> Tuple[int, int]:
    """Range of statement ``index`` widened to its leading and trailing comments."""
    body = ast["body"]
    end = body[index]["range"][1]
    next_start = body[index + 1]["range"][0] if index + 1 < len(body) else len(source)

    text_end = end
    for c_start, c_end in _comments(ast):
        if text_end <= c_start and c_end <= next_start and "\n" not in source[text_end:c_start]:
            text_end = c_end
    return leading_start(ast, source, index), text_end
