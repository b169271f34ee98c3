"""
Component script parser using esprima.
Returns a JSON-safe AST (plain dicts) whose nodes carry character ranges.
"""

from typing import Any, Dict

import esprima

from .parser_interface import ParserInterface
from ..utils.exceptions import ParseError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ScriptParser(ParserInterface):
    def __init__(self, jsx: bool = True):
        self.jsx = jsx

    def parse(self, source_code: str) -> Dict[str, Any]:
        try:
            ast = esprima.parseModule(
                source_code,
                jsx=self.jsx,
                tolerant=True,
                range=True,
                comment=True,
                # template/string tokens mark text that must not be re-indented
                tokens=True,
            )
        except Exception as e:
            logger.error(f"Script parsing failed: {e}")
            raise ParseError(str(e)) from e

        # Convert esprima nodes → python dicts
        ast_dict = self._node_to_dict(ast)

        # Add original source
        ast_dict["raw"] = source_code

        return ast_dict

    # -------------------------------------------------------------------------
    # Convert esprima Node → python dict
    # -------------------------------------------------------------------------
    def _node_to_dict(self, node):
        if isinstance(node, list):
            return [self._node_to_dict(n) for n in node]

        # primitive values
        if not hasattr(node, "__dict__"):
            return node

        result = {"type": getattr(node, "type", None)}

        for key, value in node.__dict__.items():

            if key in ("type",):
                continue

            if isinstance(value, list):
                result[key] = [self._node_to_dict(v) for v in value]

            elif hasattr(value, "__dict__"):
                result[key] = self._node_to_dict(value)

            else:
                result[key] = value

        return result

    # -------------------------------------------------------------------------
    def validate(self, source_code: str) -> bool:
        try:
            ast = self.parse(source_code)
            return isinstance(ast, dict) and ast.get("type") == "Program"
        except ParseError:
            return False
