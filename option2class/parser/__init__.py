"""Parser module for Vue component scripts."""

from .parser_interface import ParserInterface
from .script_parser import ScriptParser
from .sfc_parser import ScriptBlock, extract_script_block

__all__ = ["ParserInterface", "ScriptParser", "ScriptBlock", "extract_script_block"]
