"""Utility modules for the transpiler."""

from .string_utils import capitalize, to_pascal_case, short_hash, reindent
from .file_utils import read_file, write_file, ensure_directory, unique_file_path
from .logger import get_logger, set_log_level
from .diagnostics import Diagnostic, Diagnostics
from .exceptions import TranspileError, ParseError, UnsupportedLanguageError

__all__ = [
    "capitalize",
    "to_pascal_case",
    "short_hash",
    "reindent",
    "read_file",
    "write_file",
    "ensure_directory",
    "unique_file_path",
    "get_logger",
    "set_log_level",
    "Diagnostic",
    "Diagnostics",
    "TranspileError",
    "ParseError",
    "UnsupportedLanguageError",
]
