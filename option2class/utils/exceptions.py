"""
Exceptions raised outside the conversion core (parsing and file handling).

The option handlers never raise; they report through ``Diagnostics``.
"""


class TranspileError(Exception):
    """Base error for a file that could not be converted."""


class ParseError(TranspileError):
    """The script block is not parseable ECMAScript."""


class UnsupportedLanguageError(TranspileError):
    """The script block declares a ``lang`` this tool cannot handle."""
