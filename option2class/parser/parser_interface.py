"""
Abstract parser interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class ParserInterface(ABC):
    """Abstract interface for script parsers."""

    @abstractmethod
    def parse(self, source_code: str) -> Dict[str, Any]:
        """
        Parse source code into an AST.

        Every node must be a plain dict with a ``type`` key and a
        ``range`` pair of character offsets into ``source_code``; the
        converter slices original text through those ranges.

        Args:
            source_code: The source code to parse

        Returns:
            Abstract Syntax Tree representation (a ``Program`` node)
        """
        pass

    @abstractmethod
    def validate(self, source_code: str) -> bool:
        """
        Validate that source code is valid.

        Args:
            source_code: The source code to validate

        Returns:
            True if valid, False otherwise
        """
        pass
