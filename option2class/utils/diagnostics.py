"""
Structured warning channel for a single conversion pass.

Every warning is kept as a ``Diagnostic`` record (so callers and tests can
inspect what was skipped) and echoed through the package logger in the
``[WARNING] [file:line] message`` shape.
"""

from dataclasses import dataclass
from typing import List, Optional
from .logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """One skipped or unsupported fragment."""

    file: str
    line: Optional[int]
    message: str

    def __str__(self) -> str:
        line = self.line if self.line is not None else "null"
        return f"[{self.file}:{line}] {self.message}"


class Diagnostics:
    """Collects diagnostics for one file."""

    def __init__(self):
        self.records: List[Diagnostic] = []

    def warn(self, file: str, line: Optional[int], message: str) -> Diagnostic:
        record = Diagnostic(file, line, message)
        self.records.append(record)
        logger.warning(str(record))
        return record

    def messages(self) -> List[str]:
        return [r.message for r in self.records]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)
