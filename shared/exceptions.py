"""Error hierarchy shared by every layer.

Library code raises these; only the CLI catches them, reports and exits.
"""

from typing import Optional


class CorpusError(Exception):
    """Base class for all corpus ingestion errors.

    Attributes:
        line_number: 1-indexed input line being processed when the error
            happened, if known.
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.line_number = line_number

    def describe(self) -> str:
        if self.line_number is not None:
            return f"{self} (line {self.line_number})"
        return str(self)


class ConfigError(CorpusError):
    """Required settings are missing or invalid."""


class InputReadError(CorpusError):
    """The input file cannot be opened or a line cannot be decoded."""


class PersistenceError(CorpusError):
    """Index creation or batch insert failed."""


class OutputWriteError(CorpusError):
    """The sentence output file cannot be written."""


__all__ = [
    "CorpusError",
    "ConfigError",
    "InputReadError",
    "PersistenceError",
    "OutputWriteError",
]
