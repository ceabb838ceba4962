"""Data models for ingestion layer."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class SentenceRecord:
    """
    One validated sentence with its provenance.

    Created from segmenter output, handed to the sink exactly once.
    """

    text: str
    source_file: str
    line_number: int  # 1-indexed

    def __post_init__(self) -> None:
        if not self.text or self.text != self.text.strip():
            raise ValueError("SentenceRecord.text must be non-empty and trimmed")
        if self.line_number < 1:
            raise ValueError(f"line_number must be >= 1, got {self.line_number}")

    def to_document(self) -> Dict[str, Any]:
        """Persisted record shape."""
        return {
            "text": self.text,
            "fileName": self.source_file,
            "lineNumber": self.line_number,
        }


__all__ = ["SentenceRecord"]
