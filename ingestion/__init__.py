"""Ingestion layer for the sentence corpus.

Handles input reading, sentence segmentation and batching.

Rules:
- MUST NOT talk to the database or write files directly
- MUST NOT import storage or api
"""

from .batching import BatchAccumulator, SentenceOutput, SentenceSink
from .models import SentenceRecord
from .parsers import LineReader
from .segmentation import (
    SentenceSegmenter,
    is_sentence_boundary,
    is_terminal_mark_boundary,
    is_valid_sentence,
)

__all__ = [
    # Models
    "SentenceRecord",
    # Parsers
    "LineReader",
    # Segmentation
    "SentenceSegmenter",
    "is_sentence_boundary",
    "is_terminal_mark_boundary",
    "is_valid_sentence",
    # Batching
    "BatchAccumulator",
    "SentenceSink",
    "SentenceOutput",
]
