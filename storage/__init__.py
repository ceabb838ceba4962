"""Storage layer for the sentence corpus.

Handles persistence, schema/index management and the sentence output file.

Rules:
- MUST NOT segment or validate sentences
- MUST NOT import api
- MAY import shared and ingestion.models
"""

from .adapters import PostgresSentenceSink
from .repositories import SearchResult, SentenceRepository
from .schema import DbSchemaManager
from .sentence_writer import SentenceFileWriter

__all__ = [
    # Schema
    "DbSchemaManager",
    # Repositories
    "SentenceRepository",
    "SearchResult",
    # Sinks
    "PostgresSentenceSink",
    "SentenceFileWriter",
]
