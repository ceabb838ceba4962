"""Use case orchestration for the sentence corpus."""

from .ingest import IngestResult, IngestUseCase
from .search import SearchUseCase

__all__ = ["IngestUseCase", "IngestResult", "SearchUseCase"]
