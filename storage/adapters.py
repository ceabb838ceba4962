from typing import Sequence

from ingestion.models import SentenceRecord
from shared.config import CorpusConfig

from .repositories import SentenceRepository
from .schema import DbSchemaManager


class PostgresSentenceSink:
    """Sentence sink backed by a Postgres table with a GIN full-text index."""

    def __init__(self, config: CorpusConfig):
        self.schema_manager = DbSchemaManager(config)
        self.repository = SentenceRepository(config)

    def ensure_text_index(self) -> None:
        self.schema_manager.ensure_text_index()

    def insert_batch(self, records: Sequence[SentenceRecord]) -> None:
        self.repository.insert_batch(records)


__all__ = ["PostgresSentenceSink"]
