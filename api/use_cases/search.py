"""Search use case orchestration."""

from typing import List, Optional

from shared.config import CorpusConfig
from storage import SearchResult, SentenceRepository


class SearchUseCase:
    """Full-text search over stored sentences.

    Example:
        >>> results = SearchUseCase(config).execute("quick brown fox", limit=5)
    """

    def __init__(self, config: CorpusConfig, repository: Optional[SentenceRepository] = None):
        self.config = config
        self.repository = repository or SentenceRepository(config)

    def execute(self, query: str, limit: int = 10) -> List[SearchResult]:
        """Run a ranked full-text query.

        Raises:
            ValueError: if the query is blank or limit is not positive
        """
        query = (query or "").strip()
        if not query:
            raise ValueError("Query must not be empty")
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        return self.repository.search(query, limit=limit)

    def count(self) -> int:
        return self.repository.count()


__all__ = ["SearchUseCase"]
