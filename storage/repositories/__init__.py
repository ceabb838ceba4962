from .sentence_repo import SearchResult, SentenceRepository

__all__ = ["SentenceRepository", "SearchResult"]
