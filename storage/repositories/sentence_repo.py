"""Sentence repository implementation.

Provides bulk insert and full-text search over stored sentences.

Rules:
- MAY import shared and ingestion.models
- MUST NOT validate sentences (segmentation is ingestion's job)
"""

import time
from dataclasses import dataclass
from typing import List, Sequence

import psycopg  # type: ignore

from ingestion.models import SentenceRecord
from shared.config import CorpusConfig
from shared.exceptions import PersistenceError

from ..schema import pg_conninfo, table_identifier, text_search_regconfig


@dataclass
class SearchResult:
    """Result from full-text search.

    Attributes:
        text: Sentence text
        file_name: Source file the sentence was read from
        line_number: 1-indexed source line
        rank: ts_rank score (higher is better)
    """

    text: str
    file_name: str
    line_number: int
    rank: float


class SentenceRepository:
    """Repository for sentence records stored in Postgres."""

    def __init__(self, config: CorpusConfig):
        self.config = config

    @property
    def _pg_conn(self) -> str:
        """Get PostgreSQL connection string."""
        return pg_conninfo(self.config)

    def insert_batch(self, records: Sequence[SentenceRecord]) -> int:
        """Insert records in one transaction.

        Retries with exponential backoff only when ``insert_max_attempts`` > 1.

        Args:
            records: Ordered sentence records

        Returns:
            Number of rows written

        Raises:
            PersistenceError: if the insert fails on every attempt
        """
        if not records:
            return 0

        sql = f"INSERT INTO {table_identifier(self.config)} (text, file_name, line_number) VALUES (%s, %s, %s)"
        payload = [(record.text, record.source_file, record.line_number) for record in records]
        max_attempts = self.config.insert_max_attempts
        attempt = 0
        while True:
            try:
                # commits on clean exit, rolls back on error
                with psycopg.connect(self._pg_conn) as conn:
                    with conn.cursor() as cur:
                        cur.executemany(sql, payload)
                return len(payload)
            except psycopg.Error as exc:
                attempt += 1
                if attempt >= max_attempts:
                    print(f"[insert_batch] {len(payload)} sentences failed: {exc}")
                    raise PersistenceError(
                        f"Batch insert of {len(payload)} sentences failed: {exc}"
                    ) from exc
                sleep_for = self.config.insert_retry_backoff * (1.5 ** (attempt - 1))
                print(f"[retry] insert_batch attempt {attempt + 1}/{max_attempts} in {sleep_for:.1f}s")
                time.sleep(sleep_for)

    def search(self, query: str, limit: int = 10) -> List[SearchResult]:
        """Full-text search over sentence text.

        Args:
            query: Plain-language query (parsed with plainto_tsquery)
            limit: Maximum number of results

        Returns:
            Results ordered by rank (highest first)
        """
        regconfig = text_search_regconfig(self.config)
        sql = f"""
        SELECT
            text,
            file_name,
            line_number,
            ts_rank(to_tsvector({regconfig}, text), plainto_tsquery({regconfig}, %s)) AS rank
        FROM {table_identifier(self.config)}
        WHERE to_tsvector({regconfig}, text) @@ plainto_tsquery({regconfig}, %s)
        ORDER BY rank DESC, id
        LIMIT %s
        """
        try:
            with psycopg.connect(self._pg_conn) as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (query, query, limit))
                    rows = cur.fetchall()
        except psycopg.Error as exc:
            raise PersistenceError(f"Search failed: {exc}") from exc

        return [
            SearchResult(
                text=row[0],
                file_name=row[1],
                line_number=int(row[2]),
                rank=float(row[3]) if row[3] is not None else 0.0,
            )
            for row in rows
        ]

    def count(self) -> int:
        """Number of stored sentences."""
        try:
            with psycopg.connect(self._pg_conn) as conn:
                with conn.cursor() as cur:
                    cur.execute(f"SELECT count(*) FROM {table_identifier(self.config)}")
                    row = cur.fetchone()
        except psycopg.Error as exc:
            raise PersistenceError(f"Count failed: {exc}") from exc
        return int(row[0]) if row else 0


__all__ = ["SentenceRepository", "SearchResult"]
