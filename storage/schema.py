"""Database schema management for the sentence corpus.

Handles schema, table and full-text index creation.

Rules:
- MAY import shared (for config)
"""

import re
from typing import Optional

import psycopg  # type: ignore

from shared.config import CorpusConfig
from shared.exceptions import PersistenceError


def sanitize_identifier(name: Optional[str]) -> str:
    """Sanitize identifier for use in SQL (prevent injection)."""
    if not name:
        return "default"
    result = re.sub(r"[^A-Za-z0-9_]+", "_", name)
    if not re.match(r"[A-Za-z_]", result):
        result = f"_{result}"
    return result.lower()


def table_identifier(config: CorpusConfig) -> str:
    return f"{sanitize_identifier(config.schema_name)}.{sanitize_identifier(config.table_name)}"


def text_search_regconfig(config: CorpusConfig) -> str:
    """Text search configuration as a SQL literal, e.g. ``'english'::regconfig``."""
    return f"'{sanitize_identifier(config.text_search_config)}'::regconfig"


def pg_conninfo(config: CorpusConfig) -> str:
    return (config.pg_conn or "").replace("postgresql+psycopg", "postgresql")


class DbSchemaManager:
    """Responsible for ensuring the corpus table and its text index exist."""

    def __init__(self, config: CorpusConfig):
        self.config = config

    @property
    def _pg_conn(self) -> str:
        return pg_conninfo(self.config)

    def statements(self) -> list:
        schema = sanitize_identifier(self.config.schema_name)
        table = table_identifier(self.config)
        index_name = f"idx_{sanitize_identifier(self.config.table_name)}_text_fts"
        regconfig = text_search_regconfig(self.config)
        return [
            f"CREATE SCHEMA IF NOT EXISTS {schema};",
            f"""
            CREATE TABLE IF NOT EXISTS {table} (
              id          BIGSERIAL PRIMARY KEY,
              text        TEXT NOT NULL,
              file_name   TEXT NOT NULL,
              line_number INTEGER NOT NULL CHECK (line_number >= 1),
              created_at  TIMESTAMPTZ DEFAULT now()
            );
            """,
            f"""
            CREATE INDEX IF NOT EXISTS {index_name}
            ON {table} USING GIN (to_tsvector({regconfig}, text));
            """,
        ]

    def ensure_text_index(self) -> None:
        """Create the corpus table and its GIN full-text index (idempotent)."""
        try:
            with psycopg.connect(self._pg_conn, autocommit=True) as conn:
                with conn.cursor() as cur:
                    for sql in self.statements():
                        cur.execute(sql)
        except psycopg.Error as exc:
            raise PersistenceError(f"Text index creation failed: {exc}") from exc
        print(f"[index] text index ready on {table_identifier(self.config)}")


__all__ = [
    "DbSchemaManager",
    "pg_conninfo",
    "sanitize_identifier",
    "table_identifier",
    "text_search_regconfig",
]
