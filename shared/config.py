import os
from dataclasses import dataclass
from typing import Optional, Sequence

from dotenv import load_dotenv

from .exceptions import ConfigError


DEFAULT_BATCH_SIZE = 1000
DEFAULT_SCHEMA_NAME = "coca_like_db"
DEFAULT_TABLE_NAME = "corpus"
DEFAULT_TEXT_SEARCH_CONFIG = "english"

REQUIRED_VARS = ("INPUT_FILE_PATH", "PG_CONN", "OUTPUT_FILE_PATH")


@dataclass
class CorpusConfig:
    """Configuration for the sentence ingestion pipeline."""

    input_file_path: str
    pg_conn: str
    output_file_path: str
    batch_size: int = DEFAULT_BATCH_SIZE
    schema_name: str = DEFAULT_SCHEMA_NAME
    table_name: str = DEFAULT_TABLE_NAME
    text_search_config: str = DEFAULT_TEXT_SEARCH_CONFIG
    write_sentence_file: bool = True
    insert_max_attempts: int = 1
    insert_retry_backoff: float = 2.0
    log_lines: bool = False


def _parse_int(name: str, value: Optional[str], default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}")


def _parse_float(name: str, value: Optional[str], default: float) -> float:
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {value!r}")


def _parse_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None or value == "":
        return default
    return value.lower() in ("1", "true", "yes", "y", "on")


def load_config(required: Sequence[str] = REQUIRED_VARS) -> CorpusConfig:
    """Load configuration from environment variables (and a .env file).

    Args:
        required: Variables that must be set; search-only commands need just PG_CONN

    Raises:
        ConfigError: if a required variable is missing or a value is invalid
    """
    load_dotenv()

    missing = [name for name in required if not os.getenv(name)]
    if missing:
        raise ConfigError(f"Missing required settings: {', '.join(missing)}")

    config = CorpusConfig(
        input_file_path=os.getenv("INPUT_FILE_PATH", ""),
        pg_conn=os.getenv("PG_CONN", ""),
        output_file_path=os.getenv("OUTPUT_FILE_PATH", ""),
        batch_size=_parse_int("BATCH_SIZE", os.getenv("BATCH_SIZE"), DEFAULT_BATCH_SIZE),
        schema_name=os.getenv("CORPUS_SCHEMA") or DEFAULT_SCHEMA_NAME,
        table_name=os.getenv("CORPUS_TABLE") or DEFAULT_TABLE_NAME,
        text_search_config=os.getenv("TEXT_SEARCH_CONFIG") or DEFAULT_TEXT_SEARCH_CONFIG,
        write_sentence_file=_parse_bool(os.getenv("WRITE_SENTENCE_FILE"), True),
        insert_max_attempts=_parse_int(
            "INSERT_MAX_ATTEMPTS", os.getenv("INSERT_MAX_ATTEMPTS"), 1
        ),
        insert_retry_backoff=_parse_float(
            "INSERT_RETRY_BACKOFF", os.getenv("INSERT_RETRY_BACKOFF"), 2.0
        ),
        log_lines=_parse_bool(os.getenv("LOG_LINES"), False),
    )
    validate_config(config)
    return config


def validate_config(config: CorpusConfig) -> None:
    """Reject values no pipeline run can work with."""
    if config.batch_size < 1:
        raise ConfigError(f"BATCH_SIZE must be at least 1, got {config.batch_size}")
    if config.insert_max_attempts < 1:
        raise ConfigError(
            f"INSERT_MAX_ATTEMPTS must be at least 1, got {config.insert_max_attempts}"
        )
    if config.insert_retry_backoff < 0:
        raise ConfigError(
            f"INSERT_RETRY_BACKOFF must not be negative, got {config.insert_retry_backoff}"
        )


__all__ = ["CorpusConfig", "load_config", "validate_config"]
