"""Environment-driven configuration."""

import pytest

from shared.config import CorpusConfig, load_config
from shared.exceptions import ConfigError


def set_required(env):
    env.setenv("INPUT_FILE_PATH", "data/input.txt")
    env.setenv("PG_CONN", "postgresql://localhost/corpus")
    env.setenv("OUTPUT_FILE_PATH", "data/sentences.txt")


def test_defaults(corpus_env):
    set_required(corpus_env)
    config = load_config()

    assert config == CorpusConfig(
        input_file_path="data/input.txt",
        pg_conn="postgresql://localhost/corpus",
        output_file_path="data/sentences.txt",
    )
    assert config.batch_size == 1000
    assert config.schema_name == "coca_like_db"
    assert config.table_name == "corpus"
    assert config.insert_max_attempts == 1


def test_overrides(corpus_env):
    set_required(corpus_env)
    corpus_env.setenv("BATCH_SIZE", "250")
    corpus_env.setenv("CORPUS_TABLE", "sentences")
    corpus_env.setenv("WRITE_SENTENCE_FILE", "no")
    corpus_env.setenv("INSERT_MAX_ATTEMPTS", "4")
    corpus_env.setenv("INSERT_RETRY_BACKOFF", "0.5")
    corpus_env.setenv("LOG_LINES", "on")

    config = load_config()

    assert config.batch_size == 250
    assert config.table_name == "sentences"
    assert config.write_sentence_file is False
    assert config.insert_max_attempts == 4
    assert config.insert_retry_backoff == 0.5
    assert config.log_lines is True


def test_missing_required_settings_are_all_reported(corpus_env):
    corpus_env.setenv("PG_CONN", "postgresql://localhost/corpus")

    with pytest.raises(ConfigError) as info:
        load_config()

    assert "INPUT_FILE_PATH" in str(info.value)
    assert "OUTPUT_FILE_PATH" in str(info.value)
    assert "PG_CONN" not in str(info.value)


def test_search_commands_only_need_connection(corpus_env):
    corpus_env.setenv("PG_CONN", "postgresql://localhost/corpus")
    config = load_config(required=("PG_CONN",))
    assert config.input_file_path == ""


@pytest.mark.parametrize(
    "name,value",
    [
        ("BATCH_SIZE", "0"),
        ("BATCH_SIZE", "many"),
        ("INSERT_MAX_ATTEMPTS", "0"),
        ("INSERT_RETRY_BACKOFF", "-1"),
        ("INSERT_RETRY_BACKOFF", "soon"),
    ],
)
def test_invalid_values(corpus_env, name, value):
    set_required(corpus_env)
    corpus_env.setenv(name, value)
    with pytest.raises(ConfigError):
        load_config()
