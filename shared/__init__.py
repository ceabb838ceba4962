"""Shared utilities and configuration for the sentence corpus."""

from .config import CorpusConfig, load_config
from .exceptions import (
    ConfigError,
    CorpusError,
    InputReadError,
    OutputWriteError,
    PersistenceError,
)
from .text_utils import TextPreprocessor

__all__ = [
    "CorpusConfig",
    "load_config",
    "CorpusError",
    "ConfigError",
    "InputReadError",
    "OutputWriteError",
    "PersistenceError",
    "TextPreprocessor",
]
