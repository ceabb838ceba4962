"""Command-line commands for ingesting and searching the sentence corpus.

Usage:
    python -m api.cli ingest [--input data.txt] [--output sentences.txt]
    python -m api.cli search "query" [--limit 10] [--json]
    python -m api.cli count
"""

import argparse
import os
from typing import List, Optional

from shared.config import load_config
from shared.exceptions import CorpusError
from storage import PostgresSentenceSink, SentenceFileWriter

from ..formatters import ResponseFormatter
from ..use_cases import IngestUseCase, SearchUseCase


def warn_pg_conn(conn: Optional[str]) -> None:
    if conn and "+pycopg" in conn:
        # common typo: postgresql+pycopg -> postgresql+psycopg
        print("[warn] PG_CONN uses '+pycopg'; did you mean '+psycopg'? ->", conn)


def run_ingest(args: argparse.Namespace) -> int:
    # CLI flags override environment
    if args.input:
        os.environ["INPUT_FILE_PATH"] = args.input
    if args.output:
        os.environ["OUTPUT_FILE_PATH"] = args.output
    if args.batch_size is not None:
        os.environ["BATCH_SIZE"] = str(args.batch_size)
    if args.no_sentence_file:
        os.environ["WRITE_SENTENCE_FILE"] = "false"
    if args.log_lines:
        os.environ["LOG_LINES"] = "true"

    config = load_config()
    warn_pg_conn(config.pg_conn)
    print(f"[cfg] input={config.input_file_path} output={config.output_file_path} batch_size={config.batch_size}")

    sink = PostgresSentenceSink(config)
    result = IngestUseCase(
        config,
        sink,
        output_factory=lambda: SentenceFileWriter(config.output_file_path),
    ).execute()

    print(f"[done] total uploaded sentences: {result.sentences_uploaded} in {result.batches_flushed} batches")
    return 0


def run_search(args: argparse.Namespace) -> int:
    config = load_config(required=("PG_CONN",))
    use_case = SearchUseCase(config)
    try:
        results = use_case.execute(args.query, limit=args.limit)
    except ValueError as exc:
        print(f"[error] {exc}")
        return 1
    if args.json:
        print(ResponseFormatter.format_search_results_json(results))
    else:
        print(ResponseFormatter.format_search_results_text(results))
    return 0


def run_count(args: argparse.Namespace) -> int:
    config = load_config(required=("PG_CONN",))
    print(f"[count] {SearchUseCase(config).count()} sentences")
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="corpus-ingest",
        description="Segment text into sentences and store them in a full-text indexed corpus",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    ingest_parser = subparsers.add_parser("ingest", help="Ingest an input file")
    ingest_parser.add_argument("--input", help="Input file (overrides INPUT_FILE_PATH)")
    ingest_parser.add_argument("--output", help="Sentence output file (overrides OUTPUT_FILE_PATH)")
    ingest_parser.add_argument("--batch-size", type=int, help="Sentences per insert (overrides BATCH_SIZE)")
    ingest_parser.add_argument(
        "--no-sentence-file",
        action="store_true",
        help="Do not write sentences to the output file",
    )
    ingest_parser.add_argument("--log-lines", action="store_true", help="Echo every line and sentence")

    search_parser = subparsers.add_parser("search", help="Full-text search over stored sentences")
    search_parser.add_argument("query", help="Search query")
    search_parser.add_argument("--limit", type=int, default=10, help="Maximum number of results")
    search_parser.add_argument("--json", action="store_true", help="Output JSON")

    subparsers.add_parser("count", help="Count stored sentences")
    return parser


COMMANDS = {
    "ingest": run_ingest,
    "search": run_search,
    "count": run_count,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return COMMANDS[args.command](args)
    except CorpusError as exc:
        print(f"[ERR] {exc.describe()}")
        return 2


__all__ = ["create_parser", "main"]
