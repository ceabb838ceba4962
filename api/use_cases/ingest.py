"""Ingestion use case orchestration.

Pipeline per input line:
1. Normalize (shared)
2. Segment into sentences (ingestion)
3. Accumulate and flush batches into the sink (ingestion -> storage)
4. Record each persisted batch in the output file (storage)
"""

from contextlib import nullcontext
from dataclasses import dataclass
from typing import BinaryIO, Callable, ContextManager, Optional

from ingestion import (
    BatchAccumulator,
    LineReader,
    SentenceOutput,
    SentenceRecord,
    SentenceSegmenter,
    SentenceSink,
)
from shared.config import CorpusConfig
from shared.exceptions import CorpusError
from shared.text_utils import TextPreprocessor


@dataclass
class IngestResult:
    """Result of ingestion operation.

    Attributes:
        lines_processed: Number of input lines read
        sentences_processed: Number of sentences produced by segmentation
        sentences_uploaded: Number of sentences persisted by the sink
        batches_flushed: Number of successful batch inserts
    """

    lines_processed: int
    sentences_processed: int
    sentences_uploaded: int
    batches_flushed: int


class IngestUseCase:
    """Orchestrates the sentence ingestion pipeline for one input file.

    The output file is opened only after the text index exists and the
    input file is open, so a failed startup leaves a previous file intact.

    Example:
        >>> sink = PostgresSentenceSink(config)
        >>> opener = lambda: SentenceFileWriter(config.output_file_path)
        >>> result = IngestUseCase(config, sink, output_factory=opener).execute()
    """

    def __init__(
        self,
        config: CorpusConfig,
        sink: SentenceSink,
        output: Optional[SentenceOutput] = None,
        output_factory: Optional[Callable[[], ContextManager[SentenceOutput]]] = None,
        reader: Optional[LineReader] = None,
        segmenter: Optional[SentenceSegmenter] = None,
        preprocessor: Optional[TextPreprocessor] = None,
    ):
        self.config = config
        self.sink = sink
        self.output = output
        self.output_factory = output_factory
        self.reader = reader or LineReader()
        self.segmenter = segmenter or SentenceSegmenter()
        self.preprocessor = preprocessor or TextPreprocessor()

    def execute(self) -> IngestResult:
        """Run the pipeline to completion.

        Raises:
            CorpusError: on the first input, persistence or output failure;
                batches flushed before the failure stay persisted
        """
        self.sink.ensure_text_index()

        source_file = self.config.input_file_path
        with self.reader.open(source_file) as handle:
            with self._open_output() as output:
                return self._run(source_file, handle, output)

    def _open_output(self) -> ContextManager[Optional[SentenceOutput]]:
        if self.output_factory is not None:
            return self.output_factory()
        return nullcontext(self.output)

    def _run(
        self, source_file: str, handle: BinaryIO, output: Optional[SentenceOutput]
    ) -> IngestResult:
        accumulator = BatchAccumulator(
            self.sink,
            batch_size=self.config.batch_size,
            output=output,
            write_lines=self.config.write_sentence_file,
        )
        lines_processed = 0
        sentences_processed = 0
        line_number: Optional[int] = None

        try:
            for line_number, line in self.reader.read_lines(handle):
                lines_processed += 1
                if self.config.log_lines:
                    print(f"[line {line_number}] {line}")

                cleaned = self.preprocessor.normalize(line)
                for sentence in self.segmenter.segment(cleaned):
                    record = SentenceRecord(sentence, source_file, line_number)
                    if self.config.log_lines:
                        print(f"[sentence] {sentence}")
                    accumulator.append(record)
                    sentences_processed += 1

            line_number = None
            accumulator.finish()
            if output is not None:
                output.flush()
        except CorpusError as exc:
            if exc.line_number is None:
                exc.line_number = line_number
            raise

        print(f"[done] lines read: {lines_processed}")
        print(f"[done] total processed sentences: {sentences_processed}")
        return IngestResult(
            lines_processed=lines_processed,
            sentences_processed=sentences_processed,
            sentences_uploaded=accumulator.records_flushed,
            batches_flushed=accumulator.batches_flushed,
        )


__all__ = ["IngestUseCase", "IngestResult"]
