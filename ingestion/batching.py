"""Ordered, bounded batching of sentence records into a persistence sink."""

from typing import List, Optional, Protocol, Sequence

from .models import SentenceRecord


class SentenceSink(Protocol):
    """Persistence collaborator with a full-text index over sentence text."""

    def ensure_text_index(self) -> None:
        """Idempotently create the full-text index. Called once at startup."""
        ...

    def insert_batch(self, records: Sequence[SentenceRecord]) -> None:
        """Persist records in order; all-or-nothing per call."""
        ...


class SentenceOutput(Protocol):
    """Optional secondary sink recording sentence text."""

    def append_line(self, text: str) -> None:
        ...

    def flush(self) -> None:
        ...


class BatchAccumulator:
    """
    Collect records in arrival order and flush them to the sink in batches.

    A flush happens as soon as the batch reaches ``batch_size`` and finishes
    before ``append`` returns, so at most one flush is ever in flight. Sink
    errors propagate unchanged; the failed batch is dropped without retry and
    its sentences never reach the output.
    """

    def __init__(
        self,
        sink: SentenceSink,
        batch_size: int = 1000,
        output: Optional[SentenceOutput] = None,
        write_lines: bool = True,
        verbose: bool = True,
    ):
        """
        Initialize BatchAccumulator.

        Args:
            sink: Primary persistence sink
            batch_size: Number of records per flush
            output: Secondary sink that receives the sentences of each
                successfully inserted batch, then is flushed
            write_lines: Write sentence text to the output (flush only when False)
            verbose: Print a progress line per flushed batch
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {batch_size}")
        self.sink = sink
        self.batch_size = batch_size
        self.output = output
        self.write_lines = write_lines
        self.verbose = verbose
        self.batch: List[SentenceRecord] = []
        self.batches_flushed = 0
        self.records_flushed = 0

    @property
    def pending(self) -> int:
        return len(self.batch)

    def append(self, record: SentenceRecord) -> bool:
        """Add a record; returns True when this append triggered a flush."""
        self.batch.append(record)
        if len(self.batch) >= self.batch_size:
            self._flush()
            return True
        return False

    def finish(self) -> int:
        """Flush any remainder. Returns the number of records flushed."""
        if not self.batch:
            return 0
        return self._flush(final=True)

    def _flush(self, final: bool = False) -> int:
        # a failed batch is dropped, never re-sent by a later flush
        batch, self.batch = self.batch, []
        size = len(batch)
        self.sink.insert_batch(batch)
        self.batches_flushed += 1
        self.records_flushed += size
        if self.output is not None:
            if self.write_lines:
                for record in batch:
                    self.output.append_line(record.text)
            self.output.flush()
        if self.verbose:
            label = "uploaded final" if final else "uploaded"
            print(f"[upload] {label} {size} sentences (total {self.records_flushed})")
        return size


__all__ = ["BatchAccumulator", "SentenceOutput", "SentenceSink"]
