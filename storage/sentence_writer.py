from typing import Optional, TextIO

from shared.exceptions import OutputWriteError


class SentenceFileWriter:
    """Newline-delimited sentence file, created (or truncated) on open."""

    def __init__(self, path: str):
        self.path = path
        self._handle: Optional[TextIO] = None

    def open(self) -> "SentenceFileWriter":
        try:
            self._handle = open(self.path, "w", encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(f"Cannot create output file {self.path}: {exc}") from exc
        return self

    def append_line(self, text: str) -> None:
        if self._handle is None:
            raise OutputWriteError(f"Output file {self.path} is not open")
        try:
            self._handle.write(text + "\n")
        except OSError as exc:
            raise OutputWriteError(f"Cannot write to {self.path}: {exc}") from exc

    def flush(self) -> None:
        if self._handle is None:
            return
        try:
            self._handle.flush()
        except OSError as exc:
            raise OutputWriteError(f"Cannot flush {self.path}: {exc}") from exc

    def close(self) -> None:
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        try:
            handle.close()
        except OSError as exc:
            raise OutputWriteError(f"Cannot close {self.path}: {exc}") from exc

    def __enter__(self) -> "SentenceFileWriter":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
            return
        # the in-flight error wins over a close failure
        try:
            self.close()
        except OutputWriteError as close_exc:
            print(f"[warn] {close_exc}")


__all__ = ["SentenceFileWriter"]
