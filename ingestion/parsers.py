from typing import BinaryIO, Iterator, Tuple

from shared.exceptions import InputReadError


class LineReader:
    """Read newline-delimited input with 1-indexed line numbers.

    Lines are decoded one at a time so a malformed line is reported with
    its exact number.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def open(self, path: str) -> BinaryIO:
        try:
            return open(path, "rb")
        except OSError as exc:
            raise InputReadError(f"Cannot open input file {path}: {exc}") from exc

    def read_lines(self, handle: BinaryIO) -> Iterator[Tuple[int, str]]:
        line_number = 0
        while True:
            try:
                raw = handle.readline()
            except OSError as exc:
                raise InputReadError(
                    f"Error reading line {line_number + 1}: {exc}",
                    line_number=line_number + 1,
                ) from exc
            if not raw:
                break
            line_number += 1
            try:
                line = raw.decode(self.encoding)
            except UnicodeDecodeError as exc:
                raise InputReadError(
                    f"Error reading line {line_number}: {exc}",
                    line_number=line_number,
                ) from exc
            yield line_number, line.rstrip("\r\n")


__all__ = ["LineReader"]
