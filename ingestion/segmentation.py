"""Heuristic sentence segmentation over normalized text."""

from typing import List, Sequence

MIN_SENTENCE_TOKENS = 3
MIN_SENTENCE_CHARS = 10


def is_sentence_boundary(chars: Sequence[str], pos: int) -> bool:
    """
    Decide whether the ``.`` at ``chars[pos]`` ends a sentence.

    Args:
        chars: Text as a sequence of characters (indexed by character position)
        pos: Position of the period

    Returns:
        True when the period is followed by whitespace and then an uppercase
        letter or a digit, and is not part of an abbreviation, a decimal
        number or an ellipsis.
    """
    if pos == 0 or pos >= len(chars) - 1:
        return False

    prev_char = chars[pos - 1]
    next_char = chars[pos + 1]

    if prev_char.isalpha() and next_char.isalpha():
        return False
    if prev_char.isnumeric() and next_char.isnumeric():
        return False
    if next_char == ".":
        return False
    if not next_char.isspace():
        return False

    for following in chars[pos + 1 :]:
        if not following.isspace():
            return following.isupper() or following.isnumeric()
    return False


def is_terminal_mark_boundary(chars: Sequence[str], pos: int) -> bool:
    """``?`` and ``!`` end a sentence at end of text or before whitespace or an
    uppercase letter. Quote context is not considered."""
    if pos + 1 >= len(chars):
        return True
    next_char = chars[pos + 1]
    return next_char.isspace() or next_char.isupper()


def is_valid_sentence(
    candidate: str,
    min_tokens: int = MIN_SENTENCE_TOKENS,
    min_chars: int = MIN_SENTENCE_CHARS,
) -> bool:
    """A sentence has enough tokens and characters and is not a bare number."""
    trimmed = candidate.strip()
    if not trimmed:
        return False
    if len(trimmed.split()) < min_tokens or len(trimmed) < min_chars:
        return False
    try:
        float(trimmed)
    except ValueError:
        return True
    return False


class _SegmentationPass:
    """
    State for one ``segment()`` call.

    Accumulating: every character is appended to the buffer.
    Evaluate: at a candidate boundary the buffer is emitted if valid, otherwise
    accumulation continues with the buffer intact.
    Flush-or-Merge: at end of input a valid leftover is emitted, an invalid
    non-empty leftover is merged into the last emitted sentence, or dropped
    when nothing was emitted yet.
    """

    def __init__(self, segmenter: "SentenceSegmenter"):
        self.segmenter = segmenter
        self.buffer: List[str] = []
        self.sentences: List[str] = []

    def accumulate(self, char: str) -> None:
        self.buffer.append(char)

    def evaluate(self) -> None:
        candidate = "".join(self.buffer)
        if self.segmenter.is_valid(candidate):
            self.sentences.append(candidate.strip())
            self.buffer.clear()

    def flush_or_merge(self) -> List[str]:
        leftover = "".join(self.buffer).strip()
        self.buffer.clear()
        if not leftover:
            return self.sentences
        if self.segmenter.is_valid(leftover):
            self.sentences.append(leftover)
        elif self.sentences:
            self.sentences[-1] = f"{self.sentences[-1]} {leftover}"
        return self.sentences


class SentenceSegmenter:
    """
    Rule-based sentence segmenter for normalized, ASCII-oriented text.

    Stateless across calls: every ``segment()`` starts a fresh pass.
    """

    def __init__(
        self,
        min_tokens: int = MIN_SENTENCE_TOKENS,
        min_chars: int = MIN_SENTENCE_CHARS,
    ):
        """
        Initialize SentenceSegmenter.

        Args:
            min_tokens: Minimum whitespace-separated tokens in a sentence
            min_chars: Minimum character length of a sentence
        """
        self.min_tokens = min_tokens
        self.min_chars = min_chars

    def is_valid(self, candidate: str) -> bool:
        return is_valid_sentence(candidate, self.min_tokens, self.min_chars)

    def segment(self, text: str) -> List[str]:
        """
        Split text into validated sentences.

        Args:
            text: Normalized text (one input line)

        Returns:
            Ordered list of trimmed sentences
        """
        chars = list(text)
        state = _SegmentationPass(self)

        for pos, char in enumerate(chars):
            state.accumulate(char)
            if char == "." and is_sentence_boundary(chars, pos):
                state.evaluate()
            elif char in "?!" and is_terminal_mark_boundary(chars, pos):
                state.evaluate()

        return state.flush_or_merge()


__all__ = [
    "SentenceSegmenter",
    "is_sentence_boundary",
    "is_terminal_mark_boundary",
    "is_valid_sentence",
]
