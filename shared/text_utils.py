import re


class TextPreprocessor:
    """Line-level cleanup applied before sentence segmentation."""

    NOISE_RE = re.compile(r"[^A-Za-z0-9\s.!?]")

    def normalize(self, line: str) -> str:
        """Delete every character outside letters, digits, whitespace and
        ``.!?``, then trim. Idempotent."""
        return self.NOISE_RE.sub("", line).strip()


__all__ = ["TextPreprocessor"]
