import json
from typing import List, Sequence

from storage import SearchResult


class ResponseFormatter:
    """Render search results for the terminal."""

    @staticmethod
    def format_search_results_text(results: Sequence[SearchResult]) -> str:
        if not results:
            return "[search] no matches"
        lines: List[str] = []
        for i, result in enumerate(results, 1):
            lines.append(
                f"[{i}] rank={result.rank:.4f} {result.file_name}:{result.line_number} | {result.text}"
            )
        return "\n".join(lines)

    @staticmethod
    def format_search_results_json(results: Sequence[SearchResult]) -> str:
        payload = [
            {
                "text": result.text,
                "fileName": result.file_name,
                "lineNumber": result.line_number,
                "rank": result.rank,
            }
            for result in results
        ]
        return json.dumps(payload, ensure_ascii=False, indent=2)


__all__ = ["ResponseFormatter"]
