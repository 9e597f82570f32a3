"""Replace the problem list between its markers in a README file."""

from __future__ import annotations

from pathlib import Path

LIST_START = "<!-- leetcode list start -->"
LIST_END = "<!-- leetcode list end -->"


class ReadMeWriter:
    """Writes a new problem list into a README that holds the list markers."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def write(self, content: str) -> None:
        """Put ``content`` between the markers, replacing what was there."""
        block = f"\n{LIST_START}\n" + content + LIST_END
        text = self.path.read_text(encoding="utf-8")
        start = text.find(LIST_START)
        end = text.find(LIST_END)
        if start < 1 or end < 0:
            raise ValueError(f"{self.path}: list markers not found")
        self.path.write_text(
            text[: start - 1] + block + text[end + len(LIST_END):], encoding="utf-8"
        )