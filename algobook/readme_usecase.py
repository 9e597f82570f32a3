"""Render the problem list as Markdown and write it into the README."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from typing import Protocol

from .readme_domain import FileInfo

PROBLEM_URL = "https://leetcode.com/problems/{name}/"
STAR = "⭐"


class _Writer(Protocol):
    def write(self, content: str) -> None: ...


class _Files(Protocol):
    def read_all(self) -> list[FileInfo]: ...

    def topics(self) -> list[str]: ...


def star_to_emoji(count: int) -> str:
    """A row of ``count`` star emoji."""
    return STAR * count


def _row(info: FileInfo) -> str:
    link = f"[{info.id}. {info.name}]({PROBLEM_URL.format(name=info.name)})"
    cells = [
        link,
        star_to_emoji(info.star),
        str(info.difficulty),
        str(info.practice_count),
        ", ".join(info.other_tags),
    ]
    return "|" + "|".join(cells) + "|\n"


def render_leetcode_list(file_infos: Iterable[FileInfo], topics: Sequence[str]) -> str:
    """One Markdown table per topic, in topic order."""
    by_tag: dict[str, list[FileInfo]] = defaultdict(list)
    for info in file_infos:
        by_tag[info.main_tag].append(info)

    parts = ["## Leetcode\n\n"]
    for topic in topics:
        parts.append(f"### {topic}\n")
        parts.append("| Name | Star | Difficulty | Practice-Count | Tags |\n")
        parts.append("| -------- | -------- | -------- | -------- | -------- |\n")
        parts.extend(_row(info) for info in by_tag.get(topic, []))
    return "".join(parts)


class AlgoUseCase:
    """Regenerates the README problem list from the solution files."""

    def __init__(self, readme_writer: _Writer, file_repo: _Files) -> None:
        self.readme_writer = readme_writer
        self.file_repo = file_repo

    def update_readme(self) -> None:
        """Read every solution file and write the rendered list into the README."""
        infos = self.file_repo.read_all()
        content = render_leetcode_list(infos, self.file_repo.topics())
        self.readme_writer.write(content)