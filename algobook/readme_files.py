"""Read the tag line of each solution file into a FileInfo."""

from __future__ import annotations

import re
from collections.abc import Container, Sequence
from pathlib import Path

from .readme_domain import Difficulty, FileInfo

TAGS_PREFIX = "// tags: "
DEFAULT_TOPIC = "todo"
_STAR = "star"
_PRACTICE_COUNT = "practice-count:"
_DIFFICULTIES = {str(d): d for d in (Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD)}
_INTEGER = re.compile(r"[+-]?\d+")


class TagFormatError(ValueError):
    """A solution file's name or tag line cannot be understood."""


def _parse_int(text: str, what: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise TagFormatError(f"{what}: {text!r}")
    return int(text)


def create_file_info(file_name: str, tags_info: str, topics: Container[str]) -> FileInfo:
    """Build a FileInfo from a file name such as ``0001-two-sum.go`` and its first line."""
    problem_id = _parse_int(file_name[:4], "parse id failed")
    end = file_name.find(".go")
    if end < 5:
        raise TagFormatError(f"bad file name: {file_name!r}")
    name = file_name[5:end]

    if not tags_info.startswith(TAGS_PREFIX):
        return FileInfo(
            id=problem_id, name=name, main_tag=DEFAULT_TOPIC, is_free_in_leetcode=True
        )

    main_tag, *rest = tags_info[len(TAGS_PREFIX):].split(", ")
    if main_tag not in topics:
        raise TagFormatError(f"find no definition tag: {file_name}")

    star = 0
    difficulty = Difficulty.UNKNOWN
    practice_count = 1
    other_tags: list[str] = []
    for tag in rest:
        if len(tag) > len(_STAR) and tag.startswith(_STAR):
            star = _parse_int(tag[len(_STAR)], "star tag format error")
        elif tag in _DIFFICULTIES:
            difficulty = _DIFFICULTIES[tag]
        elif len(tag) > len(_PRACTICE_COUNT) and tag.startswith(_PRACTICE_COUNT):
            practice_count = _parse_int(
                tag[len(_PRACTICE_COUNT):], "practice-count tag format error"
            )
        else:
            other_tags.append(tag)

    return FileInfo(
        id=problem_id,
        name=name,
        main_tag=main_tag,
        other_tags=other_tags,
        practice_count=practice_count,
        has_tags=True,
        star=star,
        difficulty=difficulty,
        is_free_in_leetcode=True,
    )


def _first_line(text: str) -> str:
    # A file without any newline yields an empty first line.
    head, sep, _ = text.partition("\n")
    return head if sep else ""


class FileRepo:
    """The solution files of one folder and the order of their topics."""

    def __init__(self, folder: str | Path, topic_order: Sequence[str]) -> None:
        self.folder = Path(folder)
        self._topic_order = list(topic_order)
        self._known = frozenset(self._topic_order)

    def read_all(self) -> list[FileInfo]:
        """Describe every solution file in the folder, sorted by file name."""
        infos = []
        for path in sorted(self.folder.iterdir(), key=lambda p: p.name):
            name = path.name
            if not name.endswith(".go") or name.endswith("_test.go"):
                continue
            text = path.read_text(encoding="utf-8")
            infos.append(create_file_info(name, _first_line(text), self._known))
        return infos

    def topics(self) -> list[str]:
        """The topics in the order they are listed."""
        return list(self._topic_order)