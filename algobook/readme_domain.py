"""Records describing solved problems and practice exams."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum


class Difficulty(IntEnum):
    """How hard a problem is rated."""

    UNKNOWN = 0
    EASY = 1
    MEDIUM = 2
    HARD = 3

    def __str__(self) -> str:
        return self.name.lower()


@dataclass
class FileInfo:
    """What the tag line of one solution file says about its problem."""

    id: int
    name: str
    main_tag: str
    other_tags: list[str] = field(default_factory=list)
    practice_count: int = 0
    has_tags: bool = False
    star: int = 0
    difficulty: Difficulty = Difficulty.UNKNOWN
    familiar_score: int = 0
    is_free_in_leetcode: bool = False


@dataclass
class ExamInfo:
    """One problem picked for an exam."""

    id: int
    name: str
    done: bool = False
    familiar: int = 0
    create_time: datetime = field(default_factory=datetime.now)


@dataclass
class Exam:
    """Exam problems grouped by difficulty."""

    easy: list[ExamInfo] = field(default_factory=list)
    medium: list[ExamInfo] = field(default_factory=list)
    hard: list[ExamInfo] = field(default_factory=list)