"""Command that regenerates the README problem list."""

from __future__ import annotations

import argparse
import os
from typing import Optional

from .readme_files import FileRepo
from .readme_usecase import AlgoUseCase
from .readme_writer import ReadMeWriter

# Topics in the order their sections appear in the README.
TOPIC_ORDER = tuple(
    """
    arrays&hashing two-pointers sliding-window stack binary-search
    linked-list trees tries heap(priority-queue) backtracking graphs
    advanced-graphs 1d-dp 2d-dp greedy intervals math&geometry
    bit-manipulation todo
    """.split()
)

UPDATE_README = "update-readme"


def _parse(argv: Optional[list[str]]) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(
        prog="algobook-readme",
        description="Rebuild the problem table in a README file.",
    )
    parser.add_argument("action", nargs="?", help="action to run (default: $ACTION)")
    parser.add_argument("--neetcode-dir", default=os.path.join("..", "neetcode"))
    parser.add_argument("--readme", default=os.path.join("..", "README.md"))
    return parser, parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the action given on the command line or in the ACTION variable."""
    parser, args = _parse(argv)
    action = args.action or os.environ.get("ACTION", "")
    if action != UPDATE_README:
        parser.error(f"unknown or missing action {action!r}; expected {UPDATE_README!r}")

    use_case = AlgoUseCase(
        ReadMeWriter(args.readme),
        FileRepo(args.neetcode_dir, list(TOPIC_ORDER)),
    )
    use_case.update_readme()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())