"""CLI entry point: prompts for a score on stdin, prints PASS or FAIL."""

import sys

from .errors import InputFormatError
from .evaluator import Evaluator, read_marks
from .token_reader import TokenReader


def main() -> None:
    reader = TokenReader(sys.stdin)
    try:
        marks = read_marks(reader, sys.stdout)
    except InputFormatError as exc:
        print(f"gradecheck: {exc}", file=sys.stderr)
        sys.exit(1)

    print(Evaluator(marks).classify_stored())
