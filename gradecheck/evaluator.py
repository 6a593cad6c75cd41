"""Score record and the pass/fail rule."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from .token_reader import TokenReader

PROMPT = "Enter marks: "

# Exclusive: a score must be strictly greater than this to pass.
PASS_THRESHOLD = 50

PASS = "PASS"
FAIL = "FAIL"


@dataclass(frozen=True)
class ScoreRecord:
    """A single subject score, fixed at construction."""

    marks: int


def read_marks(reader: TokenReader, out: Optional[TextIO] = None) -> int:
    """Print the prompt to *out*, then read one integer score from *reader*.

    Raises InputFormatError if the next token is not an integer or the
    input is exhausted.  The error is not handled here.
    """
    if out is None:
        out = sys.stdout
    print(PROMPT, file=out, flush=True)
    return reader.next_int()


class Evaluator:
    """Holds a score record and classifies scores against PASS_THRESHOLD.

    The stored record and the argument to :meth:`classify` are independent;
    :meth:`classify` looks only at its argument.
    """

    def __init__(self, marks: int):
        self._record = ScoreRecord(marks)

    @property
    def record(self) -> ScoreRecord:
        return self._record

    @property
    def marks(self) -> int:
        return self._record.marks

    def classify(self, subject_marks: int) -> str:
        """Return PASS if *subject_marks* is above the threshold, else FAIL."""
        if subject_marks > PASS_THRESHOLD:
            return PASS
        return FAIL

    def classify_stored(self) -> str:
        """Classify the score held in :attr:`record`."""
        return self.classify(self.marks)

    def __repr__(self) -> str:
        return f"Evaluator(marks={self.marks!r})"
