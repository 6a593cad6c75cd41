"""Gradecheck-specific exceptions."""

from typing import Optional


class InputFormatError(Exception):
    """Raised when the input source does not yield a valid integer score.

    The CLI prints the message and exits non-zero; no classification is
    produced.  ``token`` holds the rejected text, or None at end of input.
    """

    def __init__(self, message: str, token: Optional[str] = None):
        super().__init__(message)
        self.token = token
