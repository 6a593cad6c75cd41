"""Whitespace-delimited token reader over a text stream."""

from __future__ import annotations

import re
from collections import deque
from io import StringIO
from typing import Deque, Iterable, TextIO

from .errors import InputFormatError

# Optional sign followed by ASCII digits only; rejects "1.5", "0x10", "1_000".
_INT_RE = re.compile(r"[+-]?[0-9]+")

# Scores are 32-bit signed integers.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class TokenReader:
    """Read tokens from *stream* one at a time, pulling lines lazily.

    Unconsumed tokens from a line stay buffered for the next call, so a
    single reader can walk a sequence like ``"75 50\\n-3"``.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._pending: Deque[str] = deque()

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "TokenReader":
        """Build a reader over an in-memory token sequence."""
        return cls(StringIO("\n".join(tokens)))

    def next_token(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise InputFormatError("no input provided")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def next_int(self) -> int:
        """Return the next token as an int; raise InputFormatError otherwise."""
        token = self.next_token()
        if not _INT_RE.fullmatch(token):
            raise InputFormatError(f"not an integer: {token!r}", token=token)
        value = int(token)
        if not INT_MIN <= value <= INT_MAX:
            raise InputFormatError(f"integer out of range: {token!r}", token=token)
        return value
