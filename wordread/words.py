"""Split text into whitespace-separated words that remember where they stand."""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass
from typing import List, Union

_SEPARATORS = frozenset(" \t\n\r")
_TAB_WIDTH = 4
_LEADING_SPACE = " \t\n\v\f\r"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)
_INF_RE = re.compile(r"[+-]?inf(?:inity)?", re.IGNORECASE)
_NAN_RE = re.compile(r"([+-]?)nan(?:\([0-9A-Za-z_]*\))?", re.IGNORECASE)


class WordConversionError(ValueError):
    """Raised when a word does not hold a number of the requested kind."""

    def __init__(self, word: "Word", target: str) -> None:
        super().__init__(
            f"Trying to convert not '{target}' str to '{target}'\n"
            f"str (word) = '{word.text}'\n"
            f"file: {word.line}:{word.column}"
        )
        self.word = word
        self.target = target


@dataclass(frozen=True)
class Word:
    """A word together with its 1-based line and column."""

    text: str
    line: int
    column: int

    def __len__(self) -> int:
        return len(self.text)

    def to_int(self) -> int:
        """Return the word as a base-10 integer; the whole word must be the number."""
        body = self.text.lstrip(_LEADING_SPACE)
        if not _INT_RE.fullmatch(body):
            raise WordConversionError(self, "int")
        return int(body)

    def to_double(self) -> float:
        """Return the word as a floating-point number; the whole word must be the number."""
        body = self.text.lstrip(_LEADING_SPACE)
        if _DECIMAL_RE.fullmatch(body) or _INF_RE.fullmatch(body):
            return float(body)
        if _HEX_RE.fullmatch(body):
            try:
                return float.fromhex(body)
            except OverflowError:
                return -math.inf if body.startswith("-") else math.inf
        nan_match = _NAN_RE.fullmatch(body)
        if nan_match:
            return float(f"{nan_match.group(1)}nan")
        raise WordConversionError(self, "double")


def split_words(text: str) -> List[Word]:
    """Split ``text`` on spaces, tabs, newlines and carriage returns.

    Lines and columns start at 1. A space or a word character advances the
    column by one, a tab by four, a newline starts the next line and a
    carriage return leaves the position unchanged.
    """
    words: List[Word] = []
    line, column = 1, 1
    start = None
    start_line = start_column = 0

    for index, char in enumerate(text):
        if char in _SEPARATORS:
            if start is not None:
                words.append(Word(text[start:index], start_line, start_column))
                start = None
            if char == "\n":
                line += 1
                column = 1
            elif char == "\t":
                column += _TAB_WIDTH
            elif char == " ":
                column += 1
            continue

        if start is None:
            start, start_line, start_column = index, line, column
        column += 1

    if start is not None:
        words.append(Word(text[start:], start_line, start_column))
    return words


def read_words(path: Union[str, "os.PathLike[str]"]) -> List[Word]:
    """Read a file and split its contents into words."""
    with open(path, "rb") as stream:
        data = stream.read()
    return split_words(data.decode("utf-8", errors="surrogateescape"))