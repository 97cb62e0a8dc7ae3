"""Directive lines: command types + parse (no I/O).

Grammar: ``%<LETTER>[ <ARG>]``, split on single spaces. Only the first
argument is read; anything after it is ignored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from rolo.errors import MissingArgument, ParseError

PREFIX = "%"

_INT_RE = re.compile(r"[+-]?[0-9]+")


# ── Command types ─────────────────────────────────────────────


@dataclass(frozen=True)
class Quit:
    """%Q: end the session."""


@dataclass(frozen=True)
class Count:
    """%C: report the number of records."""


@dataclass(frozen=True)
class Print:
    """%P n: show first n, last abs(n), or all (n == 0) records."""

    n: int


@dataclass(frozen=True)
class Write:
    """%W file: save every record as a CSV line."""

    path: str


@dataclass(frozen=True)
class Read:
    """%R file: feed each line of a file back through the classifier."""

    path: str


@dataclass(frozen=True)
class Sort:
    """%S key: reorder by field 1..5. Range is checked at execution."""

    key: int


@dataclass(frozen=True)
class Find:
    """%F word: show records with a field exactly equal to word."""

    word: str


@dataclass(frozen=True)
class Unknown:
    letter: str


Directive = Quit | Count | Print | Write | Read | Sort | Find | Unknown


# ── Parsing ───────────────────────────────────────────────────


def is_directive(line: str) -> bool:
    return line.startswith(PREFIX)


def _parse_int(letter: str, text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ParseError(f"%{letter}: expected an integer, got {text!r}")
    return int(text)


def parse_directive(line: str) -> Directive:
    """Parse a directive line (terminator already removed) into a command.

    Raises:
        MissingArgument: a directive that needs an argument has none.
        ParseError: a numeric argument is not an integer.
    """
    tokens = line.split(" ")
    letter = tokens[0][len(PREFIX):]
    arg = tokens[1] if len(tokens) > 1 else None

    if letter == "Q":
        return Quit()
    if letter == "C":
        return Count()

    if letter == "P":
        if arg is None:
            raise MissingArgument(letter, "a record count")
        return Print(_parse_int(letter, arg))

    if letter == "W":
        if arg is None:
            raise MissingArgument(letter, "a file name")
        return Write(arg)

    if letter == "R":
        if arg is None:
            raise MissingArgument(letter, "a file name")
        return Read(arg)

    if letter == "S":
        if arg is None:
            raise MissingArgument(letter, "a sort key (1-5)")
        return Sort(_parse_int(letter, arg))

    if letter == "F":
        if arg is None:
            raise MissingArgument(letter, "a search word")
        return Find(arg)

    return Unknown(letter)
