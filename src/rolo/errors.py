"""Error taxonomy for line processing.

Every failure raised while handling one input line derives from RoloError
and is reported by Rolo.handle_line as a single ``Error: <message>`` line.
QuitRequested is not an error: it ends the session.
"""

from __future__ import annotations


class RoloError(Exception):
    """Base error for anything that can go wrong on one input line."""


class ParseError(RoloError):
    """A field or directive argument could not be parsed."""


class MalformedRecord(RoloError):
    """A data line did not have the expected number of fields."""


class MissingArgument(RoloError):
    """A directive that needs an argument was given none."""

    def __init__(self, directive: str, what: str) -> None:
        super().__init__(f"%{directive} requires {what}")
        self.directive = directive


class InvalidSortKey(RoloError):
    """Sort key outside 1..5."""

    def __init__(self, key: int) -> None:
        super().__init__(f"invalid sort key {key} (expected 1-5)")
        self.key = key


class UnknownDirective(RoloError):
    def __init__(self, letter: str) -> None:
        super().__init__(f"unknown directive: %{letter}")
        self.letter = letter


class IoError(RoloError):
    """A file could not be opened, read or written.

    The underlying OSError is kept as ``__cause__``.
    """

    def __init__(self, action: str, path: str, reason: str) -> None:
        super().__init__(f"cannot {action} {path!r}: {reason}")
        self.path = path


class ReadDepthExceeded(RoloError):
    """Nested %R reads went deeper than the configured limit."""

    def __init__(self, path: str, limit: int) -> None:
        super().__init__(f"%R {path!r}: nesting deeper than {limit} reads")
        self.path = path


class QuitRequested(Exception):
    """Raised by %Q. Propagates through nested reads to the session."""
