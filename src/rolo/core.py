"""Rolo interpreter: line classifier + directive dispatcher.

Responsibilities:
1. Per-line error boundary (handle_line): report, then carry on
2. Classify each line as directive or data (classify_and_apply)
3. Build records via the CSV codec and append them to the collection
4. Execute directives against the collection, including %W / %R file I/O

%R feeds every file line back through classify_and_apply, so nested files
behave exactly like the top-level stream.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from rolo.book.collection import Collection
from rolo.book.record import Record, display, parse_line
from rolo.config import RoloConfig
from rolo.directives import (
    Count,
    Directive,
    Find,
    Print,
    Quit,
    Read,
    Sort,
    Unknown,
    Write,
    is_directive,
    parse_directive,
)
from rolo.errors import IoError, QuitRequested, ReadDepthExceeded, RoloError, UnknownDirective

logger = logging.getLogger(__name__)

Output = Callable[[str], None]


def strip_terminator(line: str) -> str:
    """Remove a trailing ``\\n`` or ``\\r\\n``; other whitespace is data."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class Rolo:
    """Owns the record collection and interprets input lines against it."""

    def __init__(self, config: RoloConfig | None = None, output: Output = print) -> None:
        self.config = config or RoloConfig()
        self.book = Collection()
        self._emit = output
        self._read_depth = 0

    # ── Per-line boundary ────────────────────────────────────

    def handle_line(self, line: str) -> None:
        """Process one line, reporting any failure as ``Error: <message>``.

        QuitRequested is not caught here.
        """
        try:
            self.classify_and_apply(line)
        except RoloError as e:
            self.report(e)

    def report(self, error: Exception) -> None:
        """Emit one ``Error: <message>`` console line."""
        logger.debug("%s: %s", type(error).__name__, error)
        self._emit(f"Error: {error}")

    # ── Classifier ───────────────────────────────────────────

    def classify_and_apply(self, line: str) -> None:
        text = strip_terminator(line)
        if is_directive(text):
            self.execute(parse_directive(text))
            return

        record = parse_line(text)
        if self.config.book.echo_on_insert:
            self._emit(display(record))
        self.book.append(record)

    # ── Dispatcher ───────────────────────────────────────────

    def execute(self, directive: Directive) -> None:
        logger.debug("Dispatching %r", directive)

        if isinstance(directive, Quit):
            raise QuitRequested()
        if isinstance(directive, Count):
            self._emit(f"{len(self.book)} items")
        elif isinstance(directive, Print):
            records = self.book.select(directive.n, reverse_tail=self.config.book.reverse_tail)
            self._show(records)
        elif isinstance(directive, Write):
            self._write(directive.path)
        elif isinstance(directive, Read):
            self._read(directive.path)
        elif isinstance(directive, Sort):
            self.book.sort_by(directive.key)
        elif isinstance(directive, Find):
            self._show(self.book.find(directive.word))
        elif isinstance(directive, Unknown):
            raise UnknownDirective(directive.letter)
        else:
            raise TypeError(f"unhandled directive: {directive!r}")

    def _show(self, records: Iterable[Record]) -> None:
        # rendered in full before emitting anything
        blocks = [display(r) for r in records]
        if blocks:
            self._emit("\n".join(blocks))

    def _write(self, path: str) -> None:
        lines = self.book.to_lines()
        content = "".join(f"{line}\n" for line in lines)
        # encode before opening so a failure leaves the target untouched
        try:
            data = content.encode(self.config.files.encoding)
        except UnicodeError as e:
            raise IoError("write", path, str(e)) from e
        try:
            Path(path).write_bytes(data)
        except OSError as e:
            raise IoError("write", path, e.strerror or str(e)) from e
        logger.info("Wrote %d records to %s", len(lines), path)

    def _read(self, path: str) -> None:
        limit = self.config.files.max_read_depth
        if self._read_depth >= limit:
            raise ReadDepthExceeded(path, limit)

        try:
            fh = open(path, encoding=self.config.files.encoding)
        except OSError as e:
            raise IoError("open", path, e.strerror or str(e)) from e

        count = 0
        self._read_depth += 1
        try:
            with fh:
                try:
                    for line in fh:
                        self.classify_and_apply(line)
                        count += 1
                except (OSError, UnicodeDecodeError) as e:
                    raise IoError("read", path, str(e)) from e
        finally:
            self._read_depth -= 1
        logger.info("Read %d lines from %s", count, path)
