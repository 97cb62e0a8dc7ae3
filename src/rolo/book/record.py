"""Record type + CSV line codec (no I/O).

- Parse: five text fields -> Record
- Format: Record -> CSV line / bordered display block
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime

from rolo.errors import MalformedRecord, ParseError

FIELD_COUNT = 5
DATE_FORMAT = "%Y-%m-%d"
SEPARATOR = "-----"

_MAX_ID = 2**32 - 1
_ID_RE = re.compile(r"[0-9]+")
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


@dataclass(frozen=True)
class Record:
    """One address-book entry."""

    id: int
    name: str
    date: date
    address: str
    note: str

    @property
    def date_text(self) -> str:
        return self.date.strftime(DATE_FORMAT)


# ── Parsing ───────────────────────────────────────────────────


def _parse_id(text: str) -> int:
    if not _ID_RE.fullmatch(text):
        raise ParseError(f"field 1 (id): not an unsigned integer: {text!r}")
    value = int(text)
    if value > _MAX_ID:
        raise ParseError(f"field 1 (id): out of range: {text!r}")
    return value


def _parse_date(text: str) -> date:
    # strptime alone accepts "2020-1-1", so the shape is checked first
    if not _DATE_RE.fullmatch(text):
        raise ParseError(f"field 3 (date): expected YYYY-MM-DD, got {text!r}")
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as e:
        raise ParseError(f"field 3 (date): {text!r} is not a valid date") from e


def parse_fields(fields: Sequence[str]) -> Record:
    """Build a Record from exactly five text fields.

    Raises:
        MalformedRecord: wrong field count.
        ParseError: id or date field is malformed.
    """
    if len(fields) != FIELD_COUNT:
        raise MalformedRecord(f"expected {FIELD_COUNT} fields, got {len(fields)}")

    id_text, name, date_text, address, note = fields
    return Record(
        id=_parse_id(id_text),
        name=name,
        date=_parse_date(date_text),
        address=address,
        note=note,
    )


def parse_line(line: str) -> Record:
    """Parse one data line (terminator already removed) into a Record.

    Splits on the first four commas only; the note keeps the rest verbatim.
    """
    return parse_fields(line.split(",", FIELD_COUNT - 1))


# ── Formatting ────────────────────────────────────────────────


def serialize(record: Record) -> str:
    """Render a Record back to its CSV line form (no trailing newline)."""
    return ",".join(
        [str(record.id), record.name, record.date_text, record.address, record.note]
    )


def display(record: Record) -> str:
    """Bordered multi-line block for console output."""
    return "\n".join(
        [
            SEPARATOR,
            f"ID: {record.id}",
            f"Name: {record.name}",
            f"Date: {record.date_text}",
            f"Addr: {record.address}",
            f"Note: {record.note}",
            SEPARATOR,
        ]
    )


def matches(record: Record, word: str) -> bool:
    """Exact, case-sensitive match of word against any field's text form."""
    return word in (
        str(record.id),
        record.name,
        record.date_text,
        record.address,
        record.note,
    )
