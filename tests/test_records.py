"""Tests for the record type and CSV line codec."""

from datetime import date

import pytest

from rolo.book.record import (
    Record,
    display,
    matches,
    parse_fields,
    parse_line,
    serialize,
)
from rolo.errors import MalformedRecord, ParseError


@pytest.fixture
def alice() -> Record:
    return Record(id=1, name="Alice", date=date(2020, 1, 1), address="Tokyo", note="hello")


class TestParseFields:
    def test_valid(self, alice: Record):
        rec = parse_fields(["1", "Alice", "2020-01-01", "Tokyo", "hello"])
        assert rec == alice

    def test_empty_text_fields(self):
        rec = parse_fields(["0", "", "1999-12-31", "", ""])
        assert rec.id == 0
        assert rec.name == ""
        assert rec.address == ""
        assert rec.note == ""

    def test_whitespace_preserved(self):
        rec = parse_fields(["5", " Bob ", "2021-03-04", "  Osaka", "note "])
        assert rec.name == " Bob "
        assert rec.address == "  Osaka"
        assert rec.note == "note "

    def test_wrong_field_count(self):
        with pytest.raises(MalformedRecord, match="expected 5 fields, got 4"):
            parse_fields(["1", "Alice", "2020-01-01", "Tokyo"])

    @pytest.mark.parametrize("bad_id", ["", "-1", "abc", "1.5", " 1", "+1", "4294967296"])
    def test_bad_id(self, bad_id: str):
        with pytest.raises(ParseError, match="id"):
            parse_fields([bad_id, "Alice", "2020-01-01", "Tokyo", "hello"])

    def test_max_id(self):
        rec = parse_fields(["4294967295", "A", "2020-01-01", "B", "C"])
        assert rec.id == 4294967295

    def test_leading_zeros(self):
        rec = parse_fields(["007", "Bond", "1962-10-05", "London", ""])
        assert rec.id == 7

    @pytest.mark.parametrize(
        "bad_date",
        ["2020-1-1", "20-01-01", "2020/01/01", "2020-01-01T00:00", "2020-02-30", "2020-13-01", ""],
    )
    def test_bad_date(self, bad_date: str):
        with pytest.raises(ParseError, match="date"):
            parse_fields(["1", "Alice", bad_date, "Tokyo", "hello"])

    def test_leap_day(self):
        rec = parse_fields(["1", "Leap", "2024-02-29", "", ""])
        assert rec.date == date(2024, 2, 29)


class TestParseLine:
    def test_note_keeps_commas(self):
        rec = parse_line("1,Alice,2020-01-01,Tokyo,hello, world,again")
        assert rec.note == "hello, world,again"

    def test_too_few_fields(self):
        with pytest.raises(MalformedRecord, match="got 3"):
            parse_line("1,Alice,2020-01-01")

    def test_empty_line(self):
        with pytest.raises(MalformedRecord, match="got 1"):
            parse_line("")


class TestSerialize:
    def test_field_order(self, alice: Record):
        assert serialize(alice) == "1,Alice,2020-01-01,Tokyo,hello"

    def test_round_trip(self):
        rec = parse_line("42,Carol,2001-09-11,New York,likes, commas")
        assert parse_line(serialize(rec)) == rec

    def test_comma_in_name_does_not_round_trip(self):
        # No escaping: a comma outside the note shifts every later field.
        rec = Record(id=1, name="Doe, John", date=date(2020, 1, 1), address="Paris", note="x")
        with pytest.raises(ParseError, match="date"):
            parse_line(serialize(rec))


class TestDisplay:
    def test_block(self, alice: Record):
        assert display(alice).splitlines() == [
            "-----",
            "ID: 1",
            "Name: Alice",
            "Date: 2020-01-01",
            "Addr: Tokyo",
            "Note: hello",
            "-----",
        ]


class TestMatches:
    @pytest.mark.parametrize("word", ["1", "Alice", "2020-01-01", "Tokyo", "hello"])
    def test_each_field(self, alice: Record, word: str):
        assert matches(alice, word)

    @pytest.mark.parametrize("word", ["alice", "Ali", "01", "Tokyo ", "", "hello world"])
    def test_exact_only(self, alice: Record, word: str):
        assert not matches(alice, word)

    def test_empty_word_matches_empty_field(self):
        rec = parse_line("2,Bob,2020-01-01,,")
        assert matches(rec, "")
