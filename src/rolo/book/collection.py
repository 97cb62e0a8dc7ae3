"""Ordered in-memory record collection."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

from rolo.book.record import Record, matches, serialize
from rolo.errors import InvalidSortKey

logger = logging.getLogger(__name__)

# %S key -> sort key function. Python's sort is stable, so ties keep their order.
SORT_KEYS: dict[int, Callable[[Record], Any]] = {
    1: lambda r: r.id,
    2: lambda r: r.name,
    3: lambda r: r.date,
    4: lambda r: r.address,
    5: lambda r: r.note,
}


class Collection:
    """Records in insertion order, or in the order of the last sort."""

    def __init__(self) -> None:
        self._records: list[Record] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def append(self, record: Record) -> None:
        self._records.append(record)

    # ── Selection ─────────────────────────────────────────────

    def head(self, n: int) -> list[Record]:
        return self._records[:n]

    def tail(self, n: int) -> list[Record]:
        """Last n records, oldest first."""
        if n <= 0:
            return []
        return self._records[-n:]

    def select(self, n: int, reverse_tail: bool = False) -> list[Record]:
        """Records shown by ``%P n``.

        n > 0: first n. n < 0: last abs(n), in their original relative order
        unless reverse_tail is set. n == 0: everything.
        """
        if n > 0:
            return self.head(n)
        if n < 0:
            tail = self.tail(-n)
            if reverse_tail:
                tail.reverse()
            return tail
        return list(self._records)

    def find(self, word: str) -> list[Record]:
        return [r for r in self._records if matches(r, word)]

    # ── Ordering / export ─────────────────────────────────────

    def sort_by(self, key: int) -> None:
        """Reorder in place by sort key 1..5 (id, name, date, address, note).

        Raises:
            InvalidSortKey: key outside 1..5; the order is left unchanged.
        """
        key_fn = SORT_KEYS.get(key)
        if key_fn is None:
            raise InvalidSortKey(key)
        self._records.sort(key=key_fn)
        logger.debug("Sorted %d records by key %d", len(self._records), key)

    def to_lines(self) -> list[str]:
        return [serialize(r) for r in self._records]
