"""Loans of a book with borrow and due dates."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from libraryd.date import Date

_INT = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Loan:
    """A book borrowed on one date and due back on another."""

    book_id: str
    borrow_date: Date = field(default_factory=Date)
    due_date: Date = field(default_factory=Date)

    def serialize(self) -> str:
        """Return the space-separated line stored in the loans file."""
        b, d = self.borrow_date, self.due_date
        return f"{self.book_id} {b.day} {b.month} {b.year} {d.day} {d.month} {d.year}"

    @classmethod
    def deserialize(cls, line: str) -> Loan:
        """Parse a loans line: book id followed by six integers."""
        fields = line.split()
        if len(fields) < 7 or not all(_INT.fullmatch(f) for f in fields[1:7]):
            raise ValueError(f"Malformed loans line: {line}")
        bd, bm, by, dd, dm, dy = (int(f) for f in fields[1:7])
        return cls(fields[0], Date(bd, bm, by), Date(dd, dm, dy))