"""Catalog entries and their one-line text form."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INT = re.compile(r"[+-]?[0-9]+")


@dataclass
class Book:
    """A catalogued title with the number of copies on the shelf."""

    id: str
    title: str
    author: str
    copies: int = 0

    def serialize(self) -> str:
        """Return the space-separated line stored in the catalog file."""
        return f"{self.id} {self.title} {self.author} {self.copies}"

    @classmethod
    def deserialize(cls, line: str) -> Book:
        """Parse a catalog line; extra fields after the copy count are ignored."""
        fields = line.split()
        if len(fields) < 4 or not _INT.fullmatch(fields[3]):
            raise ValueError(f"Malformed catalog line: {line}")
        book_id, title, author, copies = fields[:4]
        return cls(book_id, title, author, int(copies))