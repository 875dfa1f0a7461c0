"""The book catalog and its file storage."""

from __future__ import annotations

import re
from pathlib import Path

from libraryd.book import Book

_COUNT = re.compile(r"\s*([+-]?[0-9]+)")


class BookNotFoundError(LookupError):
    """Raised when no book in the catalog has the requested id."""

    def __init__(self, book_id: str) -> None:
        super().__init__(f"Book {book_id} not found")
        self.book_id = book_id


class DuplicateBookError(ValueError):
    """Raised when adding a book whose id is already catalogued."""

    def __init__(self, book_id: str) -> None:
        super().__init__(f"Book with ID {book_id} already exists")
        self.book_id = book_id


class Catalog:
    """An ordered collection of books."""

    def __init__(self) -> None:
        self._books: list[Book] = []

    def load(self, path: str | Path) -> None:
        """Replace the contents with the books in ``path``; a missing file means empty."""
        self._books.clear()
        try:
            with open(path, encoding="utf-8") as fh:
                text = fh.read()
        except OSError:
            return
        match = _COUNT.match(text)
        if match is None:
            raise ValueError("Failed to read catalog count")
        count = int(match.group(1))
        rest = text[match.end():]
        _, _, rest = rest.partition("\n")
        lines = (line for line in rest.split("\n") if line)
        for _, line in zip(range(count), lines):
            self._books.append(Book.deserialize(line))

    def save(self, path: str | Path) -> None:
        """Write the book count followed by one line per book."""
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(f"{len(self._books)}\n")
            fh.writelines(f"{book.serialize()}\n" for book in self._books)

    @property
    def books(self) -> tuple[Book, ...]:
        """The books in catalog order."""
        return tuple(self._books)

    def add_book(self, book: Book) -> None:
        """Append ``book``; its id must not already be present."""
        if any(b.id == book.id for b in self._books):
            raise DuplicateBookError(book.id)
        self._books.append(book)

    def delete_book(self, book_id: str) -> None:
        """Remove every book with ``book_id``."""
        kept = [b for b in self._books if b.id != book_id]
        if len(kept) == len(self._books):
            raise BookNotFoundError(book_id)
        self._books = kept

    def modify_copies(self, book_id: str, new_count: int) -> None:
        """Set the copy count of the first book with ``book_id``."""
        book = next((b for b in self._books if b.id == book_id), None)
        if book is None:
            raise BookNotFoundError(book_id)
        book.copies = new_count

    def search(self, keyword: str) -> list[Book]:
        """Return the books whose id, title or author contains ``keyword``."""
        return [
            b for b in self._books
            if keyword in b.id or keyword in b.title or keyword in b.author
        ]