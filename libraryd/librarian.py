"""Command-line tool for librarians: manage the catalog and record returns."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Sequence
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path

from libraryd.book import Book
from libraryd.catalog import BookNotFoundError, Catalog
from libraryd.colors import Color
from libraryd.loans_db import LoanNotFoundError, LoansDB

CATALOG_FILE = "catalog.txt"
LOANS_FILE = "loans.txt"

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

USAGE = (
    "Librarian commands:\n"
    "  view_catalog\n"
    "  add_book <id> <title> <author> <copies>\n"
    "  delete_book <id>\n"
    "  modify_copies <id> <newCount>\n"
    "  view_loans\n"
    "  record_return <id>\n"
)


class _CommandError(Exception):
    """A command failed; the message is shown to the user."""


@dataclass
class _Session:
    catalog: Catalog
    loans: LoansDB
    catalog_path: str | Path
    loans_path: str | Path


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text}")
    return int(match.group(1))


def _expect(params: Sequence[str], count: int, command: str) -> None:
    if len(params) != count:
        noun = "parameter" if count == 1 else "parameters"
        raise _CommandError(f"{command} expects {count} {noun}")


def _out(text: str) -> None:
    sys.stdout.write(text)


def _print_usage() -> None:
    _out(f"{Color.YELLOW}{USAGE}{Color.RESET}")


def _view_catalog(params: Sequence[str], session: _Session) -> None:
    for book in session.catalog.books:
        _out(
            f"{Color.CYAN}{book.id}{Color.RESET} | {book.title} by {book.author}"
            f" [{book.copies} copies]\n"
        )


def _add_book(params: Sequence[str], session: _Session) -> None:
    _expect(params, 4, "add_book")
    book_id, title, author, copies = params
    session.catalog.add_book(Book(book_id, title, author, _parse_int(copies)))
    session.catalog.save(session.catalog_path)
    _out(f"{Color.GREEN}Book added.\n{Color.RESET}")


def _delete_book(params: Sequence[str], session: _Session) -> None:
    _expect(params, 1, "delete_book")
    try:
        session.catalog.delete_book(params[0])
    except BookNotFoundError:
        raise _CommandError("Book ID not found") from None
    session.catalog.save(session.catalog_path)
    _out(f"{Color.GREEN}Book deleted.\n{Color.RESET}")


def _modify_copies(params: Sequence[str], session: _Session) -> None:
    _expect(params, 2, "modify_copies")
    book_id, count = params
    new_count = _parse_int(count)
    try:
        session.catalog.modify_copies(book_id, new_count)
    except BookNotFoundError:
        raise _CommandError("Book ID not found") from None
    session.catalog.save(session.catalog_path)
    _out(f"{Color.GREEN}Copies updated.\n{Color.RESET}")


def _view_loans(params: Sequence[str], session: _Session) -> None:
    for loan in session.loans.loans:
        _out(
            f"{Color.CYAN}{loan.book_id}{Color.RESET} borrowed "
            f"{loan.borrow_date} due {loan.due_date}\n"
        )


def _record_return(params: Sequence[str], session: _Session) -> None:
    _expect(params, 1, "record_return")
    book_id = params[0]
    try:
        session.loans.remove_loan_by_book(book_id)
    except LoanNotFoundError:
        raise _CommandError("Loan for this book not found") from None
    hits = session.catalog.search(book_id)
    if hits:
        with suppress(BookNotFoundError):
            session.catalog.modify_copies(book_id, hits[0].copies + 1)
    session.loans.save(session.loans_path)
    session.catalog.save(session.catalog_path)
    _out(f"{Color.GREEN}Return recorded.\n{Color.RESET}")


_COMMANDS: dict[str, Callable[[Sequence[str], _Session], None]] = {
    "view_catalog": _view_catalog,
    "add_book": _add_book,
    "delete_book": _delete_book,
    "modify_copies": _modify_copies,
    "view_loans": _view_loans,
    "record_return": _record_return,
}


def run(
    argv: Sequence[str],
    catalog_path: str | Path = CATALOG_FILE,
    loans_path: str | Path = LOANS_FILE,
) -> int:
    """Run one librarian command; ``argv`` excludes the program name. Return the exit code."""
    args = list(argv)
    if not args:
        _print_usage()
        return 1
    try:
        catalog = Catalog()
        loans = LoansDB()
        catalog.load(catalog_path)
        loans.load(loans_path)
        command, params = args[0], args[1:]
        handler = _COMMANDS.get(command)
        if handler is None:
            sys.stderr.write(f"{Color.RED}Unknown command.\n{Color.RESET}")
            _print_usage()
            return 1
        handler(params, _Session(catalog, loans, catalog_path, loans_path))
    except (_CommandError, ValueError, LookupError, OSError) as exc:
        sys.stderr.write(f"{Color.RED}Error: {exc}{Color.RESET}\n")
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: run the command given on the command line."""
    return run(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    sys.exit(main())