"""Command-line tool for patrons: search, borrow, renew and return books."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path

from libraryd.book import Book
from libraryd.catalog import BookNotFoundError, Catalog
from libraryd.colors import Color
from libraryd.date import Date
from libraryd.loan import Loan
from libraryd.loans_db import LoanNotFoundError, LoansDB

CATALOG_FILE = "catalog.txt"
LOANS_FILE = "loans.txt"
LOAN_DAYS = 14

USAGE = (
    "Patron commands:\n"
    "  search_books <keyword>\n"
    "  borrow_book <id>\n"
    "  view_loans\n"
    "  renew_book <id>\n"
    "  return_book <id>\n"
)


class _CommandError(Exception):
    """A command failed; the message is shown to the user."""


@dataclass
class _Session:
    catalog: Catalog
    loans: LoansDB
    catalog_path: str | Path
    loans_path: str | Path

    def save(self) -> None:
        self.loans.save(self.loans_path)
        self.catalog.save(self.catalog_path)


def _expect_one(params: Sequence[str], command: str) -> str:
    if len(params) != 1:
        raise _CommandError(f"{command} expects 1 parameter")
    return params[0]


def _out(text: str) -> None:
    sys.stdout.write(text)


def _print_usage() -> None:
    _out(f"{Color.YELLOW}{USAGE}{Color.RESET}")


def _search_books(params: Sequence[str], session: _Session) -> None:
    keyword = _expect_one(params, "search_books")
    for book in session.catalog.search(keyword):
        _out(
            f"{Color.CYAN}{book.id}{Color.RESET} | {book.title} by {book.author}"
            f" [{book.copies} copies]\n"
        )


def _borrow_book(params: Sequence[str], session: _Session) -> None:
    book_id = _expect_one(params, "borrow_book")
    hits = session.catalog.search(book_id)
    if not hits:
        raise _CommandError("Book not found")
    if hits[0].copies <= 0:
        raise _CommandError("No copies available")
    today = Date.today()
    loan = Loan(book_id, today, today.add_days(LOAN_DAYS))
    session.loans.add_loan(loan)
    with suppress(BookNotFoundError):
        session.catalog.modify_copies(book_id, hits[0].copies - 1)
    session.save()
    _out(f"{Color.GREEN}Book borrowed. Due {loan.due_date}\n{Color.RESET}")


def _view_loans(params: Sequence[str], session: _Session) -> None:
    for loan in session.loans.loans:
        _out(
            f"{Color.CYAN}{loan.book_id}{Color.RESET} borrowed "
            f"{loan.borrow_date} due {loan.due_date}\n"
        )


def _renew_book(params: Sequence[str], session: _Session) -> None:
    book_id = _expect_one(params, "renew_book")
    try:
        session.loans.renew_loan(book_id, LOAN_DAYS)
    except LoanNotFoundError:
        raise _CommandError("Loan not found") from None
    session.loans.save(session.loans_path)
    _out(f"{Color.GREEN}Book renewed for {LOAN_DAYS} more days.\n{Color.RESET}")


def _return_book(params: Sequence[str], session: _Session) -> None:
    book_id = _expect_one(params, "return_book")
    try:
        session.loans.remove_loan_by_book(book_id)
    except LoanNotFoundError:
        raise _CommandError("Loan not found") from None
    hits = session.catalog.search(book_id)
    if hits:
        with suppress(BookNotFoundError):
            session.catalog.modify_copies(book_id, hits[0].copies + 1)
    else:
        session.catalog.add_book(Book(book_id, "Unknown", "Unknown", 1))
    session.save()
    _out(f"{Color.GREEN}Book returned.\n{Color.RESET}")


_COMMANDS: dict[str, Callable[[Sequence[str], _Session], None]] = {
    "search_books": _search_books,
    "borrow_book": _borrow_book,
    "view_loans": _view_loans,
    "renew_book": _renew_book,
    "return_book": _return_book,
}


def run(
    argv: Sequence[str],
    catalog_path: str | Path = CATALOG_FILE,
    loans_path: str | Path = LOANS_FILE,
) -> int:
    """Run one patron command; ``argv`` excludes the program name. Return the exit code."""
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