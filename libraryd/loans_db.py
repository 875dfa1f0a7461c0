"""The record of current loans and its file storage."""

from __future__ import annotations

import dataclasses
from pathlib import Path

from libraryd.loan import Loan


class LoanNotFoundError(LookupError):
    """Raised when no loan exists for the requested book."""

    def __init__(self, book_id: str) -> None:
        super().__init__(f"Loan for book {book_id} not found")
        self.book_id = book_id


class LoansDB:
    """An ordered collection of loans."""

    def __init__(self) -> None:
        self._loans: list[Loan] = []

    def load(self, path: str | Path) -> None:
        """Replace the contents with the loans in ``path``; a missing file means empty."""
        self._loans.clear()
        try:
            with open(path, encoding="utf-8") as fh:
                text = fh.read()
        except OSError:
            return
        self._loans.extend(Loan.deserialize(line) for line in text.split("\n") if line)

    def save(self, path: str | Path) -> None:
        """Write one line per loan."""
        with open(path, "w", encoding="utf-8") as fh:
            fh.writelines(f"{loan.serialize()}\n" for loan in self._loans)

    @property
    def loans(self) -> tuple[Loan, ...]:
        """The loans in the order they were recorded."""
        return tuple(self._loans)

    def add_loan(self, loan: Loan) -> None:
        """Record a new loan."""
        self._loans.append(loan)

    def remove_loan_by_book(self, book_id: str) -> None:
        """Remove every loan of ``book_id``."""
        kept = [loan for loan in self._loans if loan.book_id != book_id]
        if len(kept) == len(self._loans):
            raise LoanNotFoundError(book_id)
        self._loans = kept

    def renew_loan(self, book_id: str, extra_days: int) -> Loan:
        """Push back the due date of the first loan of ``book_id``; return the new loan."""
        for index, loan in enumerate(self._loans):
            if loan.book_id == book_id:
                renewed = dataclasses.replace(loan, due_date=loan.due_date.add_days(extra_days))
                self._loans[index] = renewed
                return renewed
        raise LoanNotFoundError(book_id)