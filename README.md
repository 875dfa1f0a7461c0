# libraryd

A small library management tool. It keeps a book catalog and a list of
loans in two plain-text files, `catalog.txt` and `loans.txt`, in the current
directory, and offers two commands: one for librarians, one for patrons.
A missing file is treated as empty.

## Installation

```
pip install .
```

The commands can also be started as `python -m libraryd.librarian` and
`python -m libraryd.patron`.

## Librarian commands

```
library-librarian view_catalog
library-librarian add_book <id> <title> <author> <copies>
library-librarian delete_book <id>
library-librarian modify_copies <id> <newCount>
library-librarian view_loans
library-librarian record_return <id>
```

`add_book` refuses an id that is already in the catalog. Recording a return
removes every loan of that book and puts one copy back on the shelf if the
book is still catalogued.

## Patron commands

```
library-patron search_books <keyword>
library-patron borrow_book <id>
library-patron view_loans
library-patron renew_book <id>
library-patron return_book <id>
```

A loan lasts 14 days from today; renewing adds another 14 days to the due
date of the book's first loan. Borrowing needs at least one copy on the
shelf. Searching matches the keyword, case-sensitively, as a substring of a
book's id, title or author. Returning a book that is no longer in the
catalog adds it back as `Unknown` by `Unknown` with one copy.

Titles and authors are stored as single words, so use names such as
`Dune` or `Frank_Herbert`.

Run without a command, either tool prints its list of commands and exits
with status 1. Errors are printed in red on standard error, also with
status 1.

## File formats

`catalog.txt` starts with the number of books, followed by one line per
book:

```
2
b1 Dune Herbert 3
b2 Emma Austen 1
```

`loans.txt` holds one line per loan: the book id, the borrow date and the
due date, each date as day, month and year:

```
b1 1 3 2024 15 3 2024
```

Dates are shown as `DD/MM/YYYY`.

## Library use

The same pieces are available from Python:

```python
from libraryd.book import Book
from libraryd.catalog import Catalog

catalog = Catalog()
catalog.load("catalog.txt")
catalog.add_book(Book("b3", "Ulysses", "Joyce", 2))
catalog.save("catalog.txt")
print(catalog.search("Joy"))
```

- `libraryd.catalog.Catalog`: `load`, `save`, `books`, `add_book`,
  `delete_book`, `modify_copies`, `search`.
- `libraryd.loans_db.LoansDB`: `load`, `save`, `loans`, `add_loan`,
  `remove_loan_by_book`, `renew_loan` (returns the renewed `Loan`).
- `libraryd.date.Date`: `today`, `from_tokens`, `from_string`, `add_days`;
  `str()` gives `DD/MM/YYYY`.
- `libraryd.librarian.run` and `libraryd.patron.run` take the command line
  (without the program name) and optional catalog and loans paths, and
  return the exit status.

Missing books and loans raise `BookNotFoundError` and `LoanNotFoundError`
(both `LookupError`); a duplicate id raises `DuplicateBookError` (a
`ValueError`); malformed file lines raise `ValueError`.

## What it does not do

Loans are recorded per book only: there are no patron accounts, so the
tools cannot tell who borrowed a book, and there are no overdue notices or
fines. The data files are not locked, so two commands run at the same time
may overwrite each other's changes.