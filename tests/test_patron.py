import pytest

from libraryd.book import Book
from libraryd.catalog import Catalog
from libraryd.colors import Color
from libraryd.date import Date
from libraryd.loan import Loan
from libraryd.loans_db import LoansDB
from libraryd.patron import run


@pytest.fixture
def paths(tmp_path):
    catalog_path = tmp_path / "catalog.txt"
    loans_path = tmp_path / "loans.txt"
    catalog = Catalog()
    catalog.add_book(Book("b1", "Dune", "Herbert", 2))
    catalog.add_book(Book("b2", "Emma", "Austen", 0))
    catalog.save(catalog_path)
    loans = LoansDB()
    loans.add_loan(Loan("b2", Date(1, 2, 2024), Date(15, 2, 2024)))
    loans.save(loans_path)
    return catalog_path, loans_path


def _catalog(path):
    catalog = Catalog()
    catalog.load(path)
    return catalog


def _loans(path):
    loans = LoansDB()
    loans.load(path)
    return loans


def test_no_arguments_prints_usage(paths, capsys):
    assert run([], *paths) == 1
    assert "Patron commands:" in capsys.readouterr().out


def test_unknown_command(paths, capsys):
    assert run(["dance"], *paths) == 1
    captured = capsys.readouterr()
    assert "Unknown command." in captured.err
    assert "borrow_book <id>" in captured.out


def test_search_books_matches_fields(paths, capsys):
    assert run(["search_books", "Austen"], *paths) == 0
    out = capsys.readouterr().out
    assert out == f"{Color.CYAN}b2{Color.RESET} | Emma by Austen [0 copies]\n"


def test_search_books_wrong_arity(paths, capsys):
    assert run(["search_books"], *paths) == 1
    assert "search_books expects 1 parameter" in capsys.readouterr().err


def test_borrow_book(paths, capsys):
    assert run(["borrow_book", "b1"], *paths) == 0
    out = capsys.readouterr().out
    assert "Book borrowed. Due" in out
    assert _catalog(paths[0]).books[0].copies == 1
    loan = _loans(paths[1]).loans[-1]
    assert loan.book_id == "b1"
    assert loan.borrow_date.add_days(14) == loan.due_date
    assert str(loan.due_date) in out


def test_borrow_missing_book(paths, capsys):
    assert run(["borrow_book", "zzz"], *paths) == 1
    assert "Book not found" in capsys.readouterr().err


def test_borrow_without_copies(paths, capsys):
    assert run(["borrow_book", "b2"], *paths) == 1
    assert "No copies available" in capsys.readouterr().err
    assert len(_loans(paths[1]).loans) == 1


def test_view_loans(paths, capsys):
    assert run(["view_loans"], *paths) == 0
    out = capsys.readouterr().out
    assert out == f"{Color.CYAN}b2{Color.RESET} borrowed 01/02/2024 due 15/02/2024\n"


def test_renew_book(paths, capsys):
    assert run(["renew_book", "b2"], *paths) == 0
    assert "Book renewed for 14 more days." in capsys.readouterr().out
    assert _loans(paths[1]).loans[0].due_date == Date(15, 2, 2024).add_days(14)


def test_renew_missing_loan(paths, capsys):
    assert run(["renew_book", "b1"], *paths) == 1
    assert "Loan not found" in capsys.readouterr().err


def test_return_book(paths, capsys):
    assert run(["return_book", "b2"], *paths) == 0
    assert "Book returned." in capsys.readouterr().out
    assert _loans(paths[1]).loans == ()
    assert _catalog(paths[0]).books[1].copies == 1


def test_return_book_unknown_to_catalog(paths, capsys):
    loans = _loans(paths[1])
    loans.add_loan(Loan("b9", Date(1, 3, 2024), Date(15, 3, 2024)))
    loans.save(paths[1])
    assert run(["return_book", "b9"], *paths) == 0
    assert _catalog(paths[0]).books[-1] == Book("b9", "Unknown", "Unknown", 1)


def test_return_without_loan(paths, capsys):
    assert run(["return_book", "b1"], *paths) == 1
    assert "Loan not found" in capsys.readouterr().err
    assert _catalog(paths[0]).books[0].copies == 2


def test_borrow_then_return_restores_copies(paths):
    assert run(["borrow_book", "b1"], *paths) == 0
    assert run(["return_book", "b1"], *paths) == 0
    assert _catalog(paths[0]).books[0].copies == 2
    assert [loan.book_id for loan in _loans(paths[1]).loans] == ["b2"]