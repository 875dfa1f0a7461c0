"""File-backed library catalog and loan tracking with librarian and patron commands."""

__version__ = "0.1.0"