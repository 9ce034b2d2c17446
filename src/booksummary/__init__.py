"""booksummary: regenerate a GitBook SUMMARY.md for a Markdown book.

This package walks a book's directory tree, derives a readable title for
each chapter file, and writes the bullet-list table of contents GitBook
expects.
"""

from booksummary.cli import main
from booksummary.constants import __version__
from booksummary.models import SummaryEntry

__all__ = ["main", "SummaryEntry", "__version__"]
