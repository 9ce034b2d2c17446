"""Data models for booksummary."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryEntry:
    """A single bullet in the generated summary.

    Attributes:
        path: Root-relative path to the Markdown file, with forward slashes
        title: Display text shown for the link
    """

    path: str
    title: str

    def to_markdown(self) -> str:
        return f"* [{self.title}]({self.path})"
