"""Fixed names for booksummary."""

__version__ = "0.1.0"

SUMMARY_FILENAME = "SUMMARY.md"
README_FILENAME = "README.md"
MARKDOWN_SUFFIX = ".md"

SUMMARY_HEADING = "# Summary"
INTRODUCTION_TITLE = "Introduction"

# Matched against the entry name at any depth, never against a substring.
# The root README is the one exception; it is pinned as the introduction.
EXCLUDED_NAMES: frozenset[str] = frozenset(
    {
        SUMMARY_FILENAME,
        README_FILENAME,
        "_book",
        "node_modules",
        ".git",
    }
)
