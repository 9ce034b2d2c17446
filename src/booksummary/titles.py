"""Display title derivation from Markdown file names."""

import re

from booksummary.constants import MARKDOWN_SUFFIX

_NUMERIC_PREFIX = re.compile(r"^\d+[-_]")
_SEPARATORS = re.compile(r"[-_]")


def capitalize_words(text: str) -> str:
    """Uppercase the first letter of every space-delimited word.

    Unlike ``str.title`` the remainder of each word is left alone, so
    acronyms such as ``API`` survive. Runs of spaces are preserved.
    """
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def derive_title(path: str) -> str:
    """Turn a Markdown file path into a human-readable title.

    Only the final path segment is used. A leading ordering prefix such as
    ``01-`` or ``3_`` is dropped, along with the ``.md`` extension, and the
    remaining hyphens and underscores become spaces.

    Args:
        path: File path, relative or bare file name

    Returns:
        Title string; empty when ``path`` is empty

    Examples:
        >>> derive_title("01-introduction.md")
        'Introduction'
        >>> derive_title("part-2/03_code_smells.md")
        'Code Smells'
    """
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    name = _NUMERIC_PREFIX.sub("", name, count=1)
    if name.endswith(MARKDOWN_SUFFIX):
        name = name[: -len(MARKDOWN_SUFFIX)]
    return capitalize_words(_SEPARATORS.sub(" ", name))
