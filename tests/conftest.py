import pathlib

import pytest


def _write_tree(root: pathlib.Path, files: dict[str, str]) -> pathlib.Path:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_tree():
    """Return a helper that creates files (and parent directories) below a root."""
    return _write_tree


@pytest.fixture
def book(tmp_path):
    """A small book: README, two chapters and a stray dependency directory."""
    return _write_tree(
        tmp_path,
        {
            "README.md": "# Legacy Code and AI\n",
            "1-chapter-one.md": "# One\n",
            "2-chapter-two.md": "# Two\n",
            "node_modules/notes.md": "stray\n",
        },
    )
