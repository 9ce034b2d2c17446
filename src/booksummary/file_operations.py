"""File system scanning for Markdown chapters."""

import os
import pathlib
import sys
from collections.abc import Iterable

import pathspec

from booksummary.constants import EXCLUDED_NAMES, MARKDOWN_SUFFIX, README_FILENAME


def load_gitignore_patterns(root_dir: pathlib.Path) -> list[str]:
    """Load patterns from the root .gitignore, if there is one.

    Args:
        root_dir: Book root directory

    Returns:
        List of pattern lines, or an empty list if the file is missing or unreadable
    """
    gitignore_path = root_dir / ".gitignore"
    if not gitignore_path.is_file():
        return []
    try:
        with open(gitignore_path, encoding="utf-8", errors="ignore") as f:
            return f.read().splitlines()
    except OSError as e:
        print(
            f"Warning: Could not read .gitignore at {gitignore_path}: {e}",
            file=sys.stderr,
        )
        return []


def is_excluded_name(name: str, relative: str) -> bool:
    """Return True for entries that are never listed, whatever the patterns.

    Covers the fixed denylist and every dot-prefixed name. The root
    README.md is kept so it can be pinned as the introduction.
    """
    if relative == README_FILENAME:
        return False
    return name in EXCLUDED_NAMES or name.startswith(".")


def build_exclude_spec(extra_patterns: Iterable[str] = ()) -> pathspec.GitIgnoreSpec:
    """Compile caller-supplied exclusion patterns.

    These only narrow the scan further. Names rejected by is_excluded_name
    stay excluded even if a pattern such as ``!*.md`` would re-include them.

    Args:
        extra_patterns: Gitignore-style patterns, e.g. from .gitignore or --exclude

    Returns:
        Spec matched against root-relative POSIX paths (directories end in "/")
    """
    return pathspec.GitIgnoreSpec.from_lines(list(extra_patterns))


def collect_markdown_files(
    root_dir: pathlib.Path,
    exclude_spec: pathspec.PathSpec,
    skip_paths: Iterable[str] = (),
) -> list[str]:
    """Collect Markdown files below root_dir, depth first.

    Entries are visited in sorted name order and a directory's files are
    listed where the directory itself sorts. Symbolic links are skipped.

    Args:
        root_dir: Directory to start scanning from
        exclude_spec: Spec of extra paths to leave out
        skip_paths: Root-relative paths to leave out, e.g. the output file

    Returns:
        Root-relative paths using forward slashes

    Raises:
        OSError: If a directory cannot be listed
    """
    return _scan_directory(pathlib.Path(root_dir), "", exclude_spec, frozenset(skip_paths))


def _scan_directory(
    directory: pathlib.Path,
    prefix: str,
    exclude_spec: pathspec.PathSpec,
    skip_paths: frozenset[str],
) -> list[str]:
    files: list[str] = []

    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda entry: entry.name)

    for entry in entries:
        relative = prefix + entry.name
        if entry.is_symlink() or is_excluded_name(entry.name, relative):
            continue

        if entry.is_dir(follow_symlinks=False):
            # Trailing slash so directory-only patterns like "build/" apply
            if not exclude_spec.match_file(relative + "/"):
                files.extend(
                    _scan_directory(pathlib.Path(entry.path), relative + "/", exclude_spec, skip_paths)
                )
        elif entry.name.endswith(MARKDOWN_SUFFIX):
            if relative in skip_paths or exclude_spec.match_file(relative):
                continue
            files.append(relative)

    return files
