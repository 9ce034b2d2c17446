"""SUMMARY.md rendering and writing."""

import pathlib
import sys
from collections.abc import Iterable

from tqdm import tqdm

from booksummary.constants import (
    INTRODUCTION_TITLE,
    README_FILENAME,
    SUMMARY_HEADING,
)
from booksummary.file_operations import (
    build_exclude_spec,
    collect_markdown_files,
    load_gitignore_patterns,
)
from booksummary.models import SummaryEntry
from booksummary.titles import derive_title


def build_entries(files: list[str], show_progress: bool = False) -> list[SummaryEntry]:
    """Pair each collected file with its display title.

    A root README.md becomes the leading "Introduction" entry and is not
    repeated among the generic entries.

    Args:
        files: Root-relative Markdown paths in traversal order
        show_progress: Whether to display a progress bar

    Returns:
        Entries in output order
    """
    entries: list[SummaryEntry] = []
    if README_FILENAME in files:
        entries.append(SummaryEntry(path=README_FILENAME, title=INTRODUCTION_TITLE))

    for path in tqdm(files, desc="Titles", unit="file", disable=not show_progress):
        if path == README_FILENAME:
            continue
        entries.append(SummaryEntry(path=path, title=derive_title(path)))

    return entries


def render_summary(entries: Iterable[SummaryEntry]) -> str:
    """Render entries as a GitBook SUMMARY.md document."""
    lines = [SUMMARY_HEADING, ""]
    lines.extend(entry.to_markdown() for entry in entries)
    return "\n".join(lines) + "\n"


def write_summary(text: str, output_path: pathlib.Path) -> None:
    """Write the summary, replacing whatever was there.

    Raises:
        OSError: If the file cannot be written
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8", newline="\n") as md_file:
        md_file.write(text)


def resolve_output_path(root_dir: pathlib.Path, output_file: str) -> pathlib.Path:
    """Resolve output_file against the book root unless it is absolute."""
    output_path = pathlib.Path(output_file)
    if not output_path.is_absolute():
        output_path = root_dir / output_path
    return output_path.resolve()


def create_summary(
    target_dir: str,
    output_file: str,
    verbose: bool = False,
    extra_excludes: Iterable[str] = (),
    use_gitignore: bool = False,
    dry_run: bool = False,
) -> str:
    """Regenerate the summary for a book directory.

    Args:
        target_dir: Book root to scan
        output_file: Output path, relative to target_dir unless absolute
        verbose: Whether to print every entry and show progress
        extra_excludes: Additional gitignore-style exclusion patterns
        use_gitignore: Whether to also honor the root .gitignore
        dry_run: Print the summary to stdout instead of writing it; status
            lines then go to stderr

    Returns:
        The rendered summary text
    """
    root_dir = pathlib.Path(target_dir).resolve()
    if not root_dir.is_dir():
        print(f"Error: Directory not found: {target_dir}", file=sys.stderr)
        sys.exit(1)

    output_path = resolve_output_path(root_dir, output_file)

    patterns = list(extra_excludes)
    if use_gitignore:
        patterns = load_gitignore_patterns(root_dir) + patterns
    exclude_spec = build_exclude_spec(patterns)

    skip_paths = set()
    if output_path.is_relative_to(root_dir):
        skip_paths.add(output_path.relative_to(root_dir).as_posix())

    # Keep stdout clean for the summary itself on a dry run
    status = sys.stderr if dry_run else sys.stdout

    if verbose:
        print(f"📂 Scanning directory: {root_dir}", file=status)
        if use_gitignore and (root_dir / ".gitignore").exists():
            print(f"✓ Using .gitignore from: {root_dir / '.gitignore'}", file=status)

    try:
        files = collect_markdown_files(root_dir, exclude_spec, skip_paths)
    except OSError as e:
        print(f"\n❌ Error: Could not scan {root_dir}: {e}", file=sys.stderr)
        sys.exit(1)

    entries = build_entries(files, show_progress=verbose)
    if verbose:
        print(f"✓ Found {len(files)} Markdown files", file=status)
        for entry in entries:
            print(f"  ✓ {entry.path} -> {entry.title}", file=status)

    summary = render_summary(entries)

    if dry_run:
        sys.stdout.write(summary)
        return summary

    try:
        write_summary(summary, output_path)
    except OSError as e:
        print(f"\n❌ Error: Could not write to {output_path}: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"✅ {output_path.name} updated!")
    if verbose:
        print(f"📄 Output: {output_path}")
    return summary
