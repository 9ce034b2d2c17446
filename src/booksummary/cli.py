"""Command-line interface for booksummary."""

import argparse

from booksummary.constants import SUMMARY_FILENAME, __version__
from booksummary.output_generators import create_summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="book-summary",
        description="Regenerate a GitBook SUMMARY.md from the Markdown files in a book.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="The book root to scan for Markdown files.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=SUMMARY_FILENAME,
        help="The path for the summary file, relative to the book root.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Extra gitignore-style pattern to leave out (repeatable).",
    )
    parser.add_argument(
        "--gitignore",
        action="store_true",
        help="Also skip paths matched by the root .gitignore.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the summary instead of writing it.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed processing information.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    """Main entry point for the book-summary CLI."""
    args = build_parser().parse_args(argv)

    create_summary(
        args.directory,
        args.output,
        verbose=args.verbose,
        extra_excludes=args.exclude,
        use_gitignore=args.gitignore,
        dry_run=args.dry_run,
    )


if __name__ == "__main__":
    main()
