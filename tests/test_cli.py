import pytest

from booksummary import __version__
from booksummary.cli import build_parser, main


def test_defaults():
    args = build_parser().parse_args([])
    assert args.directory == "."
    assert args.output == "SUMMARY.md"
    assert args.exclude == []
    assert not (args.gitignore or args.dry_run or args.verbose)


def test_main_uses_current_directory(book, monkeypatch, capsys):
    monkeypatch.chdir(book)
    main([])
    assert (book / "SUMMARY.md").read_text(encoding="utf-8").startswith(
        "# Summary\n\n* [Introduction](README.md)\n"
    )
    assert "SUMMARY.md updated!" in capsys.readouterr().out


def test_main_with_options(book, capsys):
    main([str(book), "-o", "TOC.md", "-e", "2-*.md", "--dry-run"])
    assert not (book / "TOC.md").exists()
    assert capsys.readouterr().out == (
        "# Summary\n\n* [Introduction](README.md)\n* [Chapter One](1-chapter-one.md)\n"
    )


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out
