"""Tests for the md2html command line."""

from __future__ import annotations

from pathlib import Path

import pytest

from md2html import __version__
from md2html.cli import EXIT_ERROR, EXIT_OK, EXIT_USAGE, build_parser, main
from md2html.errors import InvalidArgument


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    path = tmp_path / "doc.md"
    path.write_text("# Title\n\nHello *world*.\n", encoding="utf-8")
    return path


class TestArguments:
    def test_defaults(self) -> None:
        args = build_parser().parse_args(["in.md"])
        assert args.input == "in.md"
        assert args.output is None
        assert args.theme is None
        assert args.theme_dir == []
        assert not args.heading_ids
        assert not args.verbose

    def test_all_options(self) -> None:
        args = build_parser().parse_args(
            ["in.md", "-o", "out.html", "-t", "dark", "--theme-dir", "a", "--theme-dir", "b",
             "--heading-ids", "-v"]
        )
        assert args.output == "out.html"
        assert args.theme == "dark"
        assert args.theme_dir == ["a", "b"]
        assert args.heading_ids
        assert args.verbose

    def test_parser_raises_invalid_argument(self) -> None:
        with pytest.raises(InvalidArgument, match="input"):
            build_parser().parse_args([])

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestUsageErrors:
    """Usage errors return EXIT_USAGE with a single error line."""

    def test_missing_input(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == EXIT_USAGE == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("md2html: error: ")
        assert "input" in captured.err
        assert captured.err.count("\n") == 1

    def test_unknown_option(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["in.md", "--bogus"]) == EXIT_USAGE
        err = capsys.readouterr().err
        assert err.startswith("md2html: error: ")
        assert "--bogus" in err
        assert err.count("\n") == 1

    def test_missing_option_value(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["in.md", "-o"]) == EXIT_USAGE
        assert capsys.readouterr().err.startswith("md2html: error: ")


class TestConversion:
    def test_stdout(self, source_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(source_file)]) == EXIT_OK
        captured = capsys.readouterr()
        assert captured.out == "<h1>Title</h1>\n<p>Hello <em>world</em>.</p>\n"
        assert captured.err == ""

    def test_output_file(self, source_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "doc.html"
        assert main([str(source_file), "-o", str(out)]) == EXIT_OK
        assert out.read_text(encoding="utf-8") == "<h1>Title</h1>\n<p>Hello <em>world</em>.</p>\n"

    def test_heading_ids(self, source_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(source_file), "--heading-ids"]) == EXIT_OK
        assert '<h1 id="title">Title</h1>' in capsys.readouterr().out

    def test_bundled_theme(self, source_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(source_file), "--theme", "minimal"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.startswith("<!DOCTYPE html>")
        assert "<h1>Title</h1>" in out
        assert "{{ body }}" not in out

    def test_theme_dir(
        self, source_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        themes = tmp_path / "themes"
        themes.mkdir()
        (themes / "plain.html").write_text("<main>{{ body }}</main>", encoding="utf-8")
        assert main([str(source_file), "-t", "plain", "--theme-dir", str(themes)]) == EXIT_OK
        assert capsys.readouterr().out.startswith("<main><h1>Title</h1>")

    def test_verbose(self, source_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(source_file), "-v"]) == EXIT_OK
        assert "<h1>Title</h1>" in capsys.readouterr().out


class TestFailures:
    def test_missing_input(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "missing.md")]) == EXIT_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("md2html: error: ")
        assert "missing.md" in captured.err
        assert captured.err.count("\n") == 1

    def test_unknown_theme_writes_nothing(
        self, source_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        out = tmp_path / "doc.html"
        assert main([str(source_file), "-o", str(out), "--theme", "neon"]) == EXIT_ERROR
        assert not out.exists()
        err = capsys.readouterr().err
        assert "theme 'neon' not found" in err

    def test_unknown_theme_stdout_empty(
        self, source_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(source_file), "-t", "neon"]) == EXIT_ERROR
        assert capsys.readouterr().out == ""

    def test_invalid_theme(
        self, source_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "broken.html").write_text("<html></html>", encoding="utf-8")
        assert main([str(source_file), "-t", "broken", "--theme-dir", str(tmp_path)]) == EXIT_ERROR
        assert "is invalid" in capsys.readouterr().err

    def test_unwritable_output(
        self, source_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        out = tmp_path / "missing-dir" / "doc.html"
        assert main([str(source_file), "-o", str(out)]) == EXIT_ERROR
        assert "md2html: error:" in capsys.readouterr().err
