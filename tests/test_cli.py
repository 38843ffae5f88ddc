"""Tests for the command-line wrapper."""

import io
import logging

import pytest

from toyparse.__main__ import main


@pytest.fixture
def html_file(tmp_path):
    path = tmp_path / "page.html"
    path.write_text('<div id="main"><p>Hello</p><p>World</p></div>', encoding="utf-8")
    return path


@pytest.fixture
def css_file(tmp_path):
    path = tmp_path / "style.css"
    path.write_text(".note, div.note { margin: 20px; }", encoding="utf-8")
    return path


class TestHtmlMode:
    def test_compact_html(self, html_file, capsys):
        main([str(html_file)])
        assert capsys.readouterr().out == '<div id="main"><p>Hello</p><p>World</p></div>\n'

    def test_pretty_html(self, html_file, capsys):
        main([str(html_file), "--pretty"])
        assert capsys.readouterr().out == '<div id="main">\n  <p>Hello</p>\n  <p>World</p>\n</div>\n'

    def test_text_format(self, html_file, capsys):
        main([str(html_file), "--format", "text"])
        assert capsys.readouterr().out == "Hello World\n"

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("<b>x</b>"))
        main(["-"])
        assert capsys.readouterr().out == "<b>x</b>\n"

    def test_css_format_rejected_for_html(self, html_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(html_file), "--format", "css"])
        assert exc_info.value.code == 2
        assert "not available for html input" in capsys.readouterr().err


class TestCssMode:
    def test_detected_from_suffix(self, css_file, capsys):
        main([str(css_file)])
        assert capsys.readouterr().out == "div.note, .note { margin: 20px; }\n"

    def test_explicit_flag(self, tmp_path, capsys):
        path = tmp_path / "style.txt"
        path.write_text("a{color:#FFFFFF;}", encoding="utf-8")
        main([str(path), "--css"])
        assert capsys.readouterr().out == "a { color: #ffffff; }\n"


class TestErrors:
    def test_parse_error_exit_status_and_report(self, tmp_path, capsys):
        path = tmp_path / "bad.html"
        path.write_text("<a></b>", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main([str(path)])
        assert exc_info.value.code == 2
        err = capsys.readouterr().err
        assert err.startswith("error: tag-mismatch at offset 5 (line 1, column 6): ")

    def test_deeply_nested_document_is_reported(self, tmp_path, capsys):
        path = tmp_path / "deep.html"
        path.write_text("<b>" * 400 + "</b>" * 400, encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main([str(path)])
        assert exc_info.value.code == 2
        err = capsys.readouterr().err
        assert err.startswith("error: nesting-too-deep at offset 600 (line 1, column 601): ")

    def test_missing_path_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
        assert "usage:" in capsys.readouterr().err


class TestLogging:
    def test_debug_records(self, css_file, caplog):
        with caplog.at_level(logging.DEBUG, logger="toyparse"):
            main([str(css_file), "--verbose"])
        assert "Parsed 1 rules" in caplog.text
