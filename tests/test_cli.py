"""Tests for the vocab-notes command-line interface."""

import io

import pytest

from vocab_notes.cli import create_parser, main

LOOKUP_YAML = """
深刻:
  meanings: [Serious, Grave]
  readings: [しんこく]
大変:
  meanings: [Serious, Terrible]
  readings: [たいへん]
"""


@pytest.fixture
def note_file(tmp_path):
    path = tmp_path / "note.txt"
    path.write_text("深刻（）Grave\n真剣（しんけん）Serious\n\nremark", encoding="utf-8")
    return path


@pytest.fixture
def lookup_file(tmp_path):
    path = tmp_path / "subjects.yaml"
    path.write_text(LOOKUP_YAML, encoding="utf-8")
    return path


class TestParser:
    def test_commands(self):
        parser = create_parser()
        args = parser.parse_args(["links", "note.txt", "--format", "text"])
        assert args.command == "links"
        assert args.format == "text"
        assert args.type == "vocabulary"

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 2
        assert "usage" in capsys.readouterr().out


class TestLinks:
    def test_text_output(self, note_file, capsys):
        assert main(["links", str(note_file), "--format", "text", "--slug", "深刻"]) == 0
        out = capsys.readouterr().out
        assert "深刻 * <https://www.wanikani.com/vocabulary/深刻>" in out
        assert "[All] https://www.wanikani.com/vocabulary/真剣" in out

    def test_html_output(self, note_file, capsys):
        assert main(["links", str(note_file)]) == 0
        assert '<a href="https://www.wanikani.com/vocabulary/深刻"' in capsys.readouterr().out

    def test_delimiter_option(self, tmp_path, capsys):
        path = tmp_path / "note.txt"
        path.write_text("a（）<br><br>b（）", encoding="utf-8")
        assert main(["links", str(path), "--delimiter", "<br>", "--type", "kanji"]) == 0
        out = capsys.readouterr().out
        assert "https://www.wanikani.com/kanji/a" in out
        assert ">Everything</a>" in out

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("大変（たいへん）"))
        assert main(["links", "-", "--format", "text"]) == 0
        assert "大変 <" in capsys.readouterr().out

    def test_missing_note(self, tmp_path, capsys):
        assert main(["links", str(tmp_path / "missing.txt")]) == 2
        assert "[ERROR]" in capsys.readouterr().err

    def test_bad_config(self, tmp_path, note_file, capsys):
        config = tmp_path / "notes.yaml"
        config.write_text("unknown_key: 1\n", encoding="utf-8")
        assert main(["links", str(note_file), "--config", str(config)]) == 2
        assert "Unknown configuration key" in capsys.readouterr().err


class TestCheck:
    def test_update_available(self, note_file, lookup_file, capsys):
        assert main(["check", str(note_file), "--lookup", str(lookup_file)]) == 1
        assert "Update available" in capsys.readouterr().out

    def test_up_to_date(self, tmp_path, lookup_file, capsys):
        path = tmp_path / "note.txt"
        path.write_text("深刻（しんこく）Serious, Grave", encoding="utf-8")
        assert main(["check", str(path), "--lookup", str(lookup_file)]) == 0
        assert "up to date" in capsys.readouterr().out

    def test_error_exit_code_differs_from_update(self, tmp_path, lookup_file, capsys):
        missing = tmp_path / "missing.txt"
        assert main(["check", str(missing), "--lookup", str(lookup_file)]) == 2
        err = capsys.readouterr().err
        assert "[ERROR]" in err
        assert "Update available" not in err

    def test_missing_lookup_degrades(self, note_file, tmp_path):
        assert main(["check", str(note_file), "--lookup", str(tmp_path / "none.yaml")]) == 0


class TestUpdate:
    def test_prints_regenerated_note(self, note_file, lookup_file, capsys):
        assert main(["update", str(note_file), "--lookup", str(lookup_file)]) == 0
        assert capsys.readouterr().out == (
            "深刻（しんこく）Serious, Grave\n真剣（しんけん）Serious\n\nremark"
        )
        assert note_file.read_text(encoding="utf-8").startswith("深刻（）")

    def test_write_in_place(self, note_file, lookup_file, capsys):
        assert main(["update", str(note_file), "--lookup", str(lookup_file), "--write"]) == 0
        assert "Updated" in capsys.readouterr().out
        assert note_file.read_text(encoding="utf-8").startswith(
            "深刻（しんこく）Serious, Grave\n"
        )

    def test_write_when_current(self, tmp_path, lookup_file, capsys):
        path = tmp_path / "note.txt"
        path.write_text("remark only", encoding="utf-8")
        assert main(["update", str(path), "--lookup", str(lookup_file), "--write"]) == 0
        assert "up to date" in capsys.readouterr().out

    def test_write_needs_file(self, monkeypatch, lookup_file, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("深刻（）"))
        assert main(["update", "-", "--lookup", str(lookup_file), "--write"]) == 2
        assert "stdin" in capsys.readouterr().err


class TestCopy:
    def test_subject_line(self, lookup_file, capsys):
        assert main(["copy", "--lookup", str(lookup_file), "--slug", "大変"]) == 0
        assert capsys.readouterr().out == "大変（たいへん）Serious, Terrible\n"

    def test_unknown_subject(self, lookup_file, capsys):
        assert main(["copy", "--lookup", str(lookup_file), "--slug", "真剣"]) == 1
        assert "No copyable line" in capsys.readouterr().err
