"""Tests for the CLI."""

import io
import json

import pytest

from shiksha.cli import format_tokens, main, parse_args, read_loop
from shiksha.phonetics.harvard_kyoto import harvard_kyoto
from shiksha.phonetics.segment import segment
from shiksha.serialization import dump_table, unit_to_dict


class TestParseArgs:
    def test_tokenize_defaults(self, monkeypatch):
        monkeypatch.delenv("SHIKSHA_SCHEME", raising=False)
        args = parse_args(["tokenize"])
        assert args.command == "tokenize"
        assert args.text is None
        assert args.scheme == "hk"
        assert args.table is None
        assert args.verbose is False

    def test_scan_options(self, tmp_path):
        args = parse_args([
            "scan", "--text", "rAma", "--scheme", "iast",
            "--render", "devanagari", "--json",
            "--table", str(tmp_path / "t.json"),
        ])
        assert args.command == "scan"
        assert args.scheme == "iast"
        assert args.render == "devanagari"
        assert args.json is True
        assert args.table == tmp_path / "t.json"

    def test_scheme_from_environment(self, monkeypatch):
        monkeypatch.setenv("SHIKSHA_SCHEME", "iast")
        assert parse_args(["scan"]).scheme == "iast"

    def test_no_command_exits(self):
        with pytest.raises(SystemExit):
            parse_args([])


class TestReadLoop:
    def test_processes_until_eof(self):
        seen = []
        read_loop(seen.append, io.StringIO("ka\nkha\n"))
        assert seen == ["ka", "kha"]

    def test_exit_is_case_insensitive(self):
        seen = []
        read_loop(seen.append, io.StringIO("ka\nEXIT\nkha\n"))
        assert seen == ["ka"]

    def test_empty_input(self):
        seen = []
        read_loop(seen.append, io.StringIO(""))
        assert seen == []


class TestFormat:
    def test_format_tokens(self):
        tokens = segment("kha?", harvard_kyoto())
        assert format_tokens(tokens) == "kh a '?'"


class TestMain:
    def test_tokenize_text(self, capsys):
        main(["tokenize", "--text", "kha"])
        assert capsys.readouterr().out.strip() == "kh a"

    def test_tokenize_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("ka\nexit\nkha\n"))
        main(["tokenize"])
        assert capsys.readouterr().out.splitlines() == ["k a"]

    def test_scan_text(self, capsys):
        main(["scan", "--text", "rAma gacchati"])
        out = capsys.readouterr().out.splitlines()
        assert out == ["rA.ma ga.ccha.ti", "pattern: GLGLL", "kaala: 7"]

    def test_scan_iast(self, capsys):
        main(["scan", "--text", "rāma", "--scheme", "iast"])
        out = capsys.readouterr().out.splitlines()
        assert out[1] == "pattern: GL"

    def test_scan_json(self, capsys):
        main(["scan", "--text", "ka", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["kind"] == "VAAKYA"
        assert data["children"][0]["type"] == "group"

    def test_custom_table(self, tmp_path, capsys):
        path = tmp_path / "hk.json"
        dump_table(harvard_kyoto(), path)
        main(["tokenize", "--text", "kha", "--table", str(path)])
        assert capsys.readouterr().out.strip() == "kh a"

    def test_table_from_environment(self, tmp_path, capsys, monkeypatch):
        path = tmp_path / "tiny.json"
        units = [unit_to_dict(harvard_kyoto().lookup(k)) for k in ("k", "a")]
        path.write_text(json.dumps({"units": units}))
        monkeypatch.setenv("SHIKSHA_TABLE", str(path))
        main(["tokenize", "--text", "kha"])
        assert capsys.readouterr().out.strip() == "k 'h' a"

    def test_missing_table_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["scan", "--text", "ka", "--table", str(tmp_path / "nope.json")])
        assert exc.value.code == 1
        assert "file not found" in capsys.readouterr().err

    def test_bad_table_exits(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text('{"units": [{"key": "a", "script": "a", "codepoint": "", "pitch": "LOUD"}]}')
        with pytest.raises(SystemExit):
            main(["scan", "--text", "ka", "--table", str(path)])
        assert "cannot load phoneme table" in capsys.readouterr().err

    def test_inconsistent_line_reported_and_loop_continues(self, tmp_path, capsys, monkeypatch):
        path = tmp_path / "clash.json"
        a = unit_to_dict(harvard_kyoto().lookup("a"))
        x = {**unit_to_dict(harvard_kyoto().lookup("k")), "key": "x", "note": "MANDRA"}
        y = {**unit_to_dict(harvard_kyoto().lookup("k")), "key": "y", "note": "KRUSHTA"}
        path.write_text(json.dumps({"units": [a, x, y]}))
        monkeypatch.setattr("sys.stdin", io.StringIO("xya\nxa\n"))
        main(["scan", "--table", str(path)])
        captured = capsys.readouterr()
        assert "inconsistent note" in captured.err
        assert "pattern: L" in captured.out
