"""Tests for the esmpath command-line interface."""

import json

import pytest

import common.logging_utils as logging_utils
from args import parse_args
from constants import Constants, ExitCodes
from esmpath import main, run


@pytest.fixture(autouse=True)
def _isolated_logging(monkeypatch):
    """Keep handlers and the log-level env var from leaking between tests."""
    monkeypatch.setattr(logging_utils, "_CONFIGURED", True)
    monkeypatch.setenv(Constants.ENV_LOG_LEVEL, "INFO")


class TestArgParsing:
    """Subcommand parsing."""

    def test_scan_defaults(self):
        ns = parse_args(["scan", "."])
        assert ns.action == "scan"
        assert ns.ROOT == "."
        assert ns.EXTENSIONS is None
        assert ns.SORT is False
        assert ns.LOG_LEVEL is None

    def test_scan_options(self):
        ns = parse_args(["scan", "src", "-e", ".ts", "--ext", ".tsx", "--sort", "--loglevel", "debug"])
        assert ns.EXTENSIONS == [".ts", ".tsx"]
        assert ns.SORT is True
        assert ns.LOG_LEVEL == "DEBUG"

    def test_missing_subcommand(self):
        with pytest.raises(SystemExit):
            parse_args([])


class TestCommands:
    """End-to-end command behavior."""

    def test_classify(self, capsys):
        code = run(parse_args(["classify", "https://esm.sh/react", "./a.js", "react"]))
        assert code == ExitCodes.SUCCESS.value
        out = json.loads(capsys.readouterr().out)
        assert [o["kind"] for o in out] == ["remote", "local", "bare"]

    def test_match_bare(self, capsys):
        assert run(parse_args(["match", "react@18.2.0/jsx-runtime"])) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["pinned"] is True
        assert out["version"] == "18.2.0"
        assert out["boundary_char"] == "t"
        assert out["name"] == "react"
        assert out["subpath"] == "jsx-runtime"

    def test_match_range(self, capsys):
        assert run(parse_args(["match", "lib@^1.2.0"])) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["pinned"] is False
        assert out["has_version"] is True

    def test_match_remote(self, capsys):
        assert run(parse_args(["match", "https://esm.sh/preact@10.19.2/hooks"])) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["version"] == "10.19.2"
        assert "name" not in out

    def test_key(self, capsys):
        assert run(parse_args(["key", "https://esm.sh/react@18.2.0/index.js"])) == 0
        assert capsys.readouterr().out.strip() == "esm.sh/react@18.2.0/index.js"

    def test_compare(self, capsys):
        assert run(parse_args(["compare", "1.2.3", "1.10.0"])) == 0
        assert capsys.readouterr().out.strip() == "true"

    def test_compare_invalid(self, capsys):
        assert run(parse_args(["compare", "^1.2.3", "1.10.0"])) == ExitCodes.INVALID_INPUT.value

    def test_encode_decode(self, capsys):
        assert run(parse_args(["encode", "hello?"])) == 0
        token = capsys.readouterr().out.strip()
        assert "=" not in token
        assert run(parse_args(["decode", token])) == 0
        assert capsys.readouterr().out.strip() == "hello?"

    def test_decode_invalid(self):
        assert run(parse_args(["decode", "ab+/"])) == ExitCodes.INVALID_INPUT.value

    def test_scan(self, tmp_path, capsys):
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "b.ts").write_text("", encoding="utf-8")
        (tmp_path / "a.js").write_text("", encoding="utf-8")
        (tmp_path / "notes.txt").write_text("", encoding="utf-8")
        (tmp_path / "node_modules").mkdir()
        (tmp_path / "node_modules" / "x.js").write_text("", encoding="utf-8")
        assert run(parse_args(["scan", str(tmp_path), "--sort"])) == 0
        assert capsys.readouterr().out.splitlines() == ["a.js", "src/b.ts"]

    def test_scan_uses_config_extensions(self, tmp_path, capsys):
        (tmp_path / "a.js").write_text("", encoding="utf-8")
        (tmp_path / "b.ts").write_text("", encoding="utf-8")
        cfg = tmp_path / "esmpath.yml"
        cfg.write_text("scan:\n  extensions: ['.ts']\n", encoding="utf-8")
        assert run(parse_args(["scan", str(tmp_path), "-c", str(cfg)])) == 0
        assert capsys.readouterr().out.splitlines() == ["b.ts"]

    def test_scan_missing_root(self, tmp_path):
        assert run(parse_args(["scan", str(tmp_path / "missing")])) == ExitCodes.FILE_ERROR.value

    def test_bad_config(self, tmp_path):
        cfg = tmp_path / "bad.yml"
        cfg.write_text("scan: [unclosed", encoding="utf-8")
        assert run(parse_args(["encode", "x", "-c", str(cfg)])) == ExitCodes.FILE_ERROR.value

    def test_main_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["encode", "x"])
        assert exc.value.code == 0
