"""Tests for the argparse front end (express_skeleton.cli)."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from express_skeleton import __version__
from express_skeleton.cli import build_parser, run

pytestmark = pytest.mark.unit


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.dir == "."
        assert args.force is False
        assert args.template_dir is None

    def test_force_flags(self):
        assert build_parser().parse_args(["-f", "app"]).force is True
        assert build_parser().parse_args(["app", "--force"]).force is True

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_unknown_option_exits_with_usage(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--bogus"])
        assert exc_info.value.code == 2
        assert "usage: express-skeleton [options] [dir]" in capsys.readouterr().err


class TestRun:
    def test_generates_into_directory(self, tmp_path: Path, capsys):
        dest = tmp_path / "cli-app"
        assert run([str(dest)]) == 0
        assert (dest / "package.json").is_file()
        out = capsys.readouterr().out
        assert "create : " in out
        assert f"cd {dest}" in out

    def test_declined_returns_one(self, non_empty_dest: Path, capsys):
        with patch("express_skeleton.utils.console.input", return_value="no"):
            assert run([str(non_empty_dest)]) == 1
        assert "aborting" in capsys.readouterr().err
        assert not (non_empty_dest / "package.json").exists()

    def test_force_skips_prompt(self, non_empty_dest: Path):
        with patch("express_skeleton.utils.console.input") as mock_input:
            assert run([str(non_empty_dest), "--force"]) == 0
        mock_input.assert_not_called()

    def test_template_dir_missing_is_fatal(self, tmp_path: Path, capsys):
        status = run([str(tmp_path / "app"), "--template-dir", str(tmp_path / "nowhere")])
        assert status == 1
        assert "Error:" in capsys.readouterr().err

    def test_default_name_from_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("SKELETON_DEFAULT_APP_NAME", "starter")
        dest = tmp_path / "___"
        assert run([str(dest)]) == 0
        data = json.loads((dest / "package.json").read_text(encoding="utf-8"))
        assert data["name"] == "starter"
