"""Integration tests for the full CLI scaffold.

These tests run ``express_skeleton.cli.run`` end-to-end against real
temporary directories and check the generated project as a whole: layout,
manifest shape, the generated ``app.js`` and forced re-runs.

No Node.js toolchain is required.
"""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from express_skeleton.cli import run


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.mark.integration
class TestScaffoldProject:
    """A fresh project is complete and self-consistent."""

    def test_layout(self, tmp_path: Path) -> None:
        dest = tmp_path / "Shop API"
        assert run([str(dest)]) == 0
        assert sorted(_snapshot(dest)) == [
            ".eslintrc.js",
            ".gitignore",
            ".prettierrc.js",
            "app.js",
            "config/index.js",
            "package.json",
            "routers/index.js",
            "routers/user.js",
            "server.js",
        ]

    def test_manifest(self, tmp_path: Path) -> None:
        dest = tmp_path / "Shop API"
        run([str(dest)])
        text = (dest / "package.json").read_text(encoding="utf-8")
        data = json.loads(text)

        assert data["name"] == "shop-api"
        assert data["version"] == "0.0.0"
        assert data["private"] is True
        assert data["main"] == "server.js"
        assert list(data["scripts"]) == ["start", "dev", "lint", "lint:fix", "test"]
        assert list(data["dependencies"]) == sorted(data["dependencies"])
        assert data["dependencies"]["morgan"] == "^1.9.1"
        assert list(data["devDependencies"])[-2:] == ["nodemon", "prettier"]
        assert text.endswith("}\n")

    def test_required_modules_exist(self, tmp_path: Path) -> None:
        """Every local require() in app.js resolves to a generated file."""
        dest = tmp_path / "app"
        run([str(dest)])
        app_js = (dest / "app.js").read_text(encoding="utf-8")
        for module in ("./routers/index", "./routers/user"):
            assert f"require('{module}')" in app_js
            assert (dest / f"{module}.js").is_file()
        assert "require('./app')" in (dest / "server.js").read_text(encoding="utf-8")
        assert (dest / "config" / "index.js").is_file()

    def test_every_dependency_is_required(self, tmp_path: Path) -> None:
        dest = tmp_path / "app"
        run([str(dest)])
        data = json.loads((dest / "package.json").read_text(encoding="utf-8"))
        sources = (dest / "app.js").read_text(encoding="utf-8") + (
            dest / "server.js"
        ).read_text(encoding="utf-8")
        for package in data["dependencies"]:
            assert f"require('{package}')" in sources, package


@pytest.mark.integration
class TestRerun:
    """Forced re-runs are idempotent."""

    def test_forced_rerun_is_byte_identical(self, tmp_path: Path) -> None:
        dest = tmp_path / "app"
        assert run([str(dest)]) == 0
        first = _snapshot(dest)
        assert run([str(dest), "--force"]) == 0
        assert _snapshot(dest) == first

    def test_unforced_rerun_declined_by_closed_stdin(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        dest = tmp_path / "app"
        run([str(dest)])
        before = _snapshot(dest)
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        assert run([str(dest)]) == 1
        assert _snapshot(dest) == before
