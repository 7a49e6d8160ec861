"""Shared pytest fixtures for the express-skeleton test suite.

Provides reusable fixtures for:
- Temporary destination directories (empty and non-empty)
- Generator construction with recorded notices, prompts and guidance
- A scratch template directory for renderer tests
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from express_skeleton.config import ScaffoldConfig
from express_skeleton.scaffolder import ApplicationGenerator, GenerationContext


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def empty_dest(tmp_path: Path) -> Path:
    """An existing, empty destination directory."""
    dest = tmp_path / "my-app"
    dest.mkdir()
    return dest


@pytest.fixture
def non_empty_dest(tmp_path: Path) -> Path:
    """A destination directory that already contains one file."""
    dest = tmp_path / "existing-app"
    dest.mkdir()
    (dest / "README.md").write_text("# Existing\n", encoding="utf-8")
    return dest


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A scratch template directory for renderer and emitter tests."""
    root = tmp_path / "templates"
    (root / "routers").mkdir(parents=True)
    (root / "static.txt").write_text("static content\n", encoding="utf-8")
    (root / "routers" / "a.js").write_text("// a\n", encoding="utf-8")
    (root / "routers" / "b.js").write_text("// b\n", encoding="utf-8")
    (root / "routers" / "notes.md").write_text("notes\n", encoding="utf-8")
    (root / "routers" / ".hidden.js").write_text("// hidden\n", encoding="utf-8")
    return root


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

class Recorder:
    """Collects everything a generator reports or asks."""

    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.prompts: list[str] = []
        self.notices: list[str] = []
        self.guidance: list[str] = []

    def confirm(self, message: str) -> bool:
        self.prompts.append(message)
        return self.answer

    def notify(self, path: str) -> None:
        self.notices.append(path)

    def report(self, lines: list[str]) -> None:
        self.guidance.extend(lines)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_generator(recorder: Recorder):
    """Factory building an ``ApplicationGenerator`` wired to ``recorder``."""

    def _make(
        destination: str | Path,
        *,
        force: bool = False,
        config: ScaffoldConfig | None = None,
        **overrides: Any,
    ) -> ApplicationGenerator:
        context = GenerationContext.from_destination(str(destination), force=force)
        kwargs: dict[str, Any] = {
            "confirm": recorder.confirm,
            "notify": recorder.notify,
            "report": recorder.report,
        }
        kwargs.update(overrides)
        return ApplicationGenerator(context, config, **kwargs)

    return _make
