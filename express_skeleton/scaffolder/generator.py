"""Main scaffolding orchestrator.

Decides whether the destination may be written, then materializes the
Express skeleton in a fixed order: destination directory, ``server.js``,
``config/``, ``routers/``, dotfiles, ``app.js`` and finally ``package.json``.
Each step creates what is missing and overwrites what is there, so a forced
re-run reproduces the same tree byte for byte.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..config import ScaffoldConfig
from ..errors import UserDeclined
from ..utils import confirm as prompt_confirm
from ..utils import launched_from_cmd, print_error, print_guidance
from .binding import TemplateBinding
from .emitter import FileEmitter, is_empty_directory
from .features import DEFAULT_FEATURES, DEFAULT_ROUTERS, apply_feature, mount_router
from .manifest import PackageManifest, baseline_manifest
from .naming import create_app_name
from .templates import TemplateRenderer

CONFIRM_PROMPT = "destination is not empty, continue? [y/N] "


# ---------------------------------------------------------------------------
# Generation context
# ---------------------------------------------------------------------------


class GenerationContext(BaseModel):
    """What one invocation was asked to generate."""

    model_config = ConfigDict(frozen=True)

    destination_path: str = Field(default=".", description="Where to scaffold")
    app_name: str = Field(..., min_length=1, description="Sanitized package name")
    force: bool = Field(default=False, description="Skip the non-empty confirmation")

    @classmethod
    def from_destination(
        cls,
        destination_path: str = ".",
        force: bool = False,
        default_name: str = "node-skeleton",
    ) -> GenerationContext:
        """Derive the app name from the absolute destination path."""
        app_name = create_app_name(os.path.abspath(destination_path)) or default_name
        return cls(destination_path=destination_path, app_name=app_name, force=force)

    @property
    def in_place(self) -> bool:
        """``True`` when scaffolding into the current directory."""
        return self.destination_path == "."


class GeneratorState(str, Enum):
    CHECK_EMPTY = "check_empty"
    CONFIRM = "confirm"
    SCAFFOLD = "scaffold"
    REPORT = "report"
    DONE = "done"
    ABORT = "abort"


# ---------------------------------------------------------------------------
# Application generator
# ---------------------------------------------------------------------------


class ApplicationGenerator:
    """Scaffolds one Express application.

    Collaborators are injectable: ``confirm`` answers the overwrite prompt,
    ``notify`` receives each ``create`` notice, and ``report`` receives the
    post-generation guidance lines.

    Attributes:
        context: The invocation being served.
        state: Current :class:`GeneratorState`.
        history: Every state entered, in order.
    """

    def __init__(
        self,
        context: GenerationContext,
        config: ScaffoldConfig | None = None,
        *,
        confirm: Callable[[str], bool] = prompt_confirm,
        notify: Callable[[str], None] | None = None,
        report: Callable[[list[str]], None] = print_guidance,
    ) -> None:
        self.context = context
        self.config = config or ScaffoldConfig()
        self.confirm = confirm
        self.report = report
        self.renderer = TemplateRenderer(self.config.template_dir)
        self.emitter = FileEmitter(
            self.config.template_dir,
            dir_mode=self.config.dir_mode,
            file_mode=self.config.file_mode,
            notify=notify,
        )
        self.state = GeneratorState.CHECK_EMPTY
        self.history: list[GeneratorState] = []

    # -- Public API --------------------------------------------------------

    async def run(self) -> int:
        """Drive the generator to ``DONE`` (status 0) or ``ABORT`` (status 1)."""
        try:
            await self.check_destination()
        except UserDeclined:
            print_error("aborting")
            self._enter(GeneratorState.ABORT)
            return 1

        self._enter(GeneratorState.SCAFFOLD)
        self.scaffold()

        self._enter(GeneratorState.REPORT)
        self.report(self.guidance())

        self._enter(GeneratorState.DONE)
        return 0

    async def check_destination(self) -> None:
        """Ask for confirmation when the destination already has content.

        Raises:
            UserDeclined: If the user answers anything but yes.
        """
        self._enter(GeneratorState.CHECK_EMPTY)
        if self.context.force or is_empty_directory(self.context.destination_path):
            return

        self._enter(GeneratorState.CONFIRM)
        # Called inline so Ctrl-C interrupts input() in the main thread.
        ok = self.confirm(CONFIRM_PROMPT)
        if not ok:
            raise UserDeclined(self.context.destination_path)

    def scaffold(self) -> PackageManifest:
        """Write the whole skeleton and return the manifest that was written."""
        dest = self.context.destination_path
        emitter = self.emitter

        if not self.context.in_place:
            emitter.ensure_dir(dest, ".")

        # JavaScript
        emitter.copy_template("server.js", Path(dest) / "server.js")
        app = self.renderer.load_template("app.js")
        manifest = baseline_manifest(self.context.app_name)

        # Request logger and body parsers
        binding = TemplateBinding()
        for feature in DEFAULT_FEATURES:
            binding, manifest = apply_feature(binding, manifest, feature)

        emitter.ensure_dir(dest, "config")
        emitter.copy_template_multi("config", Path(dest) / "config", self.config.config_glob)

        emitter.ensure_dir(dest, "routers")
        emitter.copy_template_multi("routers", Path(dest) / "routers", self.config.router_glob)

        emitter.copy_template("gitignore", Path(dest) / ".gitignore")
        emitter.copy_template("eslintrc.js", Path(dest) / ".eslintrc.js")
        emitter.copy_template("prettierrc.js", Path(dest) / ".prettierrc.js")

        for router in DEFAULT_ROUTERS:
            binding = mount_router(binding, router)
        app.binding = binding

        # sort dependencies like npm(1)
        manifest = manifest.finalized()

        emitter.write(Path(dest) / "app.js", app.render())
        emitter.write(Path(dest) / "package.json", manifest.to_json())
        return manifest

    def guidance(self) -> list[str]:
        """Return the next-step instructions shown after scaffolding."""
        prompt = ">" if launched_from_cmd() else "$"
        lines: list[str] = []
        if not self.context.in_place:
            lines += [
                "",
                "   change directory:",
                f"     {prompt} cd {self.context.destination_path}",
            ]
        lines += [
            "",
            "   install dependencies:",
            f"     {prompt} npm install or yarn",
            "",
            "   run the app:",
            f"     {prompt} npm start or npm run dev",
            "",
        ]
        return lines

    # -- Internal ----------------------------------------------------------

    def _enter(self, state: GeneratorState) -> None:
        self.state = state
        self.history.append(state)
