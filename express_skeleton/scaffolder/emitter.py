"""Directory and file materialization for scaffolding.

:class:`FileEmitter` owns every write the generator performs.  All
operations are synchronous and idempotent: directories that already exist
are left alone and files are truncated and rewritten.  Each directory or
file created is announced through the ``notify`` callback as a
``create : <path>`` notice and recorded in :attr:`FileEmitter.created`.
"""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Callable
from pathlib import Path

from ..errors import FilesystemError
from ..utils import print_create

MODE_0666 = 0o666
MODE_0755 = 0o755


class FileEmitter:
    """Writes directories, rendered text and static template copies."""

    def __init__(
        self,
        template_dir: str | Path,
        *,
        dir_mode: int = MODE_0755,
        file_mode: int = MODE_0666,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self.template_dir = Path(template_dir)
        self.dir_mode = dir_mode
        self.file_mode = file_mode
        self.notify = notify or print_create
        self.created: list[str] = []

    # -- Directories -------------------------------------------------------

    def ensure_dir(self, base_dir: str | Path, relative_dir: str | Path = ".") -> Path:
        """Create ``base_dir/relative_dir`` and any missing ancestors.

        Emits one notice per call, suffixed with the path separator, even
        when the directory already exists.
        """
        location = os.path.normpath(os.path.join(base_dir, relative_dir))
        self._announce(f"{location}{os.sep}")
        try:
            os.makedirs(location, mode=self.dir_mode, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(location, exc) from exc
        return Path(location)

    # -- Files -------------------------------------------------------------

    def write(self, path: str | Path, content: str, mode: int | None = None) -> Path:
        """Write *content* to *path*, creating or truncating it.

        *mode* applies when the file is created (subject to the umask) and
        defaults to the emitter's ``file_mode``.
        """
        target = os.path.normpath(path)
        flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
        try:
            fd = os.open(target, flags, self.file_mode if mode is None else mode)
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                handle.write(content)
        except OSError as exc:
            raise FilesystemError(target, exc) from exc
        self._announce(target)
        return Path(target)

    def read_template(self, source: str | Path) -> str:
        """Return the raw text of a static template file."""
        location = self.template_dir / source
        try:
            return location.read_text(encoding="utf-8")
        except OSError as exc:
            raise FilesystemError(location, exc) from exc

    def copy_template(self, source: str | Path, dest: str | Path) -> Path:
        """Copy a static template file to *dest* unchanged."""
        return self.write(dest, self.read_template(source))

    def copy_template_multi(
        self, source_dir: str | Path, dest_dir: str | Path, pattern: str
    ) -> list[Path]:
        """Copy every file in *source_dir* whose name matches *pattern*.

        The glob is matched against the base file name only and, as with
        shell globbing, never matches dotfiles.  Entries are copied in sorted
        order and keep their file names.
        """
        location = self.template_dir / source_dir
        try:
            names = sorted(
                entry.name
                for entry in location.iterdir()
                if entry.is_file() and not entry.name.startswith(".")
            )
        except OSError as exc:
            raise FilesystemError(location, exc) from exc

        written: list[Path] = []
        for name in fnmatch.filter(names, pattern):
            written.append(
                self.copy_template(Path(source_dir) / name, Path(dest_dir) / name)
            )
        return written

    # -- Internal ----------------------------------------------------------

    def _announce(self, path: str) -> None:
        self.created.append(path)
        self.notify(path)


def is_empty_directory(path: str | Path) -> bool:
    """Return ``True`` if *path* has no entries or does not exist.

    Any other listing failure (permission denied, not a directory) is
    raised as :class:`FilesystemError`.
    """
    try:
        with os.scandir(path) as entries:
            return next(entries, None) is None
    except FileNotFoundError:
        return True
    except OSError as exc:
        raise FilesystemError(path, exc) from exc
