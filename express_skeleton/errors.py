"""Exception taxonomy for the scaffolder.

Every failure the generator can hit is a :class:`ScaffoldError`.  None of
them are retried: a declined confirmation ends the run with status 1, and
filesystem or template failures are fatal and leave any partial output on
disk.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class FilesystemError(ScaffoldError):
    """Raised when a directory or file operation fails."""

    def __init__(self, path: str | Path, cause: OSError) -> None:
        self.path = str(path)
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"{reason}: {self.path}")


class TemplateError(ScaffoldError):
    """Raised when a template is missing, malformed, or references an unbound name."""

    def __init__(self, template: str, message: str) -> None:
        self.template = template
        super().__init__(f"Template {template!r}: {message}")


class UserDeclined(ScaffoldError):
    """Raised when the user refuses to write into a non-empty destination."""

    def __init__(self, destination: str | Path) -> None:
        self.destination = str(destination)
        super().__init__(f"Destination is not empty: {self.destination}")
