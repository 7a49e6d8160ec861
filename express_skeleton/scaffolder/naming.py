"""Package-name derivation from a destination path."""

from __future__ import annotations

import re
from pathlib import Path

_INVALID_RUN = re.compile(r"[^A-Za-z0-9.-]+")
_EDGES = re.compile(r"^[-_.]+|-+$")


def create_app_name(path_name: str | Path) -> str:
    """Create an npm-compatible package name from a directory path.

    Only the final path segment is used.  Runs of characters outside
    ``[A-Za-z0-9.-]`` collapse to a single ``-``, leading ``-``/``_``/``.``
    and trailing ``-`` are removed, and the result is lowercased.  May
    return an empty string; callers substitute a default name.

    Examples::

        create_app_name("/tmp/My App!!") -> "my-app"
        create_app_name("___")           -> ""
    """
    segment = Path(path_name).name
    name = _INVALID_RUN.sub("-", segment)
    name = _EDGES.sub("", name)
    return name.lower()
