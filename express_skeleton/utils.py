"""Shared console helpers for express-skeleton.

Provides Rich-based output (creation notices, guidance, errors), the
interactive confirmation prompt, and the flush-then-exit shutdown routine
used by the CLI.
"""

from __future__ import annotations

import os
import re
import sys

from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)

_AFFIRMATIVE = re.compile(r"y|yes|ok|true", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def print_create(path: str) -> None:
    """Print a ``create : <path>`` notice for a new directory or file."""
    console.print(
        f"   [cyan]create[/cyan] : {escape(path)}", soft_wrap=True, highlight=False
    )


def print_guidance(lines: list[str]) -> None:
    """Print plain post-generation guidance, one entry per line."""
    for line in lines:
        console.print(escape(line), soft_wrap=True, highlight=False)


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]", soft_wrap=True)


# ---------------------------------------------------------------------------
# Confirmation prompt
# ---------------------------------------------------------------------------


def parse_confirmation(answer: str) -> bool:
    """Return ``True`` only for ``y``, ``yes``, ``ok`` or ``true`` (any case).

    Everything else, including an empty answer, is a decline.
    """
    return _AFFIRMATIVE.fullmatch(answer.strip()) is not None


def confirm(message: str) -> bool:
    """Ask *message* on the console and parse the reply.

    A closed stdin counts as a decline.
    """
    try:
        answer = console.input(escape(message))
    except EOFError:
        return False
    return parse_confirmation(answer)


# ---------------------------------------------------------------------------
# Process helpers
# ---------------------------------------------------------------------------


def launched_from_cmd() -> bool:
    """Return ``True`` when running under Windows ``cmd.exe``."""
    return sys.platform == "win32" and "_" not in os.environ


def shutdown(code: int) -> int:
    """Flush every output sink and hand back the exit status *code*."""
    for stream in (console.file, err_console.file, sys.stdout, sys.stderr):
        stream.flush()
    return code
