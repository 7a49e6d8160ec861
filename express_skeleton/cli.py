"""Command-line front end for express-skeleton.

Usage::

    express-skeleton [options] [dir]
    python -m express_skeleton ./my-app --force
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from . import __version__
from .config import ScaffoldConfig
from .errors import ScaffoldError
from .scaffolder import ApplicationGenerator, GenerationContext
from .utils import print_error, shutdown


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="express-skeleton",
        usage="%(prog)s [options] [dir]",
        description="Scaffold an Express server with ESLint, Prettier and nodemon",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  express-skeleton\n"
            "  express-skeleton ./my-app\n"
            "  express-skeleton ./existing-app --force\n"
        ),
    )
    parser.add_argument(
        "dir",
        nargs="?",
        default=".",
        help="Destination directory (default: current directory)",
    )
    parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Write into a non-empty directory without asking",
    )
    parser.add_argument(
        "--template-dir",
        default=None,
        help="Use an alternative template set",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=__version__,
    )
    return parser


def run(argv: list[str] | None = None) -> int:
    """Parse *argv*, generate the application, and return the exit status."""
    args = build_parser().parse_args(argv)

    config = ScaffoldConfig.from_env()
    if args.template_dir:
        config = config.model_copy(update={"template_dir": Path(args.template_dir)})

    context = GenerationContext.from_destination(
        args.dir, force=args.force, default_name=config.default_app_name
    )
    generator = ApplicationGenerator(context, config)

    try:
        status = asyncio.run(generator.run())
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        status = 1
    return shutdown(status)


def main() -> None:
    """Console-script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
