"""Command line interface for the tutorial creator."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from . import __version__
from .console import Console
from .errors import CreateTutorialError
from .orchestrator import TutorialCreator
from .process import ProcessRunner, SubprocessRunner

LOG_LEVEL_ENV = "CREATE_TUTORIAL_LOG_LEVEL"
PACKAGE_MANAGER_ENV = "CREATE_TUTORIAL_PACKAGE_MANAGER"

EPILOG = """\
Examples:
  create-tutorial zero-to-hero
  create-tutorial add-nft-pallet
  create-tutorial custom-runtime

Everything after "--" is read as the slug, so a slug starting with a dash
is checked against the slug rules instead of being taken for an option:
  create-tutorial -- -my-tutorial

For more information, see CONTRIBUTING.md
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-tutorial",
        description="Create a new Polkadot Cookbook tutorial with all necessary scaffolding.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "slug",
        metavar="SLUG",
        help='Tutorial slug, lowercase with words separated by dashes (e.g. "my-tutorial")',
    )
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=Path.cwd(),
        help="Repository root containing tutorials/ and versions.yml (default: current directory)",
    )
    parser.add_argument(
        "--package-manager",
        default=os.environ.get(PACKAGE_MANAGER_ENV, "npm"),
        help="Package manager executable used to bootstrap the tests (default: npm)",
    )
    parser.add_argument("--skip-git", action="store_true", help="Do not create a feature branch")
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Initialise package.json and configs without installing dependencies",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        help="Logging level for diagnostic output (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


def _report(console: Console, error: CreateTutorialError) -> None:
    console.error(error.message)
    for hint in error.hints:
        console.hint(hint)


def main(argv: Sequence[str] | None = None, *, runner: ProcessRunner | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    console = Console(color=False if args.no_color else None)
    creator = TutorialCreator(
        runner or SubprocessRunner(),
        console,
        root=args.root,
        package_manager=args.package_manager,
        create_branch=not args.skip_git,
        install=not args.skip_install,
    )
    try:
        creator.create(args.slug)
    except CreateTutorialError as exc:
        _report(console, exc)
        return 1
    except Exception:
        console.error("An unexpected error occurred:")
        raise
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
