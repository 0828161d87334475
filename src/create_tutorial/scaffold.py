"""Tutorial workspace scaffolding."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .config import TutorialConfig
from .errors import FilesystemError
from .templates import (
    GITIGNORE,
    generate_e2e_test_stub,
    generate_justfile,
    generate_readme,
    generate_tutorial_metadata,
)

__all__ = ["TutorialScaffolder", "write_file"]


LOGGER = logging.getLogger(__name__)

REQUIRED_AFTER_BOOTSTRAP = ("package.json", "README.md")


def write_file(path: Path, content: str) -> None:
    """Write ``content`` to ``path`` and report failures as :class:`FilesystemError`."""

    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FilesystemError(f"Failed to write {path.name}: {exc.strerror or exc}", path) from exc
    LOGGER.debug("Wrote %s", path)


def _make_directory(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(f"Failed to create directory {path.name}: {exc.strerror or exc}", path) from exc
    LOGGER.debug("Created directory %s", path)


@dataclass(slots=True)
class TutorialScaffolder:
    """Create the directories and template files of a tutorial workspace."""

    def create(self, config: TutorialConfig) -> Path:
        """Create the workspace described by ``config`` and return its path.

        Nothing is cleaned up when a write fails, so a partially populated
        directory may remain on disk.
        """

        for directory in (config.tests_dir, config.scripts_dir, config.code_dir):
            _make_directory(directory)

        for relative_path, content in self._files(config):
            destination = config.tutorial_dir / relative_path
            if destination.parent != config.tutorial_dir:
                _make_directory(destination.parent)
            write_file(destination, content)

        return config.tutorial_dir

    def _files(self, config: TutorialConfig) -> Iterable[tuple[str, str]]:
        yield "justfile", generate_justfile()
        yield f"tests/{config.test_filename}", generate_e2e_test_stub(config.slug)
        yield "tutorial.yml", generate_tutorial_metadata(config.slug, config.title)
        yield "README.md", generate_readme(config.slug)
        # keeps the otherwise empty scripts/ directory under version control
        yield "scripts/.gitkeep", ""
        yield ".gitignore", GITIGNORE

    def verify(self, config: TutorialConfig) -> list[Path]:
        """Return the entries expected after bootstrapping that are missing."""

        missing = [
            config.tutorial_dir / name
            for name in REQUIRED_AFTER_BOOTSTRAP
            if not (config.tutorial_dir / name).exists()
        ]
        for path in missing:
            LOGGER.debug("Expected %s to exist", path)
        return missing
