"""Scaffold new tutorials inside the Polkadot Cookbook repository.

The package validates a tutorial slug, creates a feature branch, writes the
tutorial workspace from a handful of templates and bootstraps a vitest based
test project through the package manager. It can be used programmatically or
through the ``create-tutorial`` command.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import TutorialConfig
from .errors import (
    CreateTutorialError,
    FilesystemError,
    InvalidSlugError,
    PreconditionError,
    ToolchainError,
    TutorialExistsError,
    VcsError,
)
from .naming import is_valid_slug, slug_to_title, suggest_slug
from .orchestrator import TutorialCreator, validate_working_directory
from .process import ProcessResult, ProcessRunner, SubprocessRunner
from .scaffold import TutorialScaffolder

__all__ = [
    "CreateTutorialError",
    "FilesystemError",
    "InvalidSlugError",
    "PreconditionError",
    "ProcessResult",
    "ProcessRunner",
    "SubprocessRunner",
    "ToolchainError",
    "TutorialConfig",
    "TutorialCreator",
    "TutorialExistsError",
    "TutorialScaffolder",
    "VcsError",
    "is_valid_slug",
    "slug_to_title",
    "suggest_slug",
    "validate_working_directory",
]
