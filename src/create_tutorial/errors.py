"""Exception types raised while creating a tutorial."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class CreateTutorialError(RuntimeError):
    """Base class for every failure reported by the tutorial creator.

    ``hints`` are short follow-up lines shown to the user underneath the
    error message.
    """

    def __init__(self, message: str, *, hints: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.hints = tuple(hints)


class PreconditionError(CreateTutorialError):
    """Raised when the tool is not run from the cookbook repository root."""


class InvalidSlugError(CreateTutorialError):
    """Raised when a tutorial slug does not follow the naming convention."""

    def __init__(self, slug: str, *, hints: Sequence[str] = ()) -> None:
        super().__init__("Invalid tutorial slug format!", hints=hints)
        self.slug = slug


class TutorialExistsError(CreateTutorialError):
    """Raised when the target tutorial directory is already present."""

    def __init__(self, slug: str, directory: Path) -> None:
        super().__init__(
            f'Tutorial "{slug}" already exists!',
            hints=[f"Directory: {directory}"],
        )
        self.slug = slug
        self.directory = directory


class VcsError(CreateTutorialError):
    """Raised when the feature branch could not be created."""


class FilesystemError(CreateTutorialError):
    """Raised when a directory or file of the workspace cannot be written."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message, hints=[f"Path: {path}"])
        self.path = path


class ToolchainError(CreateTutorialError):
    """Raised when a package manager invocation exits unsuccessfully."""

    def __init__(self, step: str, command: Sequence[str], exit_code: int, stderr: str = "") -> None:
        hints = [f"Command: {' '.join(command)}", f"Exit status: {exit_code}"]
        detail = stderr.strip()
        if detail:
            hints.append(detail.splitlines()[-1])
        super().__init__(f"Failed to {step}", hints=hints)
        self.step = step
        self.command = tuple(command)
        self.exit_code = exit_code
        self.stderr = stderr


__all__ = [
    "CreateTutorialError",
    "FilesystemError",
    "InvalidSlugError",
    "PreconditionError",
    "ToolchainError",
    "TutorialExistsError",
    "VcsError",
]
