"""Process execution interface used to reach git and the package manager."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

__all__ = ["ProcessResult", "ProcessRunner", "SubprocessRunner"]


LOGGER = logging.getLogger(__name__)

COMMAND_NOT_FOUND = 127


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Outcome of a finished external command."""

    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class ProcessRunner(ABC):
    """Run an external command and wait for it to finish."""

    @abstractmethod
    def run(self, command: str, args: Sequence[str], cwd: Path, *, stream: bool = False) -> ProcessResult:
        """Execute ``command`` with ``args`` inside ``cwd``.

        Output is captured into the result unless ``stream`` is set, in which
        case it goes straight to the terminal. Implementations must not raise
        for a non-zero exit status; callers decide whether a failure is fatal.
        """


class SubprocessRunner(ProcessRunner):
    """Blocking :func:`subprocess.run` based runner."""

    def run(self, command: str, args: Sequence[str], cwd: Path, *, stream: bool = False) -> ProcessResult:
        argv = [command, *args]
        LOGGER.debug("Running %s in %s", " ".join(argv), cwd)
        try:
            completed = subprocess.run(
                argv,
                cwd=cwd,
                capture_output=not stream,
                check=False,
                text=True,
            )
        except FileNotFoundError:
            LOGGER.debug("Command not found: %s", command)
            return ProcessResult(COMMAND_NOT_FOUND, stderr=f"{command}: command not found")
        except OSError as exc:
            LOGGER.debug("Could not start %s: %s", command, exc)
            return ProcessResult(COMMAND_NOT_FOUND, stderr=str(exc))

        LOGGER.debug("%s exited with status %s", command, completed.returncode)
        return ProcessResult(
            completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
