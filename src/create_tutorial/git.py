"""Feature branch creation through the git command line."""

from __future__ import annotations

import logging

from .config import TutorialConfig, branch_name
from .errors import VcsError
from .process import ProcessRunner

__all__ = ["GIT_COMMAND", "branch_name", "create_git_branch"]


LOGGER = logging.getLogger(__name__)

GIT_COMMAND = "git"


def create_git_branch(config: TutorialConfig, runner: ProcessRunner) -> str:
    """Create and check out ``feat/tutorial-<slug>`` in the repository root.

    Returns the branch name. Raises :class:`VcsError` when git exits with a
    non-zero status or cannot be started.
    """

    branch = config.branch_name
    result = runner.run(GIT_COMMAND, ["checkout", "-b", branch], config.root)
    if not result.ok:
        LOGGER.debug("git checkout -b %s failed: %s", branch, result.stderr.strip())
        hints = ["You may already be on a feature branch. Continue anyway."]
        raise VcsError("Failed to create git branch", hints=hints)
    return branch
