"""Sequence the steps that turn a slug into a ready tutorial workspace."""

from __future__ import annotations

import logging
from pathlib import Path

from .bootstrap import ToolchainBootstrapper
from .config import TUTORIALS_DIRNAME, VERSIONS_FILENAME, TutorialConfig
from .console import Console
from .errors import PreconditionError, TutorialExistsError, VcsError
from .git import create_git_branch
from .process import ProcessRunner
from .scaffold import TutorialScaffolder

__all__ = ["TOTAL_STEPS", "TutorialCreator", "validate_working_directory"]


LOGGER = logging.getLogger(__name__)

TOTAL_STEPS = 4
BANNER = "🚀 Polkadot Cookbook - Tutorial Creator"
RULE = "=" * 60


def validate_working_directory(root: Path) -> None:
    """Ensure ``root`` looks like the cookbook repository root.

    Raises
    ------
    PreconditionError
        If ``tutorials/`` or ``versions.yml`` is missing.
    """

    if not (root / TUTORIALS_DIRNAME).is_dir():
        raise PreconditionError(
            "This script must be run from the repository root!",
            hints=["Expected directory structure: ./tutorials/, ./utils/, etc."],
        )
    if not (root / VERSIONS_FILENAME).is_file():
        raise PreconditionError("versions.yml not found. Are you in the correct repository?")


class TutorialCreator:
    """Validate the request, then branch, scaffold, bootstrap and verify.

    Steps run strictly in order. Branch creation and verification only warn
    on failure; every other error propagates and aborts the run without
    rolling back earlier steps.
    """

    def __init__(
        self,
        runner: ProcessRunner,
        console: Console | None = None,
        *,
        root: str | Path = ".",
        package_manager: str = "npm",
        create_branch: bool = True,
        install: bool = True,
        scaffolder: TutorialScaffolder | None = None,
    ) -> None:
        self.runner = runner
        self.console = console or Console()
        self.root = Path(root)
        self.create_branch = create_branch
        self.scaffolder = scaffolder or TutorialScaffolder()
        self.bootstrapper = ToolchainBootstrapper(
            runner,
            package_manager=package_manager,
            install=install,
            notify=self.console.info,
        )

    def prepare(self, slug: str) -> TutorialConfig:
        """Run every precondition gate and return the validated configuration."""

        validate_working_directory(self.root)
        config = TutorialConfig.from_slug(slug, self.root)
        if config.tutorial_dir.exists():
            raise TutorialExistsError(slug, Path(config.relative_dir))
        return config

    def create(self, slug: str) -> TutorialConfig:
        self.console.echo()
        self.console.echo(BANNER, "blue+bold")
        self.console.echo()

        config = self.prepare(slug)
        self.console.echo(f"Creating tutorial: {config.slug}", "cyan")

        self._create_branch(config)
        self._scaffold(config)
        self._bootstrap(config)
        self._verify(config)
        self.print_summary(config)
        return config

    def _create_branch(self, config: TutorialConfig) -> None:
        self.console.step(1, TOTAL_STEPS, "Creating git branch...")
        if not self.create_branch:
            self.console.info("Skipping branch creation")
            return
        try:
            branch = create_git_branch(config, self.runner)
        except VcsError as exc:
            self.console.error(exc.message)
            for hint in exc.hints:
                self.console.warning(hint)
            return
        self.console.success(f"Created branch: {branch}")

    def _scaffold(self, config: TutorialConfig) -> None:
        self.console.step(2, TOTAL_STEPS, "Scaffolding tutorial structure...")
        self.scaffolder.create(config)
        self.console.success("Scaffolded folder structure")
        for entry in ("README.md", "tutorial.yml", f"tests/{config.test_filename}", f"{config.code_dirname}/"):
            self.console.info(f"  - {config.relative_dir}/{entry}")

    def _bootstrap(self, config: TutorialConfig) -> None:
        self.console.step(3, TOTAL_STEPS, "Bootstrapping test environment...")
        bootstrapper = self.bootstrapper
        bootstrapper.bootstrap(config)
        self.console.success("Test environment ready")
        self.console.info("  - package.json created")
        if bootstrapper.install:
            self.console.info("  - vitest, typescript, @polkadot/api installed")
        else:
            self.console.info("  - dependency installation skipped")
        self.console.info("  - vitest.config.ts & tsconfig.json configured")

    def _verify(self, config: TutorialConfig) -> None:
        self.console.step(4, TOTAL_STEPS, "Verifying setup...")
        missing = self.scaffolder.verify(config)
        if missing:
            self.console.warning("Some files may be missing. Please check the tutorial directory.")
            for path in missing:
                self.console.warning(f"  - missing {path.name}")
        else:
            self.console.success("All files created successfully!")

    def print_summary(self, config: TutorialConfig) -> None:
        """Print the follow-up actions for the new tutorial."""

        echo = self.console.echo
        directory = config.relative_dir
        echo()
        echo(RULE, "green")
        echo("🎉 Tutorial created successfully!", "green")
        echo(RULE, "green")
        echo()
        echo("📝 Next Steps:", "yellow")

        actions: list[tuple[str, list[str]]] = []
        if "preview" in self.bootstrapper.scripts(config):
            actions.append(("Preview your tutorial live (recommended):", [f"cd {directory} && npm run preview"]))
        actions.extend(
            [
                ("Write your tutorial content:", [f"{directory}/README.md"]),
                ("Add your code implementation:", [f"{directory}/{config.code_dirname}/"]),
                ("Write comprehensive tests:", [f"{directory}/tests/"]),
                ("Run tests to verify:", [f"cd {directory} && npm test"]),
                ("Update tutorial.yml metadata:", [f"{directory}/tutorial.yml"]),
                (
                    "When ready, open a Pull Request:",
                    [
                        "git add -A",
                        f'git commit -m "feat(tutorial): add {config.slug}"',
                        f"git push origin {config.branch_name}",
                    ],
                ),
            ]
        )
        for index, (title, lines) in enumerate(actions, start=1):
            echo()
            echo(f"  {index}. {title}", "cyan")
            for line in lines:
                echo(f"     {line}")
        echo()
        echo("📚 Need help? Check CONTRIBUTING.md or open an issue!", "blue")
        LOGGER.info("Created tutorial %s at %s", config.slug, config.tutorial_dir)
