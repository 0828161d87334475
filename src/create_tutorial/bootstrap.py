"""Bootstrap the JavaScript test toolchain of a tutorial workspace."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from .config import TutorialConfig
from .errors import ToolchainError
from .process import ProcessRunner
from .scaffold import write_file
from .templates import TSCONFIG, VITEST_CONFIG

__all__ = [
    "DEV_DEPENDENCIES",
    "PREVIEW_SERVER",
    "RUNTIME_DEPENDENCIES",
    "ToolchainBootstrapper",
]


LOGGER = logging.getLogger(__name__)

DEV_DEPENDENCIES = ("vitest", "typescript", "ts-node", "@types/node")
RUNTIME_DEPENDENCIES = ("@polkadot/api", "ws")
TEST_SCRIPTS = {
    "test": "vitest run",
    "test:watch": "vitest",
}
PREVIEW_SERVER = "common-preview-server/server.js"


@dataclass(slots=True)
class ToolchainBootstrapper:
    """Initialise ``package.json``, install dependencies and write tool configs.

    Every package manager call runs inside the tutorial directory and any
    non-zero exit status, dependency installs included, raises
    :class:`ToolchainError`. Installs stream their output to the terminal and
    are announced through ``notify`` just before they start; every other
    call is captured so its stderr can be reported on failure.
    """

    runner: ProcessRunner
    package_manager: str = "npm"
    install: bool = True
    dev_dependencies: Sequence[str] = field(default=DEV_DEPENDENCIES)
    dependencies: Sequence[str] = field(default=RUNTIME_DEPENDENCIES)
    notify: Callable[[str], None] = LOGGER.info

    def bootstrap(self, config: TutorialConfig) -> list[Path]:
        """Run every bootstrap step in order and return the written config files."""

        self.init_package(config)
        if self.install:
            self.install_dependencies(config)
        else:
            LOGGER.info("Skipping dependency installation for %s", config.slug)
        self.set_scripts(config)
        return self.write_configs(config)

    def _run(self, step: str, args: Sequence[str], config: TutorialConfig, *, stream: bool = False) -> None:
        result = self.runner.run(self.package_manager, args, config.tutorial_dir, stream=stream)
        if not result.ok:
            command = [self.package_manager, *args]
            LOGGER.debug(
                "%s failed with status %s: %s",
                " ".join(command),
                result.exit_code,
                result.stderr.strip(),
            )
            raise ToolchainError(step, command, result.exit_code, result.stderr)

    def init_package(self, config: TutorialConfig) -> None:
        """Create ``package.json`` named after the slug unless it already exists."""

        if (config.tutorial_dir / "package.json").exists():
            LOGGER.debug("package.json already present in %s", config.tutorial_dir)
            return
        self._run("initialise package.json", ["init", "-y"], config)
        self._run(
            "set package.json fields",
            ["pkg", "set", f"name={config.slug}", "type=module"],
            config,
        )

    def install_dependencies(self, config: TutorialConfig) -> None:
        self.notify(f"Installing dev dependencies ({', '.join(self.dev_dependencies)})...")
        self._run("install dev dependencies", ["i", "-D", *self.dev_dependencies], config, stream=True)
        self.notify(f"Installing dependencies ({', '.join(self.dependencies)})...")
        self._run("install dependencies", ["i", *self.dependencies], config, stream=True)

    def scripts(self, config: TutorialConfig) -> dict[str, str]:
        """Return the package scripts registered for the tutorial.

        A ``preview`` script is added when the repository ships the shared
        preview server.
        """

        scripts = dict(TEST_SCRIPTS)
        if (config.root / PREVIEW_SERVER).is_file():
            scripts["preview"] = f"node ../../{PREVIEW_SERVER} ."
        return scripts

    def set_scripts(self, config: TutorialConfig) -> None:
        assignments = [f"scripts.{name}={command}" for name, command in self.scripts(config).items()]
        self._run("set npm scripts", ["pkg", "set", *assignments], config)

    def write_configs(self, config: TutorialConfig) -> list[Path]:
        written = []
        for name, content in (("vitest.config.ts", VITEST_CONFIG), ("tsconfig.json", TSCONFIG)):
            path = config.tutorial_dir / name
            write_file(path, content)
            written.append(path)
        return written
