from __future__ import annotations

import io
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from create_tutorial.console import Console  # noqa: E402 (import after sys.path setup)
from create_tutorial.process import ProcessResult, ProcessRunner  # noqa: E402


@dataclass
class Call:
    command: str
    args: tuple[str, ...]
    cwd: Path
    stream: bool = False

    @property
    def argv(self) -> tuple[str, ...]:
        return (self.command, *self.args)


@dataclass
class FakeRunner(ProcessRunner):
    """Record commands instead of running them.

    ``npm init`` writes a minimal ``package.json`` so later steps observe the
    same filesystem state as with the real package manager.
    """

    calls: list[Call] = field(default_factory=list)
    failures: dict[tuple[str, ...], ProcessResult] = field(default_factory=dict)
    writes_package_json: bool = True

    def fail(self, *argv_prefix: str, exit_code: int = 1, stderr: str = "") -> None:
        self.failures[tuple(argv_prefix)] = ProcessResult(exit_code, stderr=stderr)

    def run(self, command: str, args: Sequence[str], cwd: Path, *, stream: bool = False) -> ProcessResult:
        call = Call(command, tuple(args), Path(cwd), stream)
        self.calls.append(call)
        for prefix, result in self.failures.items():
            if call.argv[: len(prefix)] == prefix:
                return result
        if self.writes_package_json and call.args[:1] == ("init",):
            (call.cwd / "package.json").write_text('{"name": "stub"}\n', encoding="utf-8")
        return ProcessResult(0)

    def argvs(self) -> list[tuple[str, ...]]:
        return [call.argv for call in self.calls]


@pytest.fixture()
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def repo_root(tmp_path: Path) -> Path:
    """A minimal cookbook checkout: ``tutorials/`` plus ``versions.yml``."""

    root = tmp_path / "cookbook"
    (root / "tutorials").mkdir(parents=True)
    (root / "versions.yml").write_text("# test versions file\n", encoding="utf-8")
    return root


@pytest.fixture()
def console() -> Console:
    return Console(io.StringIO(), io.StringIO(), color=False)
