from __future__ import annotations

from pathlib import Path

import pytest

from create_tutorial.cli import build_parser, main


def _snapshot(directory: Path) -> dict[str, bytes]:
    return {
        str(path.relative_to(directory)): path.read_bytes()
        for path in sorted(directory.rglob("*"))
        if path.is_file()
    }


def test_parser_defaults(tmp_path: Path):
    args = build_parser().parse_args(["demo", "--root", str(tmp_path)])
    assert args.slug == "demo"
    assert args.root == tmp_path
    assert args.package_manager == "npm"
    assert not args.skip_git
    assert not args.skip_install


def test_parser_requires_slug(capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args([])
    assert excinfo.value.code == 2
    assert "SLUG" in capsys.readouterr().err


def test_cli_creates_tutorial(runner, repo_root: Path, capsys):
    exit_code = main(["add-nft-pallet", "--root", str(repo_root), "--no-color"], runner=runner)

    assert exit_code == 0
    tutorial_dir = repo_root / "tutorials" / "add-nft-pallet"
    for directory in ("tests", "scripts", "add-nft-pallet-code"):
        assert (tutorial_dir / directory).is_dir()
    for name in ("README.md", "tutorial.yml", "justfile", ".gitignore", "tests/add-nft-pallet-e2e.test.ts"):
        assert (tutorial_dir / name).is_file()

    metadata = (tutorial_dir / "tutorial.yml").read_text(encoding="utf-8")
    assert "name: Add Nft Pallet" in metadata
    assert "slug: add-nft-pallet" in metadata

    out = capsys.readouterr().out
    assert "Tutorial created successfully!" in out
    assert "\x1b[" not in out


def test_cli_refuses_second_run(runner, repo_root: Path, capsys):
    assert main(["test-tutorial", "--root", str(repo_root)], runner=runner) == 0
    tutorial_dir = repo_root / "tutorials" / "test-tutorial"
    before = _snapshot(tutorial_dir)
    calls_before = len(runner.calls)
    capsys.readouterr()

    assert main(["test-tutorial", "--root", str(repo_root)], runner=runner) == 1

    assert "already exists" in capsys.readouterr().err
    assert _snapshot(tutorial_dir) == before
    assert len(runner.calls) == calls_before


@pytest.mark.parametrize("slug", ["My-Tutorial", "my_tutorial", "my--tutorial", "my-tutorial-"])
def test_cli_rejects_invalid_slug(runner, repo_root: Path, capsys, slug: str):
    assert main([slug, "--root", str(repo_root)], runner=runner) == 1

    err = capsys.readouterr().err
    assert "Invalid tutorial slug format!" in err
    assert "Examples:" in err
    assert list((repo_root / "tutorials").iterdir()) == []
    assert runner.calls == []


def test_cli_requires_repository_root(runner, tmp_path: Path, capsys):
    assert main(["demo", "--root", str(tmp_path)], runner=runner) == 1
    assert "must be run from the repository root" in capsys.readouterr().err
    assert not (tmp_path / "tutorials").exists()


def test_cli_reports_toolchain_failure(runner, repo_root: Path, capsys):
    runner.fail("npm", "pkg", "set", "scripts.test=vitest run", exit_code=1, stderr="npm ERR! code EJSONPARSE")

    assert main(["demo", "--root", str(repo_root)], runner=runner) == 1

    err = capsys.readouterr().err
    assert "Failed to set npm scripts" in err
    assert "npm ERR! code EJSONPARSE" in err


def test_cli_git_failure_still_succeeds(runner, repo_root: Path, capsys):
    runner.fail("git", exit_code=128)

    assert main(["demo", "--root", str(repo_root)], runner=runner) == 0
    assert "Failed to create git branch" in capsys.readouterr().err


def test_cli_options_reach_the_steps(runner, repo_root: Path):
    exit_code = main(
        ["demo", "--root", str(repo_root), "--skip-git", "--skip-install", "--package-manager", "pnpm"],
        runner=runner,
    )

    assert exit_code == 0
    assert {argv[0] for argv in runner.argvs()} == {"pnpm"}
    assert not any(argv[1] == "i" for argv in runner.argvs())


def test_cli_propagates_unexpected_errors(runner, repo_root: Path, capsys, monkeypatch):
    def explode(self, config):
        raise KeyError("boom")

    monkeypatch.setattr("create_tutorial.scaffold.TutorialScaffolder.create", explode)

    with pytest.raises(KeyError):
        main(["demo", "--root", str(repo_root)], runner=runner)
    assert "An unexpected error occurred" in capsys.readouterr().err


def test_help_explains_double_dash(capsys):
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--help"])
    assert "create-tutorial -- -my-tutorial" in capsys.readouterr().out


def test_slug_after_double_dash_gets_slug_guidance(runner, repo_root: Path, capsys):
    assert main(["--root", str(repo_root), "--", "-my-tutorial"], runner=runner) == 1

    err = capsys.readouterr().err
    assert "Invalid tutorial slug format!" in err
    assert 'Did you mean "my-tutorial"?' in err
    assert runner.calls == []
