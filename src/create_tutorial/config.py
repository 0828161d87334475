"""Configuration shared by the scaffolder, the bootstrapper and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import InvalidSlugError
from .naming import is_valid_slug, slug_to_title, suggest_slug

TUTORIALS_DIRNAME = "tutorials"
VERSIONS_FILENAME = "versions.yml"
BRANCH_PREFIX = "feat/tutorial-"
SLUG_EXAMPLES = ("my-tutorial", "add-nft-pallet", "zero-to-hero")


def branch_name(slug: str) -> str:
    """Return the git branch used for the tutorial ``slug``."""

    return f"{BRANCH_PREFIX}{slug}"


@dataclass(frozen=True, slots=True)
class TutorialConfig:
    """Identifiers and paths describing a tutorial workspace.

    Attributes
    ----------
    slug:
        The validated tutorial slug. It names the workspace directory, the
        code directory and the end-to-end test file.
    title:
        Human friendly title derived from :attr:`slug`. Written to the
        ``name`` key of ``tutorial.yml``.
    root:
        The repository root containing the ``tutorials/`` directory.
    """

    slug: str
    title: str
    root: Path

    @classmethod
    def from_slug(cls, slug: str, root: str | Path = ".") -> "TutorialConfig":
        """Validate ``slug`` and build the configuration rooted at ``root``.

        Raises
        ------
        InvalidSlugError
            If ``slug`` is not lowercase words separated by single dashes.
        """

        if not is_valid_slug(slug):
            hints = ["Slug must be lowercase, with words separated by dashes."]
            suggestion = suggest_slug(slug)
            if suggestion and suggestion != slug:
                hints.append(f'Did you mean "{suggestion}"?')
            examples = ", ".join(f'"{example}"' for example in SLUG_EXAMPLES)
            hints.append(f"Examples: {examples}")
            raise InvalidSlugError(slug, hints=hints)

        return cls(slug=slug, title=slug_to_title(slug), root=Path(root))

    @property
    def tutorial_dir(self) -> Path:
        return self.root / TUTORIALS_DIRNAME / self.slug

    @property
    def relative_dir(self) -> str:
        """POSIX path of the workspace relative to :attr:`root`."""

        return f"{TUTORIALS_DIRNAME}/{self.slug}"

    @property
    def tests_dir(self) -> Path:
        return self.tutorial_dir / "tests"

    @property
    def scripts_dir(self) -> Path:
        return self.tutorial_dir / "scripts"

    @property
    def code_dirname(self) -> str:
        return f"{self.slug}-code"

    @property
    def code_dir(self) -> Path:
        return self.tutorial_dir / self.code_dirname

    @property
    def test_filename(self) -> str:
        return f"{self.slug}-e2e.test.ts"

    @property
    def test_file(self) -> Path:
        return self.tests_dir / self.test_filename

    @property
    def branch_name(self) -> str:
        return branch_name(self.slug)
