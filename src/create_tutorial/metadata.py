"""Schema of the ``tutorial.yml`` metadata file."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .naming import is_valid_slug, slug_to_title

DEFAULT_CATEGORY = "polkadot-sdk-cookbook"
DEFAULT_DESCRIPTION = "Replace with a short description."


class TutorialType(str, Enum):
    """Kind of code a tutorial walks through."""

    SDK = "sdk"
    CONTRACTS = "contracts"


class TutorialMetadata(BaseModel):
    """Metadata describing a single cookbook tutorial."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Display title of the tutorial.")
    slug: str = Field(..., description="Directory name of the tutorial under tutorials/.")
    category: str = Field(default=DEFAULT_CATEGORY, min_length=1, description="Cookbook section the tutorial belongs to.")
    needs_node: bool = Field(default=True, description="Whether the tests expect a running chain node.")
    description: str = Field(default=DEFAULT_DESCRIPTION, min_length=1, description="One line summary of the tutorial.")
    type: TutorialType = Field(default=TutorialType.SDK, description="Kind of code covered by the tutorial.")

    @field_validator("slug")
    @classmethod
    def _check_slug(cls, value: str) -> str:
        if not is_valid_slug(value):
            raise ValueError(f"'{value}' is not a lowercase, dash separated slug")
        return value

    @classmethod
    def for_slug(cls, slug: str, title: str | None = None) -> "TutorialMetadata":
        """Build placeholder metadata for a freshly scaffolded tutorial."""

        return cls(name=title if title is not None else slug_to_title(slug), slug=slug)


__all__ = ["DEFAULT_CATEGORY", "DEFAULT_DESCRIPTION", "TutorialMetadata", "TutorialType"]
