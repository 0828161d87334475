"""Slug validation and derivation helpers."""

from __future__ import annotations

import re
import unicodedata

__all__ = ["SLUG_PATTERN", "is_valid_slug", "slug_to_title", "suggest_slug"]


SLUG_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")
_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def is_valid_slug(value: object) -> bool:
    """Return ``True`` when ``value`` is a lowercase, dash separated slug.

    Segments consist of ASCII letters and digits only and are joined by a
    single dash. Leading, trailing and repeated dashes are rejected, as is the
    empty string.
    """

    if not isinstance(value, str):
        return False
    return SLUG_PATTERN.fullmatch(value) is not None


def slug_to_title(slug: str) -> str:
    """Return a display title for ``slug``, e.g. ``my-tutorial`` -> ``My Tutorial``.

    Only the first character of every segment is uppercased; the remainder is
    kept as is. Empty segments produce empty words instead of failing.
    """

    words = []
    for segment in slug.split("-"):
        words.append(segment[:1].upper() + segment[1:])
    return " ".join(words)


def suggest_slug(value: str) -> str:
    """Derive a valid slug from free form text.

    The result is only offered as a hint to the user and is never applied
    implicitly. An empty string is returned when nothing usable remains.
    """

    text = unicodedata.normalize("NFKD", str(value))
    text = text.encode("ascii", "ignore").decode("ascii").lower()
    return _NON_ALPHANUMERIC.sub("-", text).strip("-")
