"""``{{ placeholder|filter }}`` substitution for the generated tutorial files."""

from __future__ import annotations

import re
from typing import Any, Callable, Mapping

__all__ = ["FILTERS", "TemplateRenderingError", "render_template"]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")

FILTERS: dict[str, Callable[[Any], str]] = {
    # YAML booleans are lowercase
    "lower": lambda value: str(value).lower(),
}


class TemplateRenderingError(RuntimeError):
    """Raised when a placeholder cannot be evaluated."""


def _resolve_value(context: Mapping[str, Any], dotted_path: str) -> Any:
    value: Any = context
    for segment in dotted_path.split("."):
        if isinstance(value, Mapping) and segment in value:
            value = value[segment]
        elif not isinstance(value, Mapping) and hasattr(value, segment):
            value = getattr(value, segment)
        else:
            raise TemplateRenderingError(f"missing value for '{dotted_path}'")
    return value


def render_template(template: str, context: Mapping[str, Any]) -> str:
    """Replace every ``{{ path|filter }}`` expression in ``template``.

    Dotted paths such as ``metadata.type.value`` walk mappings and object
    attributes. Single braces, as used by TypeScript and JSON bodies, are left
    untouched. Unknown paths and filters raise :class:`TemplateRenderingError`.
    """

    def substitute(match: re.Match[str]) -> str:
        key, *filters = [part.strip() for part in match.group("expression").split("|")]
        value = _resolve_value(context, key)
        for name in filters:
            try:
                value = FILTERS[name](value)
            except KeyError as exc:
                raise TemplateRenderingError(f"unknown filter '{name}'") from exc
        return str(value)

    return _PLACEHOLDER_PATTERN.sub(substitute, template)
