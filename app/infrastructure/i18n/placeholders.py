"""Placeholder substitution by property path.

Replaces ``{{ path }}`` markers in a template with values looked up in a
context object. A path is a dot-separated list of segments, each resolved
against mappings by key, sequences by non-negative integer index, and any
other object by attribute. Callables never resolve::

    replace("Hello, {{user.name}}", {"user": {"name": "Ana"}})  # "Hello, Ana"
    replace("First: {{ items.0 }}", {"items": ["a", "b"]})      # "First: a"

Markers whose path does not resolve, or resolves to None, are left verbatim.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([\w$-]+(?:\.[\w$-]+)*)\s*\}\}")

_MISSING = object()


def resolve(context: Any, path: str) -> Any:
    """Resolve a dot-separated property path against a context object.

    Args:
        context: Mapping, sequence or object to walk.
        path: Dot-separated path (e.g., "user.address.city", "items.0").

    Returns:
        The resolved value, or None if any segment is missing.
    """
    current = context
    for segment in path.split("."):
        current = _step(current, segment)
        if current is _MISSING:
            return None
    return current


def _step(current: Any, segment: str) -> Any:
    if isinstance(current, Mapping):
        value = current.get(segment, _MISSING)
    elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        if not segment.isdecimal() or int(segment) >= len(current):
            return _MISSING
        value = current[int(segment)]
    elif current is None or segment.startswith("_"):
        return _MISSING
    else:
        value = getattr(current, segment, _MISSING)
    # methods and other callables are never rendered
    if callable(value):
        return _MISSING
    return value


def replace(template: str, context: Any) -> str:
    """Substitute placeholders in a template with values from context.

    Args:
        template: Text containing ``{{ path }}`` markers.
        context: Object providing the values.

    Returns:
        The template with every resolvable marker replaced by ``str(value)``.
    """

    def _substitute(match: re.Match) -> str:
        value = resolve(context, match.group(1))
        if value is None:
            return match.group(0)
        return str(value)

    return PLACEHOLDER_PATTERN.sub(_substitute, template)
