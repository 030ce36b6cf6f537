"""URL slug helpers — pure functions, no framework dependencies."""

import re
from collections.abc import Container

_DISALLOWED = re.compile(r"[^a-z0-9\s_-]")
_SEPARATORS = re.compile(r"[\s_-]+")


def generate_slug(text: str) -> str:
    """Normalise a display name into a URL-safe slug.

    >>> generate_slug("  Claude Code: Agents & Tools ")
    'claude-code-agents-tools'
    """
    slug = text.lower().strip()
    slug = _DISALLOWED.sub("", slug)
    slug = _SEPARATORS.sub("-", slug)
    return slug.strip("-")


def unique_slug(base: str, taken: Container[str]) -> str:
    """Return ``base`` or the first free ``base-N`` (N = 1, 2, …)."""
    candidate = base
    counter = 1
    while candidate in taken:
        candidate = f"{base}-{counter}"
        counter += 1
    return candidate
