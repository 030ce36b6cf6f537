"""Unit tests for slug generation."""

import re

import pytest

from app.domain.slug import generate_slug, unique_slug

SLUG_PATTERN = re.compile(r"^(?:[a-z0-9]+(?:-[a-z0-9]+)*)?$")

AWKWARD_NAMES = [
    "Café Déjà Vu",
    "tab\tseparated\tname",
    "__under_score__",
    "---a---b---",
    "Ünïcödé™ Tools 2.0",
    "AI\u00a0Agent",
    "   ",
    "已经 MCP Server",
]


def test_generate_slug_lowercases_and_joins_words():
    assert generate_slug("Database Sync Pro") == "database-sync-pro"


def test_generate_slug_drops_punctuation_and_collapses_separators():
    assert generate_slug("  Claude Code: Agents & Tools ") == "claude-code-agents-tools"
    assert generate_slug("snake_case -- name") == "snake-case-name"


def test_generate_slug_of_symbols_only_is_empty():
    assert generate_slug("!!!") == ""


def test_unique_slug_returns_base_when_free():
    assert unique_slug("tool", {"other"}) == "tool"


def test_unique_slug_appends_first_free_counter():
    assert unique_slug("tool", {"tool", "tool-1"}) == "tool-2"


@pytest.mark.parametrize("name", AWKWARD_NAMES)
def test_generate_slug_output_is_url_safe(name):
    slug = generate_slug(name)

    assert SLUG_PATTERN.match(slug)
    assert not slug.startswith("-")
    assert not slug.endswith("-")


@pytest.mark.parametrize("name", AWKWARD_NAMES)
def test_generate_slug_is_idempotent(name):
    slug = generate_slug(name)
    assert generate_slug(slug) == slug


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Café Déjà Vu", "caf-dj-vu"),
        ("tab\tseparated\tname", "tab-separated-name"),
        ("---a---b---", "a-b"),
        ("已经 MCP Server", "mcp-server"),
    ],
)
def test_generate_slug_examples(name, expected):
    assert generate_slug(name) == expected
