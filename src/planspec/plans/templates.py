"""Render plan and spec documents, and rewrite plan frontmatter."""

from __future__ import annotations

import re

from planspec.specblock import SPECS_END, SPECS_START
from planspec.specblock.codec import render_entries

_FRONTMATTER = re.compile(r"^---\n[\s\S]*?\n---\n\n?")
_FRONTMATTER_BODY = re.compile(r"^---\n([\s\S]*?)\n---")


def format_plan(idea: str, name: str, description: str, steps: list[str]) -> str:
    """Render a new plan with an empty Required Specs section."""
    implementation = ""
    if steps:
        implementation = f"\n## Implementation\n{render_entries(steps)}\n"

    return (
        f"---\n"
        f"plan name: {name}\n"
        f"plan description: {description}\n"
        f"plan status: active\n"
        f"---\n"
        f"\n"
        f"## Idea\n"
        f"{idea}\n"
        f"{implementation}\n"
        f"## Required Specs\n"
        f"{SPECS_START}\n"
        f"{SPECS_END}"
    ).strip()


def normalize_plan_frontmatter(content: str, name: str, description: str, status: str) -> str:
    """Replace the leading frontmatter block with a canonical one.

    Content without frontmatter gets one prepended.
    """
    header = (
        f"---\nplan name: {name}\nplan description: {description}\n"
        f"plan status: {status}\n---\n\n"
    )
    return header + _FRONTMATTER.sub("", content, count=1)


def parse_plan_frontmatter(content: str) -> dict[str, str]:
    """Read ``key: value`` pairs from a plan's leading frontmatter."""
    match = _FRONTMATTER_BODY.match(content)
    if not match:
        return {}
    fields = {}
    for line in match.group(1).split("\n"):
        key, sep, value = line.partition(":")
        if sep and key.strip():
            fields[key.strip()] = value.strip()
    return fields


def format_spec(name: str, scope: str, content: str) -> str:
    return f"# Spec: {name}\n\nScope: {scope}\n\n{content}".strip()
