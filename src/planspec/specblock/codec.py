"""Parse and render the bullet list between the spec markers."""

from planspec.specblock import BULLET_PREFIX


def parse_entries(middle: str) -> list[str]:
    """Extract spec names from bullet lines, in document order.

    Non-bullet lines are ignored. Duplicates are kept; callers decide
    what equality means.
    """
    entries = []
    for line in middle.split("\n"):
        line = line.strip()
        if not line.startswith(BULLET_PREFIX):
            continue
        name = line[len(BULLET_PREFIX):].strip()
        if name:
            entries.append(name)
    return entries


def render_entries(entries: list[str]) -> str:
    return "\n".join(f"{BULLET_PREFIX}{name}" for name in entries)


def unique_entries(entries: list[str]) -> list[str]:
    """Drop repeats, keeping the first occurrence of each name."""
    seen: set[str] = set()
    result = []
    for name in entries:
        if name in seen:
            continue
        seen.add(name)
        result.append(name)
    return result
