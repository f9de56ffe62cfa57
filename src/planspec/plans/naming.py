"""Plan/spec name rules and path confinement."""

from __future__ import annotations

import re
from pathlib import Path

_NAME_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_RESERVED_CHARS = re.compile(r'[\\/:*?"<>|]')

MAX_NAME_WORDS = 3


def validate_name(name: str) -> tuple[bool, str]:
    """Check a plan or spec name.

    Returns:
        (valid, reason) tuple. ``reason`` is empty when valid.
    """
    if not name or not isinstance(name, str):
        return False, "name is required"
    if not _NAME_PATTERN.match(name):
        return False, "use only letters, numbers, and hyphens"
    words = [w for w in name.split("-") if w]
    if not words:
        return False, "name cannot be empty"
    if len(words) > MAX_NAME_WORDS:
        return False, f"use max {MAX_NAME_WORDS} hyphen-separated words"
    return True, ""


def sanitize_filename(name: str) -> str:
    if not name or not isinstance(name, str):
        return "untitled"
    cleaned = _RESERVED_CHARS.sub("_", _CONTROL_CHARS.sub("", name)).strip()
    return cleaned or "untitled"


def secure_path(base_dir: Path | str, name: str) -> Path:
    """Return ``<base_dir>/<name>.md``, refusing anything outside base_dir.

    Raises:
        ValueError: If the resolved path escapes ``base_dir``.
    """
    base = Path(base_dir).resolve()
    target = (base / f"{sanitize_filename(name)}.md").resolve()
    if not target.is_relative_to(base):
        raise ValueError(f"Security violation: Path {target} is outside of {base}")
    return target
