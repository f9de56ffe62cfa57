"""Locate and enumerate plan and spec files for a project."""

from __future__ import annotations

import re
from pathlib import Path

from planspec.config import ProjectConfig
from planspec.plans.naming import secure_path

_REPO_SCOPE = re.compile(r"^Scope:\s*repo\b", re.MULTILINE)

# Scope must be declared near the top of a spec
SCOPE_HEADER_LINES = 8


def plan_path(config: ProjectConfig, name: str) -> Path:
    return secure_path(config.plans_path, name)


def spec_path(config: ProjectConfig, name: str) -> Path:
    return secure_path(config.specs_path, name)


def _list_markdown(directory: Path) -> list[Path]:
    if not directory.is_dir():
        return []
    return sorted(p.resolve() for p in directory.glob("*.md") if p.is_file())


def list_plans(config: ProjectConfig) -> list[Path]:
    """Return all plan files, sorted. Empty if the plans dir is missing."""
    return _list_markdown(config.plans_path)


def list_specs(config: ProjectConfig) -> list[Path]:
    """Return all spec files, sorted. Empty if the specs dir is missing."""
    return _list_markdown(config.specs_path)


def list_repo_specs(config: ProjectConfig) -> list[str]:
    """Return names of specs that declare ``Scope: repo`` in their header."""
    names = []
    for path in list_specs(config):
        text = path.read_text(encoding="utf-8", errors="replace")
        head = "\n".join(text.split("\n")[:SCOPE_HEADER_LINES])
        if _REPO_SCOPE.search(head):
            names.append(path.stem)
    return names


def ensure_directory(path: Path | str) -> None:
    """Create the parent directory of ``path`` if needed."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
