"""Project path resolution.

Resolves the project whose docs/ tree holds plans and specs. Uses an
environment variable when available, falls back to the current directory.

Environment variables:
    PLANSPEC_PROJECT_DIR: project root (default: current working directory)
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = ".planspec.yaml"


def project_root(override: Path | str | None = None) -> Path:
    """Return the project root directory."""
    if override:
        return Path(override).expanduser().resolve()
    env = os.environ.get("PLANSPEC_PROJECT_DIR")
    if env:
        return Path(env).expanduser().resolve()
    return Path.cwd()


def config_path(project: Path | str) -> Path:
    """Return the path to the project's .planspec.yaml."""
    return Path(project) / CONFIG_FILENAME
