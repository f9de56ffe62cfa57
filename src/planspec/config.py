"""Load per-project settings from .planspec.yaml.

Every key is optional:

    plans_dir: docs/plans
    specs_dir: docs/specs
    merge_attempts: 5
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from pathlib import Path

import yaml

from planspec.paths import config_path
from planspec.specblock import DEFAULT_ATTEMPTS

DEFAULT_PLANS_DIR = "docs/plans"
DEFAULT_SPECS_DIR = "docs/specs"


@dataclass(frozen=True)
class ProjectConfig:
    """Resolved settings for one project."""

    root: Path
    plans_dir: str = DEFAULT_PLANS_DIR
    specs_dir: str = DEFAULT_SPECS_DIR
    merge_attempts: int = DEFAULT_ATTEMPTS

    @property
    def plans_path(self) -> Path:
        return self.root / self.plans_dir

    @property
    def specs_path(self) -> Path:
        return self.root / self.specs_dir


def load_config(project: Path | str) -> ProjectConfig:
    """Read .planspec.yaml from ``project``, or return defaults if absent.

    Raises:
        ValueError: If the file exists but is not a YAML mapping.
        yaml.YAMLError: If the YAML is malformed.
    """
    root = Path(project)
    cfg_file = config_path(root)
    if not cfg_file.is_file():
        return ProjectConfig(root=root)

    with open(cfg_file) as f:
        data = yaml.safe_load(f)

    if data is None:
        return ProjectConfig(root=root)
    if not isinstance(data, dict):
        raise ValueError(f"{cfg_file} is not a YAML mapping")

    plans_dir = _dir_setting(data, "plans_dir", DEFAULT_PLANS_DIR, cfg_file)
    specs_dir = _dir_setting(data, "specs_dir", DEFAULT_SPECS_DIR, cfg_file)

    attempts = data.get("merge_attempts", DEFAULT_ATTEMPTS)
    if isinstance(attempts, bool) or not isinstance(attempts, int) or attempts < 1:
        warnings.warn(
            f"{cfg_file}: merge_attempts must be a positive integer, "
            f"got {attempts!r}; using {DEFAULT_ATTEMPTS}"
        )
        attempts = DEFAULT_ATTEMPTS

    return ProjectConfig(
        root=root,
        plans_dir=plans_dir,
        specs_dir=specs_dir,
        merge_attempts=attempts,
    )


def _dir_setting(data: dict, key: str, default: str, cfg_file: Path) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value.strip():
        warnings.warn(f"{cfg_file}: {key} must be a non-empty string; using {default}")
        return default
    return value.strip()
