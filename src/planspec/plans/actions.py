"""Plan and spec operations with validation gates.

Every operation returns a ``(success, message)`` tuple; the message is
meant to be shown to whoever requested the change.
"""

from __future__ import annotations

import logging

from planspec.config import ProjectConfig
from planspec.plans import PLAN_STATUSES, SPEC_SCOPES
from planspec.plans.naming import validate_name
from planspec.plans.templates import (
    format_plan,
    format_spec,
    normalize_plan_frontmatter,
    parse_plan_frontmatter,
)
from planspec.plans.workspace import ensure_directory, list_repo_specs, plan_path, spec_path
from planspec.specblock.merge import merge_entry
from planspec.specblock.store import FileStore

logger = logging.getLogger(__name__)

MIN_PLAN_STEPS = 5
MIN_DESCRIPTION_WORDS = 3
MAX_DESCRIPTION_WORDS = 10


def create_plan(
    config: ProjectConfig,
    name: str,
    idea: str,
    description: str,
    steps: list[str],
) -> tuple[bool, str]:
    """Write a new plan with an empty Required Specs section.

    On success the message lists the repo-scope specs that should be
    appended to the new plan.
    """
    if not name:
        return False, "'name' is required"
    if not description:
        return False, "'description' is required"
    words = len(description.split())
    if words < MIN_DESCRIPTION_WORDS or words > MAX_DESCRIPTION_WORDS:
        return False, (
            f"'description' must be between {MIN_DESCRIPTION_WORDS} "
            f"and {MAX_DESCRIPTION_WORDS} words"
        )
    if not steps or len(steps) < MIN_PLAN_STEPS:
        return False, f"'steps' must include at least {MIN_PLAN_STEPS} steps"

    valid, reason = validate_name(name)
    if not valid:
        return False, f"Invalid plan name '{name}': {reason}"

    path = plan_path(config, name)
    if path.exists():
        return False, f"Plan '{name}' already exists. Use a unique name."

    ensure_directory(path)
    content = format_plan(idea or "", name, description, steps)
    written = FileStore().write_text(path, content)
    if written == 0 or not path.exists():
        return False, f"Failed to write plan '{name}' to disk. Please check permissions."
    logger.info("created plan %s", path)

    repo_specs = list_repo_specs(config)
    if not repo_specs:
        return True, f"Plan '{name}' created. No repo specs detected."
    return True, (
        f"Plan '{name}' created. Append each repo spec: {', '.join(repo_specs)}"
    )


def create_spec(
    config: ProjectConfig,
    name: str,
    scope: str,
    content: str,
) -> tuple[bool, str]:
    """Write a new spec document."""
    if scope not in SPEC_SCOPES:
        return False, f"Invalid scope '{scope}' (valid: {', '.join(sorted(SPEC_SCOPES))})"

    valid, reason = validate_name(name)
    if not valid:
        return False, f"Invalid spec name '{name}': {reason}"

    path = spec_path(config, name)
    if path.exists():
        return False, f"Spec '{name}' already exists. Use a unique name."

    ensure_directory(path)
    written = FileStore().write_text(path, format_spec(name, scope, content or ""))
    if written == 0:
        return False, f"Failed to write spec '{name}' to disk. Please check permissions."
    logger.info("created %s spec %s", scope, path)
    return True, f"Spec '{name}' created ({scope} scope)."


def append_spec(config: ProjectConfig, plan: str, spec: str) -> tuple[bool, str]:
    """Add ``spec`` to the Required Specs of ``plan``.

    Safe to call concurrently for the same plan; already-listed specs are
    reported as success without touching the file.
    """
    for kind, name in (("plan", plan), ("spec", spec)):
        valid, reason = validate_name(name)
        if not valid:
            return False, f"Invalid {kind} name '{name}': {reason}"

    path = plan_path(config, plan)
    if not path.is_file():
        return False, f"Plan '{plan}' not found."
    if not spec_path(config, spec).is_file():
        return False, f"Spec '{spec}' not found."

    result = merge_entry(path, spec, attempts=config.merge_attempts)
    if not result.ok:
        logger.warning("append %s to %s failed: %s", spec, plan, result.reason)
        return False, f"Failed to append spec '{spec}' to plan '{plan}': {result.reason}"
    if not result.changed:
        return True, f"Spec '{spec}' already listed in plan '{plan}'."
    return True, f"Spec '{spec}' appended to plan '{plan}'."


def set_plan_status(config: ProjectConfig, name: str, status: str) -> tuple[bool, str]:
    """Rewrite a plan's frontmatter with a new status."""
    if status not in PLAN_STATUSES:
        return False, f"Invalid status '{status}' (valid: {', '.join(sorted(PLAN_STATUSES))})"

    valid, reason = validate_name(name)
    if not valid:
        return False, f"Invalid plan name '{name}': {reason}"

    path = plan_path(config, name)
    store = FileStore()
    content = store.read_text(path)
    if content is None:
        return False, f"Plan '{name}' not found."

    fields = parse_plan_frontmatter(content)
    old_status = fields.get("plan status", "<unset>")
    updated = normalize_plan_frontmatter(
        content,
        fields.get("plan name", name),
        fields.get("plan description", ""),
        status,
    )
    if updated == content:
        return True, f"{name}: status already {status}"
    if store.write_text(path, updated) == 0:
        return False, f"Failed to write plan '{name}' to disk. Please check permissions."
    return True, f"{name}: {old_status} -> {status}"


def read_plan(config: ProjectConfig, name: str) -> tuple[bool, str]:
    """Return the full text of a plan, or an error message."""
    valid, reason = validate_name(name)
    if not valid:
        return False, f"Invalid plan name '{name}': {reason}"
    content = FileStore().read_text(plan_path(config, name))
    if content is None:
        return False, f"Plan '{name}' not found."
    return True, content
