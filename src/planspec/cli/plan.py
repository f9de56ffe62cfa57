"""Plan CLI commands."""

import argparse

from planspec.config import load_config
from planspec.paths import project_root
from planspec.plans.actions import create_plan, read_plan, set_plan_status
from planspec.plans.templates import parse_plan_frontmatter
from planspec.plans.workspace import list_plans, plan_path
from planspec.specblock.merge import read_entries


def cmd_plan_create(args: argparse.Namespace) -> int:
    config = load_config(project_root(args.project))
    ok, message = create_plan(
        config, args.name, args.idea, args.description, args.steps or [],
    )
    if not ok:
        print(f"ERROR: {message}")
        return 1
    print(message)
    return 0


def cmd_plan_list(args: argparse.Namespace) -> int:
    config = load_config(project_root(args.project))
    plans = list_plans(config)
    if not plans:
        print(f"No plans found in {config.plans_path}")
        return 0

    print(f"\n  {'Name':<30} {'Status':<12} Description")
    print(f"  {'─' * 72}")
    for path in plans:
        fields = parse_plan_frontmatter(path.read_text(encoding="utf-8", errors="replace"))
        print(
            f"  {path.stem:<30} {fields.get('plan status', '?'):<12} "
            f"{fields.get('plan description', '')}"
        )
    print(f"\n  {len(plans)} plan(s)")
    return 0


def cmd_plan_show(args: argparse.Namespace) -> int:
    config = load_config(project_root(args.project))
    ok, content = read_plan(config, args.name)
    if not ok:
        print(f"ERROR: {content}")
        return 1

    print(content)
    specs = read_entries(plan_path(config, args.name))
    print(f"\n{'─' * 40}")
    if specs is None:
        print("  WARNING: plan has no Required Specs section")
    else:
        print(f"  Required specs: {', '.join(specs) if specs else 'none'}")
    return 0


def cmd_plan_status(args: argparse.Namespace) -> int:
    config = load_config(project_root(args.project))
    ok, message = set_plan_status(config, args.name, args.status)
    if not ok:
        print(f"ERROR: {message}")
        return 1
    print(message)
    return 0
