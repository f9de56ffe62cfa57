"""Spec CLI commands."""

import argparse

from planspec.config import load_config
from planspec.paths import project_root
from planspec.plans.actions import append_spec, create_spec
from planspec.plans.workspace import list_repo_specs, list_specs


def cmd_spec_create(args: argparse.Namespace) -> int:
    config = load_config(project_root(args.project))
    ok, message = create_spec(config, args.name, args.scope, args.content)
    if not ok:
        print(f"ERROR: {message}")
        return 1
    print(message)
    return 0


def cmd_spec_list(args: argparse.Namespace) -> int:
    config = load_config(project_root(args.project))
    repo_specs = set(list_repo_specs(config))
    names = [p.stem for p in list_specs(config)]
    if args.repo_only:
        names = [n for n in names if n in repo_specs]

    if not names:
        print("No specs match.")
        return 0
    for name in names:
        scope = "repo" if name in repo_specs else "feature"
        print(f"  {name:<30} {scope}")
    print(f"\n  {len(names)} spec(s)")
    return 0


def cmd_spec_append(args: argparse.Namespace) -> int:
    config = load_config(project_root(args.project))
    ok, message = append_spec(config, args.plan, args.spec)
    if not ok:
        print(f"ERROR: {message}")
        return 1
    print(message)
    return 0
