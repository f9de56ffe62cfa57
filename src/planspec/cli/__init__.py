"""Unified CLI for planspec.

Usage:
    planspec plan create <name> --description "..." --idea "..." --step "..." [--step ...]
    planspec plan list
    planspec plan show <name>
    planspec plan status <name> {active|completed|abandoned}
    planspec spec create <name> --scope {repo|feature} [--content "..."]
    planspec spec list [--repo-only]
    planspec spec append <plan> <spec>
"""

import argparse
import logging
import sys

from planspec.cli.plan import (
    cmd_plan_create,
    cmd_plan_list,
    cmd_plan_show,
    cmd_plan_status,
)
from planspec.cli.spec import cmd_spec_append, cmd_spec_create, cmd_spec_list
from planspec.plans import PLAN_STATUSES, SPEC_SCOPES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="planspec",
        description="Manage plans, specs, and the specs each plan requires",
    )
    parser.add_argument(
        "--project", default=None,
        help="Project root (default: $PLANSPEC_PROJECT_DIR or cwd)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log merge attempts to stderr",
    )
    sub = parser.add_subparsers(dest="command")

    # plan
    plan = sub.add_parser("plan", help="Plan operations")
    plan_sub = plan.add_subparsers(dest="subcommand")

    create = plan_sub.add_parser("create", help="Create a plan")
    create.add_argument("name", help="Plan name ([A-Za-z0-9-], max 3 words)")
    create.add_argument("--idea", default="", help="Detailed plan idea")
    create.add_argument(
        "--description", required=True,
        help="Short description (3-10 words)",
    )
    create.add_argument(
        "--step", dest="steps", action="append", default=None,
        help="Implementation step (repeat, at least 5)",
    )

    plan_sub.add_parser("list", help="List plans")

    show = plan_sub.add_parser("show", help="Show a plan and its specs")
    show.add_argument("name")

    status = plan_sub.add_parser("status", help="Set a plan's status")
    status.add_argument("name")
    status.add_argument("status", choices=sorted(PLAN_STATUSES))

    # spec
    spec = sub.add_parser("spec", help="Spec operations")
    spec_sub = spec.add_subparsers(dest="subcommand")

    s_create = spec_sub.add_parser("create", help="Create a spec")
    s_create.add_argument("name", help="Spec name ([A-Za-z0-9-], max 3 words)")
    s_create.add_argument("--scope", required=True, choices=sorted(SPEC_SCOPES))
    s_create.add_argument("--content", default="", help="Spec body")

    s_list = spec_sub.add_parser("list", help="List specs")
    s_list.add_argument(
        "--repo-only", action="store_true",
        help="Only specs with repo scope",
    )

    s_append = spec_sub.add_parser(
        "append", help="Add a spec to a plan's Required Specs",
    )
    s_append.add_argument("plan", help="Plan name")
    s_append.add_argument("spec", help="Spec name")

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    # stdout is reserved for command output
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        ("plan", "create"): cmd_plan_create,
        ("plan", "list"): cmd_plan_list,
        ("plan", "show"): cmd_plan_show,
        ("plan", "status"): cmd_plan_status,
        ("spec", "create"): cmd_spec_create,
        ("spec", "list"): cmd_spec_list,
        ("spec", "append"): cmd_spec_append,
    }

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
