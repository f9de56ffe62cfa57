"""Tests for the planspec CLI.

Covers:
- Parser construction and --help for each command group
- Plan and spec commands against a temporary project
- Error exit codes
"""

import argparse
from unittest.mock import patch

import pytest

from planspec.cli import build_parser, main
from planspec.specblock.merge import read_entries

STEP_ARGS = [arg for i in range(5) for arg in ("--step", f"step {i}")]


def run(project, *argv):
    with patch("sys.argv", ["planspec", "--project", str(project), *argv]):
        return main()


# ── Parser construction ──────────────────────────────────────────


class TestParserConstruction:
    def test_build_parser_returns_parser(self):
        assert isinstance(build_parser(), argparse.ArgumentParser)

    def test_no_args_shows_help(self, capsys):
        with patch("sys.argv", ["planspec"]):
            rc = main()
        assert rc == 0
        assert "planspec" in capsys.readouterr().out

    @pytest.mark.parametrize("cmd", [
        ["--help"],
        ["plan", "--help"],
        ["spec", "--help"],
        ["spec", "append", "--help"],
    ])
    def test_help_exits_zero(self, cmd):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(cmd)
        assert exc_info.value.code == 0

    def test_steps_collect(self):
        args = build_parser().parse_args(
            ["plan", "create", "demo", "--description", "x y z"] + STEP_ARGS
        )
        assert args.steps == [f"step {i}" for i in range(5)]

    def test_group_without_subcommand_shows_help(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            run(tmp_path, "plan")
        assert exc_info.value.code == 0


# ── Plan commands ────────────────────────────────────────────────


class TestPlanCommands:
    def test_create_and_list(self, tmp_path, capsys):
        rc = run(
            tmp_path, "plan", "create", "demo",
            "--idea", "Ship it", "--description", "a short demo plan", *STEP_ARGS,
        )
        assert rc == 0
        assert "created" in capsys.readouterr().out

        assert run(tmp_path, "plan", "list") == 0
        out = capsys.readouterr().out
        assert "demo" in out
        assert "active" in out
        assert "1 plan(s)" in out

    def test_create_rejects_few_steps(self, tmp_path, capsys):
        rc = run(tmp_path, "plan", "create", "demo", "--description", "a short demo plan")
        assert rc == 1
        assert "ERROR" in capsys.readouterr().out

    def test_list_empty(self, tmp_path, capsys):
        assert run(tmp_path, "plan", "list") == 0
        assert "No plans found" in capsys.readouterr().out

    def test_show(self, tmp_path, capsys):
        run(tmp_path, "plan", "create", "demo", "--description", "a short demo plan", *STEP_ARGS)
        capsys.readouterr()
        assert run(tmp_path, "plan", "show", "demo") == 0
        out = capsys.readouterr().out
        assert "## Required Specs" in out
        assert "Required specs: none" in out

    def test_show_missing(self, tmp_path, capsys):
        assert run(tmp_path, "plan", "show", "demo") == 1
        assert "not found" in capsys.readouterr().out

    def test_status(self, tmp_path, capsys):
        run(tmp_path, "plan", "create", "demo", "--description", "a short demo plan", *STEP_ARGS)
        capsys.readouterr()
        assert run(tmp_path, "plan", "status", "demo", "completed") == 0
        assert "active -> completed" in capsys.readouterr().out


# ── Spec commands ────────────────────────────────────────────────


class TestSpecCommands:
    @pytest.fixture
    def plan_project(self, tmp_path):
        run(tmp_path, "plan", "create", "demo", "--description", "a short demo plan", *STEP_ARGS)
        run(tmp_path, "spec", "create", "style", "--scope", "repo", "--content", "Use black.")
        run(tmp_path, "spec", "create", "auth", "--scope", "feature")
        return tmp_path

    def test_list(self, plan_project, capsys):
        capsys.readouterr()
        assert run(plan_project, "spec", "list") == 0
        out = capsys.readouterr().out
        assert "auth" in out
        assert "style" in out
        assert "2 spec(s)" in out

    def test_list_repo_only(self, plan_project, capsys):
        capsys.readouterr()
        assert run(plan_project, "spec", "list", "--repo-only") == 0
        out = capsys.readouterr().out
        assert "style" in out
        assert "auth" not in out

    def test_append(self, plan_project, capsys):
        assert run(plan_project, "spec", "append", "demo", "style") == 0
        assert run(plan_project, "spec", "append", "demo", "auth") == 0
        assert run(plan_project, "spec", "append", "demo", "style") == 0
        out = capsys.readouterr().out
        assert "already listed" in out
        plan = plan_project / "docs" / "plans" / "demo.md"
        assert read_entries(plan) == ["style", "auth"]

    def test_append_missing_spec(self, plan_project, capsys):
        assert run(plan_project, "spec", "append", "demo", "ghost") == 1
        assert "not found" in capsys.readouterr().out

    def test_append_uses_configured_dirs(self, tmp_path, capsys):
        (tmp_path / ".planspec.yaml").write_text("plans_dir: plans\nspecs_dir: specs\n")
        run(tmp_path, "plan", "create", "demo", "--description", "a short demo plan", *STEP_ARGS)
        run(tmp_path, "spec", "create", "auth", "--scope", "feature")
        assert run(tmp_path, "spec", "append", "demo", "auth") == 0
        assert read_entries(tmp_path / "plans" / "demo.md") == ["auth"]
