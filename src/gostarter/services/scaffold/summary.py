"""Render run summaries and dry-run plans with Rich."""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ... import exec as exec_util
from ... import log
from ...models import StepOutcome
from .plan import ScaffoldPlan

_STATUS_STYLES = {
    "succeeded": "green",
    "skipped": "dim",
    "skipped_duplicate": "yellow",
    "failed": "red",
}


def render_summary(outcomes: Sequence[StepOutcome], console: Console | None = None) -> None:
    """Print one row per step: name, policy, status, detail."""
    if not outcomes:
        return
    table = Table(title="Provisioning summary", box=box.SIMPLE)
    table.add_column("Step")
    table.add_column("Policy")
    table.add_column("Status")
    table.add_column("Detail", overflow="fold")
    for outcome in outcomes:
        style = _STATUS_STYLES.get(outcome.status, "")
        table.add_row(
            Text(outcome.name),
            outcome.policy.replace("_", "-"),
            Text(outcome.status, style=style),
            Text(outcome.detail),
        )
    (console or log.console()).print(table)


def render_plan(plan: ScaffoldPlan, console: Console | None = None) -> None:
    """Print what a run would write and execute, without doing it."""
    out = console or log.console()
    out.print(f"Project directory: {plan.project_dir}", markup=False, highlight=False)

    files = Table(title="Files", box=box.SIMPLE)
    files.add_column("Path")
    files.add_column("Mode")
    for directory in plan.directories:
        files.add_row(Text(f"{directory}/"), "dir")
    for planned in plan.files:
        files.add_row(Text(str(planned.path)), "0755" if planned.executable else "0644")
    out.print(files)

    steps = Table(title="Steps", box=box.SIMPLE)
    steps.add_column("#", justify="right")
    steps.add_column("Step")
    steps.add_column("Policy")
    steps.add_column("Commands", overflow="fold")
    for index, step in enumerate(plan.steps, start=1):
        commands = "\n".join(exec_util.format_argv(argv) for argv in step.commands)
        steps.add_row(
            str(index), Text(step.name), step.policy.replace("_", "-"), Text(commands)
        )
    out.print(steps)

    out.print("Commit message:")
    out.print(plan.commit_message, markup=False, highlight=False)
