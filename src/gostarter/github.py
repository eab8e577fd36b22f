"""GitHub CLI helpers for creating the remote repository and its metadata."""

from __future__ import annotations

from pathlib import Path

from . import exec as exec_util
from .models import GithubMilestone, LabelSpec, ScaffoldParams

MILESTONE_DESCRIPTION = "Initial release"
_ALREADY_EXISTS_MARKERS = (
    "already exists",
    "already_exists",
)


def is_already_exists(output: str) -> bool:
    """Return true when ``gh`` output reports a duplicate resource.

    Example:
        >>> is_already_exists('{"resource":"Milestone","code":"already_exists"}')
        True
        >>> is_already_exists("HTTP 401: Bad credentials")
        False
    """
    lowered = output.lower()
    return any(marker in lowered for marker in _ALREADY_EXISTS_MARKERS)


def repo_create_command(params: ScaffoldParams) -> list[str]:
    """Build the ``gh repo create`` argv linking the local repo as ``origin``.

    Example:
        >>> params = ScaffoldParams(project_name="myctl", owner="acme", description="demo tool")
        >>> repo_create_command(params)[:4]
        ['gh', 'repo', 'create', 'acme/myctl']
    """
    return [
        "gh",
        "repo",
        "create",
        params.repo_slug,
        "--description",
        params.description,
        params.visibility_flag,
        "--source",
        ".",
        "--remote",
        "origin",
    ]


def create_repo(
    params: ScaffoldParams, *, cwd: Path, runner: exec_util.CommandRunner | None = None
) -> str:
    """Create the remote repository and return whatever URL ``gh`` printed."""
    return exec_util.run_checked(repo_create_command(params), cwd=cwd, runner=runner)


def label_create_command(label: LabelSpec) -> list[str]:
    return ["gh", "label", "create", label.name, "--color", label.color, "--force"]


def create_label(
    label: LabelSpec, *, cwd: Path, runner: exec_util.CommandRunner | None = None
) -> exec_util.CommandResult | None:
    """Create or update ``label``; ``--force`` makes re-creation succeed."""
    return exec_util.try_run(label_create_command(label), cwd=cwd, runner=runner)


def milestone_create_command(repo_slug: str, title: str) -> list[str]:
    return [
        "gh",
        "api",
        f"repos/{repo_slug}/milestones",
        "-f",
        f"title={title}",
        "-f",
        f"description={MILESTONE_DESCRIPTION}",
        "-f",
        "state=open",
    ]


def create_milestone(
    repo_slug: str,
    title: str,
    *,
    cwd: Path,
    runner: exec_util.CommandRunner | None = None,
) -> exec_util.CommandResult | None:
    return exec_util.try_run(milestone_create_command(repo_slug, title), cwd=cwd, runner=runner)


def parse_milestone(result: exec_util.CommandResult) -> GithubMilestone:
    """Parse the ``gh api`` milestone response."""
    return exec_util.parse_json_model(result, model_type=GithubMilestone, context="milestone")


def project_create_command(owner: str, title: str) -> list[str]:
    return ["gh", "project", "create", "--owner", owner, "--title", title]


def create_project(
    owner: str,
    title: str,
    *,
    cwd: Path,
    runner: exec_util.CommandRunner | None = None,
) -> exec_util.CommandResult | None:
    return exec_util.try_run(project_create_command(owner, title), cwd=cwd, runner=runner)


def project_fallback_url(params: ScaffoldParams) -> str:
    """Return the page where a project board can be created by hand.

    Example:
        >>> project_fallback_url(ScaffoldParams(project_name="myctl", owner="acme"))
        'https://github.com/acme/myctl/projects/new'
    """
    return f"{params.repo_url}/projects/new"
