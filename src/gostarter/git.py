"""Git helper functions used by the scaffold provisioner."""

from pathlib import Path

from . import exec as exec_util
from .models import DEFAULT_BRANCH

HOOKS_DIR = ".githooks"


def git_command(args: list[str]) -> list[str]:
    """Build a git argv.

    Example:
        >>> git_command(["tag", "v0.1.0"])
        ['git', 'tag', 'v0.1.0']
    """
    return ["git", *args]


def init_repo(
    repo_dir: Path,
    *,
    branch: str = DEFAULT_BRANCH,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Initialize a repository whose first branch is ``branch``."""
    exec_util.run_checked(git_command(["init", "-q", "-b", branch]), cwd=repo_dir, runner=runner)


def set_hooks_path(
    repo_dir: Path,
    hooks_dir: str = HOOKS_DIR,
    *,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Point ``core.hooksPath`` at the tracked hooks directory."""
    exec_util.run_checked(
        git_command(["config", "core.hooksPath", hooks_dir]), cwd=repo_dir, runner=runner
    )


def add_all(repo_dir: Path, *, runner: exec_util.CommandRunner | None = None) -> None:
    exec_util.run_checked(git_command(["add", "-A"]), cwd=repo_dir, runner=runner)


def commit(
    repo_dir: Path, message: str, *, runner: exec_util.CommandRunner | None = None
) -> None:
    exec_util.run_checked(git_command(["commit", "-m", message]), cwd=repo_dir, runner=runner)


def push_branch(
    repo_dir: Path,
    branch: str = DEFAULT_BRANCH,
    *,
    remote: str = "origin",
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Push ``branch`` and set its upstream."""
    exec_util.run_checked(
        git_command(["push", "-u", remote, branch]), cwd=repo_dir, runner=runner
    )


def tag(repo_dir: Path, name: str, *, runner: exec_util.CommandRunner | None = None) -> None:
    exec_util.run_checked(git_command(["tag", name]), cwd=repo_dir, runner=runner)


def push_tag(
    repo_dir: Path,
    name: str,
    *,
    remote: str = "origin",
    runner: exec_util.CommandRunner | None = None,
) -> None:
    exec_util.run_checked(git_command(["push", remote, name]), cwd=repo_dir, runner=runner)
