"""Go toolchain helpers used while provisioning a scaffold."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from . import exec as exec_util

COBRA_MODULE = "github.com/spf13/cobra"


@dataclass(frozen=True)
class DevTool:
    """Developer tool installed with ``go install`` when missing."""

    binary: str
    package: str


DEV_TOOLS: tuple[DevTool, ...] = (
    DevTool("staticcheck", "honnef.co/go/tools/cmd/staticcheck@latest"),
    DevTool("golangci-lint", "github.com/golangci/golangci-lint/cmd/golangci-lint@latest"),
)


def mod_init(
    module_path: str, *, cwd: Path, runner: exec_util.CommandRunner | None = None
) -> str:
    """Create ``go.mod`` for ``module_path``."""
    return exec_util.run_checked(["go", "mod", "init", module_path], cwd=cwd, runner=runner)


def get(
    module: str, *, cwd: Path, runner: exec_util.CommandRunner | None = None
) -> str:
    """Add ``module`` to the manifest."""
    return exec_util.run_checked(["go", "get", module], cwd=cwd, runner=runner)


def mod_tidy(*, cwd: Path, runner: exec_util.CommandRunner | None = None) -> str:
    """Reconcile ``go.mod``/``go.sum`` with the sources."""
    return exec_util.run_checked(["go", "mod", "tidy"], cwd=cwd, runner=runner)


def tool_installed(tool: DevTool, *, which: Callable[[str], str | None] = shutil.which) -> bool:
    return which(tool.binary) is not None


def install(
    tool: DevTool, *, cwd: Path, runner: exec_util.CommandRunner | None = None
) -> exec_util.CommandResult | None:
    """Run ``go install`` for ``tool``; the caller decides what failure means."""
    return exec_util.try_run(["go", "install", tool.package], cwd=cwd, runner=runner)
