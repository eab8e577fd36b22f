"""Check that the external tools a scaffold run depends on are on PATH."""

from __future__ import annotations

import shutil
from typing import Callable

from ..errors import DependencyMissingError

Which = Callable[[str], str | None]

REQUIRED_TOOLS: tuple[tuple[str, str], ...] = (
    ("go", "Install Go 1.23+ first."),
    ("gh", "Install from https://cli.github.com"),
)


def check_prerequisites(*, which: Which = shutil.which) -> None:
    """Raise ``DependencyMissingError`` for the first missing required tool.

    Runs before any prompt or side effect.
    """
    for binary, install_hint in REQUIRED_TOOLS:
        if which(binary) is None:
            raise DependencyMissingError(f"{binary} not found", recovery_hint=install_hint)
