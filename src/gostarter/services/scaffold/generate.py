"""Write the planned scaffold to disk."""

from __future__ import annotations

from pathlib import Path

from ..errors import IoFailedError
from .plan import ScaffoldPlan

EXECUTABLE_MODE = 0o755


def generate_files(plan: ScaffoldPlan) -> list[Path]:
    """Create the directory tree, then write every planned file.

    The project directory itself must not exist yet.

    Returns:
        Absolute paths of the files written, in order.

    Raises:
        IoFailedError: When the target exists or a write fails.
    """
    root = plan.project_dir
    try:
        root.mkdir(parents=True, exist_ok=False)
        for directory in plan.directories:
            root.joinpath(directory).mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for planned in plan.files:
            target = root.joinpath(planned.path)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(planned.content, encoding="utf-8")
            if planned.executable:
                target.chmod(EXECUTABLE_MODE)
            written.append(target)
    except FileExistsError as exc:
        raise IoFailedError(
            f"directory already exists: {root}",
            recovery_hint="Choose another project name or parent directory.",
        ) from exc
    except (OSError, UnicodeError) as exc:
        raise IoFailedError(
            f"failed to write scaffold under {root}: {exc}",
            recovery_hint=f"Check permissions, then remove {root} before retrying.",
        ) from exc
    return written
