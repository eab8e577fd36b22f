"""Collect the scaffold parameter record from flags, defaults, and prompts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pydantic import ValidationError

from ...models import DEFAULT_VERSION, ScaffoldParams, UserDefaults
from ..errors import ValidationFailedError

AskText = Callable[..., str]
AskToggle = Callable[[str, bool], bool]


@dataclass(frozen=True)
class ParamOverrides:
    """Values supplied on the command line; ``None`` means "ask or default".

    Attributes:
        project_name: Project name override.
        owner: GitHub owner override.
        description: Description override.
        version: Initial version override.
        create_readme: README toggle override.
        create_ci: CI workflow toggle override.
        create_project_board: Project board toggle override.
        private_repo: Visibility toggle override.
    """

    project_name: str | None = None
    owner: str | None = None
    description: str | None = None
    version: str | None = None
    create_readme: bool | None = None
    create_ci: bool | None = None
    create_project_board: bool | None = None
    private_repo: bool | None = None


_FIELD_HINTS = {
    "project_name": "Provide a project name and --owner, or run interactively.",
    "owner": "Provide a project name and --owner, or run interactively.",
    "description": "Pass --description as UTF-8 text.",
    "version": "Use a tag name such as v0.1.0 (check --version and GOSTARTER_VERSION).",
}


def _recovery_hint(exc: ValidationError) -> str:
    hints: list[str] = []
    for error in exc.errors():
        loc = error.get("loc") or ("",)
        hint = _FIELD_HINTS.get(str(loc[0]))
        if hint and hint not in hints:
            hints.append(hint)
    return " ".join(hints) or _FIELD_HINTS["project_name"]


def _format_validation_error(exc: ValidationError) -> str:
    messages: list[str] = []
    for error in exc.errors():
        message = str(error.get("msg", "invalid value"))
        messages.append(message.removeprefix("Value error, "))
    return "; ".join(messages) or "invalid parameters"


def collect_params(
    overrides: ParamOverrides,
    *,
    defaults: UserDefaults,
    interactive: bool,
    ask_text: AskText,
    ask_toggle: AskToggle,
) -> ScaffoldParams:
    """Build the frozen parameter record before any side effect.

    Prompts run in a fixed order and only for values not given as flags.
    Non-interactive runs take toggle defaults and require name and owner.

    Raises:
        ValidationFailedError: When a required value is missing or invalid.
    """

    def text(value: str | None, label: str, default: str | None = None, **kwargs) -> str:
        if value is not None:
            return value
        if not interactive:
            return default or ""
        return ask_text(label, default, **kwargs)

    def toggle(value: bool | None, label: str, default: bool) -> bool:
        if value is not None:
            return value
        if not interactive:
            return default
        return ask_toggle(label, default)

    project_name = text(overrides.project_name, "Project name (e.g., myctl)", required=True)
    owner = text(overrides.owner, "GitHub owner (user/org)", defaults.owner, required=True)
    description = text(overrides.description, "Short description", allow_empty=True)
    version = text(overrides.version, "Initial version", defaults.version or DEFAULT_VERSION)
    create_readme = toggle(overrides.create_readme, "Create minimal README?", True)
    create_ci = toggle(overrides.create_ci, "Create GitHub Actions CI?", True)
    create_project_board = toggle(
        overrides.create_project_board, "Create GitHub Project board?", False
    )
    private_repo = toggle(overrides.private_repo, "Private repo?", False)

    try:
        return ScaffoldParams(
            project_name=project_name,
            owner=owner,
            description=description,
            version=version,
            create_readme=create_readme,
            create_ci=create_ci,
            create_project_board=create_project_board,
            private_repo=private_repo,
        )
    except ValidationError as exc:
        raise ValidationFailedError(
            _format_validation_error(exc),
            recovery_hint=_recovery_hint(exc),
        ) from exc
