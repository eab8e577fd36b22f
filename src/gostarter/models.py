"""Pydantic models for scaffold parameters, defaults, and run records."""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

DEFAULT_VERSION = "v0.1.0"
DEFAULT_BRANCH = "main"
MODULE_HOST = "github.com"

StepPolicy = Literal["required", "best_effort"]
StepStatus = Literal["succeeded", "skipped", "skipped_duplicate", "failed"]

_PROJECT_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")
_OWNER_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?$")
_INVALID_REF_RE = re.compile(r"[\s\x00-\x1f\x7f~^:?*\[\\]|\.\.|@\{")


def parse_toggle(raw: str | None, *, default: bool) -> bool:
    """Interpret a free-text yes/no answer.

    Toggles that default on stay on unless the answer is ``n``; toggles that
    default off stay off unless the answer is ``y``. Case and surrounding
    whitespace are ignored.

    Example:
        >>> parse_toggle("", default=True)
        True
        >>> parse_toggle("N", default=True)
        False
        >>> parse_toggle("no", default=True)
        True
        >>> parse_toggle("Y", default=False)
        True
        >>> parse_toggle("yes", default=False)
        False
    """
    answer = (raw or "").strip().lower()
    if default:
        return answer != "n"
    return answer == "y"


def is_valid_ref_name(value: str) -> bool:
    """Return true when ``value`` is usable as a git tag name.

    Example:
        >>> is_valid_ref_name("v0.1.0")
        True
        >>> is_valid_ref_name("v1 beta")
        False
    """
    if not value or value.startswith(("-", "/", ".")):
        return False
    if value.endswith(("/", ".", ".lock")) or value == "@":
        return False
    return _INVALID_REF_RE.search(value) is None


class LabelSpec(BaseModel):
    """Issue label created on the remote repository.

    Example:
        >>> LabelSpec(name="type:bug", color="D73A4A").color
        'D73A4A'
    """

    model_config = ConfigDict(frozen=True)

    name: str
    color: str


DEFAULT_LABELS: tuple[LabelSpec, ...] = (
    LabelSpec(name="priority:high", color="D93F0B"),
    LabelSpec(name="priority:low", color="0E8A16"),
    LabelSpec(name="type:bug", color="D73A4A"),
    LabelSpec(name="type:feature", color="0075CA"),
    LabelSpec(name="type:refactor", color="CFD3D7"),
)


class ScaffoldParams(BaseModel):
    """Parameter record for one scaffold run.

    The record is frozen: once validated it is only read.

    Attributes:
        project_name: Directory name, module path segment, and binary name.
        owner: GitHub user or organization.
        description: Free-text description (may be empty).
        version: Initial version; used as the milestone title and tag.
        create_readme: Whether to write ``README.md``.
        create_ci: Whether to write the GitHub Actions workflow.
        create_project_board: Whether to create a GitHub Project.
        private_repo: Whether the remote repository is private.

    Example:
        >>> params = ScaffoldParams(project_name="myctl", owner="acme", version="")
        >>> params.version
        'v0.1.0'
        >>> params.module_path
        'github.com/acme/myctl'
        >>> params.visibility_flag
        '--public'
    """

    model_config = ConfigDict(frozen=True)

    project_name: str
    owner: str
    description: str = ""
    version: str = DEFAULT_VERSION
    create_readme: bool = True
    create_ci: bool = True
    create_project_board: bool = False
    private_repo: bool = False

    @field_validator("project_name", "owner", "description", "version", mode="before")
    @classmethod
    def strip_strings(cls, value: object, info: ValidationInfo) -> object:
        if value is None:
            return ""
        if isinstance(value, str):
            try:
                value.encode("utf-8")
            except UnicodeEncodeError as exc:
                label = (info.field_name or "value").replace("_", " ")
                raise ValueError(f"{label} must be valid UTF-8") from exc
            return value.strip()
        return value

    @field_validator("project_name")
    @classmethod
    def validate_project_name(cls, value: str) -> str:
        if not value:
            raise ValueError("project name is required")
        if not _PROJECT_NAME_RE.match(value):
            raise ValueError(
                "project name may only contain letters, digits, '.', '_' and '-',"
                " and must start with a letter or digit"
            )
        return value

    @field_validator("owner")
    @classmethod
    def validate_owner(cls, value: str) -> str:
        if not value:
            raise ValueError("GitHub owner is required")
        if not _OWNER_RE.match(value):
            raise ValueError(
                "GitHub owner may only contain letters, digits and single hyphens"
            )
        return value

    @field_validator("version")
    @classmethod
    def default_version(cls, value: str) -> str:
        if not value:
            return DEFAULT_VERSION
        if not is_valid_ref_name(value):
            raise ValueError(f"version is not a valid tag name: {value!r}")
        return value

    @property
    def module_path(self) -> str:
        return f"{MODULE_HOST}/{self.owner}/{self.project_name}"

    @property
    def repo_slug(self) -> str:
        return f"{self.owner}/{self.project_name}"

    @property
    def repo_url(self) -> str:
        return f"https://{MODULE_HOST}/{self.repo_slug}"

    @property
    def visibility_flag(self) -> str:
        return "--private" if self.private_repo else "--public"


class UserDefaults(BaseModel):
    """Prompt defaults stored in the user config directory.

    Example:
        >>> UserDefaults(owner=" acme ").owner
        'acme'
    """

    model_config = ConfigDict(extra="allow")

    owner: str | None = None
    version: str | None = None

    @field_validator("owner", "version", mode="before")
    @classmethod
    def normalize_optional_strings(cls, value: object) -> object:
        if value is None:
            return None
        if isinstance(value, str):
            normalized = value.strip()
            return normalized or None
        return value


class StepOutcome(BaseModel):
    """Result of one provisioning step."""

    key: str
    name: str
    policy: StepPolicy
    status: StepStatus
    detail: str = ""


class GithubMilestone(BaseModel):
    """Subset of the milestone payload returned by ``gh api``."""

    model_config = ConfigDict(extra="ignore")

    number: int
    title: str
    html_url: str | None = None


class RunManifest(BaseModel):
    """Record of a scaffold run, written for the operator after every run."""

    params: ScaffoldParams
    project_dir: str
    started_at: str
    finished_at: str | None = None
    completed: bool = False
    remote_url: str | None = None
    error: str | None = None
    outcomes: list[StepOutcome] = Field(default_factory=list)
