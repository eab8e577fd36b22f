"""Side-effect-free description of everything a scaffold run will do."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Literal

from ... import github, gotool, paths, templates
from ...git import HOOKS_DIR
from ...models import DEFAULT_BRANCH, DEFAULT_LABELS, LabelSpec, ScaffoldParams, StepPolicy
from ..errors import ValidationFailedError

StepKey = Literal[
    "write_files",
    "go_mod_init",
    "go_get",
    "go_mod_tidy",
    "install_tool",
    "git_init",
    "git_hooks_path",
    "repo_create",
    "label",
    "milestone",
    "project_board",
    "commit",
    "push",
    "tag",
]

COMMIT_SUBJECT = "feat: initial project scaffold"
_COMMIT_BASE_BULLETS = (
    "Set up Go module structure",
    "Add Cobra CLI framework",
    "Configure linters and pre-commit hooks",
    "Add Makefile with check/test/build targets",
)
CI_WORKFLOW_PATH = ".github/workflows/ci.yml"


@dataclass(frozen=True)
class PlannedFile:
    """One generated file, relative to the project directory."""

    path: PurePosixPath
    content: str
    executable: bool = False


@dataclass(frozen=True)
class PlannedStep:
    """One provisioning step in execution order.

    Attributes:
        key: Handler selector.
        name: Label used in progress output and the summary.
        policy: ``required`` aborts the run on failure; ``best_effort`` does not.
        commands: The argv lists the step runs, for dry-run display.
        announce: Progress line printed before the step, when set.
        label: Label for ``label`` steps.
        tool: Developer tool for ``install_tool`` steps.
    """

    key: StepKey
    name: str
    policy: StepPolicy
    commands: tuple[tuple[str, ...], ...] = ()
    announce: str | None = None
    label: LabelSpec | None = None
    tool: gotool.DevTool | None = None


def commit_message(params: ScaffoldParams) -> str:
    """Build the initial commit message, listing the optional files included.

    Example:
        >>> params = ScaffoldParams(project_name="x", owner="o", create_ci=False)
        >>> commit_message(params).splitlines()[-1]
        '- Add README with usage instructions'
    """
    bullets = list(_COMMIT_BASE_BULLETS)
    if params.create_ci:
        bullets.append("Configure GitHub Actions CI")
    if params.create_readme:
        bullets.append("Add README with usage instructions")
    body = "\n".join(f"- {bullet}" for bullet in bullets)
    return f"{COMMIT_SUBJECT}\n\n{body}"


TEMPLATE_RESET_HINT = (
    "Fix the override, or restore the packaged templates with"
    " `gostarter template install --force`."
)


def _template_text(parts: tuple[str, ...], **values: str) -> str:
    """Read one template and substitute ``values`` into it, when given.

    Raises:
        ValidationFailedError: When the template cannot be read or an edited
            override has a stray ``$`` or an unknown placeholder.
    """
    try:
        result = templates.read_template_result(*parts)
    except templates.TemplateReadError as exc:
        raise ValidationFailedError(str(exc), recovery_hint=TEMPLATE_RESET_HINT) from exc
    except UnicodeDecodeError as exc:
        location = paths.installed_templates_dir().joinpath(*parts)
        raise ValidationFailedError(
            f"template {location} is not valid UTF-8", recovery_hint=TEMPLATE_RESET_HINT
        ) from exc
    if not values:
        return result.text
    try:
        return templates.render(result.text, **values)
    except KeyError as exc:
        raise ValidationFailedError(
            f"template {result.path} uses unknown placeholder {exc}",
            recovery_hint=TEMPLATE_RESET_HINT,
        ) from exc
    except ValueError as exc:
        raise ValidationFailedError(
            f"template {result.path}: {exc}", recovery_hint=TEMPLATE_RESET_HINT
        ) from exc


def render_files(params: ScaffoldParams) -> tuple[PlannedFile, ...]:
    """Render every file the scaffold writes, in creation order."""
    name = params.project_name
    files = [
        PlannedFile(
            PurePosixPath("cmd", name, "main.go"),
            _template_text(
                templates.MAIN_GO,
                use_literal=templates.go_string_literal(name),
                short_literal=templates.go_string_literal(params.description),
            ),
        ),
        PlannedFile(PurePosixPath("Makefile"), _template_text(templates.MAKEFILE)),
        PlannedFile(
            PurePosixPath(HOOKS_DIR, "pre-commit"),
            _template_text(templates.PRE_COMMIT),
            executable=True,
        ),
        PlannedFile(PurePosixPath(".gitignore"), _template_text(templates.GITIGNORE)),
        PlannedFile(PurePosixPath(".golangci.yml"), _template_text(templates.GOLANGCI)),
    ]
    if params.create_readme:
        files.append(
            PlannedFile(
                PurePosixPath("README.md"),
                _template_text(
                    templates.README,
                    project_name=name,
                    description=templates.markdown_text(params.description),
                    module_path=params.module_path,
                ),
            )
        )
    if params.create_ci:
        files.append(
            PlannedFile(PurePosixPath(CI_WORKFLOW_PATH), _template_text(templates.CI_WORKFLOW))
        )
    return tuple(files)


def planned_directories(params: ScaffoldParams) -> tuple[PurePosixPath, ...]:
    """Directories created before any file is written.

    Example:
        >>> params = ScaffoldParams(project_name="myctl", owner="acme")
        >>> [str(p) for p in planned_directories(params)]
        ['cmd/myctl', 'internal', 'pkg', 'testdata', '.githooks', '.github/workflows']
    """
    dirs = [
        PurePosixPath("cmd", params.project_name),
        PurePosixPath("internal"),
        PurePosixPath("pkg"),
        PurePosixPath("testdata"),
        PurePosixPath(HOOKS_DIR),
    ]
    if params.create_ci:
        dirs.append(PurePosixPath(CI_WORKFLOW_PATH).parent)
    return tuple(dirs)


def planned_steps(params: ScaffoldParams) -> tuple[PlannedStep, ...]:
    """Return the provisioning steps in their fixed order."""
    steps: list[PlannedStep] = [
        PlannedStep("write_files", "Write scaffold files", "required"),
        PlannedStep(
            "go_mod_init",
            "Initialize Go module",
            "required",
            commands=(("go", "mod", "init", params.module_path),),
        ),
        PlannedStep(
            "go_get",
            f"Add {gotool.COBRA_MODULE}",
            "required",
            commands=(("go", "get", gotool.COBRA_MODULE),),
            announce="Installing dependencies...",
        ),
        PlannedStep(
            "go_mod_tidy",
            "Tidy Go module",
            "required",
            commands=(("go", "mod", "tidy"),),
        ),
    ]
    for index, tool in enumerate(gotool.DEV_TOOLS):
        steps.append(
            PlannedStep(
                "install_tool",
                f"Install {tool.binary}",
                "best_effort",
                commands=(("go", "install", tool.package),),
                announce="Installing development tools..." if index == 0 else None,
                tool=tool,
            )
        )
    steps.extend(
        (
            PlannedStep(
                "git_init",
                "Initialize git repository",
                "required",
                commands=(("git", "init", "-q", "-b", DEFAULT_BRANCH),),
            ),
            PlannedStep(
                "git_hooks_path",
                "Configure git hooks path",
                "required",
                commands=(("git", "config", "core.hooksPath", HOOKS_DIR),),
            ),
            PlannedStep(
                "repo_create",
                f"Create GitHub repository {params.repo_slug}",
                "required",
                commands=(tuple(github.repo_create_command(params)),),
                announce="Creating GitHub repository...",
            ),
        )
    )
    for index, label in enumerate(DEFAULT_LABELS):
        steps.append(
            PlannedStep(
                "label",
                f"Create label {label.name}",
                "best_effort",
                commands=(tuple(github.label_create_command(label)),),
                announce="Creating labels..." if index == 0 else None,
                label=label,
            )
        )
    steps.append(
        PlannedStep(
            "milestone",
            f"Create milestone {params.version}",
            "best_effort",
            commands=(tuple(github.milestone_create_command(params.repo_slug, params.version)),),
            announce=f"Creating milestone {params.version}...",
        )
    )
    if params.create_project_board:
        steps.append(
            PlannedStep(
                "project_board",
                "Create GitHub Project",
                "best_effort",
                commands=(
                    tuple(github.project_create_command(params.owner, params.project_name)),
                ),
                announce="Creating GitHub Project...",
            )
        )
    steps.extend(
        (
            PlannedStep(
                "commit",
                "Create initial commit",
                "required",
                commands=(("git", "add", "-A"), ("git", "commit", "-m", COMMIT_SUBJECT)),
                announce="Creating initial commit...",
            ),
            PlannedStep(
                "push",
                f"Push {DEFAULT_BRANCH}",
                "required",
                commands=(("git", "push", "-u", "origin", DEFAULT_BRANCH),),
            ),
            PlannedStep(
                "tag",
                f"Tag {params.version}",
                "required",
                commands=(
                    ("git", "tag", params.version),
                    ("git", "push", "origin", params.version),
                ),
                announce=f"Creating version tag {params.version}...",
            ),
        )
    )
    return tuple(steps)


@dataclass(frozen=True)
class ScaffoldPlan:
    """Everything a run will write and execute, computed up front."""

    params: ScaffoldParams
    project_dir: Path
    directories: tuple[PurePosixPath, ...]
    files: tuple[PlannedFile, ...]
    steps: tuple[PlannedStep, ...]
    commit_message: str

    @classmethod
    def build(cls, params: ScaffoldParams, parent_dir: Path) -> ScaffoldPlan:
        return cls(
            params=params,
            project_dir=parent_dir / params.project_name,
            directories=planned_directories(params),
            files=render_files(params),
            steps=planned_steps(params),
            commit_message=commit_message(params),
        )

    def validate(self) -> None:
        """Refuse to run against an existing target directory."""
        if self.project_dir.exists():
            raise ValidationFailedError(
                f"directory already exists: {self.project_dir}",
                recovery_hint="Choose another project name or parent directory.",
            )

    def file(self, relative: str) -> PlannedFile | None:
        """Return the planned file at ``relative``, if any."""
        target = PurePosixPath(relative)
        return next((item for item in self.files if item.path == target), None)
