"""Run the scaffold plan: write files, then drive go, git, and gh in order.

Required steps abort the run on failure with a ``ServiceFailure``.
Best-effort steps never raise; each returns a ``StepOutcome`` that ends up in
the summary and the run manifest. Nothing is rolled back.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from ... import config, github, gotool, log
from ... import exec as exec_util
from ... import git as git_util
from ...io import warn
from ...models import RunManifest, StepOutcome, StepStatus
from ..base import BaseService
from ..errors import ExternalCommandFailedError, ServiceFailure
from ..result import ServiceSuccess, service_success
from .generate import generate_files
from .plan import PlannedStep, ScaffoldPlan
from .summary import render_summary

Which = Callable[[str], str | None]
Clock = Callable[[], str]
Reporter = Callable[[Sequence[StepOutcome]], None]


@dataclass(frozen=True)
class ProvisionRequest:
    """Input for one provisioning run.

    Attributes:
        plan: Validated plan to execute.
        manifest_path: Where to record the run; ``None`` skips the manifest.
    """

    plan: ScaffoldPlan
    manifest_path: Path | None = None


@dataclass(frozen=True)
class ProvisionOutcome:
    project_dir: Path
    outcomes: tuple[StepOutcome, ...]
    remote_url: str
    manifest_path: Path | None


class ProvisionService(BaseService[ProvisionRequest, ServiceSuccess[ProvisionOutcome]]):
    """Execute planned steps strictly in order with an explicit working directory."""

    def __init__(
        self,
        *,
        runner: exec_util.CommandRunner | None = None,
        which: Which = shutil.which,
        clock: Clock = config.utc_now,
        report: Reporter = render_summary,
    ) -> None:
        self._runner = runner
        self._which = which
        self._clock = clock
        self._report = report

    def _run(self, request: ProvisionRequest) -> ServiceSuccess[ProvisionOutcome]:
        plan = request.plan
        manifest = RunManifest(
            params=plan.params,
            project_dir=str(plan.project_dir),
            started_at=self._clock(),
        )
        outcomes: list[StepOutcome] = []
        remote_url = plan.params.repo_url
        try:
            for step in plan.steps:
                if step.announce:
                    log.info(step.announce)
                status, detail = self._execute(step, plan, outcomes)
                outcomes.append(_outcome(step, status, detail))
                if step.key == "repo_create":
                    remote_url = detail
            manifest.completed = True
        except ServiceFailure as exc:
            manifest.error = str(exc)
            exc.recovery_hint = _recovery_hint(plan, outcomes, request.manifest_path, exc)
            raise
        finally:
            manifest.outcomes = list(outcomes)
            if _succeeded(outcomes, "repo_create"):
                manifest.remote_url = remote_url
            manifest.finished_at = self._clock()
            self._report(outcomes)
            if request.manifest_path is not None:
                _write_manifest(request.manifest_path, manifest)

        return service_success(
            ProvisionOutcome(
                project_dir=plan.project_dir,
                outcomes=tuple(outcomes),
                remote_url=remote_url,
                manifest_path=request.manifest_path,
            )
        )

    def _execute(
        self, step: PlannedStep, plan: ScaffoldPlan, outcomes: list[StepOutcome]
    ) -> tuple[StepStatus, str]:
        if step.policy == "required":
            try:
                return "succeeded", self._required(step, plan)
            except exec_util.CommandExecutionError as exc:
                outcomes.append(_outcome(step, "failed", _first_line(str(exc))))
                raise ExternalCommandFailedError(f"{step.name}: {exc}") from exc
            except ServiceFailure as exc:
                outcomes.append(_outcome(step, "failed", _first_line(str(exc))))
                raise
        return self._best_effort(step, plan)

    def _required(self, step: PlannedStep, plan: ScaffoldPlan) -> str:
        cwd = plan.project_dir
        params = plan.params
        runner = self._runner
        if step.key == "write_files":
            written = generate_files(plan)
            return f"{len(written)} files under {cwd}"
        if step.key == "go_mod_init":
            gotool.mod_init(params.module_path, cwd=cwd, runner=runner)
            return params.module_path
        if step.key == "go_get":
            gotool.get(gotool.COBRA_MODULE, cwd=cwd, runner=runner)
            return gotool.COBRA_MODULE
        if step.key == "go_mod_tidy":
            gotool.mod_tidy(cwd=cwd, runner=runner)
            return ""
        if step.key == "git_init":
            git_util.init_repo(cwd, runner=runner)
            return ""
        if step.key == "git_hooks_path":
            git_util.set_hooks_path(cwd, runner=runner)
            return git_util.HOOKS_DIR
        if step.key == "repo_create":
            output = github.create_repo(params, cwd=cwd, runner=runner)
            return _first_url(output) or params.repo_url
        if step.key == "commit":
            git_util.add_all(cwd, runner=runner)
            git_util.commit(cwd, plan.commit_message, runner=runner)
            return ""
        if step.key == "push":
            git_util.push_branch(cwd, runner=runner)
            return ""
        if step.key == "tag":
            git_util.tag(cwd, params.version, runner=runner)
            git_util.push_tag(cwd, params.version, runner=runner)
            return params.version
        raise ValueError(f"unknown required step: {step.key}")

    def _best_effort(self, step: PlannedStep, plan: ScaffoldPlan) -> tuple[StepStatus, str]:
        cwd = plan.project_dir
        params = plan.params
        runner = self._runner
        if step.key == "install_tool":
            assert step.tool is not None
            if gotool.tool_installed(step.tool, which=self._which):
                return "skipped", "already on PATH"
            return _classify(gotool.install(step.tool, cwd=cwd, runner=runner))
        if step.key == "label":
            assert step.label is not None
            return _classify(github.create_label(step.label, cwd=cwd, runner=runner))
        if step.key == "milestone":
            result = github.create_milestone(
                params.repo_slug, params.version, cwd=cwd, runner=runner
            )
            status, detail = _classify(result)
            if status == "succeeded" and result is not None:
                try:
                    milestone = github.parse_milestone(result)
                except exec_util.CommandParseError as exc:
                    log.debug(str(exc))
                else:
                    detail = milestone.html_url or f"#{milestone.number} {milestone.title}"
            return status, detail
        if step.key == "project_board":
            status, detail = _classify(
                github.create_project(params.owner, params.project_name, cwd=cwd, runner=runner)
            )
            if status == "failed":
                fallback = github.project_fallback_url(params)
                warn("Could not create project automatically.")
                warn(f"Create manually: {fallback}")
                detail = f"create manually: {fallback}"
            return status, detail
        raise ValueError(f"unknown best-effort step: {step.key}")


def _outcome(step: PlannedStep, status: StepStatus, detail: str) -> StepOutcome:
    return StepOutcome(
        key=step.key, name=step.name, policy=step.policy, status=status, detail=detail
    )


def _classify(result: exec_util.CommandResult | None) -> tuple[StepStatus, str]:
    if result is None:
        return "failed", "command not found"
    if result.ok:
        return "succeeded", _first_line(result.stdout)
    if github.is_already_exists(f"{result.stdout}\n{result.stderr}"):
        return "skipped_duplicate", "already exists"
    return "failed", _first_line(result.output) or f"exit status {result.returncode}"


def _first_line(text: str) -> str:
    stripped = text.strip()
    return stripped.splitlines()[0] if stripped else ""


def _first_url(text: str) -> str:
    for line in text.splitlines():
        candidate = line.strip()
        if candidate.startswith("https://"):
            return candidate
    return ""


def _succeeded(outcomes: Sequence[StepOutcome], key: str) -> bool:
    return any(outcome.status == "succeeded" and outcome.key == key for outcome in outcomes)


def _recovery_hint(
    plan: ScaffoldPlan,
    outcomes: Sequence[StepOutcome],
    manifest_path: Path | None,
    error: ServiceFailure,
) -> str | None:
    parts: list[str] = []
    if error.recovery_hint:
        parts.append(error.recovery_hint)
    if _succeeded(outcomes, "repo_create"):
        parts.append(
            f"remote repository {plan.params.repo_slug} was created;"
            f" delete it with `gh repo delete {plan.params.repo_slug}` before retrying"
        )
    if plan.project_dir.exists() and _succeeded(outcomes, "write_files"):
        parts.append(f"remove {plan.project_dir} before retrying")
    if manifest_path is not None:
        parts.append(f"run record: {manifest_path}")
    return "; ".join(parts) or None


def _write_manifest(path: Path, manifest: RunManifest) -> None:
    try:
        config.write_json(path, manifest)
    except OSError as exc:
        log.warning(f"could not write run record {path}: {exc}")
    else:
        log.debug(f"run record written to {path}")
