"""Implementation for the ``gostarter new`` command.

``gostarter new`` scaffolds a Go CLI project in a fresh directory, then
creates and populates its GitHub repository.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from .. import config, io, log, paths
from ..config import ConfigError
from ..services import ServiceFailure
from ..services.scaffold import (
    ParamOverrides,
    ProvisionRequest,
    ProvisionService,
    ScaffoldPlan,
    check_prerequisites,
    collect_params,
    render_plan,
)


def _overrides_from_args(args: object) -> ParamOverrides:
    return ParamOverrides(
        project_name=getattr(args, "name", None),
        owner=getattr(args, "owner", None),
        description=getattr(args, "description", None),
        version=getattr(args, "version", None),
        create_readme=getattr(args, "readme", None),
        create_ci=getattr(args, "ci", None),
        create_project_board=getattr(args, "project_board", None),
        private_repo=getattr(args, "private", None),
    )


def _resolve_parent(args: object) -> Path:
    value = getattr(args, "parent", None)
    if value is None or not str(value).strip():
        return Path.cwd()
    candidate = Path(str(value)).expanduser()
    if not candidate.is_absolute():
        candidate = (Path.cwd() / candidate).resolve()
    if not candidate.is_dir():
        io.die(f"parent directory does not exist: {candidate}")
    return candidate


def _print_next_steps(project_name: str, repo_url: str) -> None:
    io.say("")
    io.say("=== Setup Complete ===")
    io.say("")
    io.say(f"cd {project_name}")
    io.say("make check  # verify setup")
    io.say("")
    io.say(f"Repository: {repo_url}")
    io.say("")
    io.say("Next steps:")
    io.say("  1. Create issues for initial features")
    io.say("  2. Update README with project-specific details")
    io.say("  3. Add your first command: cobra-cli add <command>")
    io.say("")


def new_project(args: object) -> None:
    """Scaffold and provision a new Go CLI project.

    Args:
        args: CLI argument object with optional fields ``name``, ``owner``,
            ``description``, ``version``, ``readme``, ``ci``,
            ``project_board``, ``private``, ``parent``, ``dry_run``, and
            ``yes``.

    Example:
        $ gostarter new myctl --owner acme --description "demo tool"
    """
    dry_run = bool(getattr(args, "dry_run", False))
    yes = bool(getattr(args, "yes", False))
    try:
        check_prerequisites(which=shutil.which)
    except ServiceFailure as exc:
        io.die(str(exc), hint=exc.recovery_hint)

    io.say("=== Go CLI Project Setup ===")
    io.say("")

    try:
        defaults = config.resolve_defaults()
    except ConfigError as exc:
        io.die(str(exc), hint="Fix or remove the file, or run 'gostarter defaults set'.")

    parent = _resolve_parent(args)
    try:
        params = collect_params(
            _overrides_from_args(args),
            defaults=defaults,
            interactive=io.is_interactive() and not yes,
            ask_text=io.prompt,
            ask_toggle=io.confirm,
        )
        io.say("")
        io.say(f"Creating: {params.module_path}")
        io.say("")
        plan = ScaffoldPlan.build(params, parent)
        plan.validate()
        if dry_run:
            render_plan(plan)
            log.info("Dry run: nothing was written or executed.")
            return
        started_at = config.utc_now()
        result = ProvisionService()(
            ProvisionRequest(
                plan=plan,
                manifest_path=paths.run_manifest_path(
                    params.owner, params.project_name, started_at
                ),
            )
        )
    except ServiceFailure as exc:
        io.die(str(exc), hint=exc.recovery_hint)

    log.success(f"Scaffolded {params.module_path}")
    _print_next_steps(params.project_name, result.outcome.remote_url)
