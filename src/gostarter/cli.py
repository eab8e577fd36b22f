"""Typer entrypoint for the ``gostarter`` command."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Optional

import typer

from . import __version__
from . import log as gostarter_log
from .commands.defaults import set_defaults as defaults_set_cmd
from .commands.defaults import show_defaults as defaults_show_cmd
from .commands.new import new_project as new_cmd
from .commands.template import install_templates as template_install_cmd
from .commands.template import list_templates as template_list_cmd
from .commands.template import templates_path as template_path_cmd

app = typer.Typer(
    help="Scaffold a Go CLI project and provision its GitHub repository.",
    no_args_is_help=True,
    add_completion=False,
)
template_app = typer.Typer(help="Inspect and customize the scaffold templates.")
defaults_app = typer.Typer(help="Show or change stored prompt defaults.")
app.add_typer(template_app, name="template")
app.add_typer(defaults_app, name="defaults")


def _validate_log_level(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in gostarter_log.LEVEL_NAMES:
        raise typer.BadParameter(
            "expected one of: " + ", ".join(gostarter_log.LEVEL_NAMES)
        )
    return normalized


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gostarter {__version__}")
        raise typer.Exit()


@app.callback()
def root(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="trace, debug, info, success, warning, or error.",
        callback=_validate_log_level,
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable coloured output."),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Scaffold a Go CLI project and provision its GitHub repository."""
    del version
    if log_level is not None:
        gostarter_log.set_level(log_level)
    if no_color:
        gostarter_log.set_no_color(True)


@app.command("new")
def new(
    name: Optional[str] = typer.Argument(None, help="Project name (e.g. myctl)."),
    owner: Optional[str] = typer.Option(None, "--owner", "-o", help="GitHub user or org."),
    description: Optional[str] = typer.Option(
        None, "--description", "-d", help="Short description."
    ),
    version: Optional[str] = typer.Option(
        None, "--version", "-v", help="Initial version tag (default v0.1.0)."
    ),
    readme: Optional[bool] = typer.Option(
        None, "--readme/--no-readme", help="Create a minimal README (default on)."
    ),
    ci: Optional[bool] = typer.Option(
        None, "--ci/--no-ci", help="Create a GitHub Actions workflow (default on)."
    ),
    project_board: Optional[bool] = typer.Option(
        None,
        "--project-board/--no-project-board",
        help="Create a GitHub Project board (default off).",
    ),
    private: Optional[bool] = typer.Option(
        None, "--private/--public", help="Repository visibility (default public)."
    ),
    parent: Optional[str] = typer.Option(
        None, "--parent", help="Directory to create the project in (default: cwd)."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Show the files and commands without running them."
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Never prompt; use flags and defaults only."
    ),
) -> None:
    """Create a Go CLI project, its GitHub repository, labels, and first tag."""
    new_cmd(
        SimpleNamespace(
            name=name,
            owner=owner,
            description=description,
            version=version,
            readme=readme,
            ci=ci,
            project_board=project_board,
            private=private,
            parent=parent,
            dry_run=dry_run,
            yes=yes,
        )
    )


@template_app.command("list")
def template_list() -> None:
    """List templates and where each one is read from."""
    template_list_cmd(SimpleNamespace())


@template_app.command("install")
def template_install(
    force: bool = typer.Option(False, "--force", help="Overwrite modified overrides."),
) -> None:
    """Copy the packaged templates into the override directory."""
    template_install_cmd(SimpleNamespace(force=force))


@template_app.command("path")
def template_path() -> None:
    """Print the template override directory."""
    template_path_cmd(SimpleNamespace())


@defaults_app.command("show")
def defaults_show() -> None:
    """Print the effective prompt defaults."""
    defaults_show_cmd(SimpleNamespace())


@defaults_app.command("set")
def defaults_set(
    owner: Optional[str] = typer.Option(None, "--owner", help="Default GitHub owner."),
    version: Optional[str] = typer.Option(None, "--version", help="Default initial version."),
) -> None:
    """Store prompt defaults; pass an empty string to clear one."""
    defaults_set_cmd(SimpleNamespace(owner=owner, version=version))


def main() -> None:
    app()
