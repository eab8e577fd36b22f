"""Implementation for the ``gostarter template`` command."""

from __future__ import annotations

from rich import box
from rich.table import Table
from rich.text import Text

from .. import log, paths, templates
from ..io import die, say, warn


def list_templates(args: object) -> None:
    """Show every template and whether a user override is active."""
    del args
    table = Table(title="Templates", box=box.SIMPLE)
    table.add_column("Template")
    table.add_column("Source")
    table.add_column("Path", overflow="fold")
    for parts in templates.TEMPLATE_PARTS:
        try:
            result = templates.read_template_result(*parts)
        except templates.TemplateReadError as exc:
            die(str(exc))
        table.add_row(Text("/".join(parts)), result.source, Text(result.path))
    log.console().print(table)


def install_templates(args: object) -> None:
    """Copy packaged templates into the override directory for editing."""
    force = bool(getattr(args, "force", False))
    try:
        written, kept = templates.refresh_installed_templates(force=force)
    except OSError as exc:
        die(f"failed to install templates: {exc}")
    for path in written:
        say(f"Installed {path}")
    for path in kept:
        warn(f"kept modified template {path} (use --force to overwrite)")


def templates_path(args: object) -> None:
    """Print the template override directory."""
    del args
    say(str(paths.installed_templates_dir()))
