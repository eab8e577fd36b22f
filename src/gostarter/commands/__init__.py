"""Command implementations wired into the Typer CLI."""
