"""Console I/O helpers for user-facing messages and prompts."""

from __future__ import annotations

import sys
from typing import NoReturn

import questionary

from .models import parse_toggle


def is_interactive() -> bool:
    """Return true when both stdin and stdout are attached to a terminal."""
    return sys.stdin.isatty() and sys.stdout.isatty()


def _use_questionary() -> bool:
    return is_interactive()


def say(message: str) -> None:
    """Print a normal message to stdout.

    Args:
        message: Text to print.

    Example:
        >>> say("Hello")
        Hello
    """
    print(message)


def warn(message: str) -> None:
    """Print a warning message to stderr.

    Args:
        message: Warning text.
    """
    print(f"warning: {message}", file=sys.stderr)


def die(message: str, code: int = 1, *, hint: str | None = None) -> NoReturn:
    """Print an error message (and optional recovery hint) and exit.

    Args:
        message: Error message to display.
        code: Exit code to use.
        hint: Optional follow-up shown on its own line.
    """
    print(f"error: {message}", file=sys.stderr)
    if hint:
        print(f"hint: {hint}", file=sys.stderr)
    sys.exit(code)


def prompt(
    text: str,
    default: str | None = None,
    required: bool = False,
    allow_empty: bool = False,
) -> str:
    """Prompt the user for input, optionally enforcing a default or requirement.

    Args:
        text: Prompt label shown to the user.
        default: Default value used when the user enters an empty string.
        required: When true, keep prompting until a non-empty value is provided.
        allow_empty: When true, an empty answer is returned as-is even if a
            default is shown.

    Returns:
        The user-provided or default string.

    Example:
        Initial version [v0.1.0]:
    """
    while True:
        if _use_questionary():
            question = questionary.text(text, default=default or "")
            value = question.ask()
            if value is None:
                die("aborted")
            value = str(value).strip()
        else:
            if default is not None and default != "":
                value = input(f"{text} [{default}]: ").strip()
                if value == "" and not allow_empty:
                    value = default
            else:
                value = input(f"{text}: ").strip()
        if required and value == "":
            continue
        return value


def confirm(text: str, default: bool = False) -> bool:
    """Prompt for a yes/no toggle.

    A ``[Y/n]`` prompt only turns off on an explicit ``n``; a ``[y/N]``
    prompt only turns on on an explicit ``y``.

    Args:
        text: Prompt label shown to the user.
        default: Default answer when the user presses enter.

    Returns:
        ``True`` when the toggle is on.
    """
    if _use_questionary():
        response = questionary.confirm(text, default=default).ask()
        if response is None:
            die("aborted")
        return bool(response)
    suffix = "[Y/n]" if default else "[y/N]"
    return parse_toggle(input(f"{text} {suffix}: "), default=default)
