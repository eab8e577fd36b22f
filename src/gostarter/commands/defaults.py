"""Implementation for the ``gostarter defaults`` command."""

from __future__ import annotations

import json

from pydantic import ValidationError

from .. import config, paths
from ..config import ConfigError
from ..io import die, say
from ..models import UserDefaults, is_valid_ref_name


def show_defaults(args: object) -> None:
    """Print the effective prompt defaults (file plus environment)."""
    del args
    try:
        defaults = config.resolve_defaults()
    except ConfigError as exc:
        die(str(exc))
    say(f"# {paths.defaults_path()}")
    say(json.dumps(defaults.model_dump(exclude_none=True), indent=2))


def set_defaults(args: object) -> None:
    """Update the stored prompt defaults; an empty string clears a value."""
    owner = getattr(args, "owner", None)
    version = getattr(args, "version", None)
    if owner is None and version is None:
        die("nothing to set; pass --owner and/or --version")
    if version and not is_valid_ref_name(version.strip()):
        die(f"version is not a valid tag name: {version!r}")
    try:
        current = config.load_user_defaults()
    except ConfigError as exc:
        die(str(exc))
    payload = current.model_dump()
    if owner is not None:
        payload["owner"] = owner
    if version is not None:
        payload["version"] = version
    try:
        updated = UserDefaults.model_validate(payload)
    except ValidationError as exc:
        die(f"invalid defaults: {exc}")
    path = config.write_user_defaults(updated)
    say(f"Wrote {path}")
