"""Configuration helpers for gostarter.

This module reads and writes the user ``defaults.json`` file, validates it
with Pydantic, and layers environment overrides on top.

Example:
    >>> from gostarter.config import utc_now
    >>> utc_now().endswith("Z")
    True
"""

import datetime as dt
import json
import os
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, ValidationError

from . import paths
from .models import UserDefaults

ENV_OWNER = "GOSTARTER_OWNER"
ENV_VERSION = "GOSTARTER_VERSION"


class ConfigError(ValueError):
    """Raised when a config file exists but cannot be used."""


def utc_now() -> str:
    """Return the current UTC timestamp in ISO-8601 format.

    Returns:
        UTC timestamp like ``2026-01-18T12:34:56Z``.

    Example:
        >>> timestamp = utc_now()
        >>> timestamp.endswith("Z")
        True
    """
    now = dt.datetime.now(tz=dt.timezone.utc).replace(microsecond=0)
    return now.isoformat().replace("+00:00", "Z")


def load_json(path: Path) -> dict | None:
    """Load a JSON file if it exists.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed payload as a dict, or ``None`` if the file does not exist.

    Example:
        >>> from pathlib import Path
        >>> load_json(Path("missing.json")) is None
        True
    """
    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def write_json(path: Path, payload: dict | BaseModel) -> None:
    """Write a JSON payload to disk, creating parent directories.

    Args:
        path: Path to the JSON file to write.
        payload: Dict or Pydantic model to serialize.
    """
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json")
    paths.ensure_dir(path.parent)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2)
        fh.write("\n")


def load_user_defaults(path: Path | None = None) -> UserDefaults:
    """Load prompt defaults from the user config directory.

    A missing file yields empty defaults.

    Raises:
        ConfigError: When the file is not valid JSON or fails validation.
    """
    target = path or paths.defaults_path()
    try:
        payload = load_json(target)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in {target}: {exc}") from exc
    if payload is None:
        return UserDefaults()
    try:
        return UserDefaults.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid defaults in {target}: {exc}") from exc


def write_user_defaults(defaults: UserDefaults, path: Path | None = None) -> Path:
    """Persist prompt defaults and return the file path written."""
    target = path or paths.defaults_path()
    write_json(target, defaults.model_dump(exclude_none=True))
    return target


def apply_env_overrides(
    defaults: UserDefaults, env: Mapping[str, str] | None = None
) -> UserDefaults:
    """Return ``defaults`` with ``GOSTARTER_*`` environment values applied.

    Example:
        >>> apply_env_overrides(UserDefaults(owner="acme"), {"GOSTARTER_OWNER": "umbrella"}).owner
        'umbrella'
    """
    source = os.environ if env is None else env
    updates: dict[str, str] = {}
    owner = source.get(ENV_OWNER, "").strip()
    if owner:
        updates["owner"] = owner
    version = source.get(ENV_VERSION, "").strip()
    if version:
        updates["version"] = version
    if not updates:
        return defaults
    return defaults.model_copy(update=updates)


def resolve_defaults(
    path: Path | None = None, env: Mapping[str, str] | None = None
) -> UserDefaults:
    """Load user defaults and layer the environment on top."""
    return apply_env_overrides(load_user_defaults(path), env)
