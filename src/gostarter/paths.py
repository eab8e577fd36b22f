"""Path helpers for locating gostarter config and data directories."""

from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

GOSTARTER_APP_NAME = "gostarter"
TEMPLATES_DIRNAME = "templates"
RUNS_DIRNAME = "runs"
DEFAULTS_FILENAME = "defaults.json"


def gostarter_data_dir() -> Path:
    """Return the base gostarter data directory.

    Example:
        >>> isinstance(gostarter_data_dir(), Path)
        True
    """
    return Path(user_data_dir(GOSTARTER_APP_NAME))


def gostarter_config_dir() -> Path:
    """Return the base gostarter config directory.

    Example:
        >>> isinstance(gostarter_config_dir(), Path)
        True
    """
    return Path(user_config_dir(GOSTARTER_APP_NAME))


def defaults_path() -> Path:
    """Return the user defaults file path.

    Example:
        >>> defaults_path().name == DEFAULTS_FILENAME
        True
    """
    return gostarter_config_dir() / DEFAULTS_FILENAME


def installed_templates_dir() -> Path:
    """Return the directory holding user template overrides.

    Example:
        >>> installed_templates_dir().name == TEMPLATES_DIRNAME
        True
    """
    return gostarter_data_dir() / TEMPLATES_DIRNAME


def runs_dir() -> Path:
    """Return the directory holding run manifests.

    Example:
        >>> runs_dir().name == RUNS_DIRNAME
        True
    """
    return gostarter_data_dir() / RUNS_DIRNAME


def run_manifest_path(owner: str, project_name: str, started_at: str) -> Path:
    """Return the manifest path for one run.

    Args:
        owner: GitHub owner.
        project_name: Project name.
        started_at: UTC timestamp like ``2026-01-18T12:34:56Z``.

    Example:
        >>> run_manifest_path("acme", "myctl", "2026-01-18T12:34:56Z").name
        'acme-myctl-20260118T123456Z.json'
    """
    stamp = started_at.replace("-", "").replace(":", "")
    return runs_dir() / f"{owner}-{project_name}-{stamp}.json"


def ensure_dir(path: Path) -> None:
    """Create a directory (and parents) if it does not exist."""
    path.mkdir(parents=True, exist_ok=True)
