"""Template loading and rendering helpers.

Templates ship inside the package under ``gostarter/templates``. A user can
override any of them by placing a file with the same relative path under
:func:`gostarter.paths.installed_templates_dir`.
"""

import json
import re
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from string import Template
from typing import Literal

from . import paths

TemplateSource = Literal["packaged_default", "installed_override"]

MAIN_GO = ("go", "main.go.tmpl")
MAKEFILE = ("go", "Makefile")
PRE_COMMIT = ("go", "pre-commit")
GITIGNORE = ("go", "gitignore")
GOLANGCI = ("go", "golangci.yml")
README = ("go", "README.md.tmpl")
CI_WORKFLOW = ("go", "ci.yml")

TEMPLATE_PARTS: tuple[tuple[str, ...], ...] = (
    MAIN_GO,
    MAKEFILE,
    PRE_COMMIT,
    GITIGNORE,
    GOLANGCI,
    README,
    CI_WORKFLOW,
)

_MARKDOWN_SPECIAL_RE = re.compile(r"([\\`*_{}\[\]<>#|])")


@dataclass(frozen=True)
class TemplateReadResult:
    """Template text plus the source it was read from.

    Attributes:
        text: Template content.
        source: Where the text came from.
        path: Filesystem location of the source.
    """

    text: str
    source: TemplateSource
    path: str


class TemplateReadError(RuntimeError):
    """Raised when no readable template source can be resolved."""

    def __init__(self, *, template: str, attempts: tuple[str, ...]) -> None:
        self.template = template
        self.attempts = attempts
        summary = "; ".join(attempts) if attempts else "no lookup attempts recorded"
        super().__init__(f"template_read_failed[{template}]: {summary}")


def _read_template(*parts: str) -> str:
    """Read a bundled template file from the package.

    Args:
        *parts: Path components under ``gostarter/templates``.

    Returns:
        Template text.

    Example:
        >>> "install-tools:" in _read_template("go", "Makefile")
        True
    """
    return (
        resources.files("gostarter")
        .joinpath("templates")
        .joinpath(*parts)
        .read_text(encoding="utf-8")
    )


def _installed_template_path(*parts: str) -> Path:
    return paths.installed_templates_dir().joinpath(*parts)


def _packaged_template_path(*parts: str) -> str:
    return str(resources.files("gostarter").joinpath("templates").joinpath(*parts))


def read_template_result(*parts: str) -> TemplateReadResult:
    """Read template text, preferring a user override when one exists.

    Args:
        *parts: Path components under ``gostarter/templates``.

    Raises:
        TemplateReadError: If neither the override nor the packaged default
            is readable.
    """
    attempts: list[str] = []
    installed_path = _installed_template_path(*parts)
    if installed_path.exists():
        try:
            text = installed_path.read_text(encoding="utf-8")
        except OSError as exc:
            attempts.append(
                f"installed override unreadable: {installed_path} ({type(exc).__name__}: {exc})"
            )
        else:
            return TemplateReadResult(
                text=text, source="installed_override", path=str(installed_path)
            )

    packaged_path = _packaged_template_path(*parts)
    try:
        text = _read_template(*parts)
    except OSError as exc:
        attempts.append(
            f"packaged default unreadable: {packaged_path} ({type(exc).__name__}: {exc})"
        )
        raise TemplateReadError(template="/".join(parts), attempts=tuple(attempts)) from exc
    return TemplateReadResult(text=text, source="packaged_default", path=packaged_path)


def read_template(*parts: str) -> str:
    """Return template text from the user override or the packaged default."""
    return read_template_result(*parts).text


def installed_template_modified(*parts: str) -> bool:
    """Return true when the installed override differs from packaged defaults."""
    path = _installed_template_path(*parts)
    if not path.exists():
        return False
    return path.read_text(encoding="utf-8") != _read_template(*parts)


def refresh_installed_templates(*, force: bool = False) -> tuple[list[Path], list[Path]]:
    """Copy packaged templates into the override directory.

    Modified overrides are kept unless ``force`` is set.

    Returns:
        ``(written, kept)`` lists of override paths.
    """
    dest_root = paths.installed_templates_dir()
    written: list[Path] = []
    kept: list[Path] = []
    for parts in TEMPLATE_PARTS:
        dest = dest_root.joinpath(*parts)
        if not force and installed_template_modified(*parts):
            kept.append(dest)
            continue
        paths.ensure_dir(dest.parent)
        dest.write_text(_read_template(*parts), encoding="utf-8")
        written.append(dest)
    return written, kept


def render(text: str, **values: str) -> str:
    """Substitute ``${name}`` placeholders; a missing value is an error.

    Example:
        >>> render("# ${project_name}", project_name="myctl")
        '# myctl'
    """
    return Template(text).substitute(values)


def go_string_literal(value: str) -> str:
    """Quote ``value`` as a Go interpreted string literal.

    Example:
        >>> go_string_literal('say "hi"')
        '"say \\\\"hi\\\\""'
        >>> go_string_literal("demo tool")
        '"demo tool"'
    """
    return json.dumps(value, ensure_ascii=False)


def markdown_text(value: str) -> str:
    """Escape Markdown control characters so ``value`` renders literally.

    Example:
        >>> markdown_text("demo tool")
        'demo tool'
        >>> markdown_text("# not *bold*")
        '\\\\# not \\\\*bold\\\\*'
    """
    return _MARKDOWN_SPECIAL_RE.sub(r"\\\1", value)
