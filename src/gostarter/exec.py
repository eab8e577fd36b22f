"""Subprocess helpers for running external commands."""

import json
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Generic, Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from . import log

ParsedT = TypeVar("ParsedT")
ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class CommandRequest:
    """Typed command invocation request."""

    argv: tuple[str, ...]
    cwd: Path | None = None


@dataclass(frozen=True)
class CommandResult:
    """Typed command execution result."""

    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Return stderr when present, otherwise stdout, stripped."""
        return (self.stderr or self.stdout or "").strip()


class CommandRunner(Protocol):
    """Runtime command-execution interface."""

    def run(self, request: CommandRequest) -> CommandResult | None: ...


class SubprocessCommandRunner:
    """Default command-runner adapter backed by subprocess."""

    def run(self, request: CommandRequest) -> CommandResult | None:
        try:
            completed = subprocess.run(
                list(request.argv),
                cwd=request.cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            return None

        stdout = completed.stdout if isinstance(completed.stdout, str) else ""
        stderr = completed.stderr if isinstance(completed.stderr, str) else ""
        return CommandResult(
            argv=request.argv,
            returncode=completed.returncode,
            stdout=stdout,
            stderr=stderr,
        )


_DEFAULT_COMMAND_RUNNER: CommandRunner = SubprocessCommandRunner()


@dataclass(frozen=True)
class CommandSpec(Generic[ParsedT]):
    """Typed command spec with a parser for command output."""

    request: CommandRequest
    parser: Callable[[CommandResult], ParsedT]
    context: str | None = None


@dataclass(frozen=True)
class CommandExecutionError(RuntimeError):
    """Raised when command execution fails before parsing can occur."""

    request: CommandRequest
    detail: str
    result: CommandResult | None = None

    def __str__(self) -> str:
        return self.detail


@dataclass(frozen=True)
class CommandParseError(RuntimeError):
    """Raised when command output parsing fails."""

    request: CommandRequest
    detail: str
    context: str | None = None

    def __str__(self) -> str:
        return self.detail


def format_argv(argv: tuple[str, ...] | list[str]) -> str:
    """Render argv as a copy-pasteable shell string.

    Example:
        >>> format_argv(("gh", "repo", "create", "acme/myctl", "--description", "demo tool"))
        "gh repo create acme/myctl --description 'demo tool'"
    """
    return shlex.join(list(argv))


def run_with_runner(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult | None:
    """Execute a typed command request with the given runner."""
    active_runner = runner or _DEFAULT_COMMAND_RUNNER
    cwd_suffix = f" (in {request.cwd})" if request.cwd is not None else ""
    log.debug(f"$ {format_argv(request.argv)}{cwd_suffix}")
    return active_runner.run(request)


def _missing_command_detail(request: CommandRequest) -> str:
    argv = request.argv
    if not argv:
        return "missing required command"
    return f"missing required command: {argv[0]}"


def _command_failure_detail(request: CommandRequest, result: CommandResult) -> str:
    output = result.output
    command_text = format_argv(request.argv)
    if output:
        return f"command failed: {command_text}\n{output}"
    return f"command failed: {command_text}"


def run_typed(
    spec: CommandSpec[ParsedT], *, runner: CommandRunner | None = None
) -> ParsedT:
    """Execute a command and parse its successful output into a typed value."""
    result = run_with_runner(spec.request, runner=runner)
    if result is None:
        raise CommandExecutionError(
            request=spec.request,
            detail=_missing_command_detail(spec.request),
        )
    if not result.ok:
        raise CommandExecutionError(
            request=spec.request,
            result=result,
            detail=_command_failure_detail(spec.request, result),
        )
    try:
        return spec.parser(result)
    except CommandParseError:
        raise
    except Exception as exc:
        context = f" ({spec.context})" if spec.context else ""
        raise CommandParseError(
            request=spec.request,
            detail=f"failed to parse command output{context}: {exc}",
            context=spec.context,
        ) from exc


def _parse_json_payload(result: CommandResult, *, context: str | None = None) -> object:
    raw = (result.stdout or "").strip()
    if not raw:
        raise CommandParseError(
            request=CommandRequest(argv=result.argv),
            detail=(
                f"failed to parse command output ({context}): empty output"
                if context
                else "failed to parse command output: empty output"
            ),
            context=context,
        )
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        context_suffix = f" ({context})" if context else ""
        raise CommandParseError(
            request=CommandRequest(argv=result.argv),
            detail=f"failed to parse command output{context_suffix}: {exc}",
            context=context,
        ) from exc


def parse_json_model(
    result: CommandResult, *, model_type: type[ModelT], context: str | None = None
) -> ModelT:
    """Parse command stdout JSON into a validated Pydantic model."""
    payload = _parse_json_payload(result, context=context)
    try:
        return model_type.model_validate(payload)
    except ValidationError as exc:
        context_suffix = f" ({context})" if context else ""
        raise CommandParseError(
            request=CommandRequest(argv=result.argv),
            detail=f"failed to validate command output{context_suffix}: {exc}",
            context=context,
        ) from exc


def parse_stdout(result: CommandResult) -> str:
    """Return stripped stdout; the parser for commands with plain-text output."""
    return result.stdout.strip()


def run_checked(
    cmd: list[str],
    *,
    cwd: Path | None = None,
    runner: CommandRunner | None = None,
) -> str:
    """Run a command that must succeed and return its stripped stdout.

    Raises:
        CommandExecutionError: When the executable is missing or exits non-zero.
    """
    spec = CommandSpec[str](
        request=CommandRequest(argv=tuple(cmd), cwd=cwd),
        parser=parse_stdout,
    )
    return run_typed(spec, runner=runner)


def try_run(
    cmd: list[str],
    *,
    cwd: Path | None = None,
    runner: CommandRunner | None = None,
) -> CommandResult | None:
    """Run a command whose failure the caller tolerates.

    Returns:
        ``CommandResult`` on execution, otherwise ``None`` when the executable
        is missing.
    """
    return run_with_runner(CommandRequest(argv=tuple(cmd), cwd=cwd), runner=runner)
