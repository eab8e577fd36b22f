# ruff: noqa: E402

from __future__ import annotations

import json
import sys
from pathlib import Path
from types import SimpleNamespace

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from gostarter import exec as exec_util
from gostarter.models import ScaffoldParams, StepOutcome
from gostarter.services.scaffold import ScaffoldPlan

FIXED_TIME = "2026-01-18T12:34:56Z"
REPO_URL = "https://github.com/acme/myctl"
MILESTONE_JSON = json.dumps(
    {
        "number": 1,
        "title": "v0.1.0",
        "html_url": "https://github.com/acme/myctl/milestone/1",
        "state": "open",
    }
)


class RecordingRunner:
    """Command runner that records every request and replays canned results.

    ``responses`` maps an argv prefix to ``(returncode, stdout, stderr)``; the
    longest matching prefix wins. Executables listed in ``missing`` behave as
    if they were not on PATH.
    """

    def __init__(
        self,
        responses: dict[tuple[str, ...], tuple[int, str, str]] | None = None,
        *,
        missing: tuple[str, ...] = (),
    ) -> None:
        self.responses = {
            ("gh", "repo", "create"): (0, f"{REPO_URL}\n", ""),
            ("gh", "api"): (0, MILESTONE_JSON, ""),
        }
        self.responses.update(responses or {})
        self.missing = missing
        self.requests: list[exec_util.CommandRequest] = []

    def run(self, request: exec_util.CommandRequest) -> exec_util.CommandResult | None:
        self.requests.append(request)
        if request.argv and request.argv[0] in self.missing:
            return None
        matches = [
            prefix for prefix in self.responses if request.argv[: len(prefix)] == prefix
        ]
        if not matches:
            return exec_util.CommandResult(
                argv=request.argv, returncode=0, stdout="", stderr=""
            )
        returncode, stdout, stderr = self.responses[max(matches, key=len)]
        return exec_util.CommandResult(
            argv=request.argv, returncode=returncode, stdout=stdout, stderr=stderr
        )

    @property
    def argvs(self) -> list[tuple[str, ...]]:
        return [request.argv for request in self.requests]


def make_params(**overrides: object) -> ScaffoldParams:
    data: dict[str, object] = {
        "project_name": "myctl",
        "owner": "acme",
        "description": "demo tool",
    }
    data.update(overrides)
    return ScaffoldParams(**data)


def make_plan(parent: Path, **overrides: object) -> ScaffoldPlan:
    return ScaffoldPlan.build(make_params(**overrides), parent)


def make_new_args(**overrides: object) -> SimpleNamespace:
    data: dict[str, object] = {
        "name": None,
        "owner": None,
        "description": None,
        "version": None,
        "readme": None,
        "ci": None,
        "project_board": None,
        "private": None,
        "parent": None,
        "dry_run": False,
        "yes": True,
    }
    data.update(overrides)
    return SimpleNamespace(**data)


def never_installed(binary: str) -> str | None:
    del binary
    return None


def statuses(outcomes: list[StepOutcome] | tuple[StepOutcome, ...]) -> dict[str, str]:
    return {outcome.name: outcome.status for outcome in outcomes}
