from __future__ import annotations

import builtins
from pathlib import Path

import pytest

import gostarter.commands.new as new_cmd
import gostarter.exec as exec_util
import gostarter.io as io
import gostarter.paths as paths
from tests.gostarter.helpers import RecordingRunner, make_new_args


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> RecordingRunner:
    recording = RecordingRunner()
    monkeypatch.setattr(exec_util, "_DEFAULT_COMMAND_RUNNER", recording)
    monkeypatch.setenv("COLUMNS", "240")
    monkeypatch.setattr(new_cmd.shutil, "which", lambda binary: f"/usr/bin/{binary}")
    return recording


def _args(tmp_path: Path, **overrides: object):
    data: dict[str, object] = {
        "name": "myctl",
        "owner": "acme",
        "description": "demo tool",
        "parent": str(tmp_path),
    }
    data.update(overrides)
    return make_new_args(**data)


def test_new_scaffolds_and_prints_next_steps(
    tmp_path: Path, runner: RecordingRunner, capsys: pytest.CaptureFixture[str]
) -> None:
    new_cmd.new_project(_args(tmp_path))

    out = capsys.readouterr().out
    assert out.startswith("=== Go CLI Project Setup ===\n")
    assert "Creating: github.com/acme/myctl" in out
    assert "=== Setup Complete ===" in out
    assert "cd myctl" in out
    assert "Repository: https://github.com/acme/myctl" in out
    assert "Add your first command: cobra-cli add <command>" in out
    assert (tmp_path / "myctl" / "cmd" / "myctl" / "main.go").is_file()
    assert ("git", "push", "origin", "v0.1.0") in runner.argvs
    manifests = list(paths.runs_dir().glob("acme-myctl-*.json"))
    assert len(manifests) == 1


def test_second_run_refuses_existing_directory(
    tmp_path: Path, runner: RecordingRunner, capsys: pytest.CaptureFixture[str]
) -> None:
    new_cmd.new_project(_args(tmp_path))
    issued = len(runner.requests)
    capsys.readouterr()

    with pytest.raises(SystemExit) as exc:
        new_cmd.new_project(_args(tmp_path))

    assert exc.value.code == 1
    assert "error: directory already exists" in capsys.readouterr().err
    assert len(runner.requests) == issued


def test_missing_prerequisite_exits_before_prompting(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(
        new_cmd.shutil, "which", lambda binary: None if binary == "gh" else "/usr/bin/go"
    )

    with pytest.raises(SystemExit):
        new_cmd.new_project(_args(tmp_path, name=None, yes=False))

    captured = capsys.readouterr()
    assert "error: gh not found" in captured.err
    assert "hint: Install from https://cli.github.com" in captured.err
    assert "Go CLI Project Setup" not in captured.out


def test_dry_run_writes_and_runs_nothing(
    tmp_path: Path, runner: RecordingRunner, capsys: pytest.CaptureFixture[str]
) -> None:
    new_cmd.new_project(_args(tmp_path, dry_run=True, project_board=True))

    out = capsys.readouterr().out
    assert "Dry run: nothing was written or executed." in out
    assert "git push -u origin main" in out
    assert runner.argvs == []
    assert not (tmp_path / "myctl").exists()
    assert not paths.runs_dir().exists()


def test_missing_owner_without_prompts_fails(
    tmp_path: Path, runner: RecordingRunner, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit):
        new_cmd.new_project(_args(tmp_path, owner=None))

    err = capsys.readouterr().err
    assert "error: GitHub owner is required" in err
    assert "hint: Provide a project name and --owner" in err
    assert runner.argvs == []


def test_owner_default_comes_from_environment(
    tmp_path: Path,
    runner: RecordingRunner,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("GOSTARTER_OWNER", "umbrella")

    new_cmd.new_project(_args(tmp_path, owner=None, dry_run=True))

    assert "Creating: github.com/umbrella/myctl" in capsys.readouterr().out


def test_interactive_run_prompts_in_order(
    tmp_path: Path,
    runner: RecordingRunner,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    answers = iter(["myctl", "acme", "demo tool", "", "", "n", "yes", "y"])
    asked: list[str] = []

    def scripted_input(prompt: str = "") -> str:
        asked.append(prompt)
        return next(answers)

    monkeypatch.setattr(io, "is_interactive", lambda: True)
    monkeypatch.setattr(builtins, "input", scripted_input)

    new_cmd.new_project(
        make_new_args(parent=str(tmp_path), yes=False, dry_run=True)
    )

    assert asked == [
        "Project name (e.g., myctl): ",
        "GitHub owner (user/org): ",
        "Short description: ",
        "Initial version [v0.1.0]: ",
        "Create minimal README? [Y/n]: ",
        "Create GitHub Actions CI? [Y/n]: ",
        "Create GitHub Project board? [y/N]: ",
        "Private repo? [y/N]: ",
    ]
    out = capsys.readouterr().out
    assert "README.md" in out
    assert ".github/workflows/ci.yml" not in out
    assert "gh project create" not in out
    assert "--private" in out


def test_invalid_defaults_file_exits_with_hint(
    tmp_path: Path, runner: RecordingRunner, capsys: pytest.CaptureFixture[str]
) -> None:
    path = paths.defaults_path()
    path.parent.mkdir(parents=True)
    path.write_text("{", encoding="utf-8")

    with pytest.raises(SystemExit):
        new_cmd.new_project(_args(tmp_path))

    err = capsys.readouterr().err
    assert "invalid JSON" in err
    assert "gostarter defaults set" in err


def test_missing_parent_directory_exits(
    tmp_path: Path, runner: RecordingRunner, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit):
        new_cmd.new_project(_args(tmp_path, parent=str(tmp_path / "nope")))

    assert "parent directory does not exist" in capsys.readouterr().err


def test_undecodable_description_exits_before_writing(
    tmp_path: Path, runner: RecordingRunner, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as exc:
        new_cmd.new_project(_args(tmp_path, description="demo \udcff"))

    assert exc.value.code == 1
    assert "error: description must be valid UTF-8" in capsys.readouterr().err
    assert not (tmp_path / "myctl").exists()
    assert runner.argvs == []


def test_broken_template_override_exits_with_reset_hint(
    tmp_path: Path, runner: RecordingRunner, capsys: pytest.CaptureFixture[str]
) -> None:
    readme = paths.installed_templates_dir() / "go" / "README.md.tmpl"
    readme.parent.mkdir(parents=True)
    readme.write_text("# ${project_name}\n\nHosting costs $5 a month.\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        new_cmd.new_project(_args(tmp_path, dry_run=True))

    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert f"error: template {readme}: Invalid placeholder" in err
    assert "gostarter template install --force" in err
    assert runner.argvs == []
