import builtins

import pytest

import gostarter.io as io
import gostarter.log as log


def _answers(monkeypatch: pytest.MonkeyPatch, *values: str) -> list[str]:
    prompts: list[str] = []
    queue = list(values)

    def scripted(prompt: str = "") -> str:
        prompts.append(prompt)
        return queue.pop(0)

    monkeypatch.setattr(builtins, "input", scripted)
    return prompts


def test_prompt_uses_default_on_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    prompts = _answers(monkeypatch, "  ")

    assert io.prompt("Initial version", "v0.1.0") == "v0.1.0"
    assert prompts == ["Initial version [v0.1.0]: "]


def test_prompt_allow_empty_keeps_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    _answers(monkeypatch, "")

    assert io.prompt("Short description", "x", allow_empty=True) == ""


def test_required_prompt_repeats_until_answered(monkeypatch: pytest.MonkeyPatch) -> None:
    prompts = _answers(monkeypatch, "", " myctl ")

    assert io.prompt("Project name (e.g., myctl)", required=True) == "myctl"
    assert len(prompts) == 2


@pytest.mark.parametrize(
    "default, answer, expected, suffix",
    [
        (True, "", True, "[Y/n]"),
        (True, "N", False, "[Y/n]"),
        (True, "nope", True, "[Y/n]"),
        (False, "", False, "[y/N]"),
        (False, "Y", True, "[y/N]"),
        (False, "yes", False, "[y/N]"),
    ],
)
def test_confirm_toggle_rules(
    monkeypatch: pytest.MonkeyPatch, default: bool, answer: str, expected: bool, suffix: str
) -> None:
    prompts = _answers(monkeypatch, answer)

    assert io.confirm("Private repo?", default=default) is expected
    assert prompts == [f"Private repo? {suffix}: "]


def test_die_prints_hint_and_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        io.die("go not found", code=3, hint="Install Go 1.23+ first.")

    assert exc.value.code == 3
    assert capsys.readouterr().err == "error: go not found\nhint: Install Go 1.23+ first.\n"


def test_log_level_filters_messages(capsys: pytest.CaptureFixture[str]) -> None:
    log.set_level("warning")
    log.info("hidden")
    log.warning("shown")

    captured = capsys.readouterr()
    assert "hidden" not in captured.out
    assert captured.err.strip() == "shown"


def test_log_level_from_environment(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("GOSTARTER_LOG_LEVEL", "debug")

    log.debug("$ go mod tidy")

    assert "$ go mod tidy" in capsys.readouterr().out


def test_debug_hidden_by_default(capsys: pytest.CaptureFixture[str]) -> None:
    log.debug("$ go mod tidy")

    assert capsys.readouterr().out == ""


def test_no_color_from_flag_or_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("GOSTARTER_NO_COLOR", raising=False)
    assert log.no_color() is False

    monkeypatch.setenv("GOSTARTER_NO_COLOR", "1")
    assert log.no_color() is True

    monkeypatch.delenv("GOSTARTER_NO_COLOR")
    log.set_no_color(True)
    assert log.no_color() is True
    assert log.console().no_color is True


_use_questionary = io._use_questionary


def test_questionary_follows_interactive_check(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(io, "is_interactive", lambda: False)
    assert _use_questionary() is False

    monkeypatch.setattr(io, "is_interactive", lambda: True)
    assert _use_questionary() is True
