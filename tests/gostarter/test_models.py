from __future__ import annotations

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from gostarter.models import (
    DEFAULT_LABELS,
    DEFAULT_VERSION,
    RunManifest,
    ScaffoldParams,
    UserDefaults,
    is_valid_ref_name,
    parse_toggle,
)

WHITESPACE = " \t"
NAME_CHARS = string.ascii_letters + string.digits + "._-"

answers = st.text(alphabet=string.ascii_letters + WHITESPACE, max_size=6)


@given(answers)
def test_default_on_toggle_only_turns_off_on_n(raw: str) -> None:
    assert parse_toggle(raw, default=True) is (raw.strip().lower() != "n")


@given(answers)
def test_default_off_toggle_only_turns_on_on_y(raw: str) -> None:
    assert parse_toggle(raw, default=False) is (raw.strip().lower() == "y")


@pytest.mark.parametrize("raw", ["yes", "YES", "true", "1", "ok"])
def test_default_off_toggle_ignores_long_affirmatives(raw: str) -> None:
    assert parse_toggle(raw, default=False) is False


def test_parse_toggle_treats_none_as_empty() -> None:
    assert parse_toggle(None, default=True) is True
    assert parse_toggle(None, default=False) is False


@st.composite
def project_names(draw: st.DrawFn) -> str:
    first = draw(st.sampled_from(string.ascii_letters + string.digits))
    rest = draw(st.text(alphabet=NAME_CHARS, max_size=12))
    return first + rest


@given(project_names(), st.text(alphabet=WHITESPACE, max_size=3))
def test_project_name_is_trimmed_and_used_for_module_path(name: str, pad: str) -> None:
    params = ScaffoldParams(project_name=f"{pad}{name}{pad}", owner="acme")

    assert params.project_name == name
    assert params.module_path == f"github.com/acme/{name}"
    assert params.repo_slug == f"acme/{name}"


@pytest.mark.parametrize("version", ["", "   ", None])
def test_blank_version_defaults(version: str | None) -> None:
    params = ScaffoldParams(project_name="myctl", owner="acme", version=version)

    assert params.version == DEFAULT_VERSION == "v0.1.0"


def test_version_is_kept_verbatim() -> None:
    params = ScaffoldParams(project_name="myctl", owner="acme", version="v2.0.0-rc.1")

    assert params.version == "v2.0.0-rc.1"


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("project_name", "", "project name is required"),
        ("project_name", "my ctl", "project name may only contain"),
        ("project_name", "-rf", "project name may only contain"),
        ("project_name", "../escape", "project name may only contain"),
        ("owner", "", "GitHub owner is required"),
        ("owner", "acme/evil", "GitHub owner may only contain"),
        ("owner", "-acme", "GitHub owner may only contain"),
        ("version", "v1 beta", "version is not a valid tag name"),
        ("version", "v1..0", "version is not a valid tag name"),
    ],
)
def test_scaffold_params_rejects_invalid_values(field: str, value: str, message: str) -> None:
    data = {"project_name": "myctl", "owner": "acme", field: value}

    with pytest.raises(ValidationError) as exc:
        ScaffoldParams(**data)

    assert message in str(exc.value)


def test_scaffold_params_are_frozen() -> None:
    params = ScaffoldParams(project_name="myctl", owner="acme")

    with pytest.raises(ValidationError):
        params.project_name = "other"  # type: ignore[misc]


def test_visibility_flag_follows_private_toggle() -> None:
    assert ScaffoldParams(project_name="a", owner="b").visibility_flag == "--public"
    assert (
        ScaffoldParams(project_name="a", owner="b", private_repo=True).visibility_flag
        == "--private"
    )


def test_toggle_defaults() -> None:
    params = ScaffoldParams(project_name="myctl", owner="acme")

    assert params.create_readme is True
    assert params.create_ci is True
    assert params.create_project_board is False
    assert params.private_repo is False


@pytest.mark.parametrize("name", ["v0.1.0", "release/2026", "1.0"])
def test_is_valid_ref_name_accepts_tags(name: str) -> None:
    assert is_valid_ref_name(name)


@pytest.mark.parametrize("name", ["", "-v1", "v1.lock", "v1:", "v1~", "v1^", "@", "a@{b"])
def test_is_valid_ref_name_rejects_bad_tags(name: str) -> None:
    assert not is_valid_ref_name(name)


def test_default_labels_match_fixed_set() -> None:
    assert [(label.name, label.color) for label in DEFAULT_LABELS] == [
        ("priority:high", "D93F0B"),
        ("priority:low", "0E8A16"),
        ("type:bug", "D73A4A"),
        ("type:feature", "0075CA"),
        ("type:refactor", "CFD3D7"),
    ]


def test_user_defaults_blank_strings_become_none() -> None:
    defaults = UserDefaults(owner="  ", version="")

    assert defaults.owner is None
    assert defaults.version is None


def test_run_manifest_round_trips_through_json() -> None:
    manifest = RunManifest(
        params=ScaffoldParams(project_name="myctl", owner="acme"),
        project_dir="/work/myctl",
        started_at="2026-01-18T12:34:56Z",
    )

    restored = RunManifest.model_validate_json(manifest.model_dump_json())

    assert restored == manifest
    assert restored.completed is False
    assert restored.outcomes == []


@pytest.mark.parametrize("field", ["project_name", "owner", "description", "version"])
def test_surrogate_text_is_rejected(field: str) -> None:
    data = {"project_name": "myctl", "owner": "acme", field: "x\udcff"}

    with pytest.raises(ValidationError) as exc:
        ScaffoldParams(**data)

    assert f"{field.replace('_', ' ')} must be valid UTF-8" in str(exc.value)
