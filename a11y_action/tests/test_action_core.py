"""Unit tests for the GitHub Actions runner helpers."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from a11y_action._action_core import (
    GitHubActionsCore,
    JobSummary,
    append_github_output,
    input_env_key,
    mask_secret,
)
from a11y_action._task_config_errors import (
    InputRequiredError,
    JobSummaryUnavailableError,
    TaskConfigError,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("url", "INPUT_URL"),
        ("max-urls", "INPUT_MAX-URLS"),
        ("my input", "INPUT_MY_INPUT"),
    ],
)
def test_input_env_key(name: str, expected: str) -> None:
    assert input_env_key(name) == expected


def test_get_input_trims_and_defaults_to_empty() -> None:
    core = GitHubActionsCore({"INPUT_URL": "  https://example.test \n"})
    assert core.get_input("url") == "https://example.test"
    assert core.get_input("hosting-mode") == ""


def test_get_input_can_keep_whitespace() -> None:
    core = GitHubActionsCore({"INPUT_INPUT-URLS": " a b "})
    assert core.get_input("input-urls", trim_whitespace=False) == " a b "


def test_get_input_required_raises_when_missing() -> None:
    core = GitHubActionsCore({})
    with pytest.raises(InputRequiredError, match="not supplied: url"):
        core.get_input("url", required=True)


def test_required_input_error_is_task_config_error() -> None:
    assert issubclass(InputRequiredError, TaskConfigError)
    assert issubclass(JobSummaryUnavailableError, TaskConfigError)


def _summary_env(tmp_path: Path, content: str = "") -> tuple[Path, dict[str, str]]:
    summary_file = tmp_path / "step_summary.md"
    summary_file.write_text(content, encoding="utf-8")
    return summary_file, {"GITHUB_STEP_SUMMARY": str(summary_file)}


def test_summary_write_appends_and_clears_buffer(tmp_path: Path) -> None:
    summary_file, env = _summary_env(tmp_path, "existing\n")
    summary = JobSummary(env)

    result = asyncio.run(summary.add_raw("# Report").add_eol().write())

    assert result is summary
    assert summary.is_empty_buffer()
    assert summary_file.read_text(encoding="utf-8").startswith("existing\n# Report")


def test_summary_write_can_overwrite(tmp_path: Path) -> None:
    summary_file, env = _summary_env(tmp_path, "stale")
    summary = JobSummary(env)

    asyncio.run(summary.add_raw("fresh").write(overwrite=True))

    assert summary_file.read_text(encoding="utf-8") == "fresh"


def test_summary_add_raw_with_eol(tmp_path: Path) -> None:
    _, env = _summary_env(tmp_path)
    summary = JobSummary(env).add_raw("line", add_eol=True)
    assert summary.stringify().startswith("line")
    assert summary.stringify() != "line"


def test_summary_requires_environment_variable() -> None:
    summary = JobSummary({})
    with pytest.raises(JobSummaryUnavailableError, match="GITHUB_STEP_SUMMARY"):
        asyncio.run(summary.add_raw("text").write())
    assert summary.stringify() == "text"


def test_summary_requires_existing_file(tmp_path: Path) -> None:
    env = {"GITHUB_STEP_SUMMARY": str(tmp_path / "missing.md")}
    with pytest.raises(JobSummaryUnavailableError, match="Unable to access"):
        asyncio.run(JobSummary(env).add_raw("text").write())


def test_core_summary_uses_same_environment(tmp_path: Path) -> None:
    summary_file, env = _summary_env(tmp_path)
    core = GitHubActionsCore(env)

    asyncio.run(core.summary.add_raw("scan complete").write())

    assert summary_file.read_text(encoding="utf-8") == "scan complete"


def test_mask_secret_masks_each_line() -> None:
    masks: list[str] = []
    mask_secret("first\n\nsecond", masks.append)
    assert masks == ["::add-mask::first", "::add-mask::second"]


def test_mask_secret_ignores_empty_values() -> None:
    masks: list[str] = []
    mask_secret("", masks.append)
    assert masks == []


def test_append_github_output_writes_entries(tmp_path: Path) -> None:
    output_file = tmp_path / "nested" / "output"
    append_github_output(output_file, {"max-urls": "100", "url": "https://a.test"})
    append_github_output(output_file, {"hosting-mode": "staticSite"})

    lines = output_file.read_text(encoding="utf-8").splitlines()
    assert lines == [
        "max-urls=100",
        "url=https://a.test",
        "hosting-mode=staticSite",
    ]


def test_append_github_output_uses_heredoc_for_multiline(tmp_path: Path) -> None:
    output_file = tmp_path / "output"
    append_github_output(output_file, {"input-urls": "a\nEOF\nb"})

    content = output_file.read_text(encoding="utf-8")
    assert content == "input-urls<<EOF_1\na\nEOF\nb\nEOF_1\n"
