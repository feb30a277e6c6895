"""Unit tests for the CLI entrypoint."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import Mock

import pytest

from focus_coach import cli
from focus_coach.llm.provider import LLMProvider


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("FOCUS_LOG_LEVEL", "FOCUS_DEBUG", "FOCUS_MODEL_TIMEOUT_SECONDS", "FOCUS_LLM_PROVIDER"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    # configure_logging swaps root handlers; restore them after each test.
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _patch_provider(monkeypatch: pytest.MonkeyPatch, reply: str | Exception) -> Mock:
    provider = Mock(spec=LLMProvider)
    if isinstance(reply, Exception):
        provider.invoke.side_effect = reply
    else:
        provider.invoke.return_value = reply
    monkeypatch.setattr(cli.LLMFactory, "create", staticmethod(lambda config: provider))
    return provider


def test_prompt_command_prints_instruction(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["prompt", "--task", "Get organized for the week"]) == cli.EXIT_OK

    assert 'TASK: "Get organized for the week"' in capsys.readouterr().out


def test_validate_accepts_good_text(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["validate", "Open a document."]) == cli.EXIT_OK

    assert capsys.readouterr().out.strip() == "OK: Open a document."


def test_validate_reports_failing_check(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["validate", "Open a document. Then write a title."])

    assert code == cli.EXIT_VALIDATION
    assert "single_sentence" in capsys.readouterr().err


def test_validate_parses_raw_json() -> None:
    assert cli.main(["validate", '{"suggestion": "Write one sentence."}']) == cli.EXIT_OK
    assert cli.main(["validate", '{"step": "Write one sentence."}']) == cli.EXIT_EXTRACTION


def test_empty_task_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["prompt", "--task", "  "])

    assert exc_info.value.code == 2


def test_suggest_prints_focus(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    provider = _patch_provider(
        monkeypatch, '{"suggestion": "List three main tasks you need to accomplish this week."}'
    )

    code = cli.main(["suggest", "--user", "alice", "--task", "Get organized for the week"])

    assert code == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "Current focus for user: alice" in out
    assert "FIRST STEP: List three main tasks you need to accomplish this week." in out
    provider.invoke.assert_awaited_once()


@pytest.mark.parametrize(
    ("reply", "expected"),
    [
        ('{"suggestion": "Think about what you want to accomplish."}', cli.EXIT_VALIDATION),
        ("no json at all", cli.EXIT_EXTRACTION),
        (ConnectionError("network down"), cli.EXIT_MODEL),
    ],
)
def test_suggest_failure_exit_codes(
    monkeypatch: pytest.MonkeyPatch, reply: str | Exception, expected: int
) -> None:
    _patch_provider(monkeypatch, reply)

    assert cli.main(["suggest", "--task", "Get organized for the week"]) == expected


def test_suggest_without_api_key_is_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FOCUS_LLM_OPENAI_API_KEY", raising=False)
    monkeypatch.setenv("FOCUS_LLM_PROVIDER", "openai")

    assert cli.main(["suggest", "--task", "Get organized"]) == cli.EXIT_CONFIG


def test_invalid_settings_are_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FOCUS_MODEL_TIMEOUT_SECONDS", "-1")

    assert cli.main(["suggest", "--task", "Get organized"]) == cli.EXIT_CONFIG
