"""Tests for the ground-check CLI."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from ground_check.cli.main import EXIT_ERROR, EXIT_SUPPORTED, EXIT_UNSUPPORTED, app
from ground_check.evaluation.application.fact_checking import FactCheckingEvaluator

_COMPLETION = "ground_check.chat.infrastructure.litellm.litellm.completion"

runner = CliRunner()


def _make_completion_response(content: str | None) -> MagicMock:
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    response.id = "chatcmpl-1"
    response.model = "gpt-4o-mini"
    response.usage = None
    response.created = None
    response._hidden_params = {}
    return response


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text("name: cli-test\nchat:\n  model: gpt-4o-mini\n", encoding="utf-8")
    return path


@pytest.fixture
def document_path(tmp_path: Path) -> Path:
    path = tmp_path / "document.txt"
    path.write_text("The sky is blue.", encoding="utf-8")
    return path


def _invoke(config_path: Path, document_path: Path, *extra: str):
    return runner.invoke(
        app,
        [
            str(config_path),
            "--document",
            str(document_path),
            "--claim",
            "The sky is blue.",
            "--log-format",
            "json",
            *extra,
        ],
    )


class TestCheckCommand:
    def test_supported_claim_exits_zero(
        self, config_path: Path, document_path: Path
    ) -> None:
        with patch(_COMPLETION, return_value=_make_completion_response("Yes")):
            result = _invoke(config_path, document_path)

        assert result.exit_code == EXIT_SUPPORTED
        assert "PASS" in result.stdout

    def test_unsupported_claim_exits_one(
        self, config_path: Path, document_path: Path
    ) -> None:
        with patch(_COMPLETION, return_value=_make_completion_response("No")):
            result = _invoke(config_path, document_path)

        assert result.exit_code == EXIT_UNSUPPORTED
        assert "FAIL" in result.stdout

    def test_document_and_claim_reach_the_model(
        self, config_path: Path, document_path: Path
    ) -> None:
        with patch(
            _COMPLETION, return_value=_make_completion_response("yes")
        ) as completion:
            _invoke(config_path, document_path)

        prompt = completion.call_args.kwargs["messages"][0]["content"]
        assert "The sky is blue." in prompt
        assert 'Respond with "yes"' in prompt

    def test_bespoke_flag_selects_bare_prompt(
        self, config_path: Path, document_path: Path
    ) -> None:
        with patch(
            _COMPLETION, return_value=_make_completion_response("yes")
        ) as completion:
            _invoke(config_path, document_path, "--bespoke-minicheck")

        prompt = completion.call_args.kwargs["messages"][0]["content"]
        assert prompt.startswith("Document:")
        assert "Respond with" not in prompt

    def test_bespoke_flag_builds_bespoke_evaluator(
        self, config_path: Path, document_path: Path
    ) -> None:
        with (
            patch(_COMPLETION, return_value=_make_completion_response("yes")),
            patch.object(
                FactCheckingEvaluator,
                "for_bespoke_minicheck",
                wraps=FactCheckingEvaluator.for_bespoke_minicheck,
            ) as for_bespoke,
        ):
            result = _invoke(config_path, document_path, "--bespoke-minicheck")

        assert result.exit_code == EXIT_SUPPORTED
        for_bespoke.assert_called_once()

    def test_undecodable_document_exits_with_error(
        self, config_path: Path, tmp_path: Path
    ) -> None:
        document = tmp_path / "binary.txt"
        document.write_bytes(b"\xff\xfe bad")

        with patch(_COMPLETION) as completion:
            result = _invoke(config_path, document)

        assert result.exit_code == EXIT_ERROR
        assert "Failed to read document" in result.output
        completion.assert_not_called()

    def test_chat_failure_exits_with_error(
        self, config_path: Path, document_path: Path
    ) -> None:
        with patch(_COMPLETION, side_effect=RuntimeError("connection refused")):
            result = _invoke(config_path, document_path)

        assert result.exit_code == EXIT_ERROR

    def test_missing_config_exits_with_error(
        self, tmp_path: Path, document_path: Path
    ) -> None:
        result = _invoke(tmp_path / "nope.yaml", document_path)

        assert result.exit_code == EXIT_ERROR

    def test_invalid_log_format_exits_with_error(
        self, config_path: Path, document_path: Path
    ) -> None:
        result = runner.invoke(
            app,
            [
                str(config_path),
                "--document",
                str(document_path),
                "--claim",
                "c",
                "--log-format",
                "xml",
            ],
        )

        assert result.exit_code == EXIT_ERROR
