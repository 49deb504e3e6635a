"""Tests for StructlogEvaluationObserver."""

from structlog.testing import capture_logs

from ground_check.evaluation.domain.observer import EvaluationObserver
from ground_check.evaluation.infrastructure.observer import StructlogEvaluationObserver


class TestStructlogEvaluationObserver:
    def test_satisfies_protocol(self) -> None:
        observer: EvaluationObserver = StructlogEvaluationObserver()

        assert observer is not None

    def test_started_is_logged_at_info(self) -> None:
        with capture_logs() as logs:
            StructlogEvaluationObserver().fact_check_started(
                claim_length=3, document_length=10
            )

        assert logs == [
            {
                "event": "evaluation.fact_check_started",
                "log_level": "info",
                "claim_length": 3,
                "document_length": 10,
            }
        ]

    def test_completed_carries_verdict(self) -> None:
        with capture_logs() as logs:
            StructlogEvaluationObserver().fact_check_completed(
                passed=True, duration_ms=12
            )

        assert logs[0]["event"] == "evaluation.fact_check_completed"
        assert logs[0]["passed"] is True
        assert logs[0]["duration_ms"] == 12

    def test_unrecognised_verdict_is_a_warning(self) -> None:
        with capture_logs() as logs:
            StructlogEvaluationObserver().fact_check_verdict_unrecognised(
                raw_verdict="Yes."
            )

        assert logs[0]["log_level"] == "warning"
        assert logs[0]["raw_verdict"] == "Yes."
