"""Structlog implementation of the EvaluationObserver port."""

import structlog


class StructlogEvaluationObserver:
    """Delegates evaluation domain events to structlog.

    Satisfies the EvaluationObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def fact_check_started(self, claim_length: int, document_length: int) -> None:
        self._log.info(
            "evaluation.fact_check_started",
            claim_length=claim_length,
            document_length=document_length,
        )

    def fact_check_completed(self, passed: bool, duration_ms: int) -> None:
        self._log.info(
            "evaluation.fact_check_completed",
            passed=passed,
            duration_ms=duration_ms,
        )

    def fact_check_verdict_unrecognised(self, raw_verdict: str | None) -> None:
        self._log.warning(
            "evaluation.fact_check_verdict_unrecognised",
            raw_verdict=raw_verdict,
            message="Model answered neither 'yes' nor 'no'; treating as unsupported",
        )
