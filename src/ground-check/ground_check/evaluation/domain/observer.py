"""EvaluationObserver port — domain events emitted while evaluating claims."""

from typing import Protocol


class EvaluationObserver(Protocol):
    """Observer port for evaluation domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def fact_check_started(self, claim_length: int, document_length: int) -> None: ...

    def fact_check_completed(self, passed: bool, duration_ms: int) -> None: ...

    def fact_check_verdict_unrecognised(self, raw_verdict: str | None) -> None: ...
