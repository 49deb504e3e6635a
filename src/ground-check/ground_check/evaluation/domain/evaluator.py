"""Evaluator Protocol — structural interface for all evaluator implementations."""

from typing import Protocol

from ground_check.evaluation.domain.request import EvaluationRequest
from ground_check.evaluation.domain.response import EvaluationResponse


class Evaluator(Protocol):
    """Structural interface satisfied by any evaluator implementation."""

    def evaluate(self, request: EvaluationRequest) -> EvaluationResponse: ...
