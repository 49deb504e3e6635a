"""EvaluationResponse value object — the verdict produced by an Evaluator."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EvaluationResponse(BaseModel):
    """Immutable evaluation outcome.

    Used as a cross-layer DTO: produced by evaluators, consumed by callers and
    reporting code.
    """

    model_config = ConfigDict(frozen=True)

    passed: bool
    score: float = 0.0
    feedback: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)
