"""Top-level GroundCheckConfig aggregate — the root configuration object."""

from pydantic import BaseModel, ConfigDict, Field

from ground_check.config.domain.chat import ChatModelConfig
from ground_check.config.domain.evaluator import EvaluatorConfig


class GroundCheckConfig(BaseModel):
    """Root configuration aggregate for a fact-checking setup."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    chat: ChatModelConfig
    evaluator: EvaluatorConfig = Field(default_factory=EvaluatorConfig)
