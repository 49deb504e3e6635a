"""Evaluator configuration model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator

from ground_check.evaluation.domain.prompt import evaluation_prompt_for, placeholders

PromptName = Literal["default", "bespoke-minicheck"]

_REQUIRED_PLACEHOLDERS = {"document", "claim"}


class EvaluatorConfig(BaseModel):
    """Selects the fact-checking template; ``custom_prompt`` overrides ``prompt``."""

    model_config = ConfigDict(frozen=True)

    prompt: PromptName = "default"
    custom_prompt: str | None = None

    @model_validator(mode="after")
    def _custom_prompt_has_placeholders(self) -> "EvaluatorConfig":
        if self.custom_prompt is None:
            return self
        absent = _REQUIRED_PLACEHOLDERS - placeholders(self.custom_prompt)
        if absent:
            names = ", ".join("{" + name + "}" for name in sorted(absent))
            raise ValueError(f"custom_prompt must contain {names}")
        return self

    def resolved_prompt(self) -> str:
        if self.custom_prompt is not None:
            return self.custom_prompt
        return evaluation_prompt_for(self.prompt)
