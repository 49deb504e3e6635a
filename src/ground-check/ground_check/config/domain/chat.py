"""Chat model configuration."""

from pydantic import BaseModel, ConfigDict, Field


class ChatModelConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str = Field(min_length=1)
    temperature: float = Field(default=0.0, ge=0.0)
    max_tokens: int | None = Field(default=None, gt=0)
    api_base: str | None = None
