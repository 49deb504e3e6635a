"""Usage value object — token accounting for a single chat completion."""

from pydantic import BaseModel, ConfigDict


class Usage(BaseModel):
    """Immutable token counts reported by the provider.

    The zero value stands in for providers that report no usage at all, so
    consumers never need to branch on absence.
    """

    model_config = ConfigDict(frozen=True)

    prompt_tokens: int = 0
    generation_tokens: int = 0

    @classmethod
    def empty(cls) -> "Usage":
        return cls()

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.generation_tokens

    @property
    def is_empty(self) -> bool:
        return self == Usage.empty()

    def __str__(self) -> str:
        return (
            f"Usage(prompt_tokens={self.prompt_tokens}, "
            f"generation_tokens={self.generation_tokens}, "
            f"total_tokens={self.total_tokens})"
        )
