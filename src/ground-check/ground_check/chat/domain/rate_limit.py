"""RateLimit value object — provider rate-limit state after a chat completion."""

from datetime import timedelta

from pydantic import BaseModel, ConfigDict


class RateLimit(BaseModel):
    """Immutable snapshot of request and token quotas.

    Every field defaults to zero; ``RateLimit.empty()`` is returned when the
    provider exposes no rate-limit headers.
    """

    model_config = ConfigDict(frozen=True)

    requests_limit: int = 0
    requests_remaining: int = 0
    requests_reset: timedelta = timedelta(0)
    tokens_limit: int = 0
    tokens_remaining: int = 0
    tokens_reset: timedelta = timedelta(0)

    @classmethod
    def empty(cls) -> "RateLimit":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self == RateLimit.empty()

    def __str__(self) -> str:
        return (
            f"RateLimit(requests={self.requests_remaining}/{self.requests_limit}"
            f" reset={self.requests_reset.total_seconds()}s,"
            f" tokens={self.tokens_remaining}/{self.tokens_limit}"
            f" reset={self.tokens_reset.total_seconds()}s)"
        )
