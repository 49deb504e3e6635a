"""ChatObserver port — domain events emitted around chat completions."""

from typing import Protocol


class ChatObserver(Protocol):
    """Observer port for chat domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def chat_completion_started(self, model: str) -> None: ...

    def chat_completion_completed(
        self, model: str, duration_ms: int, total_tokens: int
    ) -> None: ...

    def chat_completion_failed(self, model: str, reason: str) -> None: ...

    def chat_high_temperature_warned(self, model: str, temperature: float) -> None: ...
