"""Structlog implementation of the ChatObserver port."""

import structlog


class StructlogChatObserver:
    """Delegates chat domain events to structlog.

    Satisfies the ChatObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def chat_completion_started(self, model: str) -> None:
        self._log.info("chat.completion_started", model=model)

    def chat_completion_completed(
        self, model: str, duration_ms: int, total_tokens: int
    ) -> None:
        self._log.info(
            "chat.completion_completed",
            model=model,
            duration_ms=duration_ms,
            total_tokens=total_tokens,
        )

    def chat_completion_failed(self, model: str, reason: str) -> None:
        self._log.error("chat.completion_failed", model=model, reason=reason)

    def chat_high_temperature_warned(self, model: str, temperature: float) -> None:
        self._log.warning(
            "chat.high_temperature_warned",
            model=model,
            temperature=temperature,
        )
