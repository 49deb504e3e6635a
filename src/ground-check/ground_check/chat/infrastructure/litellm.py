"""LiteLLMChatClient — chat client implementation backed by LiteLLM."""

import time
from typing import Any

import litellm
import openai

from ground_check.chat.domain.metadata import ChatResponseMetadata
from ground_check.chat.domain.observer import ChatObserver
from ground_check.chat.domain.response import ChatResponse
from ground_check.chat.domain.usage import Usage
from ground_check.chat.infrastructure.errors import ChatInvocationError
from ground_check.chat.infrastructure.headers import rate_limit_from_headers
from ground_check.config.domain.chat import ChatModelConfig

# LiteLLM exceptions subclass the matching openai types.
_RETRIABLE_ERRORS: tuple[type[Exception], ...] = (
    openai.APIConnectionError,
    openai.RateLimitError,
)


class LiteLLMChatClient:
    """Chat client that delegates a single user message to an LLM via LiteLLM.

    One instance is constructed per request by LiteLLMChatClientFactory.
    """

    def __init__(self, config: ChatModelConfig, observer: ChatObserver) -> None:
        self._config = config
        self._observer = observer

    def call(self, user_text: str) -> ChatResponse:
        """Send ``user_text`` as a user-role message and return the response.

        Raises:
            ChatInvocationError: if the LiteLLM call fails. Connection, timeout
                and rate-limit failures are marked retriable.
        """
        model = self._config.model
        self._observer.chat_completion_started(model=model)

        start = time.monotonic()
        try:
            response = litellm.completion(
                messages=[{"role": "user", "content": user_text}],
                **self._completion_kwargs(),
            )
        except Exception as exc:
            reason = str(exc)
            self._observer.chat_completion_failed(model=model, reason=reason)
            raise ChatInvocationError(
                reason=reason,
                retriable=isinstance(exc, _RETRIABLE_ERRORS),
            ) from exc

        duration_ms = int((time.monotonic() - start) * 1000)

        metadata = _build_metadata(response=response, fallback_model=model)
        self._observer.chat_completion_completed(
            model=model,
            duration_ms=duration_ms,
            total_tokens=metadata.usage.total_tokens,
        )

        content: str | None = response.choices[0].message.content
        return ChatResponse(content=content, metadata=metadata)

    def _completion_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "model": self._config.model,
            "temperature": self._config.temperature,
        }
        if self._config.max_tokens is not None:
            kwargs["max_tokens"] = self._config.max_tokens
        if self._config.api_base is not None:
            kwargs["api_base"] = self._config.api_base
        return kwargs


def _build_metadata(response: Any, fallback_model: str) -> ChatResponseMetadata:
    """Translate a LiteLLM ModelResponse into ChatResponseMetadata."""
    builder = (
        ChatResponseMetadata.builder()
        .with_id(response.id or "")
        .with_model(response.model or fallback_model)
        .with_usage(_build_usage(getattr(response, "usage", None)))
    )

    hidden_params = getattr(response, "_hidden_params", None)
    if isinstance(hidden_params, dict):
        builder.with_rate_limit(
            rate_limit_from_headers(hidden_params.get("additional_headers"))
        )

    created = getattr(response, "created", None)
    if isinstance(created, int):
        builder.with_key_value("created", created)

    return builder.build()


def _build_usage(usage: Any) -> Usage:
    if usage is None:
        return Usage.empty()
    return Usage(
        prompt_tokens=usage.prompt_tokens or 0,
        generation_tokens=usage.completion_tokens or 0,
    )
