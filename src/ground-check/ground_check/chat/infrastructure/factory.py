"""LiteLLMChatClientFactory — constructs LiteLLMChatClient instances."""

import litellm

from ground_check.chat.domain.client import ChatClient
from ground_check.chat.domain.observer import ChatObserver
from ground_check.chat.infrastructure.litellm import LiteLLMChatClient
from ground_check.config.domain.chat import ChatModelConfig


class LiteLLMChatClientFactory:
    """Creates a fresh LiteLLMChatClient per request from a fixed configuration."""

    def __init__(self, config: ChatModelConfig, observer: ChatObserver) -> None:
        litellm.suppress_debug_info = True
        self._config = config
        self._observer = observer

        if config.temperature > 0.0:
            self._observer.chat_high_temperature_warned(
                model=config.model,
                temperature=config.temperature,
            )

    def create(self) -> ChatClient:
        return LiteLLMChatClient(config=self._config, observer=self._observer)
