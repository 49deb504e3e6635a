"""ChatClient and ChatClientFactory Protocols — the delegate generation capability."""

from typing import Protocol

from ground_check.chat.domain.response import ChatResponse


class ChatClient(Protocol):
    """Structural interface satisfied by any chat client implementation.

    Sends ``user_text`` as a single user-role message and returns the result.
    """

    def call(self, user_text: str) -> ChatResponse: ...


class ChatClientFactory(Protocol):
    """Constructs a fresh ChatClient for every request."""

    def create(self) -> ChatClient: ...
