"""Error types raised by chat infrastructure."""

from ground_check.core.errors import GroundCheckError


class ChatInvocationError(GroundCheckError):
    """Raised when the chat model cannot be invoked."""

    def __init__(self, reason: str, retriable: bool = False) -> None:
        super().__init__(f"Failed to invoke chat model: {reason}", retriable=retriable)
