"""ChatResponse value object — generated text plus its response metadata."""

from pydantic import BaseModel, ConfigDict, Field

from ground_check.chat.domain.metadata import ChatResponseMetadata


class ChatResponse(BaseModel):
    """Immutable outcome of one chat completion.

    ``content`` is None when the provider returned no text for the choice.
    """

    model_config = ConfigDict(frozen=True)

    content: str | None
    metadata: ChatResponseMetadata = Field(default_factory=ChatResponseMetadata)
