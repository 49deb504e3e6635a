"""ChatResponseMetadata — provider metadata returned alongside a chat response."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ground_check.chat.domain.errors import MissingMetadataKeyError
from ground_check.chat.domain.prompt_metadata import PromptMetadata
from ground_check.chat.domain.rate_limit import RateLimit
from ground_check.chat.domain.usage import Usage


class ChatResponseMetadata(BaseModel):
    """Immutable record of the identifiers and sub-metadata of one chat response.

    Unset fields hold blank strings or the empty variant of their type, never
    None. Untyped provider extensions live in ``extra``; they are carried along
    but take no part in equality or hashing.

    Build instances with ``ChatResponseMetadata.builder()``.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    model: str = ""
    rate_limit: RateLimit = Field(default_factory=RateLimit.empty)
    usage: Usage = Field(default_factory=Usage.empty)
    prompt_metadata: PromptMetadata = Field(default_factory=PromptMetadata.empty)
    extra: dict[str, Any] = Field(default_factory=dict)

    @staticmethod
    def builder() -> "ChatResponseMetadataBuilder":
        return ChatResponseMetadataBuilder()

    def get(self, key: str, default: Any = None) -> Any:
        return self.extra.get(key, default)

    def get_required(self, key: str) -> Any:
        """Return the extra value for ``key``.

        Raises:
            MissingMetadataKeyError: if ``key`` was never set.
        """
        if key not in self.extra:
            raise MissingMetadataKeyError(key=key)
        return self.extra[key]

    def keys(self) -> list[str]:
        return list(self.extra)

    def __contains__(self, key: object) -> bool:
        return key in self.extra

    def _identity(self) -> tuple[Any, ...]:
        return (self.id, self.model, self.rate_limit, self.usage, self.prompt_metadata)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ChatResponseMetadata):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        return (
            f"{{ id: {self.id}, model: {self.model}, usage: {self.usage},"
            f" rateLimit: {self.rate_limit} }}"
        )


class ChatResponseMetadataBuilder:
    """Accumulates ChatResponseMetadata fields one at a time.

    Not safe for concurrent use. ``build()`` returns an independent frozen
    value, so the builder may keep being used afterwards.
    """

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}
        self._extra: dict[str, Any] = {}

    def with_id(self, id: str) -> "ChatResponseMetadataBuilder":
        self._fields["id"] = id
        return self

    def with_model(self, model: str) -> "ChatResponseMetadataBuilder":
        self._fields["model"] = model
        return self

    def with_rate_limit(self, rate_limit: RateLimit) -> "ChatResponseMetadataBuilder":
        self._fields["rate_limit"] = rate_limit
        return self

    def with_usage(self, usage: Usage) -> "ChatResponseMetadataBuilder":
        self._fields["usage"] = usage
        return self

    def with_prompt_metadata(
        self, prompt_metadata: PromptMetadata
    ) -> "ChatResponseMetadataBuilder":
        self._fields["prompt_metadata"] = prompt_metadata
        return self

    def with_key_value(self, key: str, value: Any) -> "ChatResponseMetadataBuilder":
        self._extra[key] = value
        return self

    def build(self) -> ChatResponseMetadata:
        return ChatResponseMetadata(**self._fields, extra=dict(self._extra))
