"""PromptMetadata — per-prompt filter results reported alongside a chat response."""

from typing import Any

from pydantic import BaseModel, ConfigDict


def _freeze(value: Any) -> Any:
    """Return a hashable stand-in for nested dicts, lists and sets."""
    if isinstance(value, dict):
        return frozenset((key, _freeze(item)) for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(item) for item in value)
    return value


class PromptFilterMetadata(BaseModel):
    """Content-filter outcome for the prompt at ``prompt_index``.

    ``content_filter_metadata`` is provider-specific and passed through as-is.
    """

    model_config = ConfigDict(frozen=True)

    prompt_index: int
    content_filter_metadata: Any = None

    def __hash__(self) -> int:
        return hash((self.prompt_index, _freeze(self.content_filter_metadata)))


class PromptMetadata(BaseModel):
    """Ordered, immutable collection of PromptFilterMetadata entries."""

    model_config = ConfigDict(frozen=True)

    filters: tuple[PromptFilterMetadata, ...] = ()

    @classmethod
    def empty(cls) -> "PromptMetadata":
        return cls()

    @classmethod
    def of(cls, *filters: PromptFilterMetadata) -> "PromptMetadata":
        return cls(filters=filters)

    def find_by_prompt_index(self, prompt_index: int) -> PromptFilterMetadata | None:
        """Return the first entry for ``prompt_index``, or None if there is none."""
        for entry in self.filters:
            if entry.prompt_index == prompt_index:
                return entry
        return None

    def __len__(self) -> int:
        return len(self.filters)
