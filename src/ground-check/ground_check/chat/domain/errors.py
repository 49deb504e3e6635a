"""Error types raised by the chat domain."""

from ground_check.core.errors import GroundCheckError


class MissingMetadataKeyError(GroundCheckError):
    """Raised when a required key is absent from a metadata extra bag."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Failed to read response metadata: key '{key}' is not set")
