"""Error types raised by the evaluation domain."""

from ground_check.core.errors import GroundCheckError


class PromptRenderError(GroundCheckError):
    """Raised when a prompt template references placeholders with no value."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        names = ", ".join(sorted(missing))
        super().__init__(f"Failed to render prompt: missing values for {names}")
