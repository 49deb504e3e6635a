"""Base exception class for all ground-check errors."""


class GroundCheckError(Exception):
    """Base class for all ground-check errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
