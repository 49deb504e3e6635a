"""Error types raised by config infrastructure."""

from pathlib import Path

from ground_check.core.errors import GroundCheckError


class MissingEnvVarsError(GroundCheckError):
    """Raised when one or more required environment variables are not set."""

    def __init__(self, missing_vars: list[str]) -> None:
        self.missing_vars = missing_vars
        var_list = ", ".join(sorted(missing_vars))
        super().__init__(
            f"Failed to load config: missing environment variables: {var_list}"
        )


class ConfigValidationError(GroundCheckError):
    """Raised when the loaded config is malformed or fails schema validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(GroundCheckError):
    """Raised when the config file cannot be found."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to load config: file not found: {path}")
