"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ground_check.config.domain.config import GroundCheckConfig
from ground_check.config.domain.observer import ConfigObserver
from ground_check.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from ground_check.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a GroundCheckConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> GroundCheckConfig:
        """
        Load, interpolate, validate, and return a GroundCheckConfig from a YAML file.

        Raises:
            ConfigLoadError: if the file does not exist.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the file is not a YAML mapping or the schema is violated.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        cfg = _build_config(interpolated=interpolate(raw))
        if cfg.chat.temperature > 0.0:
            self._observer.config_chat_temperature_warning(cfg.chat.temperature)
        self._observer.config_loaded(name=cfg.name, model=cfg.chat.model)
        return cfg


def _parse_yaml(path: Path) -> Any:
    if not path.is_file():
        raise ConfigLoadError(path=path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigValidationError("top-level YAML value must be a mapping")
    return raw


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(interpolated: Any) -> GroundCheckConfig:
    try:
        return GroundCheckConfig.model_validate(interpolated)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
