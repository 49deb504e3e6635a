"""${ENV_VAR} and ${ENV_VAR:-default} interpolation over parsed YAML data."""

import os
import re
from collections.abc import Iterator
from typing import TypeAlias

# Group 1 is the variable name, group 2 the optional fallback after ":-".
_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")

RawValue: TypeAlias = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def _strings(data: RawValue) -> Iterator[str]:
    """Yield every string leaf of the data tree, depth first."""
    if isinstance(data, str):
        yield data
    elif isinstance(data, list):
        for item in data:
            yield from _strings(item)
    elif isinstance(data, dict):
        for value in data.values():
            yield from _strings(value)


def collect_missing_vars(data: RawValue) -> list[str]:
    """
    Return, in order of first appearance, the names of referenced env vars that
    are unset and carry no ``:-`` fallback.
    """
    missing: list[str] = []
    for text in _strings(data):
        for match in _ENV_VAR_PATTERN.finditer(text):
            name, fallback = match.group(1), match.group(2)
            if fallback is None and name not in os.environ and name not in missing:
                missing.append(name)
    return missing


def _substitute(match: re.Match[str]) -> str:
    name, fallback = match.group(1), match.group(2)
    if name in os.environ:
        return os.environ[name]
    if fallback is not None:
        return fallback
    raise KeyError(name)


def interpolate(data: RawValue) -> RawValue:
    """
    Return a copy of ``data`` with every env var reference substituted.

    Call `collect_missing_vars` first; an unset variable without a fallback
    raises KeyError here.
    """
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(_substitute, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data
