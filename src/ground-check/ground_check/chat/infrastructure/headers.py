"""Parse provider ``x-ratelimit-*`` response headers into a RateLimit."""

import re
from collections.abc import Mapping
from datetime import timedelta
from typing import Any

from ground_check.chat.domain.rate_limit import RateLimit

# LiteLLM re-exposes raw provider headers with this prefix.
_PROVIDER_PREFIX = "llm_provider-"

_HEADER_FIELDS: dict[str, str] = {
    "x-ratelimit-limit-requests": "requests_limit",
    "x-ratelimit-remaining-requests": "requests_remaining",
    "x-ratelimit-reset-requests": "requests_reset",
    "x-ratelimit-limit-tokens": "tokens_limit",
    "x-ratelimit-remaining-tokens": "tokens_remaining",
    "x-ratelimit-reset-tokens": "tokens_reset",
}

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ms|h|m|s)")

_UNIT_SECONDS: dict[str, float] = {"h": 3600.0, "m": 60.0, "s": 1.0, "ms": 0.001}


def parse_duration(value: str) -> timedelta:
    """
    Parse an OpenAI-style reset duration such as ``6m0s``, ``1s`` or ``20ms``.

    A bare number is read as seconds. Anything unparseable yields zero.
    """
    text = value.strip()
    try:
        return timedelta(seconds=float(text))
    except (ValueError, OverflowError):
        pass

    parts = _DURATION_PART.findall(text)
    if not parts or "".join(amount + unit for amount, unit in parts) != text:
        return timedelta(0)
    try:
        return timedelta(
            seconds=sum(float(amount) * _UNIT_SECONDS[unit] for amount, unit in parts)
        )
    except OverflowError:
        return timedelta(0)


def _parse_count(value: str) -> int:
    try:
        return int(float(value.strip()))
    except (ValueError, OverflowError):
        return 0


def rate_limit_from_headers(headers: Mapping[str, Any] | None) -> RateLimit:
    """Build a RateLimit from response headers; empty when none are present."""
    if not headers:
        return RateLimit.empty()

    values: dict[str, Any] = {}
    for raw_name, raw_value in headers.items():
        name = str(raw_name).lower().removeprefix(_PROVIDER_PREFIX)
        field = _HEADER_FIELDS.get(name)
        if field is None or field in values:
            continue
        if field.endswith("_reset"):
            values[field] = parse_duration(str(raw_value))
        else:
            values[field] = _parse_count(str(raw_value))

    if not values:
        return RateLimit.empty()
    return RateLimit(**values)
