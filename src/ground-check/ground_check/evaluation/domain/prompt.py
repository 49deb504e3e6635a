"""Fact-checking prompt templates and single-pass placeholder rendering."""

import re

from ground_check.evaluation.domain.errors import PromptRenderError

DEFAULT_EVALUATION_PROMPT = """\
Evaluate whether or not the following claim is supported by the provided document.
Respond with "yes" if the claim is supported, or "no" if it is not.
Document:
{document}

Claim:
{claim}
"""

# Bespoke-MiniCheck is fine-tuned on this exact layout and answers yes/no unprompted.
BESPOKE_EVALUATION_PROMPT = """\
Document:
{document}

Claim:
{claim}
"""

_TEMPLATES: dict[str, str] = {
    "default": DEFAULT_EVALUATION_PROMPT,
    "bespoke-minicheck": BESPOKE_EVALUATION_PROMPT,
}

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def evaluation_prompt_for(name: str) -> str:
    """Return the built-in template registered under ``name``.

    Raises:
        KeyError: if no template has that name.
    """
    return _TEMPLATES[name]


def placeholders(template: str) -> set[str]:
    """Return the names of every ``{name}`` placeholder in ``template``."""
    return {match.group(1) for match in _PLACEHOLDER.finditer(template)}


def render_prompt(template: str, **params: str) -> str:
    """
    Substitute every ``{name}`` in ``template`` with ``params[name]``.

    Values are inserted verbatim and never re-scanned, so a document that
    itself contains ``{claim}`` is left untouched. Unused params are ignored.

    Raises:
        PromptRenderError: listing every placeholder that has no value.
    """
    missing = sorted(placeholders(template) - params.keys())
    if missing:
        raise PromptRenderError(missing=missing)
    return _PLACEHOLDER.sub(lambda m: params[m.group(1)], template)
