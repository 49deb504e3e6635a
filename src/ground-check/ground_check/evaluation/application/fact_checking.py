"""FactCheckingEvaluator — grounded factuality check delegated to a chat model.

Decides whether a claim (the response under evaluation) is logically supported
by a document (the supporting context) by asking a separate, typically small
and cheap model for a yes/no answer. Models fine-tuned for this task, such as
Bespoke-MiniCheck served through Ollama, should be used via
``FactCheckingEvaluator.for_bespoke_minicheck``.

This is not a closed-book accuracy test: without a document there is nothing
to check the claim against.
"""

import time

from ground_check.chat.domain.client import ChatClientFactory
from ground_check.evaluation.domain.observer import EvaluationObserver
from ground_check.evaluation.domain.prompt import (
    BESPOKE_EVALUATION_PROMPT,
    DEFAULT_EVALUATION_PROMPT,
    render_prompt,
)
from ground_check.evaluation.domain.request import EvaluationRequest
from ground_check.evaluation.domain.response import EvaluationResponse

_AFFIRMATIVE = "yes"
_NEGATIVE = "no"


class FactCheckingEvaluator:
    """Evaluator that reduces a chat model's yes/no answer to a boolean verdict.

    Holds only its client factory, observer and template, all fixed at
    construction, so one instance may serve concurrent evaluate() calls.
    """

    def __init__(
        self,
        client_factory: ChatClientFactory,
        observer: EvaluationObserver,
        evaluation_prompt: str = DEFAULT_EVALUATION_PROMPT,
    ) -> None:
        self._client_factory = client_factory
        self._observer = observer
        self._evaluation_prompt = evaluation_prompt

    @classmethod
    def for_bespoke_minicheck(
        cls,
        client_factory: ChatClientFactory,
        observer: EvaluationObserver,
    ) -> "FactCheckingEvaluator":
        """Build an evaluator using the bare document/claim template."""
        return cls(
            client_factory=client_factory,
            observer=observer,
            evaluation_prompt=BESPOKE_EVALUATION_PROMPT,
        )

    @property
    def evaluation_prompt(self) -> str:
        return self._evaluation_prompt

    def evaluate(self, request: EvaluationRequest) -> EvaluationResponse:
        """Check ``request.response_content`` against ``request.supporting_data``.

        Only an answer equal to "yes", ignoring letter case, passes. Anything
        else, including "Yes." or an empty answer, fails.

        Raises:
            PromptRenderError: if the configured template has unknown placeholders.
            Any error raised by the chat client, unchanged.
        """
        claim = request.response_content
        document = request.supporting_data
        self._observer.fact_check_started(
            claim_length=len(claim),
            document_length=len(document),
        )

        prompt = render_prompt(self._evaluation_prompt, document=document, claim=claim)

        start = time.monotonic()
        response = self._client_factory.create().call(user_text=prompt)
        duration_ms = int((time.monotonic() - start) * 1000)

        verdict = (response.content or "").lower()
        if verdict not in (_AFFIRMATIVE, _NEGATIVE):
            self._observer.fact_check_verdict_unrecognised(raw_verdict=response.content)

        passed = verdict == _AFFIRMATIVE
        self._observer.fact_check_completed(passed=passed, duration_ms=duration_ms)
        return EvaluationResponse(passed=passed, feedback="", metadata={})
