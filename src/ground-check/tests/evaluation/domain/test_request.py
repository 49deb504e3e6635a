"""Tests for EvaluationRequest and EvaluationResponse domain models."""

import pytest
from pydantic import ValidationError

from ground_check.evaluation.domain.request import Document, EvaluationRequest
from ground_check.evaluation.domain.response import EvaluationResponse


class TestEvaluationRequestSupportingData:
    """supporting_data joins the text of every document."""

    def test_string_supporting_data_becomes_single_document(self) -> None:
        request = EvaluationRequest(response_content="c", supporting_data="doc")

        assert request.data_list == [Document(content="doc")]
        assert request.supporting_data == "doc"

    def test_documents_are_joined_with_newlines(self) -> None:
        request = EvaluationRequest(
            response_content="c",
            data_list=[Document(content="a"), Document(content="b")],
        )

        assert request.supporting_data == "a\nb"

    def test_documents_without_content_are_skipped(self) -> None:
        request = EvaluationRequest(
            response_content="c",
            data_list=[Document(content=None), Document(content="b")],
        )

        assert request.supporting_data == "b"

    def test_no_documents_gives_empty_string(self) -> None:
        request = EvaluationRequest(response_content="c")

        assert request.supporting_data == ""

    def test_explicit_data_list_wins_over_supporting_data(self) -> None:
        request = EvaluationRequest(
            response_content="c",
            data_list=[Document(content="explicit")],
            supporting_data="ignored",
        )

        assert request.supporting_data == "explicit"

    def test_user_text_defaults_to_empty(self) -> None:
        request = EvaluationRequest(response_content="c")

        assert request.user_text == ""

    def test_response_content_is_required(self) -> None:
        with pytest.raises(ValidationError):
            EvaluationRequest(supporting_data="doc")  # type: ignore[call-arg]


class TestImmutability:
    def test_request_is_frozen(self) -> None:
        request = EvaluationRequest(response_content="c", supporting_data="doc")

        with pytest.raises(ValidationError):
            request.response_content = "other"  # type: ignore[misc]

    def test_response_is_frozen(self) -> None:
        response = EvaluationResponse(passed=True)

        with pytest.raises(ValidationError):
            response.passed = False  # type: ignore[misc]


class TestEvaluationResponseDefaults:
    def test_defaults(self) -> None:
        response = EvaluationResponse(passed=False)

        assert response.score == 0.0
        assert response.feedback == ""
        assert response.metadata == {}

    def test_metadata_default_is_independent_across_instances(self) -> None:
        a = EvaluationResponse(passed=True)
        b = EvaluationResponse(passed=True)

        assert a.metadata is not b.metadata
