"""EvaluationRequest value object — the input to an Evaluator."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Document(BaseModel):
    """One piece of supporting context. ``content`` may be None for non-text media."""

    model_config = ConfigDict(frozen=True)

    content: str | None
    metadata: dict[str, Any] = Field(default_factory=dict)


class EvaluationRequest(BaseModel):
    """Immutable request pairing a model response with the context it should rest on.

    ``response_content`` is the text under evaluation (the claim), ``data_list``
    the supporting documents, and ``user_text`` the original user input, when
    one exists. A plain string may be given as ``supporting_data`` and is
    stored as a single Document.
    """

    model_config = ConfigDict(frozen=True)

    user_text: str = ""
    data_list: list[Document] = Field(default_factory=list)
    response_content: str

    @model_validator(mode="before")
    @classmethod
    def _accept_supporting_data(cls, data: Any) -> Any:
        if isinstance(data, dict) and "supporting_data" in data:
            data = dict(data)
            supporting = data.pop("supporting_data")
            data.setdefault("data_list", [Document(content=supporting)])
        return data

    @property
    def supporting_data(self) -> str:
        """Text of every document in ``data_list``, newline-separated, skipping None."""
        return "\n".join(
            doc.content for doc in self.data_list if doc.content is not None
        )
