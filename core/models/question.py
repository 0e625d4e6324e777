# =============================================================================
# core/models/question.py - Question Schemas
# =============================================================================
# These models define the API contract for question operations:
# - QuestionId: Distinct identifier type (serialized as a flat string)
# - Question: The full question record stored and returned by the API
#
# Questions are replaced as a whole on update, never patched field-by-field.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator


class QuestionId(RootModel[str]):
    """
    Identifier of a question.

    Wraps a plain string so it can't be mixed up with titles or other text.
    On the wire it is always a flat string ("1"). The older single-field
    object form ({"0": "1"}) is still accepted on input.
    """

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def unwrap_legacy_form(cls, value: Any) -> Any:
        """Accept {"0": "<id>"} as well as "<id>"."""
        if isinstance(value, dict) and set(value) == {"0"}:
            return value["0"]
        return value

    def __str__(self) -> str:
        return self.root


class Question(BaseModel):
    """
    Schema for a question.

    Example:
        {
            "id": "1",
            "title": "First Question",
            "content": "Content of question",
            "tags": ["faq"]
        }
    """

    model_config = ConfigDict(frozen=True)

    # Map key in the store is always this id
    id: QuestionId = Field(
        ...,
        description="Unique question identifier"
    )

    title: str = Field(
        ...,
        description="Short title of the question"
    )

    content: str = Field(
        ...,
        description="Body text of the question"
    )

    # None and [] are different: None means the question was never tagged
    tags: list[str] | None = Field(
        default=None,
        description="Optional ordered list of tags"
    )
