# =============================================================================
# core/models/answer.py - Answer Schemas
# =============================================================================
# An answer belongs to exactly one question, referenced by its QuestionId.
# Answers arrive as form-encoded fields (content, questionId); the id is
# assigned by the service.
# =============================================================================

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, RootModel

from .question import QuestionId


class AnswerId(RootModel[str]):
    """Identifier of an answer, serialized as a flat string."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def generate(cls) -> "AnswerId":
        """Create a fresh random identifier."""
        return cls(uuid4().hex)

    def __str__(self) -> str:
        return self.root


class Answer(BaseModel):
    """
    Schema for an answer.

    Example:
        {
            "id": "3f2b...",
            "content": "Use a read/write lock",
            "question_id": "1"
        }
    """

    model_config = ConfigDict(frozen=True)

    id: AnswerId = Field(..., description="Unique answer identifier")
    content: str = Field(..., description="Body text of the answer")
    question_id: QuestionId = Field(..., description="Question being answered")
