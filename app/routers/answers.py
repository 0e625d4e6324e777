# =============================================================================
# app/routers/answers.py - Answer Endpoints
# =============================================================================
# Answers are posted as form-encoded fields (application/x-www-form-urlencoded):
#   content=...&questionId=...
# An empty field is a valid value; only absent fields are reported as an
# invalid body (422).
# =============================================================================

from fastapi import APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.dependencies import StoreDep
from core.models.answer import Answer, AnswerId
from core.models.question import QuestionId

router = APIRouter()


# =============================================================================
# Request Models
# =============================================================================

class AnswerForm(BaseModel):
    """Form fields of POST /answers."""

    model_config = ConfigDict(populate_by_name=True)

    content: str = Field(..., description="Answer text")
    question_id: str = Field(..., alias="questionId", description="Question being answered")


# =============================================================================
# Endpoints
# =============================================================================

@router.post("", response_class=PlainTextResponse)
async def add_answer(request: Request, store: StoreDep):
    """
    Add an answer to a question.

    The form is read directly rather than through Form() parameters, since
    FastAPI treats an empty form value as missing. The answer id is
    generated by the service.
    """
    form = await request.form()

    try:
        fields = AnswerForm.model_validate(dict(form))
    except ValidationError as e:
        raise RequestValidationError(
            [{**error, "loc": ("body", *error["loc"])} for error in e.errors()]
        ) from e

    answer = Answer(
        id=AnswerId.generate(),
        content=fields.content,
        question_id=QuestionId(fields.question_id),
    )
    await store.insert_answer(answer)
    return "Answer added"
