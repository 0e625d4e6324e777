# =============================================================================
# app/routers/questions.py - Question CRUD Endpoints
# =============================================================================
# Thin handlers over the store. Failures are raised as AskBoardException
# subclasses and turned into responses by the handlers in app/exceptions.py.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Request
from fastapi.responses import PlainTextResponse

from app.dependencies import StoreDep
from core.models.question import Question, QuestionId
from core.services.pagination import extract_pagination, paginate

router = APIRouter()

QuestionIdPath = Annotated[str, Path(description="Question id")]


@router.get("", response_model=list[Question])
async def get_questions(request: Request, store: StoreDep):
    """
    List questions.

    Without query parameters, returns every question. With parameters,
    both start and end are required and the listing is sliced to
    [start, end).
    """
    params = dict(request.query_params)
    questions = await store.list()

    if not params:
        return questions

    pagination = extract_pagination(params)
    return paginate(questions, pagination)


@router.get("/{question_id}", response_model=Question)
async def get_single_question(question_id: QuestionIdPath, store: StoreDep):
    """Get a single question by id."""
    return await store.get(QuestionId(question_id))


@router.post("", response_class=PlainTextResponse)
async def add_question(question: Question, store: StoreDep):
    """
    Add a question.

    A question with the same id is replaced without error.
    """
    await store.insert(question)
    return "Question Added!"


@router.put("/{question_id}", response_class=PlainTextResponse)
async def update_question(question_id: QuestionIdPath, question: Question, store: StoreDep):
    """Replace an existing question in its entirety."""
    await store.update(QuestionId(question_id), question)
    return "Question updated"


@router.delete("/{question_id}", response_class=PlainTextResponse)
async def delete_question(question_id: QuestionIdPath, store: StoreDep):
    """Delete a question."""
    await store.delete(QuestionId(question_id))
    return "Removed value!"
