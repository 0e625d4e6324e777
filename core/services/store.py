# =============================================================================
# core/services/store.py - In-Memory Question Store
# =============================================================================
# Holds every question (and answer) for the lifetime of the process.
# Nothing is persisted: all state is lost when the server stops.
#
# Concurrency:
#   One reader/writer lock guards both maps. Reads share the lock, writes
#   take it exclusively, so a write blocks every other read and write for
#   its duration. There is no per-record locking.
#
# The store is created once at startup and handed to route handlers through
# dependency injection (see app/dependencies.py), never imported as a global.
# =============================================================================

from __future__ import annotations

import logging
from collections.abc import Iterable

from aiorwlock import RWLock

from app.exceptions import QuestionNotFoundError
from core.models.answer import Answer, AnswerId
from core.models.question import Question, QuestionId

logger = logging.getLogger(__name__)


class Store:
    """
    Concurrency-safe in-memory store of questions and answers.

    Every question is kept under its own id, so the map key and
    question.id always agree.
    """

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}
        self._answers: dict[AnswerId, Answer] = {}
        self._lock = RWLock()

    @classmethod
    def from_seed(cls, questions: Iterable[Question]) -> "Store":
        """
        Build a store pre-populated with questions.

        Runs before the store is shared, so no locking is needed.
        Later entries with a duplicate id replace earlier ones.
        """
        store = cls()
        for question in questions:
            store._questions[question.id] = question
        return store

    # -------------------------------------------------------------------------
    # Questions
    # -------------------------------------------------------------------------

    async def get(self, question_id: QuestionId) -> Question:
        """
        Get a question by ID.

        Raises:
            QuestionNotFoundError: If no question has this id
        """
        async with self._lock.reader_lock:
            question = self._questions.get(question_id)

        if question is None:
            raise QuestionNotFoundError(str(question_id))
        return question

    async def list(self) -> list[Question]:
        """
        Snapshot of all questions.

        The returned list is a copy; later writes don't affect it.
        Order is insertion order, but callers shouldn't rely on it.
        """
        async with self._lock.reader_lock:
            return list(self._questions.values())

    async def count(self) -> int:
        async with self._lock.reader_lock:
            return len(self._questions)

    async def insert(self, question: Question) -> None:
        """Insert a question, silently replacing any question with the same id."""
        async with self._lock.writer_lock:
            replaced = question.id in self._questions
            self._questions[question.id] = question

        if replaced:
            logger.info(f"Replaced question: {question.id}")
        else:
            logger.info(f"Added question: {question.id}")

    async def update(self, question_id: QuestionId, question: Question) -> Question:
        """
        Replace the question at question_id in its entirety.

        The stored record always carries question_id, even if the body
        named a different id.

        Returns:
            The stored question

        Raises:
            QuestionNotFoundError: If no question has this id
        """
        if question.id != question_id:
            logger.warning(
                f"Update of question {question_id} carried id {question.id}; "
                f"keeping {question_id}"
            )
            question = question.model_copy(update={"id": question_id})

        async with self._lock.writer_lock:
            if question_id not in self._questions:
                raise QuestionNotFoundError(str(question_id))
            self._questions[question_id] = question

        logger.info(f"Updated question: {question_id}")
        return question

    async def delete(self, question_id: QuestionId) -> Question:
        """
        Remove a question.

        Returns:
            The removed question

        Raises:
            QuestionNotFoundError: If no question has this id
        """
        async with self._lock.writer_lock:
            question = self._questions.pop(question_id, None)

        if question is None:
            raise QuestionNotFoundError(str(question_id))

        logger.info(f"Removed question: {question!r}")
        return question

    # -------------------------------------------------------------------------
    # Answers
    # -------------------------------------------------------------------------

    async def insert_answer(self, answer: Answer) -> None:
        """Insert an answer, replacing any answer with the same id."""
        async with self._lock.writer_lock:
            self._answers[answer.id] = answer

        logger.info(f"Added answer {answer.id} to question {answer.question_id}")

    async def list_answers(self, question_id: QuestionId | None = None) -> list[Answer]:
        """
        Snapshot of answers, optionally only those for one question.
        """
        async with self._lock.reader_lock:
            answers = list(self._answers.values())

        if question_id is None:
            return answers
        return [answer for answer in answers if answer.question_id == question_id]
