# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - question.py: Question and QuestionId
# - answer.py: Answer and AnswerId
# - pagination.py: Pagination window for listings
#
# These models define the "contract" between API and clients.
# =============================================================================

from .question import Question, QuestionId
from .answer import Answer, AnswerId
from .pagination import Pagination

__all__ = [
    # Question
    "Question",
    "QuestionId",
    # Answer
    "Answer",
    "AnswerId",
    # Pagination
    "Pagination",
]
