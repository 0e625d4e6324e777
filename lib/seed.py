# =============================================================================
# lib/seed.py - Seed Document Loader
# =============================================================================
# Reads the JSON document the store is populated from at startup.
#
# The document is an object mapping question id -> question:
#
#   {
#     "1": {"id": "1", "title": "...", "content": "...", "tags": ["faq"]}
#   }
#
# A missing or malformed document is fatal: SeedLoadError propagates out of
# the application lifespan and the server refuses to start.
#
# Usage:
#   from lib.seed import load_seed_questions
#   questions = load_seed_questions(settings.SEED_FILE)
# =============================================================================

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from core.models.question import Question
from lib.utils import ApplicationError

logger = logging.getLogger(__name__)


class SeedLoadError(ApplicationError):
    """Raised when the seed document can't be read or doesn't validate."""

    def __init__(self, path: Path, error: str):
        super().__init__(
            message=f"Failed to load seed questions from {path}: {error}",
            code="SEED_LOAD_ERROR",
            suggestion="Check SEED_FILE points at a JSON object of id -> question",
            details={"path": str(path), "error": error},
        )


def load_seed_questions(path: Path | str) -> list[Question]:
    """
    Load and validate the seed questions.

    Entries whose key differs from the embedded id are kept under the
    embedded id, since that is what the store keys on.

    Args:
        path: Location of the seed JSON document

    Returns:
        Questions in document order

    Raises:
        SeedLoadError: If the file is missing, isn't JSON, or an entry
            isn't a valid question
    """
    path = Path(path)

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SeedLoadError(path, str(e)) from e
    except json.JSONDecodeError as e:
        raise SeedLoadError(path, f"invalid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise SeedLoadError(path, f"expected a JSON object, got {type(raw).__name__}")

    questions = []
    for key, entry in raw.items():
        try:
            question = Question.model_validate(entry)
        except ValidationError as e:
            raise SeedLoadError(path, f"entry {key!r}: {e}") from e

        if str(question.id) != key:
            logger.warning(f"Seed entry {key!r} has id {question.id}; storing under {question.id}")
        questions.append(question)

    logger.info(f"Loaded {len(questions)} seed questions from {path}")
    return questions
