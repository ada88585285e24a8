"""Quiz Store: quiz and submission documents on top of the Supabase tables.

Quizzes are stored as one row each with their questions embedded as JSON.
Submissions reference a quiz by id. Rows are only ever inserted, never updated.

All store failures leave this module as ``PersistenceFailure``.
"""
import logging
from typing import List, Optional

from app.database import Database, is_duplicate_key_error
from app.models import Quiz, Submission
from app.utils.errors import PersistenceFailure

logger = logging.getLogger(__name__)

QUIZZES_TABLE = "quizzes"
SUBMISSIONS_TABLE = "submissions"


class QuizStore:
    def __init__(self, db: Database):
        self.db = db

    def create_quiz(self, quiz: Quiz) -> Quiz:
        try:
            row = self.db.insert(QUIZZES_TABLE, quiz.to_record())
        except Exception as e:
            raise PersistenceFailure(f"Failed to save quiz: {e}") from e
        return Quiz.model_validate(row) if row else quiz

    def find_quiz(self, quiz_id: str) -> Optional[Quiz]:
        rows = self._select_quizzes({"id": quiz_id}, limit=1)
        return rows[0] if rows else None

    def find_quiz_by_owner_and_topic(self, owner_id: str, topic: str) -> Optional[Quiz]:
        rows = self._select_quizzes({"owner_id": owner_id, "topic": topic}, limit=1)
        return rows[0] if rows else None

    def find_quizzes_by_owner(self, owner_id: str) -> List[Quiz]:
        """Quizzes created by ``owner_id``, newest first"""
        return self._select_quizzes({"owner_id": owner_id}, order_by="created_at", descending=True)

    def get_or_create_quiz(self, quiz: Quiz) -> Quiz:
        """Return the quiz keyed by (owner_id, topic), inserting ``quiz`` if absent.

        The unique index on that key makes a concurrent second insert fail with
        a duplicate-key error, in which case the winner's row is returned.
        """
        existing = self.find_quiz_by_owner_and_topic(quiz.owner_id, quiz.topic)
        if existing:
            return existing

        try:
            row = self.db.insert(QUIZZES_TABLE, quiz.to_record())
        except Exception as e:
            if not is_duplicate_key_error(e):
                raise PersistenceFailure(f"Failed to save quiz: {e}") from e
            logger.info(f"Quiz ({quiz.owner_id}, {quiz.topic}) created concurrently, reusing it")
            existing = self.find_quiz_by_owner_and_topic(quiz.owner_id, quiz.topic)
            if existing is None:
                raise PersistenceFailure("Quiz vanished after duplicate key conflict") from e
            return existing
        return Quiz.model_validate(row) if row else quiz

    def create_submission(self, submission: Submission) -> Submission:
        try:
            row = self.db.insert(SUBMISSIONS_TABLE, submission.to_record())
        except Exception as e:
            raise PersistenceFailure(f"Failed to save submission: {e}") from e
        return Submission.model_validate(row) if row else submission

    def _select_quizzes(self, filters: dict, **options) -> List[Quiz]:
        try:
            rows = self.db.select(QUIZZES_TABLE, "*", filters, **options)
        except Exception as e:
            raise PersistenceFailure(f"Failed to load quizzes: {e}") from e
        return [Quiz.model_validate(row) for row in rows or []]
