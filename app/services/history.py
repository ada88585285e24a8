from typing import Any, Dict, List, Optional

from app.services.quiz_store import QuizStore
from app.utils.errors import Unauthorized
from app.utils.time_utils import format_timestamp


class HistoryService:
    """Read-only view of the quizzes a user has created"""

    def __init__(self, store: QuizStore):
        self.store = store

    def list_history(self, user_id: Optional[str]) -> List[Dict[str, Any]]:
        if not user_id:
            raise Unauthorized("User not authenticated.")

        return [
            {
                "quizId": quiz.id,
                "topic": quiz.topic,
                "questionCount": len(quiz.questions),
                "createdAt": format_timestamp(quiz.created_at),
            }
            for quiz in self.store.find_quizzes_by_owner(user_id)
        ]
