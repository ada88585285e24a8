"""Grading Engine.

``grade_quiz`` is a pure function of the stored quiz and the submitted answers.
``GradingService.submit`` adds the access rules and decides whether the
attempt is recorded as a ``Submission``.
"""
import logging
import re
from typing import Any, Mapping, Optional
from uuid import uuid4

from app.models import GradingResult, Quiz, ResultRow, Submission
from app.services.quiz_store import QuizStore
from app.utils.errors import NotFound, Unauthorized, ValidationFailure
from app.utils.time_utils import utc_now

logger = logging.getLogger(__name__)

GUEST_USER = "guest"
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def coerce_option_id(value: Any) -> Optional[int]:
    """Submitted option id as an int, or None when the question was not answered.

    Strings are read up to the first non-digit, so "2", " 2", "2.0" and "2abc" all mean option 2.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        match = LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    if isinstance(value, (int, float)):
        try:
            return int(value)
        except (OverflowError, ValueError):
            return None
    return None


def grade_quiz(quiz: Quiz, answers: Mapping[str, Any]) -> GradingResult:
    score = 0
    results = []

    for question in quiz.questions:
        submitted = coerce_option_id(answers.get(question.id))
        is_correct = submitted == question.correct_option_id
        if is_correct:
            score += 1

        results.append(ResultRow(
            question_text=question.text,
            user_answer_text=question.option_text(submitted),
            correct_answer_text=question.option_text(question.correct_option_id),
            is_correct=is_correct,
        ))

    return GradingResult(score=score, total=len(quiz.questions), results=results)


def should_record(user_id: Optional[str]) -> bool:
    return bool(user_id) and user_id != GUEST_USER


class GradingService:
    def __init__(self, store: QuizStore):
        self.store = store

    def submit(self, quiz_id: str, answers: Optional[Mapping[str, Any]], user_id: Optional[str] = None) -> GradingResult:
        quiz = self.store.find_quiz(quiz_id)
        if quiz is None:
            raise NotFound("Quiz not found")

        # Guests may only take the sample quiz
        if not user_id and not quiz.is_sample:
            logger.warning(f"Unauthenticated submission to quiz {quiz_id}")
            raise Unauthorized("Authentication required to submit quiz")

        if not answers:
            raise ValidationFailure("Answers are required.")

        result = grade_quiz(quiz, answers)

        if should_record(user_id):
            self.store.create_submission(Submission(
                id=str(uuid4()),
                quiz_id=quiz.id,
                user_id=user_id,
                score=result.score,
                total=result.total,
                results=result.results,
                created_at=utc_now(),
            ))
            logger.info(f"Recorded submission for quiz {quiz.id} by {user_id}: {result.score}/{result.total}")

        return result
