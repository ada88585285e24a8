"""Quiz Lifecycle Service: creating, loading and seeding quizzes.

Quizzes are immutable once stored. Callers receive the full ``Quiz``; anything
sent to a client must go through ``app.models.redact_quiz`` first.
"""
import logging
from typing import Any, List, Optional
from uuid import uuid4

from pydantic import ValidationError

from app.models import Question, QuestionDraft, Quiz
from app.services.generator import GenerationRequest, QuestionGenerator
from app.services.quiz_store import QuizStore
from app.services.sample_quiz import SAMPLE_QUESTIONS, SAMPLE_QUIZ_OWNER, SAMPLE_QUIZ_TOPIC
from app.utils.errors import GenerationFailure, NotFound, ValidationFailure
from app.utils.time_utils import utc_now

logger = logging.getLogger(__name__)


def validate_generated_questions(raw_questions: List[Any]) -> List[QuestionDraft]:
    """Parse generator output, rejecting any question that cannot be graded"""
    if not raw_questions:
        raise GenerationFailure("AI response contained no questions")

    drafts = []
    for i, raw in enumerate(raw_questions):
        try:
            draft = QuestionDraft.model_validate(raw)
            draft.validate_consistency()
        except (ValidationError, ValueError) as e:
            raise GenerationFailure(f"Question {i + 1}: {e}", raw_question=raw) from e
        drafts.append(draft)
    return drafts


def build_quiz(topic: str, drafts: List[QuestionDraft], owner_id: Optional[str],
               difficulty: Optional[str] = None, audience: Optional[str] = None) -> Quiz:
    return Quiz(
        id=str(uuid4()),
        topic=topic,
        questions=[Question(id=str(uuid4()), **draft.model_dump()) for draft in drafts],
        owner_id=owner_id,
        difficulty=difficulty,
        audience=audience,
        created_at=utc_now(),
    )


class QuizService:
    def __init__(self, store: QuizStore, generator: QuestionGenerator):
        self.store = store
        self.generator = generator

    async def create_quiz(self, topic: Optional[str], count: Optional[int], difficulty: Optional[str] = None,
                          audience: Optional[str] = None, owner_id: Optional[str] = None) -> Quiz:
        if not topic or not topic.strip() or not count:
            raise ValidationFailure("Topic and count are required.")
        if count < 1:
            raise ValidationFailure("Count must be a positive number.")

        if not owner_id:
            logger.warning("Creating quiz without an identified owner")

        request = GenerationRequest(topic=topic, count=count, difficulty=difficulty, audience=audience)
        drafts = validate_generated_questions(await self.generator.generate(request))
        if len(drafts) != count:
            logger.warning(f"Requested {count} questions on {topic!r}, generator returned {len(drafts)}")

        quiz = self.store.create_quiz(build_quiz(topic, drafts, owner_id, difficulty, audience))
        logger.info(f"Created quiz {quiz.id} on {topic!r} with {len(quiz.questions)} questions")
        return quiz

    def get_quiz(self, quiz_id: str) -> Quiz:
        quiz = self.store.find_quiz(quiz_id)
        if quiz is None:
            raise NotFound("Quiz not found")
        return quiz

    def get_or_create_sample_quiz(self) -> Quiz:
        """Shared sample quiz; the store's unique (owner_id, topic) key keeps it single"""
        return self.store.get_or_create_quiz(build_quiz(SAMPLE_QUIZ_TOPIC, SAMPLE_QUESTIONS, SAMPLE_QUIZ_OWNER))
