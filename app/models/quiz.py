from pydantic import BaseModel
from typing import Any, Dict, List, Optional
from datetime import datetime

from app.utils.time_utils import format_timestamp

SYSTEM_OWNER = "system"

class Option(BaseModel):
    id: int
    text: str

class QuestionDraft(BaseModel):
    """A question as produced by the generator, before it has an id"""
    text: str
    options: List[Option]
    correct_option_id: int

    def validate_consistency(self):
        if not self.text.strip():
            raise ValueError("Question text cannot be empty")
        if len(self.options) < 2:
            raise ValueError("A question needs at least 2 options")
        option_ids = [option.id for option in self.options]
        if any(option_id <= 0 for option_id in option_ids):
            raise ValueError("Option ids must be positive integers")
        if len(set(option_ids)) != len(option_ids):
            raise ValueError("Option ids must be unique within a question")
        if self.correct_option_id not in option_ids:
            raise ValueError(f"Correct option id {self.correct_option_id} does not match any option")

class Question(QuestionDraft):
    id: str

    def option_text(self, option_id: Optional[int]) -> str:
        for option in self.options:
            if option.id == option_id:
                return option.text
        return "Not Answered"

class Quiz(BaseModel):
    id: str
    topic: str
    questions: List[Question]
    owner_id: Optional[str] = None
    difficulty: Optional[str] = None
    audience: Optional[str] = None
    created_at: datetime

    @property
    def is_sample(self) -> bool:
        return self.owner_id == SYSTEM_OWNER

    def to_record(self) -> Dict[str, Any]:
        """Row shape used by the quizzes table"""
        record = self.model_dump(mode="json")
        record["created_at"] = format_timestamp(self.created_at)
        return record

    def __repr__(self):
        return f"<Quiz(id={self.id}, topic={self.topic}, owner_id={self.owner_id})>"

def redact_questions(quiz: Quiz) -> List[Dict[str, Any]]:
    """Questions as sent to clients: correct_option_id is never included"""
    return [
        {
            "id": question.id,
            "text": question.text,
            "options": [{"id": option.id, "text": option.text} for option in question.options],
        }
        for question in quiz.questions
    ]

def redact_quiz(quiz: Quiz) -> Dict[str, Any]:
    return {
        "quizId": quiz.id,
        "topic": quiz.topic,
        "questions": redact_questions(quiz),
        "createdAt": format_timestamp(quiz.created_at),
    }
