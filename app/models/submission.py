from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List
from datetime import datetime

from app.utils.time_utils import format_timestamp

class ResultRow(BaseModel):
    question_text: str = Field(alias="questionText")
    user_answer_text: str = Field(alias="userAnswerText")
    correct_answer_text: str = Field(alias="correctAnswerText")
    is_correct: bool = Field(alias="isCorrect")

    model_config = ConfigDict(populate_by_name=True)

class GradingResult(BaseModel):
    score: int
    total: int
    results: List[ResultRow]

    def to_response(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "total": self.total,
            "results": [row.model_dump(by_alias=True) for row in self.results],
        }

class Submission(BaseModel):
    id: str
    quiz_id: str
    user_id: str
    score: int
    total: int
    results: List[ResultRow]
    created_at: datetime

    def to_record(self) -> Dict[str, Any]:
        """Row shape used by the submissions table"""
        return {
            "id": self.id,
            "quiz_id": self.quiz_id,
            "user_id": self.user_id,
            "score": self.score,
            "total": self.total,
            "results": [row.model_dump(by_alias=True) for row in self.results],
            "created_at": format_timestamp(self.created_at),
        }

    def __repr__(self):
        return f"<Submission(id={self.id}, quiz_id={self.quiz_id}, user_id={self.user_id}, score={self.score})>"
