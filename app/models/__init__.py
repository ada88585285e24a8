from .quiz import Option, QuestionDraft, Question, Quiz, SYSTEM_OWNER, redact_questions, redact_quiz
from .submission import ResultRow, GradingResult, Submission

__all__ = [
    "Option", "QuestionDraft", "Question", "Quiz", "SYSTEM_OWNER",
    "redact_questions", "redact_quiz",
    "ResultRow", "GradingResult", "Submission",
]
