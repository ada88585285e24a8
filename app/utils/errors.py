"""Error taxonomy shared by the quiz services.

Each error carries the HTTP status the routes translate it to. Server-side
failures (5xx) expose only a generic message; their diagnostic context stays in
``context`` and in the logs.
"""
from typing import Any


class QuizServiceError(Exception):
    status_code: int = 500
    public_message: str = "Internal server error"

    def __init__(self, message: str = None, **context: Any):
        super().__init__(message or self.public_message)
        self.context = context

    @property
    def detail(self) -> str:
        if self.status_code >= 500:
            return self.public_message
        return str(self)


class ValidationFailure(QuizServiceError):
    status_code = 400
    public_message = "Invalid request"


class Unauthorized(QuizServiceError):
    status_code = 401
    public_message = "User not authenticated."


class NotFound(QuizServiceError):
    status_code = 404
    public_message = "Quiz not found"


class GenerationFailure(QuizServiceError):
    """The AI service call failed or returned unusable output."""
    public_message = "Failed to generate quiz."


class PersistenceFailure(QuizServiceError):
    """The store was unreachable or rejected a write."""
