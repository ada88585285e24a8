from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional
import logging

from app.dependencies import get_grading_service, get_quiz_service
from app.models import redact_questions, redact_quiz
from app.services.grading import GradingService
from app.services.quiz_service import QuizService
from app.utils.auth_utils import get_token_user, resolve_caller
from app.utils.errors import QuizServiceError

router = APIRouter()

class QuizCreateRequest(BaseModel):
    topic: Optional[str] = None
    count: Optional[int] = None
    difficulty: Optional[str] = None
    audience: Optional[str] = None
    user_id: Optional[str] = Field(None, alias="userId")

    model_config = ConfigDict(populate_by_name=True)

class SubmitAnswersRequest(BaseModel):
    answers: Optional[Dict[str, Any]] = None  # {question_id: option_id}
    user_id: Optional[str] = Field(None, alias="userId")

    model_config = ConfigDict(populate_by_name=True)

@router.get("/sample")
async def get_sample_quiz(quiz_service: QuizService = Depends(get_quiz_service)):
    """Get the shared sample quiz, creating it on first use"""
    try:
        quiz = quiz_service.get_or_create_sample_quiz()
        return {**redact_quiz(quiz), "isSample": True}
    except QuizServiceError as e:
        logging.error(f"Error fetching sample quiz: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.detail)
    except Exception:
        logging.exception("Error fetching sample quiz")
        raise HTTPException(status_code=500, detail="Internal server error")

@router.post("", status_code=201)
async def create_quiz(
    quiz_data: Optional[QuizCreateRequest] = None,
    token_user: Optional[dict] = Depends(get_token_user),
    user_id: Optional[str] = Query(None, alias="userId"),
    quiz_service: QuizService = Depends(get_quiz_service),
):
    """Generate a new quiz for a topic"""
    quiz_data = quiz_data or QuizCreateRequest()
    caller = resolve_caller(token_user, quiz_data.user_id, user_id)
    try:
        quiz = await quiz_service.create_quiz(
            topic=quiz_data.topic,
            count=quiz_data.count,
            difficulty=quiz_data.difficulty,
            audience=quiz_data.audience,
            owner_id=caller.user_id,
        )
        return {"quizId": quiz.id, "questions": redact_questions(quiz)}
    except QuizServiceError as e:
        if e.status_code >= 500:
            logging.error(f"Error creating quiz: {e} {e.context}")
        raise HTTPException(status_code=e.status_code, detail=e.detail)
    except Exception:
        logging.exception("Error in create quiz")
        raise HTTPException(status_code=500, detail="Internal server error")

@router.get("/{quiz_id}")
async def get_quiz(quiz_id: str, quiz_service: QuizService = Depends(get_quiz_service)):
    """Get a quiz without its correct answers"""
    try:
        return redact_quiz(quiz_service.get_quiz(quiz_id))
    except QuizServiceError as e:
        if e.status_code >= 500:
            logging.error(f"Error fetching quiz {quiz_id}: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.detail)
    except Exception:
        logging.exception("Error fetching quiz")
        raise HTTPException(status_code=500, detail="Internal server error")

@router.post("/{quiz_id}/submit")
async def submit_quiz(
    quiz_id: str,
    answers_data: Optional[SubmitAnswersRequest] = None,
    token_user: Optional[dict] = Depends(get_token_user),
    user_id: Optional[str] = Query(None, alias="userId"),
    grading_service: GradingService = Depends(get_grading_service),
):
    """Grade submitted answers"""
    answers_data = answers_data or SubmitAnswersRequest()
    caller = resolve_caller(token_user, answers_data.user_id, user_id)
    try:
        result = grading_service.submit(quiz_id, answers_data.answers, caller.user_id)
        return {"message": "Quiz submitted successfully!", **result.to_response()}
    except QuizServiceError as e:
        if e.status_code >= 500:
            logging.error(f"Error submitting quiz {quiz_id}: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.detail)
    except Exception:
        logging.exception("Error submitting quiz")
        raise HTTPException(status_code=500, detail="Internal server error")
