from fastapi import APIRouter, Depends, HTTPException
import logging

from app.dependencies import get_history_service
from app.services.history import HistoryService
from app.utils.auth_utils import Caller, get_caller
from app.utils.errors import QuizServiceError

router = APIRouter()

@router.get("/history")
async def get_quiz_history(
    caller: Caller = Depends(get_caller),
    history_service: HistoryService = Depends(get_history_service),
):
    """Get the caller's created quizzes, newest first"""
    if caller.is_anonymous:
        logging.warning("Unauthenticated request to dashboard: no userId available")
    try:
        return history_service.list_history(caller.user_id)
    except QuizServiceError as e:
        if e.status_code >= 500:
            logging.error(f"Error fetching quiz history: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.detail)
    except Exception:
        logging.exception("Error fetching quiz history")
        raise HTTPException(status_code=500, detail="Internal server error")
