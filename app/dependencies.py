"""Service wiring.

The Supabase and Gemini clients are process-wide; ``build_services`` creates
them once at startup and the FastAPI dependencies below hand the services to
the routes. Tests replace these dependencies with ``app.dependency_overrides``.
"""
from dataclasses import dataclass

from fastapi import Request
from google import genai

from app.config import Settings
from app.database import Database, get_supabase_admin_client
from app.services.generator import QuestionGenerator
from app.services.grading import GradingService
from app.services.history import HistoryService
from app.services.quiz_service import QuizService
from app.services.quiz_store import QuizStore


@dataclass
class Services:
    quiz_service: QuizService
    grading_service: GradingService
    history_service: HistoryService
    generator: QuestionGenerator


def build_services(settings: Settings) -> Services:
    store = QuizStore(Database(get_supabase_admin_client()))
    generator = QuestionGenerator(
        genai.Client(api_key=settings.gemini_api_key.get_secret_value()),
        model=settings.gemini_model,
        timeout=settings.generation_timeout,
    )
    return Services(
        quiz_service=QuizService(store, generator),
        grading_service=GradingService(store),
        history_service=HistoryService(store),
        generator=generator,
    )


def get_quiz_service(request: Request) -> QuizService:
    return request.app.state.services.quiz_service


def get_grading_service(request: Request) -> GradingService:
    return request.app.state.services.grading_service


def get_history_service(request: Request) -> HistoryService:
    return request.app.state.services.history_service
