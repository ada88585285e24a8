import pytest
from httpx import ASGITransport, AsyncClient

from app.dependencies import get_grading_service, get_history_service, get_quiz_service
from app.main import app
from app.services.grading import GradingService
from app.services.history import HistoryService
from app.services.quiz_service import QuizService
from app.services.quiz_store import QuizStore
from app.utils.errors import GenerationFailure
from tests.helpers import FakeGenerator, InMemoryDatabase

@pytest.fixture
def db():
    return InMemoryDatabase()

@pytest.fixture
def store(db):
    return QuizStore(db)

@pytest.fixture
def generator():
    return FakeGenerator()

@pytest.fixture
def quiz_service(store, generator):
    return QuizService(store, generator)

@pytest.fixture
def grading_service(store):
    return GradingService(store)

@pytest.fixture
def history_service(store):
    return HistoryService(store)

@pytest.fixture
def failing_generator():
    return FakeGenerator(error=GenerationFailure(
        "Model returned invalid JSON", raw_payload="```json {not json", parse_error="Expecting value"
    ))

@pytest.fixture
async def client(quiz_service, grading_service, history_service):
    """Create test client wired to in-memory services"""
    app.dependency_overrides[get_quiz_service] = lambda: quiz_service
    app.dependency_overrides[get_grading_service] = lambda: grading_service
    app.dependency_overrides[get_history_service] = lambda: history_service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()

@pytest.fixture
def auth_headers():
    """Helper to create auth headers"""
    def _auth_headers(token: str):
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers
