"""In-memory doubles for the store database and the question generator"""
import copy
from collections import defaultdict

API = "/api"
USER_ID = "user_2abcDEF"
OTHER_USER_ID = "user_9xyzQRS"


class InMemoryDatabase:
    """Stand-in for app.database.Database backed by plain lists"""

    def __init__(self):
        self.tables = defaultdict(list)

    def insert(self, table: str, data: dict):
        rows = self.tables[table]
        if table == "quizzes" and data.get("owner_id") == "system":
            if any(row.get("owner_id") == "system" and row["topic"] == data["topic"] for row in rows):
                raise Exception('duplicate key value violates unique constraint "quizzes_system_topic_key"')
        rows.append(copy.deepcopy(data))
        return copy.deepcopy(data)

    def select(self, table: str, columns: str = "*", filters: dict = None, limit: int = None,
               order_by: str = None, descending: bool = False):
        rows = [row for row in self.tables[table]
                if all(row.get(key) == value for key, value in (filters or {}).items())]
        if order_by:
            rows.sort(key=lambda row: row[order_by], reverse=descending)
        if limit:
            rows = rows[:limit]
        return copy.deepcopy(rows)


class FakeGenerator:
    """Returns scripted questions and records every request"""

    def __init__(self, questions=None, error: Exception = None):
        self.questions = questions if questions is not None else make_raw_questions(3)
        self.error = error
        self.requests = []

    async def generate(self, request):
        self.requests.append(request)
        if self.error:
            raise self.error
        return copy.deepcopy(self.questions)

    async def aclose(self):
        pass


def make_raw_questions(count: int, topic: str = "Oceans"):
    """Generator-shaped questions; question i has correct option (i % 4) + 1"""
    return [
        {
            "text": f"{topic} question {i + 1}?",
            "options": [{"id": option_id, "text": f"Answer {option_id} to {i + 1}"} for option_id in range(1, 5)],
            "correct_option_id": (i % 4) + 1,
        }
        for i in range(count)
    ]


def correct_answers(quiz):
    return {question.id: question.correct_option_id for question in quiz.questions}


