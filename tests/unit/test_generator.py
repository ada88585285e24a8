import asyncio
import json
import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from app.services.generator import (
    GenerationRequest, QuestionGenerator, clean_model_json, extract_questions,
)
from app.utils.errors import GenerationFailure
from tests.helpers import make_raw_questions

PAYLOAD = {"questions": make_raw_questions(2)}

def make_client(text=None, side_effect=None):
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        return_value=SimpleNamespace(text=text), side_effect=side_effect
    )
    client.aio.aclose = AsyncMock()
    return client

class TestCleanModelJson:
    """Test stripping of wrapping around model output"""

    def test_plain_json(self):
        assert clean_model_json(json.dumps(PAYLOAD)) == PAYLOAD

    def test_markdown_fences(self):
        raw = "```json\n" + json.dumps(PAYLOAD) + "\n```"
        assert clean_model_json(raw) == PAYLOAD

    def test_surrounding_text_and_parentheses(self):
        raw = "Here is your quiz:\n(" + json.dumps(PAYLOAD) + ")"
        assert clean_model_json(raw) == PAYLOAD

    def test_no_json_object(self):
        with pytest.raises(GenerationFailure) as exc_info:
            clean_model_json("I cannot help with that.")
        assert exc_info.value.context["raw_payload"] == "I cannot help with that."

    def test_invalid_json(self):
        with pytest.raises(GenerationFailure) as exc_info:
            clean_model_json('{"questions": [}')
        assert "parse_error" in exc_info.value.context

class TestExtractQuestions:

    def test_missing_questions_field(self):
        with pytest.raises(GenerationFailure, match="missing questions array"):
            extract_questions('{"quiz": []}')

    def test_questions_not_a_list(self):
        with pytest.raises(GenerationFailure):
            extract_questions('{"questions": {"text": "?"}}')

    def test_questions_returned_unvalidated(self):
        # Shape of individual questions is not checked here
        assert extract_questions('{"questions": [{"text": "?"}]}') == [{"text": "?"}]

class TestQuestionGenerator:
    """Test the Gemini adapter with a mocked client"""

    @pytest.mark.asyncio
    async def test_generate_returns_questions(self):
        client = make_client(text="```json\n" + json.dumps(PAYLOAD) + "\n```")
        generator = QuestionGenerator(client, model="gemini-test", timeout=5)

        questions = await generator.generate(GenerationRequest(topic="Oceans", count=2, difficulty="easy"))

        assert questions == PAYLOAD["questions"]
        kwargs = client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-test"
        assert '"topic":"Oceans"' in kwargs["contents"]
        assert '"difficulty":"easy"' in kwargs["contents"]
        assert "audience" not in kwargs["contents"].split("following JSON object:")[1].split("Return ONLY")[0]

    @pytest.mark.asyncio
    async def test_sdk_error_is_generation_failure(self):
        generator = QuestionGenerator(make_client(side_effect=RuntimeError("quota exceeded")), model="m")

        with pytest.raises(GenerationFailure, match="quota exceeded"):
            await generator.generate(GenerationRequest(topic="Oceans", count=2))

    @pytest.mark.asyncio
    async def test_timeout_is_generation_failure(self):
        async def hang(**kwargs):
            await asyncio.sleep(10)

        client = make_client()
        client.aio.models.generate_content = hang
        generator = QuestionGenerator(client, model="m", timeout=0.01)

        with pytest.raises(GenerationFailure, match="timed out"):
            await generator.generate(GenerationRequest(topic="Oceans", count=2))

    @pytest.mark.asyncio
    async def test_empty_response_is_generation_failure(self):
        generator = QuestionGenerator(make_client(text=None), model="m")

        with pytest.raises(GenerationFailure):
            await generator.generate(GenerationRequest(topic="Oceans", count=2))

    @pytest.mark.asyncio
    async def test_aclose_releases_client(self):
        client = make_client()
        await QuestionGenerator(client, model="m").aclose()
        client.aio.aclose.assert_awaited_once()
