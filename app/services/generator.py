"""Question Generator Adapter: turns a topic request into raw questions via Gemini.

The adapter only checks the overall shape of the model output (a JSON object
with a ``questions`` list). Checking each question is left to the quiz service.
"""
import asyncio
import json
import logging
import re
from typing import Any, Dict, List, Optional

from google import genai
from google.genai import types
from pydantic import BaseModel

from app.utils.errors import GenerationFailure

logger = logging.getLogger(__name__)

QUIZ_PROMPT = """
Generate a multiple-choice quiz based on the specifications in the following JSON object:
{parameters}

Return ONLY raw JSON. Do not include explanations, commentary or markdown fences.

The JSON object must strictly follow this structure:
{{
  "questions": [
    {{
      "text": "The full text of the question.",
      "options": [
        {{ "id": 1, "text": "Text for the first option." }},
        {{ "id": 2, "text": "Text for the second option." }},
        {{ "id": 3, "text": "Text for the third option." }},
        {{ "id": 4, "text": "Text for the fourth option." }}
      ],
      "correct_option_id": 3
    }}
  ]
}}

Rules:
1. Generate exactly "count" questions about "topic".
2. Match "difficulty" and "audience" when they are given.
3. Option ids are small positive integers, unique within a question.
4. "correct_option_id" must equal the id of one of the question's options.
"""


class GenerationRequest(BaseModel):
    topic: str
    count: int
    difficulty: Optional[str] = None
    audience: Optional[str] = None


def clean_model_json(raw_text: str) -> Dict[str, Any]:
    """
    Cleans model output and extracts the JSON object.
    Handles markdown fences, wrapping parentheses and surrounding text.
    """
    cleaned = raw_text.strip()

    # Remove markdown-style fences (```json ... ```)
    cleaned = re.sub(r"^```(?:json)?|```$", "", cleaned, flags=re.IGNORECASE | re.MULTILINE).strip()

    if cleaned.startswith("(") and cleaned.endswith(")"):
        cleaned = cleaned[1:-1].strip()

    match = re.search(r"\{.*\}", cleaned, re.DOTALL)
    if not match:
        raise GenerationFailure("Model returned no JSON object", raw_payload=raw_text)

    try:
        return json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise GenerationFailure(f"Model returned invalid JSON: {e}", raw_payload=raw_text, parse_error=str(e)) from e


def extract_questions(raw_text: str) -> List[Any]:
    parsed = clean_model_json(raw_text)
    questions = parsed.get("questions") if isinstance(parsed, dict) else None
    if not isinstance(questions, list):
        raise GenerationFailure(
            "AI response missing questions array",
            raw_payload=raw_text,
            parse_error="questions is not a list",
        )
    return questions


class QuestionGenerator:
    """Wraps the Gemini client behind ``generate(request)``"""

    def __init__(self, client: genai.Client, model: str, timeout: float = 60):
        self.client = client
        self.model = model
        self.timeout = timeout

    async def generate(self, request: GenerationRequest) -> List[Any]:
        prompt = QUIZ_PROMPT.format(parameters=request.model_dump_json(exclude_none=True))

        try:
            response = await asyncio.wait_for(
                self.client.aio.models.generate_content(
                    model=self.model,
                    contents=prompt,
                    config=types.GenerateContentConfig(response_mime_type="application/json"),
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Gemini generation timed out after {self.timeout}s for topic {request.topic!r}")
            raise GenerationFailure("Generation timed out") from e
        except Exception as e:
            logger.error(f"Gemini generation failed for topic {request.topic!r}: {e}")
            raise GenerationFailure(f"Gemini call failed: {e}") from e

        raw_text = response.text or ""
        try:
            return extract_questions(raw_text)
        except GenerationFailure as e:
            logger.error(f"Failed to parse JSON from AI: {e}")
            logger.error(f"Raw AI response was: {raw_text}")
            raise

    async def aclose(self):
        await self.client.aio.aclose()
