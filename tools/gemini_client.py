"""Model client abstractions and the Gemini implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod

from google import generativeai as genai

from couture_app.config import DEFAULT_GEMINI_MODEL
from couture_app.errors import StylistConfigurationError
from logic.prompting import RESPONSE_MIME_TYPE
from tools.observability import instrument_call


class StylistModelClient(ABC):
    """Abstract generative-model client returning raw JSON text."""

    model: str

    @abstractmethod
    async def generate_json(self, prompt: str, schema: genai.protos.Schema) -> str:
        """Issue one request and return the reply text."""


class GeminiStylistClient(StylistModelClient):
    """Gemini client constrained to JSON output with a response schema."""

    def __init__(self, api_key: str | None = None, model: str = DEFAULT_GEMINI_MODEL) -> None:
        self.api_key = api_key
        self.model = model
        if self.api_key:
            genai.configure(api_key=self.api_key)

    @instrument_call("gemini.generate_content")
    async def generate_json(self, prompt: str, schema: genai.protos.Schema) -> str:
        if not self.api_key:
            raise StylistConfigurationError("GEMINI_API_KEY is not configured")

        model = genai.GenerativeModel(model_name=self.model)
        response = await model.generate_content_async(
            prompt,
            generation_config=genai.GenerationConfig(
                response_mime_type=RESPONSE_MIME_TYPE,
                response_schema=schema,
            ),
        )
        # ``text`` raises ValueError when the candidate was blocked or empty.
        return response.text


__all__ = ["StylistModelClient", "GeminiStylistClient"]
