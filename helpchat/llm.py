"""Gemini generation client."""

import asyncio
import logging
from typing import Optional

import google.genai as genai

from helpchat.config import DEFAULT_MODEL

logger = logging.getLogger(__name__)


class GeminiClient:
    """One `generate_content` call per prompt; errors propagate, nothing is retried."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        client: Optional[genai.Client] = None,
    ):
        if client is None:
            if not api_key:
                raise RuntimeError("GEMINI_API_KEY not found in environment")
            client = genai.Client(api_key=api_key)
        self.client = client
        self.model = model

    def generate(self, prompt: str) -> str:
        response = self.client.models.generate_content(model=self.model, contents=prompt)
        answer = (response.text or "").strip()
        logger.info(f"LLM response received | model={self.model} | answer_length={len(answer)}")
        return answer

    async def generate_async(self, prompt: str) -> str:
        return await asyncio.to_thread(self.generate, prompt)

    def close(self):
        close = getattr(self.client, "close", None)
        if callable(close):
            close()
