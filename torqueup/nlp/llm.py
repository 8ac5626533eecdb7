# torqueup/nlp/llm.py
from __future__ import annotations
import logging
from typing import Any, Optional

import google.generativeai as genai
from openai import AsyncOpenAI

from torqueup import config
from torqueup.settings import TEMPERATURE, TOP_K, TOP_P, MAX_OUTPUT_TOKENS
from torqueup.texts import FALLBACK_REPLY

logger = logging.getLogger("torqueup.llm")

SAFETY_SETTINGS = [
    {"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
    {"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
    {"category": "HARM_CATEGORY_SEXUALLY_EXPLICIT", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
    {"category": "HARM_CATEGORY_DANGEROUS_CONTENT", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
]


class LLMError(RuntimeError):
    """The model provider could not be reached or rejected the request."""


def _normalize_model_name(name: Optional[str]) -> str:
    if not name:
        return ""
    cleaned = name.strip()
    if cleaned.startswith("models/"):
        return cleaned.split("/", 1)[1]
    return cleaned


def first_candidate_text(response: Any) -> str:
    """
    Text of the first part of the first candidate, or "" if the model sent
    nothing back (blocked prompt, empty candidate list, ...).
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return ""
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    if not parts:
        return ""
    return getattr(parts[0], "text", "") or ""


class GeminiClient:
    provider = "Gemini"

    def __init__(self, api_key: str, model: str):
        if not api_key:
            raise LLMError("Gemini API key not configured")
        genai.configure(api_key=api_key)
        self.model_name = _normalize_model_name(model)
        self._model = genai.GenerativeModel(self.model_name)

    async def generate(self, prompt: str) -> str:
        try:
            response = await self._model.generate_content_async(
                prompt,
                generation_config={
                    "temperature": TEMPERATURE,
                    "top_k": TOP_K,
                    "top_p": TOP_P,
                    "max_output_tokens": MAX_OUTPUT_TOKENS,
                },
                safety_settings=SAFETY_SETTINGS,
            )
        except Exception as e:
            logger.error("Gemini API error (model=%s): %s", self.model_name, e)
            raise LLMError(f"Gemini API error: {e}") from e
        return first_candidate_text(response) or FALLBACK_REPLY


class OpenAIClient:
    provider = "OpenAI"

    def __init__(self, api_key: str, model: str):
        if not api_key:
            raise LLMError("OpenAI API key not configured")
        self.model_name = model
        self._client = AsyncOpenAI(api_key=api_key)

    async def generate(self, prompt: str) -> str:
        try:
            completion = await self._client.chat.completions.create(
                model=self.model_name,
                messages=[{"role": "user", "content": prompt}],
                temperature=TEMPERATURE,
                top_p=TOP_P,
                max_tokens=MAX_OUTPUT_TOKENS,
            )
        except Exception as e:
            logger.error("OpenAI API error (model=%s): %s", self.model_name, e)
            raise LLMError(f"OpenAI API error: {e}") from e
        if not completion.choices:
            return FALLBACK_REPLY
        return completion.choices[0].message.content or FALLBACK_REPLY


def get_client():
    """
    Client for the configured provider. Built per request so a key added to
    the environment is picked up without a restart.
    """
    provider = (config.LLM_PROVIDER or "gemini").lower()
    if provider == "gemini":
        return GeminiClient(config.GEMINI_API_KEY, config.GEMINI_MODEL)
    if provider == "openai":
        return OpenAIClient(config.OPENAI_API_KEY, config.OPENAI_MODEL)
    raise LLMError(f"Unsupported LLM provider: {provider}")
