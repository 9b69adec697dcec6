"""
LLM provider abstractions.

This module defines a common interface for the generative text services
used to produce job blueprints.  Every provider takes a prompt plus the
sampling parameters and returns the text of the first candidate, or
raises one of the typed errors from :mod:`jobblueprint.errors`.

Three implementations are provided:

* :class:`GeminiRestProvider` posts directly to the Gemini
  ``generateContent`` REST endpoint with ``requests``.  This is the
  default and matches the wire format the prompt was designed for.
* :class:`GeminiSDKProvider` sends the same request through the
  ``google-generativeai`` client library.
* :class:`OpenAIProvider` uses the OpenAI chat completions API.

There is no placeholder provider: when no key is
configured, :func:`get_default_provider` raises
:class:`~jobblueprint.errors.ConfigurationError` instead of inventing
content.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

from ..config import GenerationConfig, Settings
from ..errors import ApiError, ConfigurationError, EmptyResponseError

logger = logging.getLogger(__name__)


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    def generate_text(self, prompt: str, generation: GenerationConfig) -> str:
        """Send a single-turn prompt and return the first candidate's text.

        Args:
            prompt: The full instruction text.
            generation: Sampling parameters for the request.

        Returns:
            The raw text of the first candidate.

        Raises:
            ApiError: On transport failure or a non-2xx response.
            EmptyResponseError: If the response holds no candidate text.
        """
        raise NotImplementedError


def _error_summary(response: requests.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        return str(payload["error"].get("message", ""))
    return ""


class GeminiRestProvider(LLMProvider):
    """Provider that calls the Gemini REST endpoint with ``requests``.

    The API key travels in the query string.  No timeout is set unless
    one is configured, so latency and failure behaviour are those of
    the underlying transport.
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("GEMINI_API_KEY/GOOGLE_API_KEY not provided")
        self.api_key = api_key
        self.endpoint = endpoint
        self.timeout = timeout
        self.session = session or requests.Session()

    @staticmethod
    def build_body(prompt: str, generation: GenerationConfig) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": generation.to_gemini(),
        }

    def generate_text(self, prompt: str, generation: GenerationConfig) -> str:
        logger.debug("Sending prompt to Gemini REST endpoint %s: %s", self.endpoint, prompt[:200])
        try:
            response = self.session.post(
                self.endpoint,
                params={"key": self.api_key},
                headers={"Content-Type": "application/json"},
                json=self.build_body(prompt, generation),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise ApiError(f"Request to the generative API failed: {exc}") from exc
        if not response.ok:
            summary = _error_summary(response)
            message = f"HTTP error! status: {response.status_code}"
            if summary:
                message = f"{message} ({summary})"
            raise ApiError(message, status_code=response.status_code)
        try:
            data = response.json()
        except ValueError as exc:
            raise ApiError(f"Generative API returned a non-JSON body: {exc}") from exc
        logger.debug("Received response: %s", data)
        return self.extract_text(data)

    @staticmethod
    def extract_text(data: Any) -> str:
        """Return ``candidates[0].content.parts[0].text`` from a response body."""
        candidates = data.get("candidates") if isinstance(data, dict) else None
        if not candidates:
            raise EmptyResponseError("No candidates in the response")
        try:
            text = candidates[0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as exc:
            raise EmptyResponseError("First candidate has no text content") from exc
        if not isinstance(text, str) or not text:
            raise EmptyResponseError("First candidate has no text content")
        return text


class GeminiSDKProvider(LLMProvider):
    """Provider that uses Google Generative AI (Gemini) via google-generativeai."""

    def __init__(self, api_key: str, model: str) -> None:
        try:
            import google.generativeai as genai  # type: ignore
        except ImportError as exc:
            raise ConfigurationError(
                "google-generativeai package is required for GeminiSDKProvider. Install it via pip."
            ) from exc
        if not api_key:
            raise ConfigurationError("GEMINI_API_KEY/GOOGLE_API_KEY not provided")
        self.genai = genai
        self.model_name = model
        self.genai.configure(api_key=api_key)
        try:
            self.model = self.genai.GenerativeModel(self.model_name)
        except Exception as exc:  # noqa: BLE001
            raise ConfigurationError(f"Failed to load Gemini model {self.model_name}: {exc}") from exc

    def generate_text(self, prompt: str, generation: GenerationConfig) -> str:
        logger.debug("Sending prompt to Gemini SDK model %s: %s", self.model_name, prompt[:200])
        config = self.genai.types.GenerationConfig(
            temperature=generation.temperature,
            top_k=generation.top_k,
            top_p=generation.top_p,
            max_output_tokens=generation.max_output_tokens,
        )
        try:
            response = self.model.generate_content(prompt, generation_config=config)
        except Exception as exc:  # noqa: BLE001
            raise ApiError(f"Gemini API call failed: {exc}") from exc
        candidates = getattr(response, "candidates", None)
        if not candidates:
            raise EmptyResponseError("No candidates in the response")
        parts = getattr(getattr(candidates[0], "content", None), "parts", None)
        if not parts or not getattr(parts[0], "text", ""):
            raise EmptyResponseError("First candidate has no text content")
        return parts[0].text


class OpenAIProvider(LLMProvider):
    """Provider that uses the OpenAI chat completions API.

    ``top_k`` has no OpenAI equivalent and is not sent.
    """

    def __init__(self, api_key: str, model: str) -> None:
        try:
            from openai import OpenAI  # type: ignore
        except ImportError as exc:
            raise ConfigurationError(
                "openai package is required for OpenAIProvider. Install it via pip."
            ) from exc
        if not api_key:
            raise ConfigurationError("OPENAI_API_KEY not provided")
        self.model = model
        self.client = OpenAI(api_key=api_key)

    def generate_text(self, prompt: str, generation: GenerationConfig) -> str:
        logger.debug("Sending prompt to OpenAI model %s: %s", self.model, prompt[:200])
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=generation.temperature,
                top_p=generation.top_p,
                max_tokens=generation.max_output_tokens,
            )
        except Exception as exc:  # noqa: BLE001
            raise ApiError(f"OpenAI API call failed: {exc}") from exc
        if not response.choices:
            raise EmptyResponseError("No candidates in the response")
        content = response.choices[0].message.content
        if not content:
            raise EmptyResponseError("First candidate has no text content")
        return content


def get_default_provider(settings: Settings) -> LLMProvider:
    """Return an LLMProvider instance based on settings and API keys.

    The resolution order is:

    1. If ``settings.provider`` is ``"gemini"``, ``"gemini-sdk"`` or
       ``"openai"``, that provider is built; a missing key is an error
       rather than a silent fallback.
    2. If a Gemini key is present, return :class:`GeminiRestProvider`.
    3. If an OpenAI key is present, return :class:`OpenAIProvider`.
    4. Otherwise raise :class:`ConfigurationError`.
    """
    preferred = settings.provider
    if preferred == "gemini":
        return GeminiRestProvider(
            settings.gemini_api_key or "", settings.endpoint, timeout=settings.request_timeout
        )
    if preferred == "gemini-sdk":
        return GeminiSDKProvider(settings.gemini_api_key or "", settings.gemini_model)
    if preferred == "openai":
        return OpenAIProvider(settings.openai_api_key or "", settings.openai_model)
    if settings.gemini_api_key:
        return GeminiRestProvider(settings.gemini_api_key, settings.endpoint, timeout=settings.request_timeout)
    if settings.openai_api_key:
        return OpenAIProvider(settings.openai_api_key, settings.openai_model)
    raise ConfigurationError(
        "No generative API key configured. Set GEMINI_API_KEY (or GOOGLE_API_KEY) or OPENAI_API_KEY."
    )
