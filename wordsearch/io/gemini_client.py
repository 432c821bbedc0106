"""HTTP client for the Gemini ``generateContent`` endpoint."""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import requests
from requests.adapters import HTTPAdapter

from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class GeminiAPIError(RuntimeError):
    """Raised when the Gemini API responds with an error payload."""


class GeminiClient:
    """Small wrapper around the Gemini REST API used for vocabulary lists.

    Connection failures are retried by the mounted adapter; HTTP errors and
    empty candidates surface as :class:`GeminiAPIError`.
    """

    API_BASE = "https://generativelanguage.googleapis.com/v1beta"

    def __init__(
        self,
        model_name: str = "gemini-2.5-flash",
        api_key_env: str = "GEMINI_API_KEY",
        model_env: str = "GEMINI_MODEL",
        timeout_seconds: float = 30.0,
        temperature: float = 0.7,
        max_retries: int = 2,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.model_name = os.environ.get(model_env, model_name)
        self.api_key_env = api_key_env
        self.timeout_seconds = timeout_seconds
        self.temperature = temperature
        self._api_key = os.environ.get(api_key_env)
        if not self._api_key:
            raise RuntimeError(
                f"Missing Gemini API key in environment variable {self.api_key_env}"
            )
        if session is None:
            session = requests.Session()
            session.mount("https://", HTTPAdapter(max_retries=max_retries))
        self._session = session

    @property
    def endpoint(self) -> str:
        return f"{self.API_BASE}/models/{self.model_name}:generateContent"

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {"temperature": self.temperature},
        }

    def generate_text(self, prompt: str) -> str:
        """Send the prompt and return the first candidate text."""
        LOGGER.debug("Requesting %s (%s prompt chars)", self.model_name, len(prompt))
        try:
            response = self._session.post(
                self.endpoint,
                params={"key": self._api_key},
                json=self.build_payload(prompt),
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise GeminiAPIError(f"Gemini request failed: {exc}") from exc

        data = response.json()
        text = self.extract_text(data)
        if not text:
            LOGGER.warning("Gemini response missing candidates: %s", data)
            raise GeminiAPIError("Gemini API response missing text candidates")
        return text

    @staticmethod
    def extract_text(payload: Dict[str, Any]) -> Optional[str]:
        """Join the text parts of the first candidate that has any."""
        candidates: List[Dict[str, Any]] = payload.get("candidates") or []
        for candidate in candidates:
            parts: List[Dict[str, Any]] = (candidate.get("content") or {}).get("parts") or []
            texts = [part["text"] for part in parts if part.get("text")]
            if texts:
                return "".join(texts)
        return None
