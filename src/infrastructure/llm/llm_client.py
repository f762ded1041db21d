from __future__ import annotations

import http.client
import json
import logging
import os
import time
import urllib.request
from typing import Any

from domain.errors import RemoteGenerationError

logger = logging.getLogger(__name__)


class LLMClient:
    """Blocking client for the Gemini generateContent REST endpoint."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        model: str | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else os.getenv("GEMINI_API_KEY", "")
        self.base_url = (base_url or os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com")).rstrip("/")
        self.model = model or os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
        self.timeout_seconds = timeout_seconds or float(os.getenv("GEMINI_TIMEOUT_SECONDS", "30"))

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    def complete(self, prompt: str) -> str:
        if not self.is_configured:
            raise RemoteGenerationError("GEMINI_API_KEY is not configured")

        started = time.perf_counter()
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": float(os.getenv("GEMINI_TEMPERATURE", "0.4")),
            },
        }
        req = urllib.request.Request(
            url=f"{self.base_url}/v1beta/models/{self.model}:generateContent",
            data=json.dumps(payload).encode("utf-8"),
            headers={"Content-Type": "application/json", "x-goog-api-key": self.api_key},
            method="POST",
        )

        try:
            logger.info(
                "LLMClient request start model=%s base_url=%s prompt_chars=%d timeout=%.1fs",
                self.model,
                self.base_url,
                len(prompt),
                self.timeout_seconds,
            )
            with urllib.request.urlopen(req, timeout=self.timeout_seconds) as resp:
                body = json.loads(resp.read().decode("utf-8"))
        except (OSError, http.client.HTTPException, json.JSONDecodeError, UnicodeDecodeError) as exc:
            elapsed = time.perf_counter() - started
            logger.warning("LLMClient request failed after %.2fs: %s", elapsed, exc)
            raise RemoteGenerationError(f"Gemini request failed: {exc}") from exc

        text = self._extract_text(body)
        elapsed = time.perf_counter() - started
        logger.info("LLMClient request complete in %.2fs response_chars=%d", elapsed, len(text))
        return text

    def _extract_text(self, body: Any) -> str:
        try:
            parts = body["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError) as exc:
            raise RemoteGenerationError("Gemini response has no candidate content") from exc
        if not isinstance(parts, list):
            raise RemoteGenerationError("Gemini response content parts is not a list")
        text = "".join(part.get("text", "") for part in parts if isinstance(part, dict))
        if not text.strip():
            raise RemoteGenerationError("Gemini response text is empty")
        return text.strip()
