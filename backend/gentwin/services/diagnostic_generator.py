"""
Diagnostic Generator

Purpose:
  Turns a single vibration reading into a short maintenance diagnostic
  using Gemini (google-genai SDK, async client).

Features:
  - Fixed GenTwin prompt template with the looseness classification rule
  - Bounded wait on the model call (GENTWIN_AI_TIMEOUT_S)
  - No retries and no canned fallback: every failure surfaces as GenerationFailure
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, Protocol

from google import genai

from gentwin.config import ai_timeout_s, gemini_api_key, gemini_model_id
from gentwin.models.domain import ASSET_ID, CRITICAL_INTENSITY_AU

logger = logging.getLogger(__name__)


class GenerationFailure(Exception):
    """The external model could not produce a diagnostic."""


class DiagnosticGenerator(Protocol):
    async def generate(self, frequency: float, intensity: float) -> str:
        ...


def build_diagnostic_prompt(frequency: float, intensity: float) -> str:
    threshold = f"{CRITICAL_INTENSITY_AU:.3f}"
    return (
        "You are GenTwin, an expert industrial reliability AI. "
        f"An edge sensor on a heavy factory fan (Asset {ASSET_ID}) just reported a structural sway "
        f"frequency of {frequency} Hz and a displacement intensity of {intensity} AU.\n\n"
        f"Rule 1: If intensity is > {threshold} AU, treat it as a CRITICAL LOOSENESS ALARM "
        "caused by vibrating mounting bolts.\n"
        f"Rule 2: If intensity is <= {threshold} AU, treat it as HEALTHY baseline sway.\n\n"
        "Generate a concise, 3-sentence diagnostic report and recommend one immediate maintenance "
        "action. Be highly professional, technical, and do not use markdown formatting."
    )


class GeminiDiagnosticGenerator:
    """
    Gemini-backed DiagnosticGenerator.

    The SDK client is created lazily so the service can boot (and answer
    GET /api/telemetry) without a credential; ingest then fails cleanly.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout_s: Optional[float] = None,
        client: Any = None,
    ):
        self.api_key = api_key if api_key is not None else gemini_api_key()
        self.model = model or gemini_model_id()
        self.timeout_s = timeout_s if timeout_s is not None else ai_timeout_s()
        self._client = client

    @property
    def configured(self) -> bool:
        return self._client is not None or bool(self.api_key)

    def _get_client(self) -> Any:
        if self._client is None:
            if not self.api_key:
                raise GenerationFailure("GEMINI_API_KEY is not configured")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, frequency: float, intensity: float) -> str:
        client = self._get_client()
        prompt = build_diagnostic_prompt(frequency, intensity)

        try:
            resp = await asyncio.wait_for(
                client.aio.models.generate_content(model=self.model, contents=prompt),
                timeout=self.timeout_s,
            )
        except asyncio.TimeoutError as exc:
            raise GenerationFailure(f"{self.model} did not answer within {self.timeout_s:.1f}s") from exc
        except Exception as exc:
            raise GenerationFailure(f"{self.model} call failed: {exc}") from exc

        text = (getattr(resp, "text", None) or "").strip()
        if not text:
            raise GenerationFailure(f"{self.model} returned an empty response")

        logger.debug("Generated %d chars with %s", len(text), self.model)
        return text
