import asyncio
import base64
import json

import httpx
from loguru import logger

from .inference_base import InferenceBackend
from .prompts import SYSTEM_INSTRUCTIONS, build_user_prompt
from ..core.config import Settings
from ..core.errors import ConfigurationError, InferenceError


def build_request_body(file_bytes: bytes, media_type: str, filename: str, temperature: float) -> dict:
    """Single user turn: instructions, per-file prompt, then the inline file."""
    return {
        "contents": [
            {
                "role": "user",
                "parts": [
                    {"text": SYSTEM_INSTRUCTIONS},
                    {"text": build_user_prompt(filename)},
                    {
                        "inline_data": {
                            "mime_type": media_type,
                            "data": base64.b64encode(file_bytes).decode("ascii"),
                        }
                    },
                ],
            }
        ],
        "generationConfig": {"temperature": temperature},
    }


def reply_text(response: httpx.Response) -> str:
    """
    Join the text parts of the first candidate.

    Falls back to the raw response body when the reply carries no text parts
    (blocked prompts, empty candidates, unexpected payloads).
    """
    try:
        data = response.json()
    except json.JSONDecodeError:
        return response.text

    candidates = data.get("candidates") if isinstance(data, dict) else None
    first = candidates[0] if isinstance(candidates, list) and candidates else None
    content = first.get("content") if isinstance(first, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if isinstance(parts, list):
        texts = [
            part["text"] for part in parts
            if isinstance(part, dict) and isinstance(part.get("text"), str) and part["text"]
        ]
        if texts:
            return "\n".join(texts)

    return response.text


class GeminiClient(InferenceBackend):
    """Calls the Gemini generateContent REST endpoint. No retries."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._transport = transport

    async def analyze(self, file_bytes: bytes, media_type: str, filename: str) -> str:
        if not self.settings.google_api_key:
            raise ConfigurationError("Missing GOOGLE_API_KEY")

        body = build_request_body(file_bytes, media_type, filename, self.settings.gemini_temperature)
        timeout = self.settings.gemini_timeout_seconds

        logger.info(
            "Calling Gemini",
            model=self.settings.gemini_model,
            media_type=media_type,
            size_bytes=len(file_bytes),
        )

        try:
            async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
                # Overall deadline; the per-phase httpx timeout alone does not bound a slow stream
                response = await asyncio.wait_for(
                    client.post(
                        self.settings.generate_content_url,
                        params={"key": self.settings.google_api_key},
                        json=body,
                    ),
                    timeout=timeout,
                )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.error("Gemini call timed out", timeout_seconds=timeout)
            raise InferenceError(f"Gemini request timed out after {timeout:g}s") from e
        except httpx.HTTPError as e:
            logger.error(f"Gemini call failed: {e}")
            raise InferenceError(f"Gemini request failed: {e}") from e

        if not response.is_success:
            logger.error("Gemini returned an error status", http_status=response.status_code)
            raise InferenceError(f"Gemini HTTP {response.status_code}: {response.text}")

        text = reply_text(response)
        logger.info("Gemini reply received", reply_chars=len(text))
        return text
