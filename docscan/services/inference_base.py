"""
Abstract base class for inference backends.

Defines the single operation the request handler depends on, so the Gemini
client can be swapped for a fake in tests or for another provider.
"""

from abc import ABC, abstractmethod


class InferenceBackend(ABC):

    @abstractmethod
    async def analyze(self, file_bytes: bytes, media_type: str, filename: str) -> str:
        """
        Submit a document with the extraction prompt and return the raw reply.

        Args:
            file_bytes: Uploaded file contents
            media_type: Declared media type, e.g. "image/png" or "application/pdf"
            filename: Original filename, referenced in the prompt

        Returns:
            Raw reply text (may contain fences or prose around the JSON)

        Raises:
            ConfigurationError: backend is not configured
            InferenceError: the call failed or timed out
        """
        pass
