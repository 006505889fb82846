"""
Turn a free-text model reply into a result document.

The model is told to answer with bare JSON, but replies regularly arrive
wrapped in markdown fences or surrounded by prose. Extraction is a heuristic,
not a parser: it picks a fenced block if there is one, otherwise the span from
the first "{" to the last "}". Nested or unrelated braces in prose can yield a
slice that does not parse; that case is handled by the fallback document.
"""

import json
import re
from typing import Any

from loguru import logger

from ..models.document import fallback_document

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.IGNORECASE | re.DOTALL)


def _reject_constant(name: str):
    # NaN and Infinity are not JSON; treat them as a parse failure
    raise ValueError(f"Invalid JSON constant: {name}")


def extract_json_candidate(text: str | None) -> str | None:
    """Return the most likely JSON substring of ``text``, or None."""
    if not text:
        return None

    fence = _FENCE_RE.search(text)
    if fence and fence.group(1):
        return fence.group(1).strip()

    first = text.find("{")
    last = text.rfind("}")
    if first != -1 and last != -1 and last > first:
        return text[first:last + 1].strip()

    return None


def parse_reply(raw_text: str) -> Any:
    """
    Parse a model reply into JSON, degrading to a generic document.

    Never raises: when neither the extracted candidate nor the raw reply is
    valid JSON, the whole reply is kept in the fallback document's notes.
    """
    candidate = extract_json_candidate(raw_text)
    try:
        return json.loads(candidate or raw_text, parse_constant=_reject_constant)
    except ValueError:
        logger.warning(
            "Reply is not valid JSON, returning fallback document",
            reply_chars=len(raw_text or ""),
            had_candidate=candidate is not None,
        )
        return fallback_document(raw_text)
