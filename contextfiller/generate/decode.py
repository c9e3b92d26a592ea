# Turn the model's reply into a FillerResult.
# Models like to wrap JSON in ```json ... ``` fences, so those are peeled off first.

from __future__ import annotations

import re
from typing import Any, Dict

from pydantic import ValidationError

from .errors import DecodeError
from .types import FillerResult

_LEADING_FENCE = re.compile(r"^```[\w+-]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\s*```$")


def extract_text(payload: Dict[str, Any]) -> str:
    """
    Pull candidates[0].content.parts[0].text out of a generateContent body.
    Any missing link in the path yields "" (which then fails decoding).
    """
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""


def strip_fences(text: str) -> str:
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _LEADING_FENCE.sub("", cleaned, count=1)
        cleaned = _TRAILING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def decode_filler(text: str) -> FillerResult:
    json_text = strip_fences(text)
    try:
        return FillerResult.model_validate_json(json_text)
    except ValidationError as e:
        raise DecodeError(f"Could not parse model reply: {_describe(e)}") from e


def _describe(err: ValidationError) -> str:
    parts = []
    for item in err.errors():
        loc = ".".join(str(p) for p in item.get("loc", ())) or "reply"
        parts.append(f"{loc}: {item.get('msg', 'invalid')}")
    return "; ".join(parts)
