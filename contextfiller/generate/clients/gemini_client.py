# Client for the Gemini generateContent REST endpoint.
# Same shape as the other clients: generate(prompt, credential) -> reply text.

import logging
from typing import Any, Dict, Optional

import requests

from ..decode import extract_text
from ..errors import TransportError

logger = logging.getLogger("contextfiller.gemini")

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
GENERIC_FAILURE = "Failed to generate text"


class GeminiClient:
    def __init__(self, model: str = "gemini-2.5-flash", base_url: str = DEFAULT_BASE_URL, timeout: float = 60.0):
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate(self, prompt: str, credential: str) -> str:
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        try:
            resp = requests.post(
                self.endpoint,
                params={"key": credential},
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Gemini request failed before a response: %s", type(e).__name__)
            raise TransportError(str(e) or GENERIC_FAILURE) from e

        if not resp.ok:
            message = _error_message(_safe_json(resp)) or GENERIC_FAILURE
            logger.warning("Gemini returned HTTP %s: %s", resp.status_code, message)
            raise TransportError(message, status_code=resp.status_code)

        data = _safe_json(resp)
        if data is None:
            return ""
        return extract_text(data)


def _safe_json(resp: requests.Response) -> Optional[Dict[str, Any]]:
    try:
        data = resp.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def _error_message(data: Optional[Dict[str, Any]]) -> Optional[str]:
    """The service reports failures as {"error": {"message": "..."}}."""
    if not data:
        return None
    err = data.get("error")
    if isinstance(err, dict):
        msg = err.get("message")
        if isinstance(msg, str) and msg:
            return msg
    return None
