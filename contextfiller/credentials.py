# Credential lookup for the model API.
# Priority: configured value (env / .env.dev) > saved value (YAML file) > none.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger("contextfiller.credentials")

STORE_KEY = "gemini_api_key"


class CredentialStore:
    """Remembers a user-supplied key in a small YAML file."""

    def __init__(self, path: str):
        self.path = Path(os.path.expanduser(path))

    def load(self) -> Optional[str]:
        if not self.path.exists():
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.warning("Ignoring unreadable credential store %s: %s", self.path, e)
            return None
        value = data.get(STORE_KEY) if isinstance(data, dict) else None
        if not isinstance(value, str) or not value.strip():
            return None
        return value.strip()

    def save(self, value: str) -> str:
        cleaned = (value or "").strip()
        if not cleaned:
            raise ValueError("API key must not be blank")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump({STORE_KEY: cleaned}, f)
        logger.info("Saved API key to %s", self.path)
        return cleaned


class CredentialProvider:
    def __init__(self, configured: Optional[str] = None, store: Optional[CredentialStore] = None):
        self.configured = configured
        self.store = store

    def get_credential(self) -> Optional[str]:
        if self.configured and self.configured.strip():
            return self.configured.strip()
        if self.store is not None:
            return self.store.load()
        return None
