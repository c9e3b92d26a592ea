# FillerGenerator owns the request lifecycle:
# - validates the request and looks up a credential
# - builds the prompt and sends it through any model client (Gemini, Echo)
# - decodes the reply into a FillerResult
# - publishes Idle / Loading / Succeeded / Failed to subscribers
#
# Only this class writes the state. Each dispatch gets a token; a reply whose
# token is no longer current (reset or newer dispatch) is dropped.

from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional

from .decode import decode_filler
from .errors import (
    GenerationError,
    GenerationInProgress,
    MissingCredential,
    MissingSubject,
)
from .prompts import build_prompt
from .types import (
    Failed,
    GenerationRequest,
    GenerationState,
    Idle,
    Loading,
    Succeeded,
    Tone,
)

logger = logging.getLogger("contextfiller.generator")

Listener = Callable[[GenerationState], None]


class FillerGenerator:
    def __init__(self, model_client, credentials=None):
        self.model_client = model_client
        self.credentials = credentials
        self._state: GenerationState = Idle()
        self._subject: Optional[str] = None
        self._token = 0
        self._listeners: List[Listener] = []

    # -------------------------
    # Read side
    # -------------------------
    @property
    def state(self) -> GenerationState:
        return self._state

    @property
    def subject(self) -> Optional[str]:
        """Subject of the last dispatched request, cleared by reset()."""
        return self._subject

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a state listener. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -------------------------
    # Write side
    # -------------------------
    async def generate(self, request: GenerationRequest, credential: Optional[str] = None) -> GenerationState:
        subject = (request.subject or "").strip()
        if not subject:
            raise MissingSubject()
        if isinstance(self._state, Loading):
            raise GenerationInProgress()

        key = (credential or "").strip() or self._lookup_credential()
        if not key:
            raise MissingCredential()

        tone = Tone(request.tone)
        prompt = build_prompt(subject, request.language, tone)

        self._token += 1
        token = self._token
        self._subject = subject
        self._publish(Loading())
        logger.info("Dispatch #%d: subject=%r language=%s tone=%s",
                    token, subject, request.language.code, tone.value)

        try:
            text = await asyncio.to_thread(self.model_client.generate, prompt, key)
            result = decode_filler(text)
            outcome: GenerationState = Succeeded(result)
        except GenerationError as e:
            logger.warning("Dispatch #%d failed (%s): %s", token, e.kind, e.message)
            outcome = Failed(message=e.message, kind=e.kind)
        except Exception as e:
            logger.exception("Dispatch #%d crashed", token)
            outcome = Failed(message=str(e) or "An error occurred", kind=type(e).__name__)

        if token != self._token:
            logger.info("Dropping stale reply for dispatch #%d (current #%d)", token, self._token)
            return self._state

        self._publish(outcome)
        return outcome

    def reset(self) -> GenerationState:
        # Bumping the token orphans any in-flight dispatch.
        self._token += 1
        self._subject = None
        self._publish(Idle())
        return self._state

    # -------------------------
    # Internals
    # -------------------------
    def _lookup_credential(self) -> Optional[str]:
        if self.credentials is None:
            return None
        return self.credentials.get_credential()

    def _publish(self, state: GenerationState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener %r failed on %s", listener, state.status)
