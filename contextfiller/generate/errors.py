# Error taxonomy for the generation pipeline.
# Every error carries a `kind` so callers can tell them apart without isinstance chains.

from __future__ import annotations


class GenerationError(Exception):
    """Base class. `kind` names the failure, `str(err)` is the user-facing message."""
    kind = "GenerationError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingSubject(GenerationError):
    kind = "MissingSubject"

    def __init__(self, message: str = "Please enter a subject"):
        super().__init__(message)


class MissingCredential(GenerationError):
    kind = "MissingCredential"

    def __init__(self, message: str = "API key is required. Please configure it in settings."):
        super().__init__(message)


class GenerationInProgress(GenerationError):
    kind = "Busy"

    def __init__(self, message: str = "A generation is already in progress"):
        super().__init__(message)


class TransportError(GenerationError):
    """Non-success HTTP status or network failure talking to the model service."""
    kind = "TransportError"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(GenerationError):
    """Reply text could not be turned into a complete FillerResult."""
    kind = "DecodeError"
