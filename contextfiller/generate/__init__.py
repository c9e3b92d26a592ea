# Generator package

# Makes generate/ importable and exposes key interfaces.

from .generator import FillerGenerator
from .prompts import build_prompt
from .decode import decode_filler, strip_fences
from .types import (
    Tone,
    Language,
    GenerationRequest,
    FillerResult,
    GenerationState,
    Idle,
    Loading,
    Succeeded,
    Failed,
)
from .errors import (
    GenerationError,
    MissingSubject,
    MissingCredential,
    GenerationInProgress,
    TransportError,
    DecodeError,
)
from .clients.echo_dev_client import EchoDevClient

__all__ = [
    "FillerGenerator", "build_prompt", "decode_filler", "strip_fences",
    "Tone", "Language", "GenerationRequest", "FillerResult",
    "GenerationState", "Idle", "Loading", "Succeeded", "Failed",
    "GenerationError", "MissingSubject", "MissingCredential",
    "GenerationInProgress", "TransportError", "DecodeError",
    "EchoDevClient",
]
