# Typed values shared across the generator modules.

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, StrictStr


class Tone(str, Enum):
    PROFESSIONAL = "Professional"
    SEMI_PROFESSIONAL = "Semi-professional"
    FRIENDLY = "Friendly"
    FUNNY = "Funny"


@dataclass(frozen=True)
class Language:
    """A selectable output language."""
    code: str
    english_name: str
    native_name: str

    @property
    def display_name(self) -> str:
        return f"{self.english_name} ({self.native_name})"


@dataclass(frozen=True)
class GenerationRequest:
    """What the user asked for. `subject` is kept as typed; validation trims it."""
    subject: str
    language: Language
    tone: Tone = Tone.PROFESSIONAL


class FillerResult(BaseModel):
    """The three variants returned by the model. All fields are required."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    sentence: StrictStr
    short_paragraph: StrictStr
    long_paragraph: StrictStr


# ---------- State machine variants

@dataclass(frozen=True)
class Idle:
    status: str = field(default="idle", init=False)


@dataclass(frozen=True)
class Loading:
    status: str = field(default="loading", init=False)


@dataclass(frozen=True)
class Succeeded:
    result: FillerResult
    status: str = field(default="success", init=False)


@dataclass(frozen=True)
class Failed:
    message: str
    kind: Optional[str] = None
    status: str = field(default="error", init=False)


GenerationState = Union[Idle, Loading, Succeeded, Failed]
