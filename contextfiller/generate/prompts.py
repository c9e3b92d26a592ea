# Prompt template for filler text generation.
# The JSON instruction must stay in sync with FillerResult's field names.

from __future__ import annotations

from .types import Language, Tone

JSON_INSTRUCTION = 'Return strictly JSON: { "sentence": "...", "short_paragraph": "...", "long_paragraph": "..." }'


def build_prompt(subject: str, language: Language, tone: Tone) -> str:
    tone_name = tone.value if isinstance(tone, Tone) else str(tone)
    return f"""Write 3 variations of filler text about the topic: '{subject}'.
Language: {language.display_name}.
Tone: {tone_name}.
1. A single sentence/headline.
2. A short paragraph (2-3 lines).
3. A longer paragraph (6 lines).
{JSON_INSTRUCTION}"""
