# Dummy model client for local dev and testing without API calls.
# Replies the way Gemini usually does: JSON inside a ```json fence.

import json

from ..types import FillerResult


class EchoDevClient:
    def __init__(self):
        self.model = "echo-dev"
        self.calls = 0

    def generate(self, prompt: str, credential: str) -> str:
        self.calls += 1
        topic = _topic(prompt)
        result = FillerResult(
            sentence=f"[ECHO] {topic}",
            short_paragraph=f"[ECHO] A short paragraph about {topic}.",
            long_paragraph=f"[ECHO] A longer paragraph about {topic}.",
        )
        return "```json\n" + json.dumps(result.model_dump(), ensure_ascii=False) + "\n```"


def _topic(prompt: str) -> str:
    marker = "about the topic: '"
    start = prompt.find(marker)
    if start < 0:
        return "(no topic)"
    start += len(marker)
    end = prompt.find("'.\n", start)
    return prompt[start:end] if end > start else prompt[start:]
