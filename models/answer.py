from dataclasses import dataclass
from typing import Any

EMPTY_SELECTION_TEXT = "(empty)"


@dataclass(frozen=True)
class AnswerResult:
    text: str
    provider: str
    model: str
    query: str = ""  # selection the answer was produced for

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "provider": self.provider,
            "model": self.model,
            "query": self.query,
        }


def assemble_answer(text: str | None, provider: str, model: str, query: str = "") -> AnswerResult:
    """Wrap extracted text with the resolved provider label and model.

    A missing ``text`` (no selection was available) becomes the
    ``"(empty)"`` sentinel rather than an error.
    """
    if text is None:
        return AnswerResult(text=EMPTY_SELECTION_TEXT, provider=provider, model=model, query="")
    return AnswerResult(text=text, provider=provider, model=model, query=query)
