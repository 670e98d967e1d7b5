import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_PROMPT = (
    "Answer concisely based on the user's selected text. "
    "If the text is a question, provide a clear and direct answer with one or few sentences. "
    "If the text is a word or phrase, give a brief definition or explanation. "
    "If the text is a code snippet, explain its purpose in simple terms."
)
DEFAULT_OPENAI_MODEL = "gpt-5-mini"
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_WIKIPEDIA_MODEL = "kiwix-wikipedia"
DEFAULT_KIWIX_BASE_URL = "http://127.0.0.1:8080"

_TRUTHY = {"1", "true", "yes", "on"}


class Provider(str, Enum):
    """Supported answer providers. The value is the outward label."""
    OPENAI = "openai"
    GEMINI = "gemini"
    WIKIPEDIA = "wikipedia"


def _clean(value: Optional[str]) -> Optional[str]:
    value = (value or "").strip()
    return value or None


@dataclass(frozen=True)
class OverlayConfig:
    """
    Runtime parameters for a single overlay request.

    Built from the environment on every call and passed explicitly to each
    component; nothing here is cached between requests.
    """

    openai_api_key: Optional[str] = None
    openai_model: Optional[str] = None
    gemini_api_key: Optional[str] = None
    gemini_api_token: Optional[str] = None
    gemini_model: Optional[str] = None
    gemini_search_grounding: bool = False
    wikipedia_model: Optional[str] = None
    kiwix_base_url: str = DEFAULT_KIWIX_BASE_URL
    prompt: str = DEFAULT_PROMPT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "OverlayConfig":
        """
        Read the configuration from environment variables.

        Args:
            environ: Mapping to read from. When omitted, a .env file at the
                project root is loaded (without overriding set variables)
                and os.environ is used.

        Returns:
            OverlayConfig: Configuration for this request
        """
        if environ is None:
            env_path = Path(__file__).parent.parent / ".env"
            if env_path.exists():
                load_dotenv(dotenv_path=env_path)
            environ = os.environ

        grounding = (environ.get("GEMINI_SEARCH_GROUNDING") or "").strip().lower()

        return cls(
            openai_api_key=_clean(environ.get("OPENAI_API_KEY")),
            openai_model=_clean(environ.get("OPENAI_MODEL")),
            gemini_api_key=_clean(environ.get("GEMINI_API_KEY")),
            gemini_api_token=_clean(environ.get("GEMINI_API_TOKEN")),
            gemini_model=_clean(environ.get("GEMINI_MODEL")),
            gemini_search_grounding=grounding in _TRUTHY,
            wikipedia_model=_clean(environ.get("WIKIPEDIA_MODEL")),
            kiwix_base_url=(_clean(environ.get("KIWIX_BASE_URL")) or DEFAULT_KIWIX_BASE_URL).rstrip("/"),
            prompt=_clean(environ.get("OVERLAY_PROMPT")) or DEFAULT_PROMPT,
        )

    def model_for(self, provider: Provider, override: Optional[str] = None) -> str:
        """
        Resolve the model identifier for a provider.

        Precedence: explicit per-call override, then the environment
        override, then the provider default.
        """
        override = _clean(override)
        if override:
            return override

        if provider == Provider.GEMINI:
            return self.gemini_model or DEFAULT_GEMINI_MODEL
        if provider == Provider.WIKIPEDIA:
            return self.wikipedia_model or DEFAULT_WIKIPEDIA_MODEL
        return self.openai_model or DEFAULT_OPENAI_MODEL
