from typing import Optional

import httpx

from api.base_client import BaseProviderClient
from api.google_gemini_client import GeminiClient
from api.kiwix_client import KiwixClient
from api.openai_client import OpenAIClient
from config.config import OverlayConfig, Provider

DEFAULT_PROVIDER = Provider.OPENAI

CLIENTS: dict[Provider, type[BaseProviderClient]] = {
    Provider.OPENAI: OpenAIClient,
    Provider.GEMINI: GeminiClient,
    Provider.WIKIPEDIA: KiwixClient,
}

# Only these tokens select a non-default provider; "openai" falls through to
# the default like any other value.
_TOKENS = {
    "gemini": Provider.GEMINI,
    "wikipedia": Provider.WIKIPEDIA,
}


def resolve_provider(token: Optional[str]) -> Provider:
    """Map a user-supplied token to a provider. Never fails."""
    if token is None:
        return DEFAULT_PROVIDER
    return _TOKENS.get(token.lower(), DEFAULT_PROVIDER)


def create_client(
    provider: Provider, config: OverlayConfig, http_client: httpx.AsyncClient
) -> BaseProviderClient:
    return CLIENTS[provider](config, http_client)
