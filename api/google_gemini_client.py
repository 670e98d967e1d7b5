from typing import Any

import httpx

from config.config import DEFAULT_GEMINI_MODEL, Provider
from models.errors import MissingCredentialError
from .base_client import BaseProviderClient

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"


class GeminiClient(BaseProviderClient):
    """
    Client for the Gemini generateContent REST endpoint.

    Authenticates with GEMINI_API_TOKEN as a bearer header when set,
    otherwise with GEMINI_API_KEY as the ``key`` query parameter.
    """

    provider = Provider.GEMINI
    default_model = DEFAULT_GEMINI_MODEL

    def require_credentials(self) -> None:
        if not (self.config.gemini_api_token or self.config.gemini_api_key):
            raise MissingCredentialError(
                "GEMINI_API_KEY or GEMINI_API_TOKEN is not set", provider=self.label
            )

    def build_body(self, selection: str) -> dict[str, Any]:
        body: dict[str, Any] = {
            "contents": [{"parts": [{"text": selection}]}],
            "systemInstruction": {"parts": [{"text": self.config.prompt}]},
        }
        if self.config.gemini_search_grounding:
            body["tools"] = [{"google_search": {}}]
        return body

    def build_request(self, selection: str, model: str) -> httpx.Request:
        url = f"{GEMINI_BASE_URL}/{model}:generateContent"
        headers = {}
        params = {}
        if self.config.gemini_api_token:
            headers["Authorization"] = f"Bearer {self.config.gemini_api_token}"
        else:
            params["key"] = self.config.gemini_api_key

        return self.http_client.build_request(
            "POST", url, json=self.build_body(selection), headers=headers, params=params
        )

    def parse_response(self, payload: Any) -> str:
        text = self.extract_text(payload, ("candidates", 0, "content", "parts", 0, "text"))
        if text is not None:
            return text

        # Best-effort fallback for the flattened shape some proxies return.
        text = self.extract_text(payload, ("response", "text"))
        if text is not None:
            return text

        raise self.unexpected_shape(payload)
