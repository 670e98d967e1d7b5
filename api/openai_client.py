from typing import Any

import httpx

from config.config import DEFAULT_OPENAI_MODEL, Provider
from models.errors import MissingCredentialError
from .base_client import BaseProviderClient

OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"


class OpenAIClient(BaseProviderClient):
    """
    Client for the OpenAI chat completions endpoint.
    Sends the prompt as the system message and the selection as the user message.
    """

    provider = Provider.OPENAI
    default_model = DEFAULT_OPENAI_MODEL

    def require_credentials(self) -> None:
        if not self.config.openai_api_key:
            raise MissingCredentialError("OPENAI_API_KEY is not set", provider=self.label)

    def build_request(self, selection: str, model: str) -> httpx.Request:
        body = {
            "model": model,
            "messages": [
                {"role": "system", "content": self.config.prompt},
                {"role": "user", "content": selection},
            ],
        }
        return self.http_client.build_request(
            "POST",
            OPENAI_CHAT_URL,
            json=body,
            headers={"Authorization": f"Bearer {self.config.openai_api_key}"},
        )

    def parse_response(self, payload: Any) -> str:
        text = self.extract_text(payload, ("choices", 0, "message", "content"))
        if text is None:
            raise self.unexpected_shape(payload)
        return text
