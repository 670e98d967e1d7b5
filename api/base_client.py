import json
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

import httpx

from config.config import OverlayConfig, Provider
from models.errors import (
    EmptyAnswerError,
    HttpStatusError,
    TransportFailureError,
    UnexpectedResponseShapeError,
)
from utils.logger import get_logger

logger = get_logger(__name__)

_MISSING = object()


class BaseProviderClient(ABC):
    """
    Abstract base class for answer providers.

    Single-request providers implement build_request and parse_response;
    answer() ties them together. Providers with a multi-step flow override
    answer() and reuse the transport helpers.
    """

    provider: Provider
    default_model: str

    def __init__(self, config: OverlayConfig, http_client: httpx.AsyncClient):
        """
        Initialize the provider client.

        Args:
            config: Configuration resolved for the current request
            http_client: Transport shared by the calls of this request
        """
        self.config = config
        self.http_client = http_client

    @property
    def label(self) -> str:
        return self.provider.value

    def require_credentials(self) -> None:
        """Raise MissingCredentialError when the provider cannot authenticate.

        Called before any network activity. Providers without credentials
        keep the default no-op.
        """

    @abstractmethod
    def build_request(self, selection: str, model: str) -> httpx.Request:
        """
        Build the HTTP request for a selection.

        Args:
            selection: Selected text to answer
            model: Resolved model identifier

        Returns:
            An unsent httpx.Request
        """

    @abstractmethod
    def parse_response(self, payload: Any) -> str:
        """
        Extract the answer text from a decoded JSON payload.

        Raises:
            EmptyAnswerError: The answer field exists but is blank
            UnexpectedResponseShapeError: The answer field is absent
        """

    async def answer(self, selection: str, model: str) -> str:
        self.require_credentials()
        request = self.build_request(selection, model)
        response = await self.send(request)
        return self.parse_response(self.decode_json(response))

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send a request, mapping transport and status failures to OverlayErrors."""
        url = self._redact_url(request.url)
        logger.info(
            f"{self.label} request",
            extra={"extra_fields": {"provider": self.label, "method": request.method, "url": url}},
        )

        try:
            response = await self.http_client.send(request)
        except httpx.RequestError as e:
            logger.error(
                f"{self.label} request failed",
                extra={"extra_fields": {"provider": self.label, "url": url, "error_type": type(e).__name__}},
            )
            raise TransportFailureError(f"api request failed: {e}", provider=self.label) from e

        if not response.is_success:
            logger.error(
                f"{self.label} returned HTTP {response.status_code}",
                extra={"extra_fields": {"provider": self.label, "url": url, "status_code": response.status_code}},
            )
            raise HttpStatusError(
                f"api http error: {response.status_code} {response.reason_phrase} for url {url}",
                status_code=response.status_code,
                provider=self.label,
            )

        return response

    def decode_json(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise UnexpectedResponseShapeError(
                f"failed to parse api response: {e}", body=response.text, provider=self.label
            ) from e

    def extract_text(self, payload: Any, path: Sequence[Any]) -> Optional[str]:
        """
        Follow a fixed path of dict keys / list indexes through a payload.

        Returns:
            The trimmed string at the end of the path, or None if any step is
            missing or the final value is not a string

        Raises:
            EmptyAnswerError: The path resolved to a blank string
        """
        node = payload
        for step in path:
            if isinstance(step, int):
                if not isinstance(node, list) or len(node) <= step:
                    return None
                node = node[step]
            else:
                if not isinstance(node, dict):
                    return None
                node = node.get(step, _MISSING)
                if node is _MISSING:
                    return None

        if not isinstance(node, str):
            return None

        text = node.strip()
        if not text:
            raise EmptyAnswerError("api response missing content", provider=self.label)
        return text

    def unexpected_shape(self, payload: Any) -> UnexpectedResponseShapeError:
        logger.error(
            f"Unexpected {self.label} response shape",
            extra={"extra_fields": {"provider": self.label, "body": payload}},
        )
        return UnexpectedResponseShapeError(
            f"unexpected response shape: {json.dumps(payload, default=str)}",
            body=payload,
            provider=self.label,
        )

    @staticmethod
    def _redact_url(url: httpx.URL) -> str:
        return str(url.copy_remove_param("key"))
