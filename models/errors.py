"""Error taxonomy for overlay requests.

Every failure is terminal for the request it belongs to; nothing is retried.
``str(error)`` is the single human-readable message handed to callers.
"""

from typing import Any


class OverlayError(Exception):
    """Base class for all overlay request failures."""

    code = "unknown"

    def __init__(self, message: str, provider: str | None = None):
        super().__init__(message)
        self.message = message
        self.provider = provider

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "provider": self.provider}


class MissingCredentialError(OverlayError):
    code = "missing_credential"


class TransportFailureError(OverlayError):
    code = "transport_failure"


class HttpStatusError(OverlayError):
    code = "http_status"

    def __init__(self, message: str, status_code: int, provider: str | None = None):
        super().__init__(message, provider=provider)
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["status_code"] = self.status_code
        return data


class UnexpectedResponseShapeError(OverlayError):
    """The body parsed (or failed to) but the expected fields were absent."""

    code = "unexpected_response_shape"

    def __init__(self, message: str, body: Any = None, provider: str | None = None):
        super().__init__(message, provider=provider)
        self.body = body


class EmptyAnswerError(OverlayError):
    code = "empty_answer"


class NoSearchHitError(OverlayError):
    code = "no_search_hit"


class EmptyArticleContentError(OverlayError):
    code = "empty_article_content"
