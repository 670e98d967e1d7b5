"""Kiwix (offline Wikipedia mirror) provider.

Two sequential requests against the local kiwix-serve instance: a full-text
search, then the first article it links to. The article HTML is reduced to
its heading and opening paragraphs.
"""

from typing import Any

import httpx

from config.config import DEFAULT_WIKIPEDIA_MODEL, Provider
from models.errors import EmptyArticleContentError, NoSearchHitError
from utils.html_text import extract_first_hit, html_to_text
from utils.logger import get_logger

from .base_client import BaseProviderClient

logger = get_logger(__name__)


class KiwixClient(BaseProviderClient):
    provider = Provider.WIKIPEDIA
    default_model = DEFAULT_WIKIPEDIA_MODEL

    @property
    def base_url(self) -> str:
        return self.config.kiwix_base_url.rstrip("/")

    def build_request(self, selection: str, _model: str) -> httpx.Request:
        return self.http_client.build_request(
            "GET", f"{self.base_url}/search", params={"pattern": selection}
        )

    def build_article_request(self, path: str) -> httpx.Request:
        return self.http_client.build_request("GET", f"{self.base_url}/{path}")

    def parse_response(self, payload: Any) -> str:
        text = html_to_text(payload)
        if not text:
            raise EmptyArticleContentError("article content was empty", provider=self.label)
        return text

    async def search(self, selection: str, model: str) -> str:
        response = await self.send(self.build_request(selection, model))
        path = extract_first_hit(response.text)
        if path is None:
            logger.info(
                "Kiwix search returned no article links",
                extra={"extra_fields": {"provider": self.label, "query_length": len(selection)}},
            )
            raise NoSearchHitError("no matches found", provider=self.label)
        return path

    async def answer(self, selection: str, model: str) -> str:
        path = await self.search(selection, model)
        logger.info("Kiwix search hit", extra={"extra_fields": {"provider": self.label, "path": path}})

        response = await self.send(self.build_article_request(path))
        return self.parse_response(response.text)
