"""
Overlay orchestration: selection -> provider -> answer.

Each call re-reads configuration from the environment, captures the
selection, and runs a single provider request on its own HTTP client.
Nothing is shared between calls.
"""

from __future__ import annotations

import asyncio
import time
from typing import Callable, Mapping

import httpx

from config.config import OverlayConfig
from models.answer import AnswerResult, assemble_answer
from models.errors import OverlayError
from orchestrator.model_registry import ModelRegistry
from orchestrator.provider_registry import create_client, resolve_provider
from utils.logger import get_logger
from utils.selection import fetch_selection

logger = get_logger(__name__)


class OverlayOrchestrator:
    """
    Produces an AnswerResult for whatever text is currently selected.

    Args:
        selection_reader: Callable returning the selected text
        transport: Optional httpx transport (tests pass httpx.MockTransport)
        environ: Optional environment mapping; os.environ (plus .env) when None
        registry: Optional model registry used to flag unknown model names
    """

    def __init__(
        self,
        selection_reader: Callable[[], str] = fetch_selection,
        transport: httpx.AsyncBaseTransport | None = None,
        environ: Mapping[str, str] | None = None,
        registry: ModelRegistry | None = None,
    ):
        self.selection_reader = selection_reader
        self.transport = transport
        self.environ = environ
        self.registry = registry

    def _check_model(self, provider, model: str) -> None:
        if self.registry and not self.registry.is_known_model(provider, model):
            logger.warning(
                "Model is not listed in the model registry",
                extra={"extra_fields": {"provider": provider.value, "model": model}},
            )

    async def generate_answer(self, provider_token: str | None = None, model: str | None = None) -> AnswerResult:
        """
        Answer the current selection with the requested provider.

        Args:
            provider_token: "gemini", "wikipedia", anything else means OpenAI
            model: Optional model override for this call

        Returns:
            AnswerResult; text is "(empty)" when nothing was selected

        Raises:
            OverlayError: Any provider failure (see models.errors)
        """
        config = OverlayConfig.from_env(self.environ)
        # wl-paste blocks; read it off the event loop
        selection = (await asyncio.to_thread(self.selection_reader)).strip()
        provider = resolve_provider(provider_token)
        resolved_model = config.model_for(provider, model)

        if not selection:
            logger.info(
                "Empty selection; skipping provider call",
                extra={"extra_fields": {"provider": provider.value, "model": resolved_model}},
            )
            return assemble_answer(None, provider.value, resolved_model)

        self._check_model(provider, resolved_model)
        start_time = time.time()

        async with httpx.AsyncClient(transport=self.transport, follow_redirects=True) as http_client:
            client = create_client(provider, config, http_client)
            try:
                text = await client.answer(selection, resolved_model)
            except OverlayError as e:
                logger.error(
                    f"Overlay request failed: {e.code}",
                    extra={
                        "extra_fields": {
                            "provider": provider.value,
                            "model": resolved_model,
                            "error_code": e.code,
                            "error_message": e.message,
                        }
                    },
                )
                raise

        logger.info(
            "Overlay answer generated",
            extra={
                "extra_fields": {
                    "provider": provider.value,
                    "model": resolved_model,
                    "query_length": len(selection),
                    "answer_length": len(text),
                    "latency_ms": int((time.time() - start_time) * 1000),
                }
            },
        )
        return assemble_answer(text, provider.value, resolved_model, query=selection)


async def generate_answer(provider_token: str | None = None, model: str | None = None) -> AnswerResult:
    """Module-level shortcut using the real selection buffer and network."""
    return await OverlayOrchestrator().generate_answer(provider_token, model)
