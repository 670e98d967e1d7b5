import httpx
import pytest

from api.google_gemini_client import GeminiClient
from api.kiwix_client import KiwixClient
from api.openai_client import OpenAIClient
from config.config import OverlayConfig, Provider
from orchestrator.provider_registry import CLIENTS, DEFAULT_PROVIDER, create_client, resolve_provider

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("token", ["gemini", "GEMINI", "Gemini", "gEmInI"])
def test_gemini_tokens_are_case_insensitive(token):
    assert resolve_provider(token) == Provider.GEMINI


@pytest.mark.parametrize("token", ["wikipedia", "WIKIPEDIA", "Wikipedia"])
def test_wikipedia_tokens_are_case_insensitive(token):
    assert resolve_provider(token) == Provider.WIKIPEDIA


@pytest.mark.parametrize("token", [None, "", "openai", "OpenAI", "claude", " gemini", "wiki"])
def test_everything_else_defaults_to_openai(token):
    assert resolve_provider(token) == Provider.OPENAI
    assert DEFAULT_PROVIDER == Provider.OPENAI


def test_every_provider_has_a_client():
    assert set(CLIENTS) == set(Provider)


@pytest.mark.parametrize(
    "provider, expected_cls, label",
    [
        (Provider.OPENAI, OpenAIClient, "openai"),
        (Provider.GEMINI, GeminiClient, "gemini"),
        (Provider.WIKIPEDIA, KiwixClient, "wikipedia"),
    ],
)
def test_create_client(provider, expected_cls, label):
    http_client = httpx.AsyncClient()
    client = create_client(provider, OverlayConfig(), http_client)

    assert isinstance(client, expected_cls)
    assert client.label == label
    assert client.http_client is http_client
