import pytest

from config.config import (
    DEFAULT_GEMINI_MODEL,
    DEFAULT_KIWIX_BASE_URL,
    DEFAULT_OPENAI_MODEL,
    DEFAULT_PROMPT,
    DEFAULT_WIKIPEDIA_MODEL,
    OverlayConfig,
    Provider,
)

pytestmark = pytest.mark.unit


def test_defaults_from_empty_environment():
    config = OverlayConfig.from_env({})

    assert config.openai_api_key is None
    assert config.gemini_api_key is None
    assert config.gemini_api_token is None
    assert config.gemini_search_grounding is False
    assert config.kiwix_base_url == DEFAULT_KIWIX_BASE_URL
    assert config.prompt == DEFAULT_PROMPT
    assert config.model_for(Provider.OPENAI) == DEFAULT_OPENAI_MODEL
    assert config.model_for(Provider.GEMINI) == DEFAULT_GEMINI_MODEL
    assert config.model_for(Provider.WIKIPEDIA) == DEFAULT_WIKIPEDIA_MODEL


def test_reads_environment_overrides():
    config = OverlayConfig.from_env(
        {
            "OPENAI_API_KEY": "sk-test",
            "OPENAI_MODEL": "gpt-5-nano",
            "GEMINI_API_TOKEN": "ya29.token",
            "GEMINI_MODEL": "gemini-2.5-pro",
            "GEMINI_SEARCH_GROUNDING": "True",
            "OVERLAY_PROMPT": "Answer in French.",
            "KIWIX_BASE_URL": "http://kiwix.local:9000/",
        }
    )

    assert config.openai_api_key == "sk-test"
    assert config.gemini_api_token == "ya29.token"
    assert config.gemini_search_grounding is True
    assert config.prompt == "Answer in French."
    assert config.kiwix_base_url == "http://kiwix.local:9000"
    assert config.model_for(Provider.OPENAI) == "gpt-5-nano"
    assert config.model_for(Provider.GEMINI) == "gemini-2.5-pro"


def test_blank_values_count_as_unset():
    config = OverlayConfig.from_env({"OPENAI_API_KEY": "  ", "OVERLAY_PROMPT": "", "OPENAI_MODEL": ""})

    assert config.openai_api_key is None
    assert config.prompt == DEFAULT_PROMPT
    assert config.model_for(Provider.OPENAI) == DEFAULT_OPENAI_MODEL


@pytest.mark.parametrize("value, expected", [("1", True), ("yes", True), ("on", True), ("0", False), ("no", False)])
def test_search_grounding_flag(value, expected):
    assert OverlayConfig.from_env({"GEMINI_SEARCH_GROUNDING": value}).gemini_search_grounding is expected


def test_call_override_beats_environment():
    config = OverlayConfig.from_env({"GEMINI_MODEL": "gemini-2.5-pro"})

    assert config.model_for(Provider.GEMINI, "gemini-3-pro-preview") == "gemini-3-pro-preview"
    assert config.model_for(Provider.GEMINI, "  ") == "gemini-2.5-pro"
