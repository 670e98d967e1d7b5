import json

import httpx
import pytest

import main as cli
from orchestrator.core import OverlayOrchestrator

pytestmark = pytest.mark.integration


def patch_orchestrator(monkeypatch, selection, environ, handler=None):
    transport = httpx.MockTransport(handler) if handler else None
    monkeypatch.setattr(
        cli,
        "OverlayOrchestrator",
        lambda: OverlayOrchestrator(selection_reader=lambda: selection, transport=transport, environ=environ),
    )


def test_prints_empty_sentinel(monkeypatch, capsys):
    patch_orchestrator(monkeypatch, "", {})

    assert cli.main(["gemini"]) == 0
    assert capsys.readouterr().out.strip() == "(empty)"


def test_prints_json_result(monkeypatch, capsys):
    patch_orchestrator(
        monkeypatch,
        "bird",
        {"OPENAI_API_KEY": "sk-test"},
        handler=lambda request: httpx.Response(200, json={"choices": [{"message": {"content": "Tweet."}}]}),
    )

    assert cli.main(["--model", "gpt-5-nano", "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == {
        "text": "Tweet.",
        "provider": "openai",
        "model": "gpt-5-nano",
        "query": "bird",
    }


def test_error_goes_to_stderr(monkeypatch, capsys):
    patch_orchestrator(monkeypatch, "bird", {})

    assert cli.main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "OPENAI_API_KEY is not set"
