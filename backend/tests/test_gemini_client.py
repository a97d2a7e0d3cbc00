import asyncio
from unittest.mock import MagicMock

import pytest

from config import settings
from services import gemini_client


@pytest.fixture
def fake_client(monkeypatch):
    client = MagicMock()
    monkeypatch.setattr(settings, "gemini_api_key", "test-key")
    monkeypatch.setattr(gemini_client, "_client", client)
    return client


def _reply(client, text):
    client.models.generate_content.return_value = MagicMock(text=text)
    return asyncio.run(gemini_client.generate_json("prompt"))


def test_no_api_key_disables_client(monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", "")
    assert gemini_client.get_client() is None
    assert asyncio.run(gemini_client.generate_json("prompt")) is None


def test_generate_json_parses_object(fake_client):
    assert _reply(fake_client, '{"confidence": 0.4}') == {"confidence": 0.4}
    kwargs = fake_client.models.generate_content.call_args.kwargs
    assert kwargs["model"] == settings.gemini_model
    assert kwargs["contents"] == "prompt"


def test_generate_json_strips_code_fences(fake_client):
    assert _reply(fake_client, '```json\n{"reasoning": "ok"}\n```') == {"reasoning": "ok"}


def test_generate_json_invalid_json(fake_client):
    assert _reply(fake_client, "not json") is None


def test_generate_json_rejects_non_object(fake_client):
    assert _reply(fake_client, "[1, 2]") is None


def test_generate_json_api_error(fake_client):
    fake_client.models.generate_content.side_effect = RuntimeError("quota")
    assert asyncio.run(gemini_client.generate_json("prompt")) is None
