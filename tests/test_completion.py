"""
Tests for the Claude completion client.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import anthropic
import httpx
import pytest

from analysis import completion
from analysis.completion import DEFAULT_MAX_TOKENS, DEFAULT_MODEL, CompletionClient
from errors import CompletionError

_REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def _sdk(reply=None, error=None):
    sdk = MagicMock()
    if error is not None:
        sdk.messages.create.side_effect = error
    else:
        sdk.messages.create.return_value = reply
    return sdk


def _message(*texts):
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=t) for t in texts])


class TestCompletionClient:

    def test_sends_single_user_message(self):
        sdk = _sdk(_message("BRAND_ANALYSIS:\nGood."))
        client = CompletionClient(api_key="key", client=sdk)

        reply = client.complete("the prompt")

        assert reply == "BRAND_ANALYSIS:\nGood."
        sdk.messages.create.assert_called_once_with(
            model=DEFAULT_MODEL,
            max_tokens=4000,
            messages=[{"role": "user", "content": "the prompt"}],
        )

    def test_returns_first_item_verbatim(self):
        client = CompletionClient(api_key="key", client=_sdk(_message("  first\n", "second")))

        assert client.complete("p") == "  first\n"

    def test_defaults(self):
        assert DEFAULT_MAX_TOKENS == 4000
        client = CompletionClient(api_key="key", client=_sdk(_message("x")))
        assert client.model == DEFAULT_MODEL
        assert client.max_tokens == DEFAULT_MAX_TOKENS

    def test_builds_sdk_client_without_retries(self, monkeypatch):
        factory = MagicMock()
        monkeypatch.setattr(completion.anthropic, "Anthropic", factory)

        CompletionClient(api_key="secret")

        factory.assert_called_once_with(api_key="secret", max_retries=0)

    def test_passes_timeout_when_configured(self, monkeypatch):
        factory = MagicMock()
        monkeypatch.setattr(completion.anthropic, "Anthropic", factory)

        CompletionClient(api_key="", timeout=30.0)

        factory.assert_called_once_with(api_key="", max_retries=0, timeout=30.0)

    def test_status_error(self):
        error = anthropic.APIStatusError(
            "overloaded",
            response=httpx.Response(529, request=_REQUEST),
            body=None,
        )
        sdk = _sdk(error=error)

        with pytest.raises(CompletionError):
            CompletionClient(api_key="key", client=sdk).complete("p")
        assert sdk.messages.create.call_count == 1

    def test_connection_error(self):
        sdk = _sdk(error=anthropic.APIConnectionError(request=_REQUEST))

        with pytest.raises(CompletionError, match="AI analysis failed"):
            CompletionClient(api_key="key", client=sdk).complete("p")

    def test_missing_credentials(self):
        sdk = _sdk(error=TypeError("Could not resolve authentication method"))

        with pytest.raises(CompletionError):
            CompletionClient(api_key="", client=sdk).complete("p")

    @pytest.mark.parametrize(
        "reply",
        [
            SimpleNamespace(content=[]),
            SimpleNamespace(content=None),
            SimpleNamespace(content=[SimpleNamespace(type="tool_use", id="t1")]),
            SimpleNamespace(),
        ],
    )
    def test_reply_without_text(self, reply):
        with pytest.raises(CompletionError, match="no content"):
            CompletionClient(api_key="key", client=_sdk(reply)).complete("p")
