"""
Claude completion client: one blocking Messages API round trip per prompt.
"""

import logging
from typing import Optional

import anthropic

from errors import CompletionError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_MAX_TOKENS = 4000


class CompletionClient:
    """
    Thin wrapper around `anthropic.Anthropic().messages.create`.

    The API key is passed in rather than read from the environment. An empty
    key is sent as-is and fails at the service. Retries are disabled; `timeout`
    of None leaves the SDK's own default in place.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        timeout: Optional[float] = None,
        client: Optional[anthropic.Anthropic] = None,
    ):
        self.model = model
        self.max_tokens = max_tokens
        if client is None:
            options = {"api_key": api_key, "max_retries": 0}
            if timeout is not None:
                options["timeout"] = timeout
            client = anthropic.Anthropic(**options)
        self._client = client

    def complete(self, prompt: str) -> str:
        """Send `prompt` as the sole user message and return the reply text verbatim."""
        logger.info("Requesting completion (model=%s, max_tokens=%d)", self.model, self.max_tokens)
        try:
            message = self._client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIStatusError as exc:
            logger.error("Claude returned HTTP %d: %s", exc.status_code, exc)
            raise CompletionError("AI analysis failed") from exc
        except anthropic.AnthropicError as exc:
            logger.error("Claude request failed: %s", exc)
            raise CompletionError("AI analysis failed") from exc
        except TypeError as exc:
            # The SDK raises TypeError when no credential resolves (empty key)
            logger.error("Claude request rejected before sending: %s", exc)
            raise CompletionError("AI analysis failed") from exc

        content = getattr(message, "content", None) or []
        text = getattr(content[0], "text", None) if content else None
        if not isinstance(text, str):
            logger.error("Claude reply has no text content item")
            raise CompletionError("AI analysis returned no content")

        logger.info("Completion received (%d chars)", len(text))
        return text
