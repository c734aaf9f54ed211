"""
Chat-completion clients.

Every AI feature sends one system/user message pair to a completion endpoint
and gets free-form text back. Two transports share the ``complete()``
contract: an OpenAI-compatible HTTP endpoint (Groq by default) called with
``requests``, and Anthropic's Messages API through the ``anthropic`` SDK.
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging

import anthropic
import requests

from career_assistant.core.errors import CompletionError

logger = logging.getLogger(__name__)

Messages = list[dict[str, str]]

DEFAULT_MAX_TOKENS = 2000
DEFAULT_TEMPERATURE = 0.7


class CompletionClient(ABC):
    """Sends a message list to a completion model and returns its reply text."""

    DEFAULT_MODEL = ""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: float = DEFAULT_TEMPERATURE,
        timeout: int = 60,
    ):
        self.api_key = api_key
        self.model = model or self.DEFAULT_MODEL
        self.temperature = temperature
        self.timeout = timeout
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""
        pass

    @abstractmethod
    def complete(self, messages: Messages, max_tokens: int = DEFAULT_MAX_TOKENS) -> str:
        """
        Request one completion.

        Args:
            messages: Chat messages ({"role": ..., "content": ...})
            max_tokens: Ceiling on generated tokens

        Returns:
            The reply text, or "" when the model returned nothing

        Raises:
            CompletionError: On any network or API failure
        """
        pass

    def _require_key(self) -> str:
        if not self.api_key:
            self.logger.error(f"No API key configured for {self.name}")
            raise CompletionError()
        return self.api_key


class HTTPCompletionClient(CompletionClient):
    """OpenAI-compatible chat-completion endpoint (Groq, OpenAI)."""

    API_URL = "https://api.groq.com/openai/v1/chat/completions"
    DEFAULT_MODEL = "mixtral-8x7b-32768"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        api_url: Optional[str] = None,
        temperature: float = DEFAULT_TEMPERATURE,
        timeout: int = 60,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(api_key=api_key, model=model, temperature=temperature, timeout=timeout)
        self.api_url = api_url or self.API_URL
        self.session = session or requests.Session()

    @property
    def name(self) -> str:
        return "Groq"

    def complete(self, messages: Messages, max_tokens: int = DEFAULT_MAX_TOKENS) -> str:
        api_key = self._require_key()

        payload = {
            "model": self.model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": self.temperature,
        }
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

        try:
            response = self.session.post(
                self.api_url, json=payload, headers=headers, timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            self.logger.error(f"{self.name} API call failed: {e}")
            raise CompletionError() from e

        try:
            choices = data.get("choices") or []
            if not choices:
                return ""
            return (choices[0].get("message") or {}).get("content") or ""
        except AttributeError as e:
            self.logger.error(f"Unexpected {self.name} response envelope: {data!r:.200}")
            raise CompletionError() from e


class OpenAICompletionClient(HTTPCompletionClient):
    """OpenAI's own chat-completion endpoint."""

    API_URL = "https://api.openai.com/v1/chat/completions"
    DEFAULT_MODEL = "gpt-4o-mini"

    @property
    def name(self) -> str:
        return "OpenAI"


class AnthropicCompletionClient(CompletionClient):
    """Anthropic Messages API."""

    DEFAULT_MODEL = "claude-sonnet-4-20250514"

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None,
                 temperature: float = DEFAULT_TEMPERATURE, timeout: int = 60,
                 client: Optional[anthropic.Anthropic] = None):
        super().__init__(api_key=api_key, model=model, temperature=temperature, timeout=timeout)
        self._client = client

    @property
    def name(self) -> str:
        return "Anthropic"

    @property
    def client(self) -> anthropic.Anthropic:
        if self._client is None:
            self._client = anthropic.Anthropic(api_key=self._require_key(), timeout=self.timeout)
        return self._client

    def complete(self, messages: Messages, max_tokens: int = DEFAULT_MAX_TOKENS) -> str:
        # The Messages API takes the system prompt separately
        system = "\n\n".join(m["content"] for m in messages if m["role"] == "system")
        chat = [m for m in messages if m["role"] != "system"]

        kwargs = {
            "model": self.model,
            "max_tokens": max_tokens,
            "temperature": self.temperature,
            "messages": chat,
        }
        if system:
            kwargs["system"] = system

        try:
            response = self.client.messages.create(**kwargs)
        except anthropic.APIError as e:
            self.logger.error(f"Anthropic API call failed: {e}")
            raise CompletionError() from e

        return "".join(
            block.text for block in response.content if getattr(block, "type", "text") == "text"
        )


PROVIDERS = {
    "groq": HTTPCompletionClient,
    "openai": OpenAICompletionClient,
    "anthropic": AnthropicCompletionClient,
}


def get_completion_client(config) -> CompletionClient:
    """
    Build the completion client selected in the configuration.

    Args:
        config: A Config instance

    Returns:
        CompletionClient for ``ai.provider``
    """
    settings = config.get_ai_config()
    provider = str(settings["provider"]).lower()

    if provider not in PROVIDERS:
        raise ValueError(f"Unsupported AI provider: {provider}")

    kwargs = {
        "api_key": settings["api_key"],
        "model": settings["model"],
        "temperature": settings["temperature"],
        "timeout": settings["timeout"],
    }
    if provider != "anthropic" and settings["api_url"]:
        kwargs["api_url"] = settings["api_url"]

    logger.debug(f"Using {provider} completion provider")
    return PROVIDERS[provider](**kwargs)


def build_messages(system: str, user: str) -> Messages:
    """The system/user message pair every feature sends."""
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": user},
    ]
