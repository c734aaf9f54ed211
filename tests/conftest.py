"""Shared fixtures for the career assistant tests."""

import json

import pytest

from career_assistant.ai.completion import CompletionClient
from career_assistant.core.errors import CompletionError
from career_assistant.storage import LocalBackend


class FakeCompletionClient(CompletionClient):
    """Returns queued replies and records every request."""

    def __init__(self, *replies):
        super().__init__(api_key="test-key")
        self.replies = list(replies)
        self.calls = []

    @property
    def name(self) -> str:
        return "Fake"

    def complete(self, messages, max_tokens=2000):
        self.calls.append({"messages": messages, "max_tokens": max_tokens})
        if not self.replies:
            return ""
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, (dict, list)):
            return json.dumps(reply)
        return reply

    @property
    def last_user_message(self) -> str:
        return self.calls[-1]["messages"][-1]["content"]

    @property
    def last_system_message(self) -> str:
        return self.calls[-1]["messages"][0]["content"]


@pytest.fixture
def fake_client():
    def make(*replies):
        return FakeCompletionClient(*replies)
    return make


@pytest.fixture
def failing_client():
    return FakeCompletionClient(CompletionError())


@pytest.fixture
def local_backend(tmp_path):
    return LocalBackend(str(tmp_path / "data"))
