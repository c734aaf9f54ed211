"""
Completion endpoint clients and reply parsing.
"""

from .completion import (
    CompletionClient,
    HTTPCompletionClient,
    OpenAICompletionClient,
    AnthropicCompletionClient,
    get_completion_client,
    build_messages,
)
from .parsing import parse_json_response, extract_json

__all__ = [
    "CompletionClient",
    "HTTPCompletionClient",
    "OpenAICompletionClient",
    "AnthropicCompletionClient",
    "get_completion_client",
    "build_messages",
    "parse_json_response",
    "extract_json",
]
