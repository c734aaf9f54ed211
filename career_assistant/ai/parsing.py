"""
Parsing of model replies that are supposed to be JSON.

Models often wrap JSON in markdown fences or surround it with prose. The
reply is parsed as-is first, then with fences stripped, then from the first
JSON-looking span. When none of that yields the expected container, the
caller's fallback payload is returned instead so there is always something
to render.
"""

from typing import Any, Callable, Union
import copy
import json
import logging
import re

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```[a-zA-Z0-9_-]*\s*\n?(.*?)\n?```$", re.S)
_OBJECT_RE = re.compile(r"\{.*\}", re.S)
_ARRAY_RE = re.compile(r"\[.*\]", re.S)


def _strip_fences(raw: str) -> str:
    text = raw.strip()
    match = _FENCE_RE.match(text)
    if match:
        return match.group(1).strip()
    return text


def extract_json(raw: str) -> Any:
    """
    Decode the JSON value contained in a model reply.

    Raises:
        ValueError: If no JSON value can be decoded
    """
    text = _strip_fences(raw or "")
    if not text:
        raise ValueError("empty reply")

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    # Try whichever bracket opens first
    candidates = []
    for pattern in (_OBJECT_RE, _ARRAY_RE):
        match = pattern.search(text)
        if match:
            candidates.append(match)
    for match in sorted(candidates, key=lambda m: m.start()):
        try:
            return json.loads(match.group())
        except json.JSONDecodeError:
            continue

    raise ValueError("no JSON value found in reply")


def parse_json_response(
    raw: str,
    fallback: Union[Any, Callable[[], Any]],
    expect: type = dict,
    context: str = "response",
) -> Any:
    """
    Parse a model reply, substituting ``fallback`` on failure.

    Args:
        raw: Reply text from the completion endpoint
        fallback: Payload (or zero-argument factory) used when parsing fails
        expect: Required container type of the parsed value (dict or list)
        context: Label used in the log message

    Returns:
        The parsed value, or a fresh copy of the fallback
    """
    try:
        value = extract_json(raw)
        if isinstance(value, expect):
            return value
        # A single question object where a list was asked for, etc.
        if expect is list and isinstance(value, dict):
            for key in ("questions", "items", "phases", "learningPath", "data"):
                if isinstance(value.get(key), list):
                    return value[key]
        reason = f"expected {expect.__name__}, got {type(value).__name__}"
    except ValueError as e:
        reason = str(e)

    logger.warning(f"Could not parse {context} ({reason}); using sample data")
    if callable(fallback):
        return fallback()
    return copy.deepcopy(fallback)
