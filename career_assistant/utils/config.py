"""
Configuration for the career assistant.

Settings are layered: built-in defaults, then the JSON config file, then
environment variables for endpoints and secrets.
"""

from pathlib import Path
from typing import Any, Optional
import copy
import json
import os


DEFAULTS = {
    "api_keys": {
        "groq": "",
        "openai": "",
        "anthropic": "",
    },
    "ai": {
        "provider": "groq",
        "model": "",
        "api_url": "",
        "temperature": 0.7,
        "timeout": 60,
    },
    "backend": {
        "type": "supabase",
        "url": "",
        "anon_key": "",
        "data_dir": "./career_data",
    },
    "generation": {
        "output_dir": "./generated_documents",
        "default_format": "markdown",
    },
    "session_path": "",
}

# Dotted key -> environment variable that wins over the file
ENV_OVERRIDES = {
    "backend.url": "SUPABASE_URL",
    "backend.anon_key": "SUPABASE_ANON_KEY",
    "ai.provider": "CAREER_ASSISTANT_AI_PROVIDER",
    "ai.model": "CAREER_ASSISTANT_AI_MODEL",
}

SECRET_MARKERS = ("key", "secret", "password", "token")


def merge_settings(base: dict, override: dict) -> dict:
    """Recursively overlay ``override`` onto a copy of ``base``."""
    merged = dict(base)
    for name, value in override.items():
        current = merged.get(name)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[name] = merge_settings(current, value)
        else:
            merged[name] = value
    return merged


def mask_secret(value: Any) -> str:
    if not value:
        return "(not set)"
    text = str(value)
    if len(text) <= 8:
        return "****"
    return f"{text[:4]}...{text[-4:]}"


def masked(settings: dict, secret: bool = False) -> dict:
    """Copy of ``settings`` with every secret-looking value masked."""
    result = {}
    for name, value in settings.items():
        is_secret = secret or any(marker in name.lower() for marker in SECRET_MARKERS)
        if isinstance(value, dict):
            result[name] = masked(value, is_secret)
        else:
            result[name] = mask_secret(value) if is_secret else value
    return result


class Config:
    """Application settings: completion provider, backend and output locations."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Load settings.

        Args:
            config_path: Path to config file (default: ~/.career_assistant/config.json)
        """
        self.config_path = Path(config_path) if config_path else Path.home() / ".career_assistant" / "config.json"
        self.settings = copy.deepcopy(DEFAULTS)

        if self.config_path.exists():
            with open(self.config_path, 'r') as f:
                self.settings = merge_settings(self.settings, json.load(f))

    def save(self) -> None:
        """Write the current settings to the config file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w') as f:
            json.dump(self.settings, f, indent=2)

    def get(self, key: str, default=None):
        """
        Look up a setting by dotted key, e.g. ``"backend.url"``.

        Environment overrides listed in ENV_OVERRIDES win over the file.
        """
        env_var = ENV_OVERRIDES.get(key)
        if env_var and os.environ.get(env_var):
            return os.environ[env_var]

        node = self.settings
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def set(self, key: str, value) -> None:
        """Set a setting by dotted key, creating intermediate sections."""
        *sections, leaf = key.split('.')
        node = self.settings
        for part in sections:
            node = node.setdefault(part, {})
        node[leaf] = value

    def get_api_key(self, provider: str) -> str:
        """API key for a completion provider; ``<PROVIDER>_API_KEY`` wins over the file."""
        return os.environ.get(f"{provider.upper()}_API_KEY") or self.get(f"api_keys.{provider}", "")

    def set_api_key(self, provider: str, key: str) -> None:
        self.set(f"api_keys.{provider}", key)
        self.save()

    def get_ai_config(self) -> dict:
        """Settings for the configured completion provider."""
        provider = self.get("ai.provider", "groq")
        return {
            "provider": provider,
            "api_key": self.get_api_key(provider),
            "model": self.get("ai.model") or None,
            "api_url": self.get("ai.api_url") or None,
            "temperature": float(self.get("ai.temperature", 0.7)),
            "timeout": int(self.get("ai.timeout", 60)),
        }

    def get_backend_config(self) -> dict:
        """Settings for the persistence backend."""
        return {
            "type": self.get("backend.type", "supabase"),
            "url": self.get("backend.url", ""),
            "anon_key": self.get("backend.anon_key", ""),
            "data_dir": self.get("backend.data_dir", "./career_data"),
        }

    def get_output_dir(self) -> str:
        return self.get("generation.output_dir", "./generated_documents")

    def get_session_path(self) -> Path:
        """Where the signed-in session is persisted (next to the config file by default)."""
        path = self.get("session_path")
        return Path(path) if path else self.config_path.parent / "session.json"

    def print_config(self) -> None:
        """Print the settings with secrets masked."""
        print(json.dumps(masked(self.settings), indent=2))
