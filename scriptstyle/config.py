"""
Configuration
=============

Settings are read once from the process environment (and an optional
``.env`` file) and then passed explicitly into every collaborator.

Environment variables:
- YT_API_KEY / YOUTUBE_API_KEY: YouTube Data API key
- GOOGLE_SERVICE_ACCOUNT_PATH: service account JSON (preferred over the key)
- OPENAI_API_KEY: key for the chat-completion API
- OPENAI_MODEL: chat model name (default: gpt-4o-mini)
- TRANSCRIPT_BASE_URL: fetch transcripts through a running instance of the API
- HTTP_TIMEOUT: outbound request timeout in seconds (default: 30)
- TRANSCRIPT_LANGUAGES: comma-separated preferred caption languages
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigurationError

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LANGUAGES = ("en", "en-US", "en-GB")


@dataclass(frozen=True)
class Settings:
    youtube_api_key: Optional[str] = None
    service_account_path: Optional[str] = None
    openai_api_key: Optional[str] = None
    openai_model: str = DEFAULT_MODEL
    transcript_base_url: Optional[str] = None
    http_timeout: float = DEFAULT_TIMEOUT
    transcript_languages: Tuple[str, ...] = DEFAULT_LANGUAGES

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, use_dotenv: bool = True) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            env: Mapping to read from (defaults to os.environ)
            use_dotenv: Load a .env file into os.environ first

        Raises:
            ConfigurationError if HTTP_TIMEOUT is not a number
        """
        if env is None:
            if use_dotenv:
                load_dotenv(find_dotenv(usecwd=True))
            env = os.environ

        def get(name: str) -> Optional[str]:
            value = env.get(name)
            return (value.strip() or None) if value else None

        timeout_raw = get("HTTP_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError:
            raise ConfigurationError(f"HTTP_TIMEOUT must be a number, got {timeout_raw!r}")

        languages = DEFAULT_LANGUAGES
        if get("TRANSCRIPT_LANGUAGES"):
            languages = tuple(
                code.strip() for code in get("TRANSCRIPT_LANGUAGES").split(",") if code.strip()
            ) or DEFAULT_LANGUAGES

        base_url = get("TRANSCRIPT_BASE_URL")

        return cls(
            youtube_api_key=get("YT_API_KEY") or get("YOUTUBE_API_KEY"),
            service_account_path=get("GOOGLE_SERVICE_ACCOUNT_PATH"),
            openai_api_key=get("OPENAI_API_KEY"),
            openai_model=get("OPENAI_MODEL") or DEFAULT_MODEL,
            transcript_base_url=base_url.rstrip("/") if base_url else None,
            http_timeout=timeout,
            transcript_languages=languages,
        )
