"""
LLM Factory
===========

Builds the LangChain chat models used by the style and script stages.
"""

from langchain_openai import ChatOpenAI

from .config import Settings
from .errors import ConfigurationError

# Sampling parameters per stage
STYLE_TEMPERATURE = 0.7
STYLE_MAX_TOKENS = 2000
SCRIPT_TEMPERATURE = 0.8
SCRIPT_MAX_TOKENS = 2500


def build_chat_model(settings: Settings, temperature: float, max_tokens: int) -> ChatOpenAI:
    """Create an OpenAI chat model with fixed sampling parameters."""
    if not settings.openai_api_key:
        raise ConfigurationError("Missing OPENAI_API_KEY in environment.")

    return ChatOpenAI(
        model=settings.openai_model,
        api_key=settings.openai_api_key,
        temperature=temperature,
        max_tokens=max_tokens,
        timeout=settings.http_timeout,
        max_retries=0,
    )


def build_style_model(settings: Settings) -> ChatOpenAI:
    return build_chat_model(settings, STYLE_TEMPERATURE, STYLE_MAX_TOKENS)


def build_script_model(settings: Settings) -> ChatOpenAI:
    return build_chat_model(settings, SCRIPT_TEMPERATURE, SCRIPT_MAX_TOKENS)
