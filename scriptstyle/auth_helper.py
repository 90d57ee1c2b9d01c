"""
Authentication Helper
=====================
Service account authentication for the YouTube Data API.
"""

import os

from google.auth.transport.requests import Request
from google.oauth2 import service_account

from .errors import ConfigurationError

YOUTUBE_READONLY_SCOPE = "https://www.googleapis.com/auth/youtube.readonly"


def load_credentials(service_account_path: str) -> service_account.Credentials:
    """
    Load service account credentials scoped for read-only YouTube access.

    Args:
        service_account_path: Path to the service account JSON file

    Raises:
        ConfigurationError if the file is missing or unreadable
    """
    if not os.path.exists(service_account_path):
        raise ConfigurationError(f"Service account file not found: {service_account_path}")

    try:
        return service_account.Credentials.from_service_account_file(
            service_account_path,
            scopes=[YOUTUBE_READONLY_SCOPE],
        )
    except Exception as e:
        raise ConfigurationError(f"Service account file is invalid: {e}") from e


def get_access_token(credentials: service_account.Credentials) -> str:
    """Current access token; refreshed only when missing or expired."""
    if not credentials.valid:
        try:
            credentials.refresh(Request())
        except Exception as e:
            raise ConfigurationError(f"Service account auth failed: {e}") from e
    return credentials.token


def bearer_headers(credentials: service_account.Credentials) -> dict:
    """Authorization header for a request made with a service account."""
    return {"Authorization": f"Bearer {get_access_token(credentials)}"}
