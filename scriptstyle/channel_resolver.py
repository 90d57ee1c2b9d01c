"""
Channel Resolver
================

Parses a free-form YouTube channel reference into a normalized form the
Data API can look up. No network calls happen here.

Supports (first match wins):
- Any text containing @handle
- Channel URLs (/channel/UC...)
- Legacy vanity URLs (/c/CustomName)
- Bare channel IDs (UC...)
- Bare text without slashes or dots (treated as a handle)
"""

import re

from .errors import ValidationError
from .models import ResolvedChannel

# Regex patterns
RE_HANDLE = re.compile(r"@([a-zA-Z0-9_-]+)")
RE_CHANNEL_PATH = re.compile(r"/channel/(UC[a-zA-Z0-9_-]+)")
RE_CUSTOM_PATH = re.compile(r"/c/([a-zA-Z0-9_-]+)")
RE_CHANNEL_ID = re.compile(r"^UC[a-zA-Z0-9_-]+$")

INVALID_MESSAGE = "Invalid channel URL. Please provide a valid YouTube channel URL or ID."


def resolve_channel_reference(reference: str) -> ResolvedChannel:
    """
    Resolve a channel reference to a ResolvedChannel.

    Examples:
        "https://www.youtube.com/@veritasium"      -> handle "@veritasium"
        "https://youtube.com/channel/UCabc123"     -> id "UCabc123"
        "https://youtube.com/c/Kurzgesagt"         -> custom "Kurzgesagt"
        "UCabc123"                                 -> id "UCabc123"
        "veritasium"                               -> handle "@veritasium"

    Raises:
        ValidationError if the reference matches none of the supported shapes
    """
    s = (reference or "").strip()
    if not s:
        raise ValidationError("Channel URL is required")

    m = RE_HANDLE.search(s)
    if m:
        return ResolvedChannel(kind="handle", value=f"@{m.group(1)}")

    m = RE_CHANNEL_PATH.search(s)
    if m:
        return ResolvedChannel(kind="id", value=m.group(1))

    m = RE_CUSTOM_PATH.search(s)
    if m:
        return ResolvedChannel(kind="custom", value=m.group(1))

    if RE_CHANNEL_ID.match(s):
        return ResolvedChannel(kind="id", value=s)

    # Plain text: treat as a handle
    if "/" not in s and "." not in s:
        return ResolvedChannel(kind="handle", value=s if s.startswith("@") else f"@{s}")

    raise ValidationError(INVALID_MESSAGE)
