"""
Transcript Fetcher
==================

Download YouTube video transcripts and clean them up for prompting.

Features:
- Prefers manually created transcripts over auto-generated
- Multi-language fallback (en, en-US, en-GB, etc.)
- Strips bracketed annotations ([Music], [Applause]) and collapses whitespace
- Optional HTTP source that reads transcripts from a running API instance
"""

import logging
import re
from typing import Iterable, Optional, Sequence

import requests
from youtube_transcript_api import (
    YouTubeTranscriptApi,
    NoTranscriptFound,
    CouldNotRetrieveTranscript,
)

from .config import DEFAULT_LANGUAGES
from .errors import TranscriptUnavailableError

logger = logging.getLogger(__name__)

RE_ANNOTATION = re.compile(r"\[.*?\]")
RE_WHITESPACE = re.compile(r"\s+")


def clean_transcript(fragments: Iterable[str]) -> str:
    """
    Join caption fragments and normalize the text.

    >>> clean_transcript(["Hello [Music] world", "  foo"])
    'Hello world foo'
    """
    text = " ".join(fragments)
    text = RE_ANNOTATION.sub("", text)
    return RE_WHITESPACE.sub(" ", text).strip()


class TranscriptFetcher:
    """Fetch transcripts in-process with youtube-transcript-api."""

    def __init__(self, api: Optional[YouTubeTranscriptApi] = None, languages: Sequence[str] = DEFAULT_LANGUAGES):
        self.api = api or YouTubeTranscriptApi()
        self.languages = list(languages)

    def _pick(self, transcript_list):
        """
        Strategy:
        1. Manual transcripts in a preferred language
        2. Auto-generated transcripts in a preferred language
        3. Any available transcript
        """
        try:
            return transcript_list.find_manually_created_transcript(self.languages)
        except NoTranscriptFound:
            pass
        try:
            return transcript_list.find_generated_transcript(self.languages)
        except NoTranscriptFound:
            pass
        for transcript in transcript_list:
            return transcript
        return None

    def fetch_transcript(self, video_id: str) -> str:
        """
        Fetch and clean the transcript of one video.

        Raises:
            TranscriptUnavailableError if transcripts are disabled, missing,
            blocked, malformed, or empty after cleaning
        """
        try:
            transcript = self._pick(self.api.list(video_id))
            if transcript is None:
                raise TranscriptUnavailableError(video_id, "no transcripts listed")
            fetched = transcript.fetch()
            text = clean_transcript(snippet.text for snippet in fetched if snippet.text)
        except TranscriptUnavailableError:
            raise
        except (CouldNotRetrieveTranscript, requests.RequestException) as e:
            raise TranscriptUnavailableError(video_id, f"{type(e).__name__}: {e}") from e
        except Exception as e:
            # Malformed caption data; one bad video must not stop the run
            raise TranscriptUnavailableError(video_id, f"{type(e).__name__}: {e}") from e

        if not text:
            raise TranscriptUnavailableError(video_id, "empty transcript")
        source = "auto-generated" if transcript.is_generated else "manual"
        logger.info(f"Fetched {source} transcript ({transcript.language_code}) for {video_id}: {len(text)} chars")
        return text


class HttpTranscriptSource:
    """Fetch transcripts through the /transcript endpoint of a running instance."""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch_transcript(self, video_id: str) -> str:
        try:
            r = self.session.get(
                f"{self.base_url}/transcript",
                params={"videoId": video_id},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TranscriptUnavailableError(video_id, f"{type(e).__name__}: {e}") from e
        if r.status_code != 200:
            raise TranscriptUnavailableError(video_id, f"HTTP {r.status_code}")

        try:
            text = r.json().get("transcript") or ""
            text = text.strip()
        except (ValueError, AttributeError, TypeError) as e:
            raise TranscriptUnavailableError(video_id, f"bad response body: {type(e).__name__}") from e
        if not text:
            raise TranscriptUnavailableError(video_id, "empty transcript")
        return text
