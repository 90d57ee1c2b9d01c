"""
Style Pipeline
==============

End-to-end orchestration shared by the HTTP API and the CLI.

Flow:
    1. Resolve the channel reference
    2. Fetch channel metadata and recent uploads
    3. Collect transcripts for the first few uploads
    4. Analyze the writing style with the LLM
    5. (separate call) Generate a script from the style guide and a topic
"""

import logging

from langchain_core.runnables import Runnable

from .aggregator import MAX_TRANSCRIPT_VIDEOS, TranscriptSource, aggregate_transcripts
from .channel_resolver import resolve_channel_reference
from .config import Settings
from .llm import build_script_model, build_style_model
from .models import StyleAnalysis
from .script_generator import generate_script
from .style_analyzer import analyze_style, extract_characteristics
from .transcript_fetcher import HttpTranscriptSource, TranscriptFetcher
from .youtube_client import MAX_VIDEOS, YouTubeClient

logger = logging.getLogger(__name__)


def build_transcript_source(settings: Settings) -> TranscriptSource:
    """In-process fetcher, or the HTTP endpoint when TRANSCRIPT_BASE_URL is set."""
    if settings.transcript_base_url:
        return HttpTranscriptSource(settings.transcript_base_url, timeout=settings.http_timeout)
    return TranscriptFetcher(languages=settings.transcript_languages)


class StylePipeline:
    """
    Holds the collaborators for one process. Each call is independent;
    nothing is carried over between analyze and generate.
    """

    def __init__(
        self,
        youtube: YouTubeClient,
        transcripts: TranscriptSource,
        style_llm: Runnable,
        script_llm: Runnable,
        video_limit: int = MAX_VIDEOS,
        transcript_limit: int = MAX_TRANSCRIPT_VIDEOS,
        show_progress: bool = False,
    ):
        self.youtube = youtube
        self.transcripts = transcripts
        self.style_llm = style_llm
        self.script_llm = script_llm
        self.video_limit = video_limit
        self.transcript_limit = transcript_limit
        self.show_progress = show_progress

    @classmethod
    def from_settings(cls, settings: Settings, show_progress: bool = False) -> "StylePipeline":
        return cls(
            youtube=YouTubeClient(
                api_key=settings.youtube_api_key,
                service_account_path=settings.service_account_path,
                timeout=settings.http_timeout,
            ),
            transcripts=build_transcript_source(settings),
            style_llm=build_style_model(settings),
            script_llm=build_script_model(settings),
            show_progress=show_progress,
        )

    def analyze_channel(self, reference: str) -> StyleAnalysis:
        resolved = resolve_channel_reference(reference)
        logger.info(f"Resolved {reference!r} to {resolved.kind} {resolved.value}")

        channel, videos = self.youtube.fetch_channel_and_videos(resolved, limit=self.video_limit)
        records = aggregate_transcripts(
            videos,
            self.transcripts,
            limit=self.transcript_limit,
            show_progress=self.show_progress,
        )

        style_guide = analyze_style(records, channel.title, self.style_llm)
        return StyleAnalysis(
            channel_title=channel.title,
            videos_analyzed=len(records),
            style_guide=style_guide,
            characteristics=extract_characteristics(style_guide),
        )

    def generate_script(self, style_guide: str, topic: str) -> str:
        return generate_script(style_guide, topic, self.script_llm)

