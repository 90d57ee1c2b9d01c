"""
Channel Style Scripter
======================

Analyze a YouTube channel's script-writing style from its transcripts and
write new scripts in that style.
"""

__version__ = "1.0.0"

from .channel_resolver import resolve_channel_reference
from .config import Settings
from .youtube_client import YouTubeClient
from .transcript_fetcher import TranscriptFetcher, HttpTranscriptSource, clean_transcript
from .aggregator import aggregate_transcripts
from .style_analyzer import analyze_style, extract_characteristics
from .script_generator import generate_script
from .pipeline import StylePipeline

__all__ = [
    "resolve_channel_reference",
    "Settings",
    "YouTubeClient",
    "TranscriptFetcher",
    "HttpTranscriptSource",
    "clean_transcript",
    "aggregate_transcripts",
    "analyze_style",
    "extract_characteristics",
    "generate_script",
    "StylePipeline",
]
