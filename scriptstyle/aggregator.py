"""
Transcript Aggregator
=====================

Collect transcripts for a channel's most recent videos.

Only the first few videos are attempted and each retrieval finishes before
the next starts. A video whose transcript cannot be fetched is logged and
skipped; the batch fails only when nothing at all was collected.
"""

import logging
from typing import List, Protocol, Sequence

from tqdm import tqdm

from .errors import NoTranscriptsError, TranscriptUnavailableError
from .models import TranscriptRecord, VideoEntry

logger = logging.getLogger(__name__)

MAX_TRANSCRIPT_VIDEOS = 5

NO_CAPTIONS_MESSAGE = "Could not fetch transcripts. The channel may not have captions enabled."


class TranscriptSource(Protocol):
    def fetch_transcript(self, video_id: str) -> str: ...


def aggregate_transcripts(
    videos: Sequence[VideoEntry],
    source: TranscriptSource,
    limit: int = MAX_TRANSCRIPT_VIDEOS,
    show_progress: bool = False,
) -> List[TranscriptRecord]:
    """
    Fetch transcripts for up to `limit` videos, in order.

    Args:
        videos: Candidate videos, most recent first
        source: Anything with fetch_transcript(video_id) -> str
        limit: Maximum number of retrieval attempts
        show_progress: Show a tqdm progress bar

    Returns:
        One TranscriptRecord per video whose transcript was retrieved

    Raises:
        NoTranscriptsError if no transcript could be retrieved
    """
    records: List[TranscriptRecord] = []

    for video in tqdm(list(videos)[:limit], desc="Transcripts", unit="video", disable=not show_progress):
        try:
            text = source.fetch_transcript(video.video_id)
            records.append(TranscriptRecord(video_id=video.video_id, title=video.title, transcript=text))
        except TranscriptUnavailableError as e:
            logger.warning(f"Failed to get transcript for {video.video_id}: {e.reason or e}")
        except Exception as e:
            logger.warning(f"Failed to get transcript for {video.video_id}: {type(e).__name__}: {e}")

    if not records:
        raise NoTranscriptsError(NO_CAPTIONS_MESSAGE)

    logger.info(f"Collected {len(records)} transcripts from {min(len(videos), limit)} attempts")
    return records
