"""
Style Analyzer
==============

LLM-based analysis of a channel's script-writing style.

Features:
- Embeds up to a few transcripts, each hard-truncated to a character budget
- Fixed 8-point rubric producing a reusable style guide
- Heuristic extraction of short characteristic lines for display
"""

import logging
import re
from typing import List, Sequence

from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.runnables import Runnable

from .errors import UpstreamError
from .models import TranscriptRecord

logger = logging.getLogger(__name__)

TRANSCRIPT_CHAR_LIMIT = 3000
TRANSCRIPT_SEPARATOR = "\n\n---\n\n"

MAX_CHARACTERISTICS = 5
FALLBACK_CHARACTERISTIC = "Style analysis completed"
RE_LIST_MARKER = re.compile(r"^[#\-*\d.]+\s*")

STYLE_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "You are an expert at analyzing writing styles and creating style guides."),
    ("human", """Analyze the script-writing style of the YouTube channel "{channel_title}" based on these video transcripts:

{transcripts}

Provide a comprehensive style guide that captures:
1. Tone and voice (formal, casual, energetic, calm, etc.)
2. Sentence structure patterns (short and punchy, long and flowing, etc.)
3. Common phrases or expressions
4. Opening and closing patterns
5. Use of questions, rhetorical devices, or humor
6. Pacing and rhythm
7. How they engage with the audience
8. Any unique stylistic elements

Format this as a detailed style guide that can be used to write new scripts in this style."""),
])


def combine_transcripts(records: Sequence[TranscriptRecord], max_chars: int = TRANSCRIPT_CHAR_LIMIT) -> str:
    """Concatenate transcripts in order, each cut to its first `max_chars` characters."""
    return TRANSCRIPT_SEPARATOR.join(
        f"Video: {r.title}\n\n{r.transcript[:max_chars]}" for r in records
    )


def analyze_style(records: Sequence[TranscriptRecord], channel_title: str, llm: Runnable) -> str:
    """
    Ask the LLM for a style guide describing how the channel writes.

    Args:
        records: Transcripts in the order they were fetched
        channel_title: Channel name, quoted in the prompt
        llm: Chat model (temperature 0.7, 2000 max tokens in production)

    Returns:
        Raw text of the first completion

    Raises:
        UpstreamError if the completion call fails
    """
    chain = STYLE_PROMPT | llm | StrOutputParser()
    try:
        return chain.invoke({
            "channel_title": channel_title,
            "transcripts": combine_transcripts(records),
        })
    except Exception as e:
        logger.error(f"Style analysis failed for {channel_title!r}: {type(e).__name__}: {e}")
        raise UpstreamError("Failed to analyze style with AI", status_code=500) from e


def extract_characteristics(style_guide: str) -> List[str]:
    """Pick short display lines from the top of a style guide."""
    lines = [line for line in style_guide.splitlines() if line.strip()]
    characteristics = []

    for line in lines[:MAX_CHARACTERISTICS]:
        line = RE_LIST_MARKER.sub("", line).strip()
        if 10 < len(line) < 150:
            characteristics.append(line)

    return characteristics or [FALLBACK_CHARACTERISTIC]
