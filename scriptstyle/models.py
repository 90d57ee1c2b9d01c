"""
Data Models
===========

Request-scoped value objects passed between pipeline stages.
None of them is persisted.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ResolvedChannel(BaseModel):
    """Normalized channel reference the metadata API can look up."""
    kind: Literal["id", "handle", "custom"]
    value: str

    def __str__(self) -> str:
        return self.value


class ChannelInfo(BaseModel):
    channel_id: str
    title: str
    uploads_playlist_id: Optional[str] = None


class VideoEntry(BaseModel):
    """One upload listed from a channel's uploads playlist."""
    video_id: str
    title: str
    published_at: Optional[datetime] = None


class TranscriptRecord(BaseModel):
    """A cleaned transcript ready to be embedded in the style prompt."""
    video_id: str
    title: str
    transcript: str

    @field_validator("transcript")
    @classmethod
    def non_empty(cls, v: str):
        if not v.strip():
            raise ValueError("transcript must not be empty")
        return v


class StyleAnalysis(BaseModel):
    """Result of analyzing a channel, serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    channel_title: str
    videos_analyzed: int
    style_guide: str
    characteristics: List[str] = Field(default_factory=list)
