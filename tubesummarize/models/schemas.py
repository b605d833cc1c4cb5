"""
Data models for the TubeSummarize application.
"""
import datetime
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class TranscriptSegment(BaseModel):
    """One timestamped unit of spoken or inferred text."""
    text: str
    timestamp: int = Field(ge=0, description="Start offset in seconds")


class CaptionEntry(BaseModel):
    """A caption line as delivered by a caption provider."""
    text: str
    offset_ms: int = Field(ge=0)


class VideoMetadata(BaseModel):
    """Metadata resolved for a YouTube video."""
    video_id: str
    title: str
    channel_title: str
    iso_duration: str
    duration: str
    duration_seconds: int = 0
    thumbnail_url: Optional[str] = None
    description: Optional[str] = None


class VideoRecord(BaseModel):
    """A processed video: metadata, transcript, and optional summary."""
    id: str
    url: str
    title: str
    channel_title: str
    duration: str
    transcript: List[TranscriptSegment]
    summary: Optional[str] = None
    thumbnail_url: Optional[str] = None
    synthetic: bool = False
    processed_at: datetime.datetime = Field(default_factory=_utcnow)

    model_config = {"from_attributes": True}

    @field_validator('transcript')
    def validate_transcript(cls, v):
        if not v:
            raise ValueError('transcript must contain at least one segment')
        return v

    def transcript_text(self) -> str:
        """Join the transcript into plain text for summarization."""
        return " ".join(segment.text for segment in self.transcript)


class SummaryConfig(BaseModel):
    """Configuration for summarization operations."""
    model: str
    temperature: float = 0.5
    max_tokens: int = 800
    chunk_size: int = 12000
    chunk_overlap: int = 400
