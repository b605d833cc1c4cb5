from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from tubesummarize.models.schemas import TranscriptSegment, VideoRecord
from tubesummarize.utils.helpers import format_relative_date


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys, as the web client expects."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TranscriptRequest(CamelModel):
    """Model for requesting transcript extraction."""
    video_url: str = Field(min_length=1)


class SummaryRequest(CamelModel):
    """Model for requesting a summary of a processed video."""
    video_id: str = Field(min_length=1)


class VideoResponse(CamelModel):
    """Model for processed video responses."""
    video_id: str
    title: str
    channel_title: str
    duration: str
    transcript: List[TranscriptSegment]
    thumbnail_url: Optional[str] = None
    synthetic: bool = False

    @classmethod
    def from_record(cls, record: VideoRecord) -> "VideoResponse":
        return cls(
            video_id=record.id,
            title=record.title,
            channel_title=record.channel_title,
            duration=record.duration,
            transcript=record.transcript,
            thumbnail_url=record.thumbnail_url,
            synthetic=record.synthetic,
        )


class SummaryResponse(CamelModel):
    """Model for summary responses."""
    video_id: str
    summary: str


class HistoryItem(CamelModel):
    """One entry of the history listing."""
    id: str
    url: str
    title: str
    channel_title: str
    processed_at: str
    processed_ago: str
    thumbnail_url: Optional[str] = None
    has_summary: bool = False

    @classmethod
    def from_record(cls, record: VideoRecord) -> "HistoryItem":
        return cls(
            id=record.id,
            url=record.url,
            title=record.title,
            channel_title=record.channel_title,
            processed_at=record.processed_at.isoformat(),
            processed_ago=format_relative_date(record.processed_at),
            thumbnail_url=record.thumbnail_url,
            has_summary=bool(record.summary),
        )


class HistoryResponse(BaseModel):
    """Model for the history listing."""
    videos: List[HistoryItem]


class ClearHistoryResponse(BaseModel):
    success: bool = True
