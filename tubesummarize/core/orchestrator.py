"""
Transcript acquisition pipeline.

Resolves a YouTube URL to a stored ``VideoRecord``: metadata first, then real
captions, falling back to a synthetic transcript when the video has none.
"""

from typing import List, Optional, Tuple

from tubesummarize.core.errors import (
    CaptionsUnavailableError,
    InvalidUrlError,
    NotFoundError,
    VideoTooLongError,
)
from tubesummarize.config import config
from tubesummarize.core.metadata_fetcher import MetadataFetcher, create_metadata_fetcher
from tubesummarize.core.summarizer import TranscriptSummarizer
from tubesummarize.core.synthesizer import synthesize
from tubesummarize.core.transcript_fetcher import TranscriptFetcher, YouTubeTranscriptApiProvider
from tubesummarize.core.url_parser import correct_youtube_url, extract_video_id
from tubesummarize.db.store import DEFAULT_HISTORY_LIMIT, VideoStore, create_store
from tubesummarize.models.schemas import SummaryConfig, TranscriptSegment, VideoMetadata, VideoRecord
from tubesummarize.utils.logger import logging


class TranscriptOrchestrator:
    """Coordinates metadata, transcript, and summary work for videos."""

    def __init__(
        self,
        store: VideoStore,
        metadata_fetcher: MetadataFetcher,
        transcript_fetcher: TranscriptFetcher,
        summarizer: Optional[TranscriptSummarizer] = None,
        summary_model: str = "llama-3.3-70b-versatile",
        max_duration_minutes: Optional[int] = None,
    ):
        """
        Initialize the orchestrator with its collaborators.

        Args:
            store: History store for processed videos
            metadata_fetcher: Provider of video metadata and descriptions
            transcript_fetcher: Real caption retrieval
            summarizer: Summarizer; created on first use when omitted
            summary_model: LLM used for summaries
            max_duration_minutes: Reject longer videos; None or 0 disables
        """
        self.store = store
        self.metadata_fetcher = metadata_fetcher
        self.transcript_fetcher = transcript_fetcher
        self.summarizer = summarizer
        self.summary_model = summary_model
        self.max_duration_minutes = max_duration_minutes

    def acquire_transcript(self, url: str) -> VideoRecord:
        """
        Get the transcript record for a YouTube URL, processing it if new.

        Args:
            url: YouTube URL, possibly pasted with surrounding text

        Returns:
            The stored VideoRecord (without a summary for new videos)
        """
        corrected_url = correct_youtube_url(url)
        video_id = extract_video_id(corrected_url) if corrected_url else None
        if not video_id:
            raise InvalidUrlError(url)

        existing = self.store.get(video_id)
        if existing:
            logging.info(f"Video {video_id} found in history, skipping processing")
            return existing

        logging.info(f"Fetching metadata for video: {video_id}")
        metadata = self.metadata_fetcher.fetch_video_metadata(video_id)
        self._check_duration(video_id, metadata)

        transcript, synthetic = self._acquire_segments(video_id, metadata)

        record = VideoRecord(
            id=video_id,
            url=corrected_url,
            title=metadata.title,
            channel_title=metadata.channel_title,
            duration=metadata.duration,
            transcript=transcript,
            thumbnail_url=metadata.thumbnail_url,
            synthetic=synthetic,
        )
        self.store.put(record)
        return record

    def _check_duration(self, video_id: str, metadata: VideoMetadata) -> None:
        if not self.max_duration_minutes:
            return
        if metadata.duration_seconds > self.max_duration_minutes * 60:
            logging.warning(
                f"Video {video_id} is {metadata.duration}, over the {self.max_duration_minutes} minute limit"
            )
            raise VideoTooLongError(video_id, metadata.duration_seconds, self.max_duration_minutes)

    def _acquire_segments(self, video_id: str, metadata: VideoMetadata) -> Tuple[List[TranscriptSegment], bool]:
        try:
            segments = self.transcript_fetcher.fetch_real_transcript(video_id)
        except CaptionsUnavailableError:
            segments = []

        if segments:
            return segments, False

        logging.info(f"No transcript available for video {video_id}, falling back to video metadata")
        description = self.metadata_fetcher.fetch_description(video_id)
        return synthesize(video_id, metadata.duration_seconds, description), True

    def summarize(self, video_id: str) -> VideoRecord:
        """
        Generate and store a summary for a processed video.

        Raises:
            NotFoundError: the video has not been processed
            UpstreamError: the summary provider failed
        """
        record = self.store.get(video_id)
        if not record:
            raise NotFoundError(f"Video not found: {video_id}", video_id=video_id)

        if self.summarizer is None:
            self.summarizer = TranscriptSummarizer()

        logging.info(f"Generating summary for video {video_id} with {self.summary_model}")
        summary = self.summarizer.summarize(
            record.transcript_text(),
            record.title,
            SummaryConfig(model=self.summary_model),
        )

        updated = self.store.update_summary(video_id, summary)
        if updated is None:
            raise NotFoundError(f"Video not found: {video_id}", video_id=video_id)
        return updated

    def get_video(self, video_id: str) -> VideoRecord:
        """Get a processed video or raise NotFoundError."""
        record = self.store.get(video_id)
        if not record:
            raise NotFoundError(f"Video not found: {video_id}", video_id=video_id)
        return record

    def get_summary(self, video_id: str) -> str:
        """Get the stored summary of a video or raise NotFoundError."""
        record = self.get_video(video_id)
        if not record.summary:
            raise NotFoundError(f"Summary not found for video {video_id}", video_id=video_id)
        return record.summary

    def history(self, limit: int = DEFAULT_HISTORY_LIMIT) -> List[VideoRecord]:
        """Get the most recently processed videos."""
        return self.store.list(limit)

    def clear_history(self) -> None:
        """Remove every processed video."""
        self.store.clear()


def create_orchestrator(cfg=None, store: Optional[VideoStore] = None) -> TranscriptOrchestrator:
    """
    Build an orchestrator wired to the configured providers and store.

    Args:
        cfg: Configuration class, defaults to the application config
        store: Store to use instead of the configured backend
    """
    cfg = cfg or config
    if store is None:
        store = create_store(cfg.STORE_BACKEND, cfg.HISTORY_FILE)

    return TranscriptOrchestrator(
        store=store,
        metadata_fetcher=create_metadata_fetcher(cfg.YOUTUBE_API_KEY, timeout=cfg.REQUEST_TIMEOUT_SECONDS),
        transcript_fetcher=TranscriptFetcher(
            YouTubeTranscriptApiProvider(cfg.CAPTION_LANGUAGES, timeout=cfg.REQUEST_TIMEOUT_SECONDS)
        ),
        summary_model=cfg.DEFAULT_SUMMARY_MODEL,
        max_duration_minutes=cfg.MAX_VIDEO_DURATION_MINUTES,
    )
