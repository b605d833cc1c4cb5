"""
Configuration for pytest tests.
"""

import datetime
import os

# Keep tests away from the real history file and API keys
os.environ["ENVIRONMENT"] = "development"
os.environ["STORE_BACKEND"] = "memory"
os.environ.setdefault("GROQ_API_KEY", "test_api_key")

import pytest
from unittest.mock import MagicMock

from tubesummarize.core.metadata_fetcher import MetadataFetcher
from tubesummarize.core.orchestrator import TranscriptOrchestrator
from tubesummarize.core.transcript_fetcher import CaptionProvider, TranscriptFetcher
from tubesummarize.db.store import InMemoryVideoStore
from tubesummarize.models.schemas import TranscriptSegment, VideoMetadata, VideoRecord


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


@pytest.fixture
def video_metadata():
    """Metadata as the providers would return it for the test video."""
    return VideoMetadata(
        video_id="dQw4w9WgXcQ",
        title="Never Gonna Give You Up",
        channel_title="Rick Astley",
        iso_duration="PT3M33S",
        duration="3:33",
        duration_seconds=213,
        thumbnail_url="https://i.ytimg.com/vi/dQw4w9WgXcQ/mqdefault.jpg",
        description="",
    )


@pytest.fixture
def metadata_fetcher(video_metadata):
    """Mocked metadata provider."""
    fetcher = MagicMock(spec=MetadataFetcher)
    fetcher.fetch_video_metadata.return_value = video_metadata
    fetcher.fetch_description.return_value = ""
    return fetcher


@pytest.fixture
def caption_provider():
    """Mocked caption provider; tests set its return value or side effect."""
    return MagicMock(spec=CaptionProvider)


@pytest.fixture
def store():
    return InMemoryVideoStore()


@pytest.fixture
def orchestrator(store, metadata_fetcher, caption_provider):
    """Orchestrator wired to mocks and an in-memory store."""
    return TranscriptOrchestrator(
        store=store,
        metadata_fetcher=metadata_fetcher,
        transcript_fetcher=TranscriptFetcher(caption_provider),
    )


@pytest.fixture
def make_record():
    """Factory for stored video records."""
    def _make(video_id="dQw4w9WgXcQ", processed_at=None, summary=None):
        return VideoRecord(
            id=video_id,
            url=f"https://www.youtube.com/watch?v={video_id}",
            title=f"Video {video_id}",
            channel_title="Test Channel",
            duration="3:33",
            transcript=[
                TranscriptSegment(text="Never", timestamp=0),
                TranscriptSegment(text="gonna", timestamp=1),
            ],
            summary=summary,
            thumbnail_url=None,
            processed_at=processed_at or datetime.datetime(2024, 5, 1, 12, 0, tzinfo=datetime.timezone.utc),
        )
    return _make
