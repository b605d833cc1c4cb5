"""
Tests for the HTTP API.
"""

import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from tubesummarize.api.app import app
from tubesummarize.api.routes import get_orchestrator
from tubesummarize.core.errors import CaptionsUnavailableError, UpstreamError, UpstreamReason
from tubesummarize.core.summarizer import TranscriptSummarizer
from tubesummarize.models.schemas import CaptionEntry


@pytest.fixture
def client(orchestrator):
    """Test client with the orchestrator dependency replaced by the test one."""
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["name"] == "TubeSummarize"


def test_extract_transcript(client, caption_provider, test_video_url):
    caption_provider.fetch_captions.return_value = [
        CaptionEntry(text="Never", offset_ms=0),
        CaptionEntry(text="gonna", offset_ms=1000),
    ]

    response = client.post("/api/transcripts", json={"videoUrl": test_video_url})

    assert response.status_code == 200
    data = response.json()
    assert data["videoId"] == "dQw4w9WgXcQ"
    assert data["channelTitle"] == "Rick Astley"
    assert data["duration"] == "3:33"
    assert data["transcript"] == [{"text": "Never", "timestamp": 0}, {"text": "gonna", "timestamp": 1}]
    assert data["synthetic"] is False
    assert "X-Process-Time" in response.headers


def test_extract_transcript_synthetic(client, caption_provider, test_video_url):
    caption_provider.fetch_captions.side_effect = CaptionsUnavailableError("dQw4w9WgXcQ")

    response = client.post("/api/transcripts", json={"videoUrl": test_video_url})

    assert response.status_code == 200
    assert response.json()["synthetic"] is True
    assert len(response.json()["transcript"]) == 21


def test_extract_transcript_invalid_url(client):
    response = client.post("/api/transcripts", json={"videoUrl": "https://vimeo.com/1"})

    assert response.status_code == 400
    assert response.json()["kind"] == "invalid_url"


def test_extract_transcript_missing_body(client):
    response = client.post("/api/transcripts", json={})

    assert response.status_code == 422


@pytest.mark.parametrize("reason, status_code", [
    (UpstreamReason.AUTH, 502),
    (UpstreamReason.RATE_LIMIT, 429),
    (UpstreamReason.TIMEOUT, 504),
    (UpstreamReason.GENERIC, 502),
])
def test_upstream_errors(client, metadata_fetcher, test_video_url, reason, status_code):
    metadata_fetcher.fetch_video_metadata.side_effect = UpstreamError("YouTube Data API", "failed", reason)

    response = client.post("/api/transcripts", json={"videoUrl": test_video_url})

    assert response.status_code == status_code
    data = response.json()
    assert data["kind"] == "upstream"
    assert data["reason"] == reason.value
    assert data["dependency"] == "YouTube Data API"


def test_get_video(client, store, make_record):
    store.put(make_record())

    response = client.get("/api/videos/dQw4w9WgXcQ")

    assert response.status_code == 200
    assert response.json()["title"] == "Video dQw4w9WgXcQ"


def test_get_unknown_video(client):
    response = client.get("/api/videos/missingvid01")

    assert response.status_code == 404
    assert response.json()["kind"] == "not_found"


def test_generate_and_get_summary(client, orchestrator, store, make_record):
    store.put(make_record())
    summarizer = MagicMock(spec=TranscriptSummarizer)
    summarizer.summarize.return_value = "Key points of the video"
    orchestrator.summarizer = summarizer

    assert client.get("/api/summaries/dQw4w9WgXcQ").status_code == 404

    response = client.post("/api/summaries", json={"videoId": "dQw4w9WgXcQ"})
    assert response.status_code == 200
    assert response.json() == {"videoId": "dQw4w9WgXcQ", "summary": "Key points of the video"}

    response = client.get("/api/summaries/dQw4w9WgXcQ")
    assert response.status_code == 200
    assert response.json()["summary"] == "Key points of the video"


def test_generate_summary_rate_limited(client, orchestrator, store, make_record):
    store.put(make_record())
    summarizer = MagicMock(spec=TranscriptSummarizer)
    summarizer.summarize.side_effect = UpstreamError("Groq", "rate limit exceeded", UpstreamReason.RATE_LIMIT, 429)
    orchestrator.summarizer = summarizer

    response = client.post("/api/summaries", json={"videoId": "dQw4w9WgXcQ"})

    assert response.status_code == 429
    assert store.get("dQw4w9WgXcQ").summary is None


def test_history_and_clear(client, store, make_record):
    store.put(make_record(video_id="video0000001"))
    store.put(make_record(video_id="video0000002", summary="done"))

    response = client.get("/api/history", params={"limit": 1})
    assert response.status_code == 200
    videos = response.json()["videos"]
    assert len(videos) == 1
    assert set(videos[0]) >= {"id", "url", "title", "channelTitle", "processedAt", "processedAgo", "thumbnailUrl"}

    response = client.delete("/api/history")
    assert response.json() == {"success": True}
    assert client.get("/api/history").json() == {"videos": []}
