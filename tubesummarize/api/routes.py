"""
API routes for the TubeSummarize application.
"""

from fastapi import APIRouter, Depends, Path, Query, Request

from tubesummarize.api.schemas import (
    ClearHistoryResponse,
    HistoryItem,
    HistoryResponse,
    SummaryRequest,
    SummaryResponse,
    TranscriptRequest,
    VideoResponse,
)
from tubesummarize.core.orchestrator import TranscriptOrchestrator, create_orchestrator
from tubesummarize.db.store import DEFAULT_HISTORY_LIMIT
from tubesummarize.utils.logger import logging

router = APIRouter(prefix="/api", tags=["youtube"])


def get_orchestrator(request: Request) -> TranscriptOrchestrator:
    """
    Get the application's orchestrator.

    This is a dependency that will be used in FastAPI route functions.
    """
    orchestrator = getattr(request.app.state, "orchestrator", None)
    if orchestrator is None:
        orchestrator = create_orchestrator()
        request.app.state.orchestrator = orchestrator
    return orchestrator


@router.post("/transcripts", response_model=VideoResponse)
def extract_transcript(
    request: TranscriptRequest,
    orchestrator: TranscriptOrchestrator = Depends(get_orchestrator),
):
    """
    Extract the transcript of a YouTube video by URL.

    - If the video has been processed before, returns the stored record
    - If the video has no captions, returns a synthetic transcript
    """
    record = orchestrator.acquire_transcript(request.video_url)
    logging.debug(f"Returning {len(record.transcript)} segments for video {record.id}")
    return VideoResponse.from_record(record)


@router.post("/summaries", response_model=SummaryResponse)
def generate_summary(
    request: SummaryRequest,
    orchestrator: TranscriptOrchestrator = Depends(get_orchestrator),
):
    """Generate a summary for a processed video and store it."""
    record = orchestrator.summarize(request.video_id)
    return SummaryResponse(video_id=record.id, summary=record.summary)


@router.get("/videos/{video_id}", response_model=VideoResponse)
def get_video(
    video_id: str = Path(..., description="YouTube video ID"),
    orchestrator: TranscriptOrchestrator = Depends(get_orchestrator),
):
    """Get a processed video by ID."""
    return VideoResponse.from_record(orchestrator.get_video(video_id))


@router.get("/summaries/{video_id}", response_model=SummaryResponse)
def get_summary(
    video_id: str = Path(..., description="YouTube video ID"),
    orchestrator: TranscriptOrchestrator = Depends(get_orchestrator),
):
    """Get the stored summary for a processed video."""
    return SummaryResponse(video_id=video_id, summary=orchestrator.get_summary(video_id))


@router.get("/history", response_model=HistoryResponse)
def get_history(
    limit: int = Query(DEFAULT_HISTORY_LIMIT, ge=1, le=100),
    orchestrator: TranscriptOrchestrator = Depends(get_orchestrator),
):
    """List the most recently processed videos."""
    videos = orchestrator.history(limit)
    return HistoryResponse(videos=[HistoryItem.from_record(video) for video in videos])


@router.delete("/history", response_model=ClearHistoryResponse)
def clear_history(orchestrator: TranscriptOrchestrator = Depends(get_orchestrator)):
    """Remove every processed video from history."""
    orchestrator.clear_history()
    return ClearHistoryResponse(success=True)
