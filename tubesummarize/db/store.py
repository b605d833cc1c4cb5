"""
History store for processed videos.

Records are keyed by YouTube video ID. Two backends share the same
interface: an in-memory map and a flat JSON file.
"""

import os
import threading
from pathlib import Path
from typing import Dict, List, Optional, Union

from tubesummarize.models.schemas import VideoRecord
from tubesummarize.utils.helpers import load_json, save_json
from tubesummarize.utils.logger import logging

DEFAULT_HISTORY_LIMIT = 10


class VideoStore:
    """In-memory video store; base class for persistent backends."""

    def __init__(self):
        self._videos: Dict[str, VideoRecord] = {}
        self._lock = threading.Lock()

    def _persist(self, videos: Dict[str, VideoRecord]) -> None:
        """Hook called with the new contents before a mutation is applied. No-op in memory."""

    def get(self, video_id: str) -> Optional[VideoRecord]:
        """Get a video record by ID."""
        with self._lock:
            record = self._videos.get(video_id)
            return record.model_copy(deep=True) if record else None

    def list(self, limit: int = DEFAULT_HISTORY_LIMIT) -> List[VideoRecord]:
        """Get the most recently processed videos, newest first."""
        with self._lock:
            records = sorted(self._videos.values(), key=lambda r: r.processed_at, reverse=True)
            return [record.model_copy(deep=True) for record in records[:max(0, limit)]]

    def put(self, record: VideoRecord) -> VideoRecord:
        """Insert a video record, replacing any record with the same ID."""
        with self._lock:
            videos = dict(self._videos)
            videos[record.id] = record.model_copy(deep=True)
            self._persist(videos)
            self._videos = videos
        logging.info(f"Stored video {record.id} in history")
        return record

    def update_summary(self, video_id: str, summary: str) -> Optional[VideoRecord]:
        """Set or replace the summary of a stored video."""
        with self._lock:
            record = self._videos.get(video_id)
            if record is None:
                logging.warning(f"Cannot store summary, video {video_id} is not in history")
                return None
            updated = record.model_copy(update={"summary": summary}, deep=True)
            videos = dict(self._videos)
            videos[video_id] = updated
            self._persist(videos)
            self._videos = videos
            return updated.model_copy(deep=True)

    def clear(self) -> None:
        """Remove all videos from the store."""
        with self._lock:
            count = len(self._videos)
            self._persist({})
            self._videos = {}
        logging.info(f"Cleared {count} videos from history")

    def __len__(self) -> int:
        with self._lock:
            return len(self._videos)


class InMemoryVideoStore(VideoStore):
    """Video store that lives for the lifetime of the process."""


class JsonFileVideoStore(VideoStore):
    """Video store persisted to a single JSON file."""

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the store, loading any existing history file.

        Args:
            path: Location of the JSON history file
        """
        super().__init__()
        self.path = Path(path)
        self._load()

    def _load(self) -> None:
        if not os.path.exists(self.path):
            return

        data = load_json(str(self.path))
        for item in data.get("videos", []):
            record = VideoRecord.model_validate(item)
            self._videos[record.id] = record
        logging.info(f"Loaded {len(self._videos)} videos from {self.path}")

    def _persist(self, videos: Dict[str, VideoRecord]) -> None:
        data = {"videos": [record.model_dump(mode="json") for record in videos.values()]}
        save_json(data, str(self.path))


def create_store(backend: str = "memory", path: Optional[Union[str, Path]] = None) -> VideoStore:
    """
    Create the configured video store.

    Args:
        backend: "memory" or "file"
        path: History file location, required for the file backend
    """
    if backend == "file":
        if path is None:
            raise ValueError("A history file path is required for the file store")
        return JsonFileVideoStore(path)
    if backend == "memory":
        return InMemoryVideoStore()
    raise ValueError(f"Unknown store backend: {backend}")
