"""
Video metadata fetchers.

Two providers resolve the same ``VideoMetadata``: the YouTube Data API (when
an API key is configured) and pytubefix, which needs no key.
"""

import concurrent.futures
from typing import Any, Dict, Optional

import requests
from urllib.error import HTTPError as UrllibHTTPError, URLError
from pytubefix import YouTube
from pytubefix.exceptions import (
    AgeCheckRequiredAccountError,
    AgeCheckRequiredError,
    BotDetection,
    InnerTubeResponseError,
    LoginRequired,
    PoTokenRequired,
    PytubeFixError,
    VideoUnavailable,
)

from tubesummarize.core.duration import format_duration, parse_duration
from tubesummarize.core.errors import NotFoundError, UpstreamError, UpstreamReason
from tubesummarize.core.url_parser import watch_url
from tubesummarize.models.schemas import VideoMetadata
from tubesummarize.utils.logger import logging

YOUTUBE_VIDEOS_ENDPOINT = "https://www.googleapis.com/youtube/v3/videos"


class MetadataFetcher:
    """Interface for video metadata providers."""

    dependency = "metadata provider"

    def fetch_video_metadata(self, video_id: str) -> VideoMetadata:
        raise NotImplementedError

    def fetch_description(self, video_id: str) -> str:
        raise NotImplementedError


class YouTubeDataApiFetcher(MetadataFetcher):
    """Resolve metadata through the YouTube Data API v3."""

    dependency = "YouTube Data API"

    def __init__(self, api_key: str, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize the fetcher.

        Args:
            api_key: YouTube Data API key
            timeout: Seconds before a request is abandoned
            session: Optional requests session to reuse connections
        """
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get_item(self, video_id: str, parts: str) -> Dict[str, Any]:
        params = {"id": video_id, "part": parts, "key": self.api_key}
        try:
            response = self.session.get(YOUTUBE_VIDEOS_ENDPOINT, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout as e:
            logging.error(f"Timed out fetching metadata for video {video_id}: {str(e)}")
            raise UpstreamError(self.dependency, "request timed out", UpstreamReason.TIMEOUT) from e
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            logging.error(f"{self.dependency} returned {status_code} for video {video_id}")
            raise UpstreamError(
                self.dependency,
                f"request failed with status {status_code}",
                UpstreamError.reason_for_status(status_code),
                status_code,
            ) from e
        except (requests.exceptions.RequestException, ValueError) as e:
            logging.error(f"Error fetching metadata for video {video_id}: {str(e)}")
            raise UpstreamError(self.dependency, f"request failed: {str(e)}") from e

        items = data.get("items") or []
        if not items:
            raise NotFoundError(f"Video not found: {video_id}", video_id=video_id)
        return items[0]

    def fetch_video_metadata(self, video_id: str) -> VideoMetadata:
        """Fetch title, channel, duration, and thumbnail for a video."""
        item = self._get_item(video_id, "snippet,contentDetails")
        snippet = item.get("snippet", {})
        iso_duration = item.get("contentDetails", {}).get("duration", "")
        thumbnails = snippet.get("thumbnails", {})
        thumbnail = thumbnails.get("medium") or thumbnails.get("high") or thumbnails.get("default") or {}
        duration_seconds = parse_duration(iso_duration)

        return VideoMetadata(
            video_id=video_id,
            title=snippet.get("title", ""),
            channel_title=snippet.get("channelTitle", ""),
            iso_duration=iso_duration,
            duration=format_duration(duration_seconds),
            duration_seconds=duration_seconds,
            thumbnail_url=thumbnail.get("url"),
            description=snippet.get("description", ""),
        )

    def fetch_description(self, video_id: str) -> str:
        """Fetch the current description of a video."""
        item = self._get_item(video_id, "snippet")
        return item.get("snippet", {}).get("description") or ""


class PytubefixFetcher(MetadataFetcher):
    """Resolve metadata by scraping the watch page with pytubefix."""

    dependency = "pytubefix"

    def __init__(self, timeout: Optional[float] = None, max_workers: int = 4):
        """
        Initialize the fetcher.

        pytubefix does not expose a request timeout, so each page load runs
        on a worker thread and is abandoned once ``timeout`` elapses.

        Args:
            timeout: Seconds before a page load is abandoned
            max_workers: Number of page loads that may run at once
        """
        self.timeout = timeout
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="pytubefix"
        )

    def _read_page(self, video_id: str) -> VideoMetadata:
        yt = YouTube(watch_url(video_id))
        duration_seconds = int(yt.length or 0)

        return VideoMetadata(
            video_id=video_id,
            title=yt.title,
            channel_title=yt.author,
            iso_duration=f"PT{duration_seconds}S",
            duration=format_duration(duration_seconds),
            duration_seconds=duration_seconds,
            thumbnail_url=yt.thumbnail_url,
            description=yt.description or "",
        )

    def _load(self, video_id: str) -> VideoMetadata:
        future = self._executor.submit(self._read_page, video_id)
        try:
            return future.result(timeout=self.timeout)
        except (concurrent.futures.TimeoutError, TimeoutError) as e:
            future.cancel()
            logging.error(f"Timed out fetching metadata for video {video_id}")
            raise UpstreamError(self.dependency, "request timed out", UpstreamReason.TIMEOUT) from e
        # Blocks and sign-in walls subclass VideoUnavailable, so they go first
        except (BotDetection, PoTokenRequired) as e:
            logging.error(f"YouTube blocked metadata request for video {video_id}: {str(e)}")
            raise UpstreamError(self.dependency, "request blocked by YouTube", UpstreamReason.RATE_LIMIT) from e
        except (LoginRequired, AgeCheckRequiredError, AgeCheckRequiredAccountError) as e:
            logging.error(f"YouTube requires sign-in for video {video_id}: {str(e)}")
            raise UpstreamError(self.dependency, "sign-in required", UpstreamReason.AUTH) from e
        except InnerTubeResponseError as e:
            logging.error(f"Unexpected InnerTube response for video {video_id}: {str(e)}")
            raise UpstreamError(self.dependency, f"request failed: {str(e)}") from e
        except VideoUnavailable as e:
            raise NotFoundError(f"Video not found: {video_id}", video_id=video_id) from e
        except UrllibHTTPError as e:
            logging.error(f"pytubefix returned {e.code} for video {video_id}")
            raise UpstreamError(
                self.dependency,
                f"request failed with status {e.code}",
                UpstreamError.reason_for_status(e.code),
                e.code,
            ) from e
        except (PytubeFixError, URLError) as e:
            logging.error(f"Error fetching metadata for video {video_id}: {str(e)}")
            raise UpstreamError(self.dependency, f"request failed: {str(e)}") from e

    def fetch_video_metadata(self, video_id: str) -> VideoMetadata:
        """Fetch title, channel, duration, and thumbnail for a video."""
        return self._load(video_id)

    def fetch_description(self, video_id: str) -> str:
        """Fetch the current description of a video."""
        return self._load(video_id).description


def create_metadata_fetcher(api_key: Optional[str] = None, timeout: Optional[float] = None) -> MetadataFetcher:
    """Pick the Data API fetcher when a key is available, pytubefix otherwise."""
    if api_key:
        return YouTubeDataApiFetcher(api_key, timeout=timeout)
    logging.info("No YouTube API key configured, using pytubefix for metadata")
    return PytubefixFetcher(timeout=timeout)
