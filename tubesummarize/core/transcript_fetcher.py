"""
Real caption retrieval.

A caption provider returns raw ``CaptionEntry`` items with millisecond
offsets; ``TranscriptFetcher`` turns them into ``TranscriptSegment`` items.
"""

from typing import List, Optional, Sequence

import requests
from youtube_transcript_api import (
    YouTubeTranscriptApi,
    CouldNotRetrieveTranscript,
    NoTranscriptFound,
    RequestBlocked,
    TranscriptsDisabled,
)

from tubesummarize.core.errors import CaptionsUnavailableError, UpstreamError, UpstreamReason
from tubesummarize.models.schemas import CaptionEntry, TranscriptSegment
from tubesummarize.utils.logger import logging


class TimeoutSession(requests.Session):
    """A requests session that applies a default timeout to every request."""

    def __init__(self, timeout: Optional[float] = None):
        super().__init__()
        self.timeout = timeout

    def request(self, method, url, **kwargs):
        kwargs.setdefault("timeout", self.timeout)
        return super().request(method, url, **kwargs)


class CaptionProvider:
    """Interface for caption sources."""

    dependency = "caption provider"

    def fetch_captions(self, video_id: str) -> List[CaptionEntry]:
        """
        Return the caption lines of a video.

        Raises:
            CaptionsUnavailableError: the video has no caption track
            UpstreamError: the provider could not be reached
        """
        raise NotImplementedError


class YouTubeTranscriptApiProvider(CaptionProvider):
    """Caption provider backed by youtube-transcript-api."""

    dependency = "youtube-transcript-api"

    def __init__(self, languages: Sequence[str] = ("en",), timeout: Optional[float] = None):
        self.languages = list(languages) or ["en"]
        self.api = YouTubeTranscriptApi(http_client=TimeoutSession(timeout))

    def fetch_captions(self, video_id: str) -> List[CaptionEntry]:
        try:
            transcript_list = self.api.list(video_id)
            try:
                transcript = transcript_list.find_transcript(self.languages)
            except NoTranscriptFound:
                # Any language beats a synthetic transcript
                available = list(transcript_list)
                if not available:
                    raise CaptionsUnavailableError(video_id)
                transcript = available[0]
                logging.info(
                    f"No caption track in {self.languages} for video {video_id}, "
                    f"using {transcript.language_code}"
                )
            fetched = transcript.fetch()
        except (TranscriptsDisabled, NoTranscriptFound) as e:
            raise CaptionsUnavailableError(video_id) from e
        except RequestBlocked as e:
            raise UpstreamError(self.dependency, "requests are being blocked by YouTube",
                                UpstreamReason.RATE_LIMIT) from e
        except CouldNotRetrieveTranscript as e:
            raise UpstreamError(self.dependency, f"could not retrieve captions: {str(e)}") from e
        except requests.exceptions.Timeout as e:
            raise UpstreamError(self.dependency, "request timed out", UpstreamReason.TIMEOUT) from e
        except requests.exceptions.RequestException as e:
            raise UpstreamError(self.dependency, f"request failed: {str(e)}") from e

        return [
            CaptionEntry(text=snippet.text, offset_ms=max(0, round(snippet.start * 1000)))
            for snippet in fetched
        ]


class TranscriptFetcher:
    """Class to retrieve real transcripts for YouTube videos."""

    def __init__(self, provider: CaptionProvider):
        """
        Initialize the fetcher with a caption provider.

        Args:
            provider: Source of raw caption entries
        """
        self.provider = provider

    def fetch_real_transcript(self, video_id: str) -> List[TranscriptSegment]:
        """
        Fetch captions and convert their offsets to whole seconds.

        Returns:
            Segments in caption order; empty if the provider returned no lines

        Raises:
            CaptionsUnavailableError: no caption track exists
            UpstreamError: the caption provider failed
        """
        logging.info(f"Fetching captions for video: {video_id}")
        try:
            entries = self.provider.fetch_captions(video_id)
        except CaptionsUnavailableError:
            logging.info(f"No captions available for video {video_id}")
            raise
        except UpstreamError as e:
            logging.error(f"Caption fetch failed for video {video_id}: {e.message}")
            raise

        segments = [
            TranscriptSegment(text=entry.text, timestamp=entry.offset_ms // 1000)
            for entry in entries
        ]
        logging.info(f"Transcript fetched successfully with {len(segments)} segments")
        return segments
