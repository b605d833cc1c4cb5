"""
Fallback transcript synthesis for videos without captions.

The synthetic transcript gives the summarizer something to work with. It is
built only from the video description and duration, so it is fully
deterministic, and its first segment always discloses that it is not a real
transcript.
"""

import math
import re
from typing import List

from tubesummarize.core.duration import format_timestamp
from tubesummarize.models.schemas import TranscriptSegment
from tubesummarize.utils.logger import logging

SYNTHETIC_DISCLOSURE = (
    "Note: This video doesn't have captions available. The following transcript "
    "is generated from the video description and is not a precise representation "
    "of the actual content."
)

MIN_SEGMENTS = 20
SECONDS_PER_SEGMENT = 15
MIN_TOPIC_LENGTH = 20
MAX_TOPIC_LENGTH = 200
MAX_SEGMENT_TEXT = 200

GENERIC_PHRASES = [
    "I wanted to talk about this topic because",
    "Here's something interesting to consider",
    "Many viewers have asked me about",
    "Let's dive deeper into this concept",
    "This is a crucial point to understand",
    "When we look at the data, we can see that",
    "The research suggests that",
    "From my experience, I've found that",
    "It's important to remember that",
    "One approach that works well is",
    "The key insight here is",
    "What most people don't realize is",
]

_TOPIC_SEPARATORS = re.compile(r"\n|\.|,")


def segment_count_for(duration_seconds: int) -> int:
    """Number of generated segments: one per 15 seconds, at least 20."""
    return max(MIN_SEGMENTS, math.ceil(max(0, duration_seconds) / SECONDS_PER_SEGMENT))


def extract_topics(description: str, limit: int) -> List[str]:
    """Split a description into candidate topic lines of a reasonable length."""
    topics = []
    for line in _TOPIC_SEPARATORS.split(description or ""):
        line = line.strip()
        if MIN_TOPIC_LENGTH < len(line) < MAX_TOPIC_LENGTH:
            topics.append(line)
            if len(topics) == limit:
                break
    return topics


def _truncate(text: str) -> str:
    if len(text) > MAX_SEGMENT_TEXT:
        return text[:MAX_SEGMENT_TEXT - 3] + "..."
    return text


def synthesize(video_id: str, duration_seconds: int, description: str) -> List[TranscriptSegment]:
    """
    Generate a placeholder transcript from the video description.

    Args:
        video_id: ID of the video the transcript stands in for
        duration_seconds: Length of the video in seconds
        description: Video description used as the source of topics

    Returns:
        The disclosure segment followed by at least 20 generated segments
    """
    duration_seconds = max(0, int(duration_seconds))
    segment_count = segment_count_for(duration_seconds)
    segment_duration = duration_seconds // segment_count
    topics = extract_topics(description, segment_count)

    segments = [TranscriptSegment(text=SYNTHETIC_DISCLOSURE, timestamp=0)]

    for i in range(segment_count):
        timestamp = i * segment_duration

        if i < len(topics):
            text = topics[i]
        elif topics:
            phrase = GENERIC_PHRASES[i % len(GENERIC_PHRASES)]
            text = f"{phrase} {topics[i % len(topics)].lower()}"
        else:
            text = f"Transcript segment {i + 1} of the video (timestamp: {format_timestamp(timestamp)})"

        segments.append(TranscriptSegment(text=_truncate(text.strip()), timestamp=timestamp))

    logging.info(f"Synthesized {segment_count} placeholder segments for video {video_id} from {len(topics)} topics")
    return segments
