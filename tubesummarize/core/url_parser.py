"""
YouTube URL validation, auto-correction, and video ID extraction.
"""

import re
from typing import Optional

# Anchored form: the whole input must be a YouTube watch or short URL
YOUTUBE_URL_PATTERN = re.compile(
    r"^(https?://)?([\w-]+\.)?(youtube\.com/watch\?v=|youtu\.be/)([a-zA-Z0-9_-]{11})(\S*)?$"
)

# Unanchored form used to find a URL inside pasted text
EMBEDDED_URL_PATTERN = re.compile(
    r"(https?://)?([\w-]+\.)?(youtube\.com/watch\?v=|youtu\.be/)[a-zA-Z0-9_-]{11}\S*"
)

VIDEO_ID_PATTERN = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([a-zA-Z0-9_-]{11})")


def is_valid_youtube_url(url: str) -> bool:
    """Check whether a string is exactly a supported YouTube URL."""
    return bool(YOUTUBE_URL_PATTERN.match((url or "").strip()))


def correct_youtube_url(text: str) -> Optional[str]:
    """
    Recover a YouTube URL from pasted text.

    Users often paste a URL with surrounding text or whitespace. If the text
    is already a valid URL it is returned stripped; otherwise the first
    embedded YouTube URL is returned.

    Args:
        text: Raw user input

    Returns:
        The corrected URL, or None if the text holds no YouTube URL
    """
    candidate = (text or "").strip()
    if is_valid_youtube_url(candidate):
        return candidate

    match = EMBEDDED_URL_PATTERN.search(candidate)
    if match:
        return match.group(0)
    return None


def extract_video_id(url: str) -> Optional[str]:
    """Extract the 11 character video ID from a YouTube URL."""
    match = VIDEO_ID_PATTERN.search(url or "")
    if match:
        return match.group(1)
    return None


def watch_url(video_id: str) -> str:
    """Build the canonical watch URL for a video."""
    return f"https://www.youtube.com/watch?v={video_id}"
