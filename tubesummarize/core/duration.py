"""
Helpers for YouTube durations.

YouTube reports durations as ISO-8601 strings (``PT1H2M3S``); the UI shows
them as ``H:MM:SS`` or ``M:SS``.
"""

import re

ISO_DURATION_PATTERN = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def parse_duration(iso: str) -> int:
    """
    Convert an ISO-8601 duration to seconds.

    Args:
        iso: Duration such as ``PT3M33S``; any subset of H/M/S may be present

    Returns:
        Total seconds, or 0 when the string is not a recognisable duration
    """
    match = ISO_DURATION_PATTERN.search(iso or "")
    if not match:
        return 0

    hours = int(match.group(1) or 0)
    minutes = int(match.group(2) or 0)
    seconds = int(match.group(3) or 0)

    return hours * 3600 + minutes * 60 + seconds


def format_duration(seconds: int) -> str:
    """Format seconds as ``H:MM:SS``, or ``M:SS`` when under an hour."""
    seconds = max(0, int(seconds))
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_timestamp(seconds: int) -> str:
    """Format seconds as ``M:SS`` with unbounded minutes."""
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes}:{secs:02d}"
