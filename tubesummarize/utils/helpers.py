"""
Helper utility functions for the TubeSummarize application.
"""

import datetime
import json
import os
from typing import Any, Optional


def save_json(data: Any, filepath: str, pretty: bool = True) -> None:
    """
    Save data to a JSON file.

    The data is written to a temporary sibling file first and then moved
    into place, so readers never see a half-written file.

    Args:
        data: Data to save
        filepath: Path to save the file
        pretty: Whether to format the JSON for readability
    """
    ensure_dir(os.path.dirname(os.path.abspath(filepath)))
    tmp_path = f"{filepath}.tmp"
    with open(tmp_path, 'w', encoding='utf-8') as f:
        if pretty:
            json.dump(data, f, indent=2, ensure_ascii=False)
        else:
            json.dump(data, f, ensure_ascii=False)
    os.replace(tmp_path, filepath)


def load_json(filepath: str) -> Any:
    """
    Load data from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        Loaded JSON data
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        return json.load(f)


def ensure_dir(directory: str) -> None:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        directory: Directory path to ensure exists
    """
    os.makedirs(directory, exist_ok=True)


def format_relative_date(value: datetime.datetime, now: Optional[datetime.datetime] = None) -> str:
    """
    Describe how long ago a timestamp was, for history listings.

    Args:
        value: The timestamp to describe
        now: Reference time, defaults to the current UTC time

    Returns:
        "just now", "N minutes ago", "N hours ago", "yesterday", or an ISO date
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    now = now or datetime.datetime.now(datetime.timezone.utc)
    diff = int((now - value).total_seconds())

    if diff < 60:
        return "just now"
    if diff < 3600:
        return f"{diff // 60} minutes ago"
    if diff < 86400:
        return f"{diff // 3600} hours ago"
    if diff < 172800:
        return "yesterday"
    return value.date().isoformat()
