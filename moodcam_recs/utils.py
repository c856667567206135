"""
Utility Functions
=================

Common utilities used across the MoodCam Recs system.
"""

import re
import base64
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import LOG_LEVEL

_DATA_URI_PREFIX = re.compile(r"^data:image/\w+;base64,")


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging once for the entry points.

    Args:
        level: Level name (defaults to LOG_LEVEL)
    """
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def strip_data_uri(payload: str) -> str:
    """
    Remove a leading ``data:image/<type>;base64,`` header.

    Args:
        payload: Data URI or raw base64 string

    Returns:
        Raw base64 text
    """
    return _DATA_URI_PREFIX.sub("", payload, count=1)


def load_image_as_base64(path: str) -> str:
    """Read an image file and return its base64 text."""
    data = Path(path).read_bytes()
    return base64.b64encode(data).decode("ascii")


def join_artist_names(artists: List[Dict[str, Any]]) -> str:
    """Join contributor names into one display string."""
    return ", ".join(a.get("name", "") for a in artists or [] if a)


def first_image_url(images: List[Dict[str, Any]]) -> str:
    """URL of the first image variant, or empty string if there is none."""
    for image in images or []:
        if image and image.get("url"):
            return image["url"]
    return ""


def format_duration(duration_ms: int) -> str:
    """
    Format a track duration as m:ss.

    Args:
        duration_ms: Duration in milliseconds

    Returns:
        e.g. "3:07"
    """
    total_seconds = max(0, int(duration_ms or 0)) // 1000
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"
