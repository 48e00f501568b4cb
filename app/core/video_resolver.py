"""
Resolve a YouTube URL to its video id.
"""

import re

from app.utils.errors import InvalidInput


# watch?v=, any query carrying v=, /embed/, /v/, /e/, /shorts/, /live/ and youtu.be/
VIDEO_ID_PATTERN = re.compile(
    r"(?:youtube(?:-nocookie)?\.com/"
    r"(?:(?:embed|v|e|shorts|live)/|\S*?[?&]v=)"
    r"|youtu\.be/)"
    r"([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])"
)


def extract_video_id(url: str) -> str:
    """
    Extract the 11-character video id from a YouTube URL.

    Args:
        url: Any string the user typed

    Returns:
        The video id

    Raises:
        InvalidInput: If no recognised URL shape matches
    """
    if not url:
        raise InvalidInput("Invalid YouTube URL")

    match = VIDEO_ID_PATTERN.search(url.strip())
    if not match:
        raise InvalidInput("Invalid YouTube URL")
    return match.group(1)
