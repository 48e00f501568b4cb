"""
Tests for the video resolver module.
"""

import pytest

from app.core.video_resolver import extract_video_id
from app.utils.errors import InvalidInput


@pytest.mark.parametrize("url", [
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "https://youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
    "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
    "https://m.youtube.com/watch?v=dQw4w9WgXcQ",
    "https://www.youtube.com/embed/dQw4w9WgXcQ",
    "https://www.youtube.com/v/dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ?si=-InVol0JhtWji-6R",
    "youtu.be/dQw4w9WgXcQ",
    "  https://www.youtube.com/shorts/dQw4w9WgXcQ  ",
])
def test_recognised_shapes(url):
    """Test that every supported URL shape yields the same id."""
    assert extract_video_id(url) == "dQw4w9WgXcQ"


@pytest.mark.parametrize("url", [
    "",
    None,
    "not a url",
    "https://vimeo.com/123456789",
    "https://www.youtube.com/watch?v=short",
    "https://www.youtube.com/",
    "dQw4w9WgXcQ",
])
def test_unrecognised_input(url):
    """Test that anything else fails with InvalidInput."""
    with pytest.raises(InvalidInput) as exc_info:
        extract_video_id(url)
    assert exc_info.value.message == "Invalid YouTube URL"
