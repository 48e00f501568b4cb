"""
Tests for the metadata fetcher module.
"""

import asyncio
import pytest
import requests
from types import SimpleNamespace
from unittest.mock import MagicMock

from app.core.metadata_fetcher import MetadataFetcher, YOUTUBE_VIDEOS_URL
from app.models.schemas import TutorialSettings, VideoMetadata, TRANSCRIPT_UNAVAILABLE
from app.utils.errors import ConfigurationError, NotFound, UpstreamError


VIDEO_PAYLOAD = {
    "items": [
        {"snippet": {"title": "Test Video", "description": "Repo: https://github.com/acme/widget"}}
    ]
}


@pytest.fixture
def mock_session(make_response):
    """Fixture to mock a requests session returning one video."""
    session = MagicMock()
    session.get.return_value = make_response(200, VIDEO_PAYLOAD)
    return session


@pytest.fixture
def mock_transcript_api():
    """Fixture to mock the transcript client."""
    api = MagicMock()
    api.fetch.return_value = [
        SimpleNamespace(text="Hello and welcome", start=0.0, duration=2.0),
        SimpleNamespace(text="today we build a widget", start=2.0, duration=3.5),
    ]
    return api


def test_missing_key_is_configuration_error():
    """Test that construction fails without a YouTube API key."""
    with pytest.raises(ConfigurationError):
        MetadataFetcher(TutorialSettings(gemini_api_key="x"))


def test_fetch(settings, mock_session, mock_transcript_api):
    """Test fetching metadata with a transcript."""
    fetcher = MetadataFetcher(settings, session=mock_session, transcript_api=mock_transcript_api)
    metadata = fetcher.fetch("dQw4w9WgXcQ")

    assert isinstance(metadata, VideoMetadata)
    assert metadata.title == "Test Video"
    assert metadata.description == "Repo: https://github.com/acme/widget"
    assert metadata.transcript == "Hello and welcome\ntoday we build a widget"
    assert metadata.transcript_available

    args, kwargs = mock_session.get.call_args
    assert args[0] == YOUTUBE_VIDEOS_URL
    assert kwargs["params"]["id"] == "dQw4w9WgXcQ"
    assert kwargs["params"]["key"] == "test_youtube_key"
    assert kwargs["timeout"] == settings.request_timeout
    mock_transcript_api.fetch.assert_called_once_with("dQw4w9WgXcQ", languages=["en"])


def test_transcript_failure_uses_sentinel(settings, mock_session):
    """Test that a transcript failure still returns metadata."""
    transcript_api = MagicMock()
    transcript_api.fetch.side_effect = RuntimeError("Subtitles are disabled for this video")

    fetcher = MetadataFetcher(settings, session=mock_session, transcript_api=transcript_api)
    metadata = fetcher.fetch("dQw4w9WgXcQ")

    assert metadata.title == "Test Video"
    assert metadata.transcript == TRANSCRIPT_UNAVAILABLE
    assert not metadata.transcript_available


def test_empty_transcript_uses_sentinel(settings, mock_session):
    transcript_api = MagicMock()
    transcript_api.fetch.return_value = []

    fetcher = MetadataFetcher(settings, session=mock_session, transcript_api=transcript_api)
    assert fetcher.fetch("dQw4w9WgXcQ").transcript == TRANSCRIPT_UNAVAILABLE


def test_empty_items_is_not_found(settings, make_response, mock_transcript_api):
    """Test that zero items fails with NotFound before the transcript is requested."""
    session = MagicMock()
    session.get.return_value = make_response(200, {"items": []})

    fetcher = MetadataFetcher(settings, session=session, transcript_api=mock_transcript_api)
    with pytest.raises(NotFound):
        fetcher.fetch("dQw4w9WgXcQ")
    mock_transcript_api.fetch.assert_not_called()


def test_missing_items_is_not_found(settings, make_response, mock_transcript_api):
    session = MagicMock()
    session.get.return_value = make_response(200, {"kind": "youtube#videoListResponse"})

    fetcher = MetadataFetcher(settings, session=session, transcript_api=mock_transcript_api)
    with pytest.raises(NotFound):
        fetcher.fetch("dQw4w9WgXcQ")


def test_http_error_carries_upstream_message(settings, make_response, mock_transcript_api):
    """Test that a non-success status becomes UpstreamError with the API message."""
    session = MagicMock()
    session.get.return_value = make_response(403, {"error": {"code": 403, "message": "API key not valid."}})

    fetcher = MetadataFetcher(settings, session=session, transcript_api=mock_transcript_api)
    with pytest.raises(UpstreamError) as exc_info:
        fetcher.fetch("dQw4w9WgXcQ")

    assert exc_info.value.message == "API key not valid."
    assert exc_info.value.status_code == 403


def test_http_error_without_body(settings, make_response, mock_transcript_api):
    session = MagicMock()
    response = make_response(500)
    response.json.side_effect = ValueError("no json")
    session.get.return_value = response

    fetcher = MetadataFetcher(settings, session=session, transcript_api=mock_transcript_api)
    with pytest.raises(UpstreamError) as exc_info:
        fetcher.fetch("dQw4w9WgXcQ")
    assert exc_info.value.message == "Failed to fetch video details"


def test_network_error_is_upstream_error(settings, mock_transcript_api):
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError("connection refused")

    fetcher = MetadataFetcher(settings, session=session, transcript_api=mock_transcript_api)
    with pytest.raises(UpstreamError):
        fetcher.fetch("dQw4w9WgXcQ")


def test_fetch_async(settings, mock_session, mock_transcript_api):
    """Test the threadpool wrapper returns the same metadata."""
    fetcher = MetadataFetcher(settings, session=mock_session, transcript_api=mock_transcript_api)
    metadata = asyncio.run(fetcher.fetch_async("dQw4w9WgXcQ"))
    assert metadata.title == "Test Video"
