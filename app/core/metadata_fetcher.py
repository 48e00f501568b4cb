"""
Module for fetching video metadata and transcripts.
"""

from typing import Optional

import requests
from starlette.concurrency import run_in_threadpool
from youtube_transcript_api import YouTubeTranscriptApi

from app.models.schemas import TutorialSettings, VideoMetadata, TRANSCRIPT_UNAVAILABLE
from app.utils.errors import ConfigurationError, NotFound, UpstreamError
from app.utils.logger import logging


YOUTUBE_VIDEOS_URL = "https://www.googleapis.com/youtube/v3/videos"


class MetadataFetcher:
    """Class to retrieve title, description and transcript for a video."""

    def __init__(
        self,
        settings: TutorialSettings,
        session: Optional[requests.Session] = None,
        transcript_api: Optional[YouTubeTranscriptApi] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            settings: Pipeline settings carrying the YouTube Data API key
            session: Optional requests session to reuse connections
            transcript_api: Optional transcript client

        Raises:
            ConfigurationError: If the YouTube API key is missing
        """
        if not settings.youtube_api_key:
            raise ConfigurationError("YouTube API key is not configured")

        self.settings = settings
        self.session = session or requests.Session()
        self.transcript_api = transcript_api or YouTubeTranscriptApi()

    def fetch_video_details(self, video_id: str) -> dict:
        """
        Fetch the snippet of a video from the YouTube Data API.

        Args:
            video_id: YouTube video ID

        Returns:
            The snippet dictionary of the first matching item
        """
        logging.info(f"Fetching video details for: {video_id}")
        try:
            response = self.session.get(
                YOUTUBE_VIDEOS_URL,
                params={
                    "part": "snippet,contentDetails",
                    "id": video_id,
                    "key": self.settings.youtube_api_key,
                },
                timeout=self.settings.request_timeout,
            )
        except requests.RequestException as e:
            logging.error(f"Error fetching video details: {str(e)}")
            raise UpstreamError(f"Failed to fetch video details: {str(e)}") from e

        if not response.ok:
            message = _error_message(response) or "Failed to fetch video details"
            logging.error(f"YouTube API returned {response.status_code}: {message}")
            raise UpstreamError(message, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError("Malformed response from YouTube API") from e

        items = data.get("items") if isinstance(data, dict) else None
        if not items:
            raise NotFound("Video not found")

        return items[0].get("snippet") or {}

    def fetch_transcript(self, video_id: str) -> str:
        """
        Fetch the transcript text of a video.

        A missing transcript never fails the request; the sentinel text is
        returned instead.
        """
        try:
            fragments = self.transcript_api.fetch(
                video_id, languages=self.settings.transcript_languages
            )
            transcript = "\n".join(fragment.text for fragment in fragments)
        except Exception as e:
            logging.warning(f"Failed to fetch transcript for {video_id}: {str(e)}")
            return TRANSCRIPT_UNAVAILABLE

        if not transcript.strip():
            logging.warning(f"Empty transcript for {video_id}")
            return TRANSCRIPT_UNAVAILABLE
        return transcript

    def fetch(self, video_id: str) -> VideoMetadata:
        """
        Fetch metadata and transcript for a video.

        Args:
            video_id: YouTube video ID

        Returns:
            VideoMetadata object
        """
        snippet = self.fetch_video_details(video_id)
        transcript = self.fetch_transcript(video_id)

        metadata = VideoMetadata(
            video_id=video_id,
            title=snippet.get("title", ""),
            description=snippet.get("description", ""),
            transcript=transcript,
        )
        logging.info(
            f"Fetched '{metadata.title}' (transcript available: {metadata.transcript_available})"
        )
        return metadata

    async def fetch_async(self, video_id: str) -> VideoMetadata:
        """Run fetch in a worker thread so the event loop stays free."""
        return await run_in_threadpool(self.fetch, video_id)


def _error_message(response: requests.Response) -> Optional[str]:
    try:
        payload = response.json()
    except ValueError:
        return None
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict):
            return error.get("message")
    return None
