"""
API client for communicating with the YouTube Tutorial Generator backend.
"""

import json
import requests
from typing import Dict, Any, Iterator, Optional
from urllib.parse import urljoin
from app.config import config


class ApiClient:
    """Client for interacting with the YouTube Tutorial Generator API."""

    def __init__(self, base_url: str = config.PUBLIC_URL, timeout: float = 600.0):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Seconds to wait for the server between bytes
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/v1/")
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    def generate_tutorial(self, url: str, model: Optional[str] = None) -> Dict[str, Any]:
        """
        Request a tutorial and wait for the complete result.

        Args:
            url: YouTube video URL
            model: Optional Gemini model override

        Returns:
            Dictionary with the tutorial fields
        """
        response = requests.post(
            self._url("tutorial"),
            json={"url": url, "model": model},
            timeout=self.timeout,
        )

        if not response.ok:
            return {"error": _detail(response)}
        return response.json()

    def stream_tutorial(self, url: str, model: Optional[str] = None) -> Iterator[Dict[str, Any]]:
        """
        Request a tutorial and yield progress, result and error events.

        Args:
            url: YouTube video URL
            model: Optional Gemini model override

        Yields:
            Decoded NDJSON events
        """
        with requests.post(
            self._url("tutorial/stream"),
            json={"url": url, "model": model},
            stream=True,
            timeout=self.timeout,
        ) as response:
            if not response.ok:
                yield {"type": "error", "error_type": "HTTPError", "message": _detail(response)}
                return

            for line in response.iter_lines(decode_unicode=True):
                if line:
                    yield json.loads(line)


def _detail(response: requests.Response) -> str:
    try:
        return response.json().get("detail", response.reason)
    except ValueError:
        return f"{response.status_code} {response.reason}"
