"""
Configuration for pytest tests.
"""

import os
import pytest
from typing import List, Optional
from unittest.mock import MagicMock

from app.models.schemas import GenerationConfig, TutorialSettings, VideoMetadata


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Setup test environment variables."""
    os.environ["YOUTUBE_API_KEY"] = os.environ.get("YOUTUBE_API_KEY", "test_youtube_key")
    os.environ["GEMINI_API_KEY"] = os.environ.get("GEMINI_API_KEY", "test_gemini_key")
    os.environ["ENVIRONMENT"] = "development"
    yield


class ScriptedLLM:
    """Stand-in for GeminiClient returning queued responses in order."""

    def __init__(self, responses: List[str]):
        self.responses = list(responses)
        self.prompts: List[str] = []
        self.configs: List[GenerationConfig] = []

    async def generate(self, prompt: str, config: GenerationConfig) -> str:
        self.prompts.append(prompt)
        self.configs.append(config)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def scripted_llm():
    """Factory for ScriptedLLM instances."""
    return ScriptedLLM


@pytest.fixture
def settings():
    """Fixture to create a complete TutorialSettings object."""
    return TutorialSettings(
        youtube_api_key="test_youtube_key",
        gemini_api_key="test_gemini_key",
        gemini_model="gemini-2.0-flash",
        request_timeout=5,
        llm_timeout=10,
    )


@pytest.fixture
def metadata():
    """Fixture to create a VideoMetadata object."""
    return VideoMetadata(
        video_id="dQw4w9WgXcQ",
        title="Build a REST API with FastAPI",
        description="Code: https://github.com/acme/widget",
        transcript="Today we build an API.\nFirst install FastAPI.",
    )


@pytest.fixture
def long_text():
    """Section text long enough to pass the acceptance rule."""
    def make(label: str = "content", length: int = 150) -> str:
        return (f"{label} " * length)[:length]
    return make


@pytest.fixture
def make_response():
    """Factory building mock requests.Response objects."""
    def make(status_code: int = 200, payload: Optional[dict] = None) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 300
        response.json.return_value = payload if payload is not None else {}
        return response
    return make
