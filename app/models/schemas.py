"""
Data models for the YouTube tutorial generator application.
"""
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict

from app.utils.errors import ConfigurationError


TRANSCRIPT_UNAVAILABLE = "Transcript not available for this video."


class TutorialSettings(BaseModel):
    """Explicit settings for one pipeline, validated once at startup."""
    youtube_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.0-flash"
    request_timeout: float = 30.0
    llm_timeout: float = 300.0
    transcript_languages: List[str] = Field(default_factory=lambda: ["en"])

    def validate_credentials(self) -> "TutorialSettings":
        """Raise ConfigurationError naming every missing credential."""
        missing = []
        if not self.youtube_api_key:
            missing.append("YOUTUBE_API_KEY")
        if not self.gemini_api_key:
            missing.append("GEMINI_API_KEY")
        if missing:
            raise ConfigurationError(f"Missing required configuration: {', '.join(missing)}")
        return self


class VideoMetadata(BaseModel):
    """Title, description and transcript of one video."""
    video_id: str = ""
    title: str
    description: str = ""
    transcript: str = TRANSCRIPT_UNAVAILABLE

    model_config = ConfigDict(frozen=True)

    @property
    def transcript_available(self) -> bool:
        return self.transcript != TRANSCRIPT_UNAVAILABLE


class TutorialSection(BaseModel):
    """One entry of the section plan."""
    title: str
    subsections: List[str] = Field(default_factory=list)
    completed: bool = False

    def mark_completed(self) -> None:
        if self.completed:
            raise ValueError(f"Section '{self.title}' is already completed")
        self.completed = True


class GenerationProgress(BaseModel):
    """A progress event published while a tutorial is generated."""
    label: str
    percent: int = Field(ge=0, le=100)


class HarmCategory(str, Enum):
    """Safety categories understood by the Gemini API."""
    HATE_SPEECH = "HARM_CATEGORY_HATE_SPEECH"
    DANGEROUS_CONTENT = "HARM_CATEGORY_DANGEROUS_CONTENT"


class HarmBlockThreshold(str, Enum):
    """Sensitivity at which a category blocks generation."""
    BLOCK_ONLY_HIGH = "BLOCK_ONLY_HIGH"
    BLOCK_MEDIUM_AND_ABOVE = "BLOCK_MEDIUM_AND_ABOVE"
    BLOCK_NONE = "BLOCK_NONE"


class SafetySetting(BaseModel):
    """Category to threshold mapping sent with every LLM request."""
    category: HarmCategory
    threshold: HarmBlockThreshold


class GenerationConfig(BaseModel):
    """Sampling configuration for one LLM request."""
    temperature: float = 0.0
    top_k: Optional[int] = None
    top_p: Optional[float] = None
    max_output_tokens: int = 8192
    safety_settings: List[SafetySetting] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


# Only the most severe hateful or dangerous content is blocked so that
# ordinary technical material (exploits in a security tutorial, etc.) passes.
DEFAULT_SAFETY_SETTINGS = [
    SafetySetting(category=HarmCategory.HATE_SPEECH, threshold=HarmBlockThreshold.BLOCK_ONLY_HIGH),
    SafetySetting(category=HarmCategory.DANGEROUS_CONTENT, threshold=HarmBlockThreshold.BLOCK_ONLY_HIGH),
]

SECTION_GENERATION_CONFIG = GenerationConfig(
    temperature=0.0,
    top_k=40,
    top_p=0.8,
    max_output_tokens=8192,
    safety_settings=DEFAULT_SAFETY_SETTINGS,
)

FALLBACK_GENERATION_CONFIG = GenerationConfig(
    temperature=0.0,
    max_output_tokens=8192,
    safety_settings=DEFAULT_SAFETY_SETTINGS,
)


class TutorialResult(BaseModel):
    """Model for a finished tutorial."""
    video_id: str
    title: str
    markdown: str
    repository_links: List[str] = Field(default_factory=list)
    transcript_available: bool = False
    sections_completed: List[str] = Field(default_factory=list)
    used_fallback: bool = False
