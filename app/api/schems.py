from pydantic import BaseModel
from typing import Optional, List


class TutorialRequest(BaseModel):
    """Model for requesting tutorial generation."""
    url: str
    model: Optional[str] = None


class TutorialResponse(BaseModel):
    """Model for tutorial responses."""
    video_id: str
    title: str
    markdown: str
    repository_links: List[str] = []
    transcript_available: bool
    sections_completed: List[str] = []
    used_fallback: bool = False


class ProgressEvent(BaseModel):
    """Progress line of the NDJSON stream."""
    type: str = "progress"
    label: str
    percent: int


class ResultEvent(BaseModel):
    """Final line of a successful NDJSON stream."""
    type: str = "result"
    tutorial: TutorialResponse


class ErrorEvent(BaseModel):
    """Final line of a failed NDJSON stream."""
    type: str = "error"
    error_type: str
    message: str
