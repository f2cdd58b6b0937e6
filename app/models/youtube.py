from typing import List
from pydantic import BaseModel, Field, ConfigDict

# --- Raw Provider Models ---

class CaptionSnippet(BaseModel):
    """A single caption unit as returned by the transcript provider."""
    text: str
    start: float
    duration: float

    model_config = ConfigDict(frozen=True)

class VideoDetails(BaseModel):
    """Basic video metadata as returned by the transcript provider."""
    title: str = ""
    author: str = ""
    view_count: str = ""

    model_config = ConfigDict(frozen=True)

# --- Normalized Output Models ---

class TranscriptSnippet(BaseModel):
    start: str
    duration: float
    text: str

    model_config = ConfigDict(frozen=True)

class VideoSummary(BaseModel):
    id: str
    title: str
    author: str
    views: str
    transcript: List[TranscriptSnippet] = Field(default_factory=list)
