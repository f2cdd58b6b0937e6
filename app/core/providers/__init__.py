"""
Provider abstraction layer for transcript sources.
"""
from app.core.providers.transcript_provider import TranscriptProvider
from app.core.providers.youtube_provider import (
    YouTubeClient,
    YouTubeTranscriptProvider,
)

__all__ = [
    "TranscriptProvider",
    "YouTubeClient",
    "YouTubeTranscriptProvider",
]
