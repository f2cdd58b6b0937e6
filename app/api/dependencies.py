"""
Dependency injection factories for FastAPI.

Configuration is read here, once, and handed to services explicitly so the
services themselves never touch process-global settings.
"""
from functools import lru_cache
from fastapi import Depends

from app.core.config import settings
from app.core.providers.transcript_provider import TranscriptProvider
from app.core.providers.youtube_provider import YouTubeTranscriptProvider
from app.services.proxy import ProxyService
from app.services.transcript import TranscriptService


@lru_cache
def get_proxy_service() -> ProxyService:
    """Get proxy service for provider traffic."""
    return ProxyService(proxy_url=settings.PROXY_URL)


@lru_cache
def get_transcript_provider() -> TranscriptProvider:
    """Get the YouTube transcript provider."""
    return YouTubeTranscriptProvider()


def get_transcript_service(
    provider: TranscriptProvider = Depends(get_transcript_provider),
    proxy_service: ProxyService = Depends(get_proxy_service),
) -> TranscriptService:
    """Get transcript service wired with provider, proxy and language settings."""
    return TranscriptService(
        provider=provider,
        proxy_service=proxy_service,
        languages=settings.TRANSCRIPT_LANGUAGES,
        allow_generated=settings.ALLOW_GENERATED_TRANSCRIPTS,
    )
