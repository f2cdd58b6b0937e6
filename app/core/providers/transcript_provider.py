"""
Abstract base class for transcript providers.

This module defines a vendor-neutral interface for fetching captions and
basic metadata for a single video. Concrete implementations (YouTube via
youtube-transcript-api/yt-dlp) must implement this interface.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from app.models.proxy import ProxyConfig
from app.models.youtube import CaptionSnippet, VideoDetails


class TranscriptProvider(ABC):
    """
    Abstract interface for transcript providers.

    Implementations must provide:
    - init_client: Build a client, optionally routed through a proxy
    - fetch_transcript: Fetch the caption units for a video
    - fetch_metadata: Fetch title, author and view count for a video

    The client returned by init_client is opaque to callers and is only
    handed back to the same provider's fetch methods.

    Example:
        provider = YouTubeTranscriptProvider()
        client = provider.init_client(proxy=None)
        captions = await provider.fetch_transcript(client, "dQw4w9WgXcQ", ["en"])
        details = await provider.fetch_metadata(client, "dQw4w9WgXcQ")
    """

    @abstractmethod
    def init_client(self, proxy: Optional[ProxyConfig] = None) -> Any:
        """
        Construct a provider client.

        Args:
            proxy: Proxy settings, or None for a direct connection.

        Returns:
            An opaque client object.
        """
        ...

    @abstractmethod
    async def fetch_transcript(
        self,
        client: Any,
        video_id: str,
        languages: Sequence[str],
        allow_generated: bool = True,
    ) -> list[CaptionSnippet]:
        """
        Fetch captions for a video.

        Args:
            client: A client from init_client.
            video_id: A validated video identifier.
            languages: Language codes in order of preference.
            allow_generated: Whether auto-generated captions are acceptable.

        Returns:
            Caption units in chronological order.
        """
        ...

    @abstractmethod
    async def fetch_metadata(self, client: Any, video_id: str) -> VideoDetails:
        """
        Fetch title, author and raw view count for a video.

        Args:
            client: A client from init_client.
            video_id: A validated video identifier.
        """
        ...
