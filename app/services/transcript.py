"""
Transcript service: resolves the requested video, fetches its captions and
metadata from the provider and assembles the normalized summary.
"""
from typing import List, Sequence

from loguru import logger

from app.core.exceptions import (
    MetadataFetchError,
    ProviderInitError,
    TranscriptFetchError,
)
from app.core.providers.transcript_provider import TranscriptProvider
from app.models import ByUrl, TranscriptPayload, TranscriptRequest, TranscriptSnippet, VideoSummary
from app.services.formatting import clean_caption_text, format_timestamp, format_view_count
from app.services.proxy import ProxyService
from app.services.validation import extract_video_id, validate_video_id


class TranscriptService:
    """
    Handles a single transcript request end to end.

    The flow is linear and never retries:
    1. Resolve the video ID from the payload (identifier or URL).
    2. Build a provider client, routed through the proxy if one is configured.
    3. Fetch the transcript.
    4. Fetch the metadata (only once the transcript succeeded).
    5. Format everything into a VideoSummary.

    Any failure aborts the request; no partial summary is ever returned.
    """

    def __init__(
        self,
        provider: TranscriptProvider,
        proxy_service: ProxyService,
        languages: Sequence[str] = ("en",),
        allow_generated: bool = True,
    ):
        """
        Initialize the TranscriptService.

        Args:
            provider: Source of captions and metadata.
            proxy_service: Supplies the optional proxy configuration.
            languages: Preferred caption languages, in order.
            allow_generated: Whether auto-generated captions are acceptable.
        """
        self.provider = provider
        self.proxy_service = proxy_service
        self.languages = list(languages)
        self.allow_generated = allow_generated

    @staticmethod
    def resolve_video_id(request: TranscriptRequest) -> str:
        """
        Turn a TranscriptRequest into a validated video ID.

        Raises:
            ValidationError: If the identifier or URL is invalid.
        """
        if isinstance(request, ByUrl):
            return extract_video_id(request.url)
        validate_video_id(request.video_id)
        return request.video_id

    async def handle(self, payload: TranscriptPayload) -> VideoSummary:
        """
        Produce the VideoSummary for an inbound payload.

        Args:
            payload: The request body.

        Returns:
            VideoSummary: Formatted metadata and transcript.

        Raises:
            InputError: If the payload is conflicting, empty or invalid.
            ProviderError: If the provider could not be initialised or failed to fetch.
        """
        video_id = self.resolve_video_id(payload.to_request())
        logger.info(f"Fetching transcript for video: {video_id}")

        proxies = self.proxy_service.get_proxies()
        has_proxy = proxies is not None
        try:
            client = self.provider.init_client(proxies)
        except Exception as e:
            logger.error(f"Failed to initialise transcript provider: {e}")
            raise ProviderInitError(str(e)) from e

        try:
            captions = await self.provider.fetch_transcript(
                client, video_id, self.languages, self.allow_generated
            )
        except Exception as e:
            logger.error(f"Failed to fetch transcript for {video_id} (proxy={has_proxy}): {e}")
            raise TranscriptFetchError(str(e), has_proxy=has_proxy) from e

        try:
            details = await self.provider.fetch_metadata(client, video_id)
        except Exception as e:
            logger.error(f"Failed to fetch metadata for {video_id}: {e}")
            raise MetadataFetchError(str(e)) from e

        snippets: List[TranscriptSnippet] = [
            TranscriptSnippet(
                start=format_timestamp(caption.start),
                duration=caption.duration,
                text=clean_caption_text(caption.text),
            )
            for caption in captions
        ]
        logger.info(f"Successfully fetched {len(snippets)} transcript snippets for {video_id}")

        return VideoSummary(
            id=video_id,
            title=details.title,
            author=details.author,
            views=format_view_count(details.view_count),
            transcript=snippets,
        )
