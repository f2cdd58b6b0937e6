"""
YouTube transcript provider backed by youtube-transcript-api and yt-dlp.
"""
import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

from loguru import logger
from yt_dlp import YoutubeDL
from youtube_transcript_api import YouTubeTranscriptApi
from youtube_transcript_api.proxies import GenericProxyConfig

from app.core.providers.transcript_provider import TranscriptProvider
from app.models.proxy import ProxyConfig
from app.models.youtube import CaptionSnippet, VideoDetails

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


@dataclass(frozen=True)
class YouTubeClient:
    """Request-scoped handles for both YouTube libraries."""

    transcript_api: YouTubeTranscriptApi
    ydl_opts: Dict[str, Any] = field(default_factory=dict)


class YouTubeTranscriptProvider(TranscriptProvider):
    """
    Fetches captions with youtube-transcript-api and metadata with yt-dlp.

    Both libraries block, so every network call runs in a worker thread to
    keep the event loop free for other requests.
    """

    def init_client(self, proxy: Optional[ProxyConfig] = None) -> YouTubeClient:
        proxy_conf = None
        ydl_opts: Dict[str, Any] = {
            "quiet": True,
            "no_warnings": True,
            "skip_download": True,
        }
        if proxy:
            proxy_conf = GenericProxyConfig(http_url=proxy.http, https_url=proxy.https)
            ydl_opts["proxy"] = proxy.url

        return YouTubeClient(
            transcript_api=YouTubeTranscriptApi(proxy_config=proxy_conf),
            ydl_opts=ydl_opts,
        )

    def _fetch_transcript_sync(
        self,
        client: YouTubeClient,
        video_id: str,
        languages: Sequence[str],
        allow_generated: bool,
    ) -> list[CaptionSnippet]:
        transcript_list = client.transcript_api.list(video_id)
        if allow_generated:
            transcript = transcript_list.find_transcript(languages)
        else:
            transcript = transcript_list.find_manually_created_transcript(languages)

        logger.info(
            f"Video {video_id}: Using {'Automatic' if transcript.is_generated else 'Manual'} "
            f"transcript in '{transcript.language_code}'"
        )
        return [
            CaptionSnippet(text=item.text, start=item.start, duration=item.duration)
            for item in transcript.fetch()
        ]

    async def fetch_transcript(
        self,
        client: YouTubeClient,
        video_id: str,
        languages: Sequence[str],
        allow_generated: bool = True,
    ) -> list[CaptionSnippet]:
        return await asyncio.to_thread(
            self._fetch_transcript_sync, client, video_id, languages, allow_generated
        )

    def _fetch_metadata_sync(self, client: YouTubeClient, video_id: str) -> Dict[str, Any]:
        with YoutubeDL(client.ydl_opts) as ydl:
            return ydl.extract_info(WATCH_URL.format(video_id=video_id), download=False)

    async def fetch_metadata(self, client: YouTubeClient, video_id: str) -> VideoDetails:
        info = await asyncio.to_thread(self._fetch_metadata_sync, client, video_id)
        if not info:
            raise ValueError(f"No info returned from yt-dlp for video {video_id}")

        view_count = info.get("view_count")
        return VideoDetails(
            title=info.get("title") or "",
            author=info.get("uploader") or info.get("channel") or "",
            view_count="" if view_count is None else str(view_count),
        )
