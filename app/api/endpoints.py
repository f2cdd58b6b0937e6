"""
API endpoint for video transcripts.
"""
from fastapi import APIRouter, Depends
from loguru import logger
import time

from app.models import TranscriptPayload, VideoSummary
from app.services.transcript import TranscriptService
from app.api.dependencies import get_transcript_service


router = APIRouter()


@router.post("/transcript", response_model=VideoSummary)
async def get_transcript(
    payload: TranscriptPayload,
    transcript_service: TranscriptService = Depends(get_transcript_service),
):
    """
    Fetches the transcript and basic metadata of a YouTube video.

    Exactly one of `video_id` or `video_url` must be given.

    Args:
        payload: The request body identifying the video.
        transcript_service: The service handling the business logic.

    Returns:
        VideoSummary: Title, author, abbreviated views and timestamped transcript.
    """
    logger.info(
        f"Incoming transcript request (video_id={payload.video_id!r}, video_url={payload.video_url!r})"
    )

    start_time = time.perf_counter()
    result = await transcript_service.handle(payload)
    duration = time.perf_counter() - start_time
    logger.info(f"Transcript request completed in {duration:.2f}s")
    return result
