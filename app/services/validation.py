"""
Validation of YouTube video identifiers and extraction of identifiers from URLs.
"""
import string

from app.core.constants import UrlConfig, VideoIdConfig
from app.core.exceptions import (
    CharsetError,
    LengthError,
    UnsupportedUrlError,
    UrlParseError,
    ValidationError,
)

_ALLOWED_CHARS = frozenset(string.ascii_letters + string.digits) | VideoIdConfig.EXTRA_CHARS


def validate_video_id(video_id: str) -> None:
    """
    Check a raw identifier against YouTube's constraints.

    Args:
        video_id: The candidate identifier.

    Raises:
        LengthError: If the identifier is not exactly 11 characters long.
        CharsetError: If it contains characters outside [A-Za-z0-9_-]. The
            offending characters are reported in scan order, duplicates kept.
    """
    if len(video_id) != VideoIdConfig.LENGTH:
        raise LengthError()

    invalid_chars = [c for c in video_id if c not in _ALLOWED_CHARS]
    if invalid_chars:
        raise CharsetError(invalid_chars)


def _is_valid(video_id: str) -> bool:
    try:
        validate_video_id(video_id)
    except ValidationError:
        return False
    return True


def extract_video_id(url: str) -> str:
    """
    Extract the video identifier from a watch page or short-link URL.

    Only the first matching marker is tried: a watch URL whose `v=` parameter
    is missing or invalid fails even if a short-link marker is also present.

    Args:
        url: The URL as supplied by the caller; surrounding whitespace is ignored.

    Returns:
        The validated 11-character identifier.

    Raises:
        UrlParseError: If a recognised URL holds no valid identifier.
        UnsupportedUrlError: If the URL is neither a watch page nor a short link.
    """
    url = url.strip()

    # https://www.youtube.com/watch?v=VIDEO_ID
    if UrlConfig.WATCH_MARKER in url:
        parts = url.split(UrlConfig.WATCH_ID_PARAM)
        if len(parts) > 1:
            video_id = parts[1].split(UrlConfig.WATCH_PARAM_DELIMITER)[0]
            if _is_valid(video_id):
                return video_id
        raise UrlParseError()

    # https://youtu.be/VIDEO_ID
    if UrlConfig.SHORT_LINK_MARKER in url:
        parts = url.split(UrlConfig.SHORT_LINK_MARKER)
        video_id = parts[1].split(UrlConfig.QUERY_DELIMITER)[0]
        if _is_valid(video_id):
            return video_id
        raise UrlParseError()

    raise UnsupportedUrlError()
