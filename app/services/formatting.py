"""
Display formatting for provider output: view counts, timestamps and caption text.
"""
import math
import re

from app.core.constants import CaptionConfig, TimestampConfig, ViewCountConfig

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


def format_view_count(raw: str) -> str:
    """
    Abbreviate a raw view count, e.g. "1500" -> "1.5K", "2000000" -> "2M".

    Non-numeric input is returned unchanged rather than treated as an error.
    """
    if not _UNSIGNED_INT.fullmatch(raw):
        return raw
    count = int(raw)
    if count > ViewCountConfig.U64_MAX:
        return raw

    for threshold, suffix in ViewCountConfig.THRESHOLDS:
        if count >= threshold:
            formatted = f"{count / threshold:.1f}"
            return f"{formatted.removesuffix('.0')}{suffix}"

    return str(count)


def format_timestamp(seconds: float) -> str:
    """Render seconds as MM:SS, or HH:MM:SS once an hour is reached. Fractions are truncated."""
    # saturate like an unsigned cast: NaN and negatives give zero, overflow gives the maximum
    if math.isnan(seconds) or seconds <= 0:
        total = 0
    elif seconds >= TimestampConfig.MAX_SECONDS:
        total = TimestampConfig.MAX_SECONDS
    else:
        total = int(seconds)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)

    if hours > 0:
        return f"{hours:02}:{minutes:02}:{secs:02}"
    return f"{minutes:02}:{secs:02}"


def clean_caption_text(text: str) -> str:
    # ">> " marks a speaker change in some caption tracks
    return text.replace(CaptionConfig.SPEAKER_CHANGE_MARKER, "")
