"""
Application-wide constants.

Grouped into static classes for namespace management and discoverability.
"""


class VideoIdConfig:
    """Constraints on YouTube video identifiers."""
    LENGTH = 11
    EXTRA_CHARS = frozenset("-_")  # Allowed besides ASCII letters and digits


class UrlConfig:
    """Markers recognised when extracting an identifier from a URL."""
    WATCH_MARKER = "youtube.com/watch"
    WATCH_ID_PARAM = "v="
    WATCH_PARAM_DELIMITER = "&"
    SHORT_LINK_MARKER = "youtu.be/"
    QUERY_DELIMITER = "?"


class ViewCountConfig:
    """Magnitude thresholds for abbreviated view counts, largest first."""
    THRESHOLDS = (
        (1_000_000_000, "B"),
        (1_000_000, "M"),
        (1_000, "K"),
    )
    U64_MAX = 2**64 - 1


class TimestampConfig:
    """Bounds for clock-style timestamps."""
    MAX_SECONDS = 2**64 - 1


class CaptionConfig:
    """Caption text clean-up."""
    SPEAKER_CHANGE_MARKER = ">> "


class ProxyLogConfig:
    """How much of the proxy URL may appear in logs."""
    PREVIEW_CHARS = 40
    # URLs longer than this are marked as truncated, even when the preview shows them whole
    ELLIPSIS_AFTER_CHARS = 20
