from .youtube import CaptionSnippet, VideoDetails, TranscriptSnippet, VideoSummary
from .api import ByIdentifier, ByUrl, TranscriptRequest, TranscriptPayload, WelcomeResponse
from .proxy import ProxyConfig
from .enums import RequestKind
