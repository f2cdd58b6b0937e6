"""
Enums for type-safe values across the application.
"""
from enum import Enum


class RequestKind(str, Enum):
    """How the caller identified the video."""
    IDENTIFIER = "identifier"
    URL = "url"
