"""
Custom exception classes and RFC 7807 error handling.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from fastapi import Request
from fastapi.responses import JSONResponse


class ErrorResponse(BaseModel):
    """RFC 7807 Problem Details response model."""
    type: str
    title: str
    status: int
    detail: str
    instance: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        status_code: int,
        error_type: str,
        title: str,
        detail: str,
    ):
        self.status_code = status_code
        self.error_type = error_type
        self.title = title
        self.detail = detail
        super().__init__(detail)


# =============================================================================
# INPUT ERRORS (caller fault, 400)
# =============================================================================

class InputError(AppException):
    """Invalid request input. Never retried."""

    def __init__(
        self,
        detail: str,
        error_type: str = "https://problems.example.com/bad-request",
    ):
        super().__init__(
            status_code=400,
            error_type=error_type,
            title="Bad Request",
            detail=detail,
        )


class ConflictingInputError(InputError):
    """Both video_id and video_url were supplied."""

    def __init__(
        self,
        detail: str = "Cannot provide both video_id and video_url. Use one or the other.",
    ):
        super().__init__(detail, "https://problems.example.com/conflicting-input")


class MissingInputError(InputError):
    """Neither video_id nor video_url was supplied."""

    def __init__(self, detail: str = "Must provide either video_id or video_url."):
        super().__init__(detail, "https://problems.example.com/missing-input")


class ValidationError(InputError):
    """A video identifier or URL failed validation."""


class LengthError(ValidationError):
    def __init__(self, detail: str = "video_id must be exactly 11 characters"):
        super().__init__(detail, "https://problems.example.com/invalid-video-id")


class CharsetError(ValidationError):
    """The identifier contains characters outside [A-Za-z0-9_-]."""

    def __init__(self, invalid_chars: List[str]):
        self.invalid_chars = invalid_chars
        super().__init__(
            f"video_id contains invalid characters: {invalid_chars}",
            "https://problems.example.com/invalid-video-id",
        )


class UrlParseError(ValidationError):
    def __init__(
        self,
        detail: str = "invalid YouTube URL: could not extract valid video ID",
    ):
        super().__init__(detail, "https://problems.example.com/invalid-url")


class UnsupportedUrlError(ValidationError):
    def __init__(
        self,
        detail: str = "invalid YouTube URL: must be youtube.com/watch or youtu.be URL",
    ):
        super().__init__(detail, "https://problems.example.com/unsupported-url")


# =============================================================================
# PROVIDER ERRORS (server fault, 500)
# =============================================================================

class ProviderError(AppException):
    """The transcript provider failed. Callers may retry externally."""

    def __init__(
        self,
        detail: str,
        error_type: str = "https://problems.example.com/provider-error",
    ):
        super().__init__(
            status_code=500,
            error_type=error_type,
            title="Internal Server Error",
            detail=detail,
        )


class ProviderInitError(ProviderError):
    def __init__(self, detail: str):
        super().__init__(
            f"API init error: {detail}",
            "https://problems.example.com/provider-init",
        )


class TranscriptFetchError(ProviderError):
    def __init__(self, detail: str, has_proxy: bool):
        self.has_proxy = has_proxy
        super().__init__(
            f"Transcript error (proxy={str(has_proxy).lower()}): {detail}",
            "https://problems.example.com/transcript-fetch",
        )


class MetadataFetchError(ProviderError):
    def __init__(self, detail: str):
        super().__init__(
            f"Metadata error: {detail}",
            "https://problems.example.com/metadata-fetch",
        )


def create_error_response(
    request: Request,
    status_code: int,
    error_type: str,
    title: str,
    detail: str,
) -> JSONResponse:
    """Create a RFC 7807 compliant JSON error response."""
    error = ErrorResponse(
        type=error_type,
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
    )
    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(),
        media_type="application/problem+json",
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle AppException and return RFC 7807 response."""
    return create_error_response(
        request=request,
        status_code=exc.status_code,
        error_type=exc.error_type,
        title=exc.title,
        detail=exc.detail,
    )
