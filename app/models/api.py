"""
Pydantic models for API request/response schemas.
"""
from typing import Annotated, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.core.exceptions import ConflictingInputError, MissingInputError
from app.models.enums import RequestKind


class ByIdentifier(BaseModel):
    """The caller supplied a bare video identifier."""

    kind: Literal[RequestKind.IDENTIFIER] = RequestKind.IDENTIFIER
    video_id: str

    model_config = ConfigDict(frozen=True)


class ByUrl(BaseModel):
    """The caller supplied a full video URL."""

    kind: Literal[RequestKind.URL] = RequestKind.URL
    url: str

    model_config = ConfigDict(frozen=True)


TranscriptRequest = Annotated[Union[ByIdentifier, ByUrl], Field(discriminator="kind")]


class TranscriptPayload(BaseModel):
    """
    Inbound body of POST /transcript.

    Exactly one of the two fields must be set; `to_request` turns the payload
    into a TranscriptRequest or raises. Unknown keys are ignored.
    """

    video_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("video_id", "identifier")
    )
    video_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("video_url", "url")
    )

    def to_request(self) -> TranscriptRequest:
        if self.video_id is not None and self.video_url is not None:
            raise ConflictingInputError()
        if self.video_id is not None:
            return ByIdentifier(video_id=self.video_id)
        if self.video_url is not None:
            return ByUrl(url=self.video_url)
        raise MissingInputError()


class WelcomeResponse(BaseModel):
    """Response model for the root endpoint."""

    message: str

    model_config = ConfigDict(frozen=True)
