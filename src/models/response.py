from typing import List, Literal, Union
from pydantic import BaseModel, ConfigDict, Field
from src.config import settings
from src.models.summary import Summary
from src.models.transcript import Segment, TranscriptStats, TranscriptText

def _developer() -> str:
    return settings.DEVELOPER

class UnavailableTranscript(BaseModel):
    available: Literal[False] = False

class AvailableTranscript(BaseModel):
    available: Literal[True] = True
    language: str
    stats: TranscriptStats
    text: TranscriptText
    segments: List[Segment]

class ErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str
    developer: str = Field(default_factory=_developer)

class UnavailableResponse(BaseModel):
    """No caption track could be found or read; still a successful lookup."""
    model_config = ConfigDict(populate_by_name=True)

    success: Literal[True] = True
    video_id: str = Field(alias="videoId")
    transcript: UnavailableTranscript = Field(default_factory=UnavailableTranscript)
    developer: str = Field(default_factory=_developer)

class AvailableResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: Literal[True] = True
    video_id: str = Field(alias="videoId")
    transcript: AvailableTranscript
    summary: Summary
    developer: str = Field(default_factory=_developer)

TranscriptResponse = Union[AvailableResponse, UnavailableResponse]
