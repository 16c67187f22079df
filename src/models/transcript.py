from typing import List
from pydantic import BaseModel

class Segment(BaseModel):
    text: str

class Transcript(BaseModel):
    video_id: str
    language: str
    segments: List[Segment]

class TranscriptStats(BaseModel):
    words: int
    segments: int
    estimated_speaking_minutes: int

class TranscriptText(BaseModel):
    full: str
    paragraphs: List[str]
