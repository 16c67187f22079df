import math
from typing import List
from src.config import settings
from src.models.transcript import Segment, TranscriptStats, TranscriptText

def count_words(text: str) -> int:
    return len(text.split())

def estimate_speaking_minutes(words: int, rate: int = None) -> int:
    rate = settings.SPEAKING_RATE_WPM if rate is None else rate
    return math.ceil(words / rate)

class Chunker:
    def __init__(self, paragraph_size: int = None, speaking_rate: int = None):
        self.paragraph_size = settings.PARAGRAPH_SIZE if paragraph_size is None else paragraph_size
        self.speaking_rate = settings.SPEAKING_RATE_WPM if speaking_rate is None else speaking_rate
        if self.paragraph_size <= 0:
            raise ValueError(f"paragraph_size must be positive, got {self.paragraph_size}")
        if self.speaking_rate <= 0:
            raise ValueError(f"speaking_rate must be positive, got {self.speaking_rate}")

    def chunk(self, segments: List[Segment]) -> List[List[Segment]]:
        """Split segments into consecutive groups of paragraph_size; the last may be shorter."""
        size = self.paragraph_size
        return [segments[i:i + size] for i in range(0, len(segments), size)]

    def paragraphs(self, segments: List[Segment]) -> List[str]:
        out = []
        for group in self.chunk(segments):
            paragraph = " ".join(s.text for s in group).strip()
            if paragraph:
                out.append(paragraph)
        return out

    def build_text(self, segments: List[Segment]) -> TranscriptText:
        return TranscriptText(
            full=" ".join(s.text for s in segments),
            paragraphs=self.paragraphs(segments)
        )

    def build_stats(self, full_text: str, segments: List[Segment]) -> TranscriptStats:
        words = count_words(full_text)
        return TranscriptStats(
            words=words,
            segments=len(segments),
            estimated_speaking_minutes=estimate_speaking_minutes(words, self.speaking_rate)
        )
