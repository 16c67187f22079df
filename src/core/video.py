from abc import ABC, abstractmethod
from typing import List, Optional
from src.models.transcript import Transcript

class VideoSource(ABC):
    @abstractmethod
    def resolve_video_id(self, url: Optional[str] = None, video_id: Optional[str] = None) -> str:
        """Return the canonical video id or raise MissingVideoId."""
        pass

    @abstractmethod
    def list_languages(self, video_id: str) -> Optional[List[str]]:
        """List caption language codes; None when the caption list is unreachable."""
        pass

    @abstractmethod
    def get_transcript(self, video_id: str) -> Optional[Transcript]:
        """Get video transcript, or None when no usable captions exist."""
        pass
