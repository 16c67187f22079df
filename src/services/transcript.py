from typing import Any, Dict, Optional, Tuple
from src.core.errors import MissingVideoId
from src.core.video import VideoSource
from src.models.response import (
    AvailableResponse,
    AvailableTranscript,
    ErrorResponse,
    TranscriptResponse,
    UnavailableResponse,
)
from src.providers.youtube import YouTubeProvider
from src.services.summarizer import SummarizerService
from src.utils.chunker import Chunker
from src.utils.logger import logger

INTERNAL_ERROR_MESSAGE = "Runtime safe error handled"

class TranscriptService:
    def __init__(self, provider: VideoSource = None, chunker: Chunker = None, summarizer: SummarizerService = None):
        self.provider = provider or YouTubeProvider()
        self.chunker = chunker or Chunker()
        self.summarizer = summarizer or SummarizerService()

    def get_transcript(self, url: Optional[str] = None, video_id: Optional[str] = None) -> TranscriptResponse:
        """Run the lookup pipeline. Raises MissingVideoId when no id can be resolved."""
        vid = self.provider.resolve_video_id(url=url, video_id=video_id)

        transcript = self.provider.get_transcript(vid)
        if transcript is None:
            logger.info(f"Transcript unavailable for {vid}")
            return UnavailableResponse(video_id=vid)

        text = self.chunker.build_text(transcript.segments)
        stats = self.chunker.build_stats(text.full, transcript.segments)
        logger.info(f"Assembled {stats.segments} segments into {len(text.paragraphs)} paragraphs ({stats.words} words)")

        return AvailableResponse(
            video_id=vid,
            transcript=AvailableTranscript(
                language=transcript.language,
                stats=stats,
                text=text,
                segments=transcript.segments
            ),
            summary=self.summarizer.summarize(text.full)
        )

    def handle(self, url: Optional[str] = None, video_id: Optional[str] = None) -> Tuple[int, Dict[str, Any]]:
        """Outermost boundary: map every outcome to an HTTP status and a JSON-ready dict."""
        try:
            result = self.get_transcript(url=url, video_id=video_id)
        except MissingVideoId as e:
            logger.warning(f"Rejected request: {e}")
            return 400, ErrorResponse(error=str(e)).model_dump()
        except Exception:
            logger.exception("Unhandled error while building transcript response")
            return 500, ErrorResponse(error=INTERNAL_ERROR_MESSAGE).model_dump()
        return 200, result.model_dump(by_alias=True)
