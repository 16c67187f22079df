import re
import requests
from typing import List, Optional
from src.core.errors import MissingVideoId
from src.core.video import VideoSource
from src.models.transcript import Transcript, Segment
from src.utils.logger import logger
from src.config import settings

VIDEO_ID_RE = re.compile(r"(youtu\.be/|v=|/shorts/)([a-zA-Z0-9_-]{11})")
LANG_CODE_RE = re.compile(r'lang_code="([^"]+)"')
TEXT_TAG_RE = re.compile(r"<text[^>]*>(.*?)</text>", re.DOTALL)
WHITESPACE_RE = re.compile(r"\s+")


def extract_video_id(url: Optional[str]) -> Optional[str]:
    """Pull the 11-character id out of a youtu.be, watch?v= or /shorts/ URL."""
    if not url:
        return None
    m = VIDEO_ID_RE.search(url)
    return m.group(2) if m else None


def decode_caption_text(raw: str) -> str:
    # Single pass, ampersand first: "&amp;lt;" ends up as "<".
    text = raw.replace("&amp;", "&").replace("&lt;", "<").replace("&gt;", ">")
    return WHITESPACE_RE.sub(" ", text).strip()


def parse_timedtext(document: str, min_length: int = None) -> List[Segment]:
    """Extract caption segments from a timedtext XML document, in document order.

    Segments whose decoded text is ``min_length`` characters or shorter are
    dropped (empty or punctuation-only captions).
    """
    if min_length is None:
        min_length = settings.MIN_SEGMENT_LENGTH
    segments = []
    for m in TEXT_TAG_RE.finditer(document or ""):
        text = decode_caption_text(m.group(1))
        if len(text) > min_length:
            segments.append(Segment(text=text))
    return segments


class YouTubeProvider(VideoSource):
    def __init__(self, preferred_lang: Optional[str] = None, timeout: Optional[float] = None):
        self.preferred_lang = preferred_lang or settings.TRANSCRIPT_LANG
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.headers = {'User-Agent': settings.USER_AGENT}

    def resolve_video_id(self, url: Optional[str] = None, video_id: Optional[str] = None) -> str:
        if video_id:
            return video_id
        found = extract_video_id(url)
        if not found:
            raise MissingVideoId()
        return found

    def _get(self, endpoint: str, params: dict) -> Optional[str]:
        try:
            resp = requests.get(endpoint, params=params, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Request to {endpoint} failed: {e}")
            return None
        if not 200 <= resp.status_code < 300:
            logger.warning(f"{endpoint} answered HTTP {resp.status_code} for {params}")
            return None
        return resp.text

    def list_languages(self, video_id: str) -> Optional[List[str]]:
        body = self._get(settings.CAPTION_LIST_URL, {"type": "list", "v": video_id})
        if body is None:
            return None
        return LANG_CODE_RE.findall(body)

    def find_language(self, video_id: str) -> Optional[str]:
        languages = self.list_languages(video_id)
        if not languages:
            return None
        if self.preferred_lang != "auto" and self.preferred_lang in languages:
            return self.preferred_lang
        return languages[0]

    def fetch_caption_document(self, video_id: str, lang: str) -> Optional[str]:
        return self._get(settings.TRANSCRIPT_URL, {"v": video_id, "lang": lang})

    def get_transcript(self, video_id: str) -> Optional[Transcript]:
        logger.info(f"Looking up caption tracks for {video_id}...")
        lang = self.find_language(video_id)
        if not lang:
            logger.warning(f"No caption track listed for {video_id}")
            return None

        logger.info(f"Fetching '{lang}' captions for {video_id}...")
        document = self.fetch_caption_document(video_id, lang)
        if document is None:
            return None

        segments = parse_timedtext(document)
        if not segments:
            logger.warning(f"Caption document for {video_id} contained no usable text")
            return None
        return Transcript(video_id=video_id, language=lang, segments=segments)
