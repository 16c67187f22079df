import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from src.core.errors import MissingVideoId
from src.providers.youtube import YouTubeProvider, decode_caption_text, extract_video_id, parse_timedtext

CAPTION_LIST = '<transcript_list><track id="0" name="" lang_code="en" lang_original="English"/><track id="1" lang_code="de"/></transcript_list>'

@pytest.mark.parametrize("url", [
    "https://youtu.be/dQw4w9WgXcQ",
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=5",
    "https://www.youtube.com/shorts/dQw4w9WgXcQ",
    "https://m.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
])
def test_extract_video_id(url):
    assert extract_video_id(url) == "dQw4w9WgXcQ"

def test_extract_video_id_rejects_short_ids_and_other_urls():
    assert extract_video_id("https://youtu.be/abc") is None
    assert extract_video_id("https://example.com/video/dQw4w9WgXcQ") is None
    assert extract_video_id("") is None
    assert extract_video_id(None) is None

def test_resolve_prefers_explicit_video_id():
    p = YouTubeProvider()
    assert p.resolve_video_id(url="https://youtu.be/dQw4w9WgXcQ", video_id="abc") == "abc"
    assert p.resolve_video_id(url="https://youtu.be/dQw4w9WgXcQ") == "dQw4w9WgXcQ"

def test_explicit_video_id_is_used_verbatim():
    p = YouTubeProvider()
    assert p.resolve_video_id(url="https://youtu.be/dQw4w9WgXcQ", video_id="   ") == "   "
    assert p.resolve_video_id(video_id=" abc ") == " abc "

def test_resolve_without_identifier_raises():
    p = YouTubeProvider()
    with pytest.raises(MissingVideoId):
        p.resolve_video_id()
    with pytest.raises(MissingVideoId):
        p.resolve_video_id(url="https://vimeo.com/12345", video_id="")

def test_decode_caption_text():
    assert decode_caption_text("Hello &amp; World") == "Hello & World"
    assert decode_caption_text("a &lt;b&gt; c") == "a <b> c"
    assert decode_caption_text("  line one\n\tline   two ") == "line one line two"

def test_decode_is_single_pass_ampersand_first():
    assert decode_caption_text("&amp;lt;") == "<"

def test_parse_timedtext_filters_short_segments():
    segments = parse_timedtext('<text>Hello &amp; World</text><text>ok</text>')
    assert [s.text for s in segments] == ["Hello & World"]

def test_parse_timedtext_keeps_document_order_and_attributes():
    doc = (
        '<?xml version="1.0" encoding="utf-8" ?><transcript>'
        '<text start="0.5" dur="2.1">first line\nwraps</text>'
        '<text start="3" dur="1">   </text>'
        '<text start="4" dur="1">second line</text>'
        '</transcript>'
    )
    assert [s.text for s in parse_timedtext(doc)] == ["first line wraps", "second line"]

def test_parse_timedtext_empty_document():
    assert parse_timedtext("") == []
    assert parse_timedtext("<transcript></transcript>") == []

def test_find_language_uses_first_lang_code(fake_timedtext):
    calls = fake_timedtext(caption_list=CAPTION_LIST)
    p = YouTubeProvider(preferred_lang="auto", timeout=5)
    assert p.find_language("dQw4w9WgXcQ") == "en"
    assert calls[0][1] == {"type": "list", "v": "dQw4w9WgXcQ"}
    assert calls[0][2] == 5

def test_find_language_honours_preferred_language(fake_timedtext):
    fake_timedtext(caption_list=CAPTION_LIST)
    assert YouTubeProvider(preferred_lang="de").find_language("dQw4w9WgXcQ") == "de"
    assert YouTubeProvider(preferred_lang="fr").find_language("dQw4w9WgXcQ") == "en"

def test_list_languages(fake_timedtext):
    fake_timedtext(caption_list=CAPTION_LIST)
    assert YouTubeProvider().list_languages("dQw4w9WgXcQ") == ["en", "de"]

def test_no_lang_code_means_unavailable(fake_timedtext):
    fake_timedtext(caption_list="<transcript_list></transcript_list>")
    p = YouTubeProvider()
    assert p.find_language("dQw4w9WgXcQ") is None
    assert p.get_transcript("dQw4w9WgXcQ") is None

def test_caption_list_http_error_means_unavailable(fake_timedtext):
    fake_timedtext(caption_list=CAPTION_LIST, list_status=404)
    p = YouTubeProvider()
    assert p.list_languages("dQw4w9WgXcQ") is None
    assert p.get_transcript("dQw4w9WgXcQ") is None

def test_network_error_means_unavailable(fake_timedtext):
    fake_timedtext(caption_list=CAPTION_LIST, raise_on="document")
    assert YouTubeProvider().get_transcript("dQw4w9WgXcQ") is None

def test_transcript_http_error_means_unavailable(fake_timedtext):
    fake_timedtext(caption_list=CAPTION_LIST, document="<text>never read</text>", doc_status=500)
    assert YouTubeProvider().get_transcript("dQw4w9WgXcQ") is None

def test_get_transcript(fake_timedtext):
    calls = fake_timedtext(
        caption_list=CAPTION_LIST,
        document="<transcript><text start=\"0\">Never gonna give</text><text>you up</text><text>.</text></transcript>",
    )
    t = YouTubeProvider().get_transcript("dQw4w9WgXcQ")
    assert t.video_id == "dQw4w9WgXcQ"
    assert t.language == "en"
    assert [s.text for s in t.segments] == ["Never gonna give", "you up"]
    assert calls[1][1] == {"v": "dQw4w9WgXcQ", "lang": "en"}

def test_redirect_status_means_unavailable(fake_timedtext):
    fake_timedtext(caption_list=CAPTION_LIST, list_status=302)
    p = YouTubeProvider()
    assert p.list_languages("dQw4w9WgXcQ") is None
    assert p.get_transcript("dQw4w9WgXcQ") is None

def test_transcript_redirect_status_means_unavailable(fake_timedtext):
    fake_timedtext(caption_list=CAPTION_LIST, document="<text>never read</text>", doc_status=301)
    assert YouTubeProvider().get_transcript("dQw4w9WgXcQ") is None
