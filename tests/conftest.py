import pytest
import requests

class FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200):
        self.text = text
        self.status_code = status_code

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

@pytest.fixture
def fake_timedtext(monkeypatch):
    """Patch requests.get to answer the caption-list and transcript calls.

    Every call is recorded in the returned list as (url, params, timeout).
    """
    def install(caption_list=None, document=None, list_status=200, doc_status=200, raise_on=None):
        calls = []

        def fake_get(url, params=None, headers=None, timeout=None):
            params = params or {}
            calls.append((url, dict(params), timeout))
            kind = "list" if params.get("type") == "list" else "document"
            if raise_on == kind:
                raise requests.ConnectionError("boom")
            if kind == "list":
                return FakeResponse(caption_list or "", list_status)
            return FakeResponse(document or "", doc_status)

        monkeypatch.setattr(requests, "get", fake_get)
        return calls

    return install
