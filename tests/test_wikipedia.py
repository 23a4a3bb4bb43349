# tests/test_wikipedia.py
import json

import pytest
import requests

from daily_knowledge import wikipedia as wk
from daily_knowledge.errors import ErrorKind, JobError


class DummyResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def json(self):
        return json.loads(self.text)


def _wiki_body(titles):
    return json.dumps({"query": {"random": [{"id": i, "ns": 0, "title": t} for i, t in enumerate(titles)]}})


def test_fetch_random_titles_preserves_order(monkeypatch):
    titles = [f"Article {i}" for i in range(25)]
    captured = {}

    def fake_get(url, params=None, headers=None, timeout=None):
        captured["url"] = url
        captured["params"] = params
        captured["headers"] = headers
        captured["timeout"] = timeout
        return DummyResponse(_wiki_body(titles))

    monkeypatch.setattr(wk.requests, "get", fake_get)

    result = wk.fetch_random_titles()

    assert result == titles
    assert len(result) == 25
    assert captured["url"] == wk.WIKI_API_URL
    assert captured["params"]["rnlimit"] == 25
    assert captured["params"]["rnnamespace"] == 0
    assert captured["params"]["list"] == "random"
    assert captured["headers"]["User-Agent"] == wk.USER_AGENT
    assert captured["timeout"] > 0


def test_fetch_random_titles_uses_session(monkeypatch):
    class DummySession:
        def __init__(self):
            self.calls = 0

        def get(self, url, params=None, headers=None, timeout=None):
            self.calls += 1
            return DummyResponse(_wiki_body(["A", "B"]))

    def forbidden_get(*args, **kwargs):
        raise AssertionError("module-level requests.get must not be used")

    monkeypatch.setattr(wk.requests, "get", forbidden_get)
    session = DummySession()

    assert wk.fetch_random_titles(limit=2, session=session, timeout=1) == ["A", "B"]
    assert session.calls == 1


def test_fetch_random_titles_network_error(monkeypatch):
    calls = {"n": 0}

    def fake_get(*args, **kwargs):
        calls["n"] += 1
        raise requests.ConnectionError("down")

    monkeypatch.setattr(wk.requests, "get", fake_get)

    with pytest.raises(JobError) as exc_info:
        wk.fetch_random_titles()

    assert exc_info.value.kind is ErrorKind.NETWORK
    # без ретраев
    assert calls["n"] == 1


def test_fetch_random_titles_bad_json(monkeypatch):
    monkeypatch.setattr(wk.requests, "get", lambda *a, **k: DummyResponse("<html>oops</html>"))

    with pytest.raises(JobError) as exc_info:
        wk.fetch_random_titles()

    assert exc_info.value.kind is ErrorKind.DECODE


@pytest.mark.parametrize(
    "body",
    [
        {"batchcomplete": ""},
        {"query": {}},
        {"query": {"random": "nope"}},
        {"query": {"random": [{"id": 1}]}},
        [],
    ],
)
def test_fetch_random_titles_shape_mismatch(monkeypatch, body):
    monkeypatch.setattr(wk.requests, "get", lambda *a, **k: DummyResponse(json.dumps(body)))

    with pytest.raises(JobError) as exc_info:
        wk.fetch_random_titles()

    assert exc_info.value.kind is ErrorKind.SHAPE_MISMATCH


def test_fetch_random_titles_deeply_nested_json(monkeypatch):
    monkeypatch.setattr(wk.requests, "get", lambda *a, **k: DummyResponse("[" * 100000))

    with pytest.raises(JobError) as exc_info:
        wk.fetch_random_titles()

    assert exc_info.value.kind is ErrorKind.DECODE
