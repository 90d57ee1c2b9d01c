from types import SimpleNamespace

import pytest
import requests
from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableLambda

from scriptstyle.errors import TranscriptUnavailableError


class FakeResponse:
    """A canned JSON response, or a non-JSON body when `text` is given."""

    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload if payload is not None else {}
        self._is_json = text is None
        self.text = str(self._payload) if text is None else text

    def json(self):
        if not self._is_json:
            raise requests.JSONDecodeError("Expecting value", self.text, 0)
        return self._payload


class FakeSession:
    """Stands in for requests.Session; answers by endpoint name."""

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append(SimpleNamespace(url=url, params=dict(params or {}), headers=headers, timeout=timeout))
        endpoint = url.rsplit("/", 1)[-1]
        route = self.routes.get(endpoint)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, list):
            return route.pop(0)
        return route or FakeResponse(404, {"error": "no route"})

    def calls_to(self, endpoint):
        return [c for c in self.calls if c.url.endswith("/" + endpoint)]


class FakeTranscriptSource:
    """Returns canned transcripts; video IDs missing from the map fail."""

    def __init__(self, transcripts=None):
        self.transcripts = transcripts or {}
        self.requested = []

    def fetch_transcript(self, video_id):
        self.requested.append(video_id)
        if video_id not in self.transcripts:
            raise TranscriptUnavailableError(video_id, "no captions")
        return self.transcripts[video_id]


class RecordingLLM:
    """Chat model stand-in that records prompts and returns a fixed reply."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []
        self.runnable = RunnableLambda(self._call)

    def _call(self, prompt_value):
        self.calls.append(prompt_value.to_messages())
        if self.error:
            raise self.error
        return AIMessage(content=self.reply)


def channel_payload(channel_id="UCabc123", title="Test Channel", uploads="UUabc123"):
    item = {"id": channel_id, "snippet": {"title": title}, "contentDetails": {"relatedPlaylists": {}}}
    if uploads:
        item["contentDetails"]["relatedPlaylists"]["uploads"] = uploads
    return {"items": [item]}


def playlist_payload(count):
    return {"items": [
        {"snippet": {
            "title": f"Video {i}",
            "publishedAt": f"2024-01-{i + 1:02d}T12:00:00Z",
            "resourceId": {"videoId": f"vid{i}"},
        }}
        for i in range(count)
    ]}


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def fake_transcripts():
    return FakeTranscriptSource


@pytest.fixture
def recording_llm():
    return RecordingLLM


@pytest.fixture
def youtube_payloads():
    return SimpleNamespace(channel=channel_payload, playlist=playlist_payload)
