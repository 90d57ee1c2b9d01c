from types import SimpleNamespace

import pytest

from scriptstyle.api import create_app
from scriptstyle.config import Settings
from scriptstyle.pipeline import StylePipeline
from scriptstyle.youtube_client import YouTubeClient


@pytest.fixture
def fakes(fake_session, fake_response, youtube_payloads, fake_transcripts, recording_llm):
    return SimpleNamespace(
        session=fake_session({
            "channels": fake_response(200, youtube_payloads.channel(title="Science Hour")),
            "playlistItems": fake_response(200, youtube_payloads.playlist(3)),
        }),
        source=fake_transcripts({"vid0": "one", "vid1": "two", "vid2": "three"}),
        style_llm=recording_llm("## Tone\n- Upbeat, curious and fast paced\n"),
        script_llm=recording_llm("Hey science fans!"),
    )


@pytest.fixture
def client(fakes):
    pipeline = StylePipeline(
        youtube=YouTubeClient(api_key="k", session=fakes.session),
        transcripts=fakes.source,
        style_llm=fakes.style_llm.runnable,
        script_llm=fakes.script_llm.runnable,
    )
    app = create_app(settings=Settings(), pipeline=pipeline, transcript_source=fakes.source)
    app.config["TESTING"] = True
    return app.test_client()


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_analyze_success(client, fakes):
    r = client.post("/analyze", json={"channelUrl": "https://www.youtube.com/@sciencehour"})

    assert r.status_code == 200
    assert r.get_json() == {
        "channelTitle": "Science Hour",
        "videosAnalyzed": 3,
        "styleGuide": "## Tone\n- Upbeat, curious and fast paced\n",
        "characteristics": ["Upbeat, curious and fast paced"],
    }


@pytest.mark.parametrize("body", [{}, {"channelUrl": ""}, {"channelUrl": 42}])
def test_analyze_missing_url(client, fakes, body):
    r = client.post("/analyze", json=body)
    assert r.status_code == 400
    assert r.get_json() == {"error": "Channel URL is required"}
    assert fakes.session.calls == []


def test_analyze_invalid_url(client):
    r = client.post("/analyze", json={"channelUrl": "https://example.com/watch/this"})
    assert r.status_code == 400
    assert "Invalid channel URL" in r.get_json()["error"]


def test_analyze_channel_not_found(client, fakes, fake_response):
    fakes.session.routes["channels"] = fake_response(200, {"items": []})
    r = client.post("/analyze", json={"channelUrl": "@ghost"})
    assert r.status_code == 404
    assert r.get_json() == {"error": "Channel not found"}


def test_analyze_channel_fetch_failure(client, fakes, fake_response):
    fakes.session.routes["channels"] = fake_response(400, {"error": "badRequest"})
    r = client.post("/analyze", json={"channelUrl": "UCabc123"})
    assert r.status_code == 400
    assert "Make sure the channel exists" in r.get_json()["error"]


def test_analyze_no_captions(client, fakes):
    fakes.source.transcripts.clear()
    r = client.post("/analyze", json={"channelUrl": "@sciencehour"})
    assert r.status_code == 400
    assert "captions enabled" in r.get_json()["error"]
    assert fakes.style_llm.calls == []


def test_analyze_llm_failure(client, fakes):
    fakes.style_llm.error = RuntimeError("boom")
    r = client.post("/analyze", json={"channelUrl": "@sciencehour"})
    assert r.status_code == 500
    assert r.get_json() == {"error": "Failed to analyze style with AI"}


def test_generate_success(client, fakes):
    r = client.post("/generate", json={"styleAnalysis": "Tone: upbeat", "topic": "Volcanoes"})
    assert r.status_code == 200
    assert r.get_json() == {"script": "Hey science fans!"}
    assert "Volcanoes" in fakes.script_llm.calls[0][1].content


@pytest.mark.parametrize("body", [
    {"styleAnalysis": "Tone: upbeat", "topic": ""},
    {"styleAnalysis": "Tone: upbeat"},
    {"topic": "Volcanoes"},
    {"styleAnalysis": "   ", "topic": "Volcanoes"},
])
def test_generate_missing_fields(client, fakes, body):
    r = client.post("/generate", json=body)
    assert r.status_code == 400
    assert r.get_json() == {"error": "Style analysis and topic are required"}
    assert fakes.script_llm.calls == []


def test_generate_llm_failure(client, fakes):
    fakes.script_llm.error = RuntimeError("boom")
    r = client.post("/generate", json={"styleAnalysis": "Tone: upbeat", "topic": "Volcanoes"})
    assert r.status_code == 500
    assert r.get_json() == {"error": "Failed to generate script"}


def test_transcript_success(client):
    r = client.get("/transcript?videoId=vid1")
    assert r.status_code == 200
    assert r.get_json() == {"transcript": "two"}


def test_transcript_missing_id(client):
    r = client.get("/transcript")
    assert r.status_code == 400
    assert r.get_json() == {"error": "Video ID is required"}


def test_transcript_unavailable(client):
    r = client.get("/transcript?videoId=nope")
    assert r.status_code == 404
    assert r.get_json() == {"error": "Could not fetch transcript for this video"}


def test_missing_openai_key_is_500():
    app = create_app(settings=Settings(youtube_api_key="k"))
    r = app.test_client().post("/analyze", json={"channelUrl": "@sciencehour"})
    assert r.status_code == 500
    assert "OPENAI_API_KEY" in r.get_json()["error"]
