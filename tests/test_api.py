import pytest
from fastapi.testclient import TestClient

from veospark.api.dependencies import get_generator, get_store
from veospark.main import app
from veospark.services.history_store import HistoryStore

from conftest import FakeGenerator, reply_text, sample_reply

REQUEST_BODY = {
    "request": {
        "topic": "a cat in rain",
        "style": "Film Noir",
        "aspectRatio": "16:9",
        "motion": ["Drone Flyover"],
        "totalDuration": "10s",
        "cutDuration": "5s",
    },
    "language": "en",
}


@pytest.fixture
def generator():
    return FakeGenerator(reply_text(sample_reply(shot_count=2)))


@pytest.fixture
def client(db_session, generator):
    app.dependency_overrides[get_store] = lambda: HistoryStore(db_session)
    app.dependency_overrides[get_generator] = lambda: generator
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_generate_list_and_delete(client):
    response = client.post("/api/v1/prompts/", json=REQUEST_BODY)
    assert response.status_code == 201
    body = response.json()
    assert len(body["shots"]) == 2
    assert {s["duration"] for s in body["shots"]} == {"5s"}
    assert body["originalRequest"]["motion"] == ["Drone Flyover"]
    assert body["productionNote"]["directorVision"] == "Quiet noir"

    listed = client.get("/api/v1/prompts/").json()
    assert [r["id"] for r in listed] == [body["id"]]

    combined = client.get(f"/api/v1/prompts/{body['id']}/combined").json()
    assert "--ar 16:9" in combined["prompt"]

    assert client.delete(f"/api/v1/prompts/{body['id']}").status_code == 204
    assert client.get("/api/v1/prompts/").json() == []
    assert client.delete(f"/api/v1/prompts/{body['id']}").status_code == 404


def test_parse_failure_returns_502_and_keeps_history(client, generator):
    generator.reply = '{"title": "cut off'
    response = client.post("/api/v1/prompts/", json=REQUEST_BODY)

    assert response.status_code == 502
    assert response.json()["detail"]["category"] == "parse"
    assert client.get("/api/v1/prompts/").json() == []


def test_unexpected_call_failure_returns_502(client, generator):
    generator.reply = RuntimeError("credentials missing")
    response = client.post("/api/v1/prompts/", json=REQUEST_BODY)

    assert response.status_code == 502
    assert response.json()["detail"]["category"] == "service"


def test_blank_topic_is_rejected(client):
    body = {**REQUEST_BODY, "request": {**REQUEST_BODY["request"], "topic": "   "}}
    assert client.post("/api/v1/prompts/", json=body).status_code == 422


def test_empty_motion_is_rejected(client):
    body = {**REQUEST_BODY, "request": {**REQUEST_BODY["request"], "motion": []}}
    assert client.post("/api/v1/prompts/", json=body).status_code == 422


def test_language_switch_falls_back_but_still_switches(client, generator):
    client.post("/api/v1/prompts/", json=REQUEST_BODY)
    before = client.get("/api/v1/prompts/").json()
    assert client.get("/api/v1/language/").json() == {"language": "ko"}

    generator.reply = RuntimeError("translation service down")
    response = client.post("/api/v1/language/switch", json={"topic": "a cat", "details": ""})

    assert response.status_code == 200
    body = response.json()
    assert body["language"] == "en"
    assert body["degraded"] is True
    assert body["topic"] == "a cat"
    assert body["results"] == before
    assert client.get("/api/v1/language/").json() == {"language": "en"}


def test_suggestions(client, generator):
    generator.reply = "Neon reflections on wet asphalt."
    body = {"topic": "a cat in rain", "style": "Film Noir", "language": "en", "currentDetails": "moody"}
    response = client.post("/api/v1/suggestions/details", json=body).json()

    assert response["suggestion"] == "Neon reflections on wet asphalt."
    assert response["details"] == "moody, Neon reflections on wet asphalt."
    assert response["degraded"] is False


def test_options(client):
    body = client.get("/api/v1/options/").json()
    assert "Cinematic" in body["styles"]
    assert "21:9" in body["aspectRatios"]
    assert "Dolly Zoom" in body["motionCategories"]["dynamic"]
    assert body["languages"] == ["en", "ko"]
