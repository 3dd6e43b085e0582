import json

import httpx
import pytest
import respx

GEMINI_HOST = "generativelanguage.googleapis.com"

DRAFT = {
    "title": "Why Static Sites Still Matter",
    "meta": "A look at static sites in 2024.",
    "subheading": "Fast, cheap and secure",
    "excerpt": "Static sites remain a great default.",
    "body": "## Speed\n\nNothing beats a CDN.",
}


def gemini_reply(text):
    return httpx.Response(
        200,
        json={"candidates": [{"content": {"parts": [{"text": text}]}}]},
    )


@pytest.fixture
def gemini(app):
    app.config["GEMINI_API_KEY"] = "test-key"
    with respx.mock(assert_all_called=False) as router:
        yield router.post(host=GEMINI_HOST)


def test_generates_a_blog_draft(owner_client, gemini):
    gemini.mock(return_value=gemini_reply(json.dumps(DRAFT)))

    response = owner_client.post("/dashboard/content/generate", json={"prompt": "  static sites  "})

    assert response.status_code == 200
    assert response.get_json() == DRAFT

    request = gemini.calls.last.request
    assert request.url.params["key"] == "test-key"
    assert "Topic: static sites" in json.loads(request.content)["contents"][0]["parts"][0]["text"]


def test_json_embedded_in_prose_is_recovered(owner_client, gemini):
    gemini.mock(return_value=gemini_reply(f"Sure! Here it is:\n```json\n{json.dumps(DRAFT)}\n```"))

    response = owner_client.post("/dashboard/content/generate", json={"prompt": "static sites"})

    assert response.status_code == 200
    assert response.get_json()["title"] == DRAFT["title"]


@pytest.mark.parametrize(
    "reply",
    [
        httpx.Response(500, text="upstream exploded"),
        gemini_reply("not json at all"),
        gemini_reply(json.dumps({**DRAFT, "body": ""})),
        httpx.Response(200, json={"candidates": []}),
    ],
)
def test_failed_generation_is_a_bad_gateway(owner_client, gemini, reply):
    gemini.mock(return_value=reply)

    response = owner_client.post("/dashboard/content/generate", json={"prompt": "static sites"})

    assert response.status_code == 502


def test_network_failure_is_a_bad_gateway(owner_client, gemini):
    gemini.mock(side_effect=httpx.ConnectTimeout("timed out"))

    response = owner_client.post("/dashboard/content/generate", json={"prompt": "static sites"})

    assert response.status_code == 502


def test_missing_api_key(app, owner_client):
    app.config["GEMINI_API_KEY"] = None

    with respx.mock(assert_all_called=False) as router:
        response = owner_client.post("/dashboard/content/generate", json={"prompt": "static sites"})

    assert response.status_code == 502
    assert not router.calls


def test_prompt_is_required(owner_client, gemini):
    response = owner_client.post("/dashboard/content/generate", json={"prompt": "   "})

    assert response.status_code == 400
    assert not gemini.called


def test_generation_requires_a_session(client):
    assert client.post("/dashboard/content/generate", json={"prompt": "x"}).status_code == 302
