import httpx
import pytest

from tests.conftest import gemini_reply

CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "POST, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


def assert_cors(response):
    for name, value in CORS.items():
        assert response.headers[name] == value


def test_summarize_returns_first_candidate(make_client, upstream_calls):
    client = make_client(lambda req: httpx.Response(200, json=gemini_reply("A greeting.")))

    response = client.post("/summarize", json={"text": "Hello world"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"summary": "A greeting."}
    assert_cors(response)
    assert len(upstream_calls) == 1


def test_summarize_ignores_extra_fields(make_client):
    client = make_client(lambda req: httpx.Response(200, json=gemini_reply("ok")))

    response = client.post("/summarize", json={"text": "some text", "lang": "en"})

    assert response.status_code == 200
    assert response.json() == {"summary": "ok"}


def test_empty_text_is_rejected(make_client, upstream_calls):
    client = make_client(lambda req: httpx.Response(200, json=gemini_reply("unused")))

    response = client.post("/summarize", json={"text": "", "other": "value"})

    assert response.status_code == 400
    assert response.text == "Text field is required"
    assert_cors(response)
    assert upstream_calls == []


def test_missing_text_is_rejected(make_client):
    client = make_client(lambda req: httpx.Response(200, json=gemini_reply("unused")))

    response = client.post("/summarize", json={})

    assert response.status_code == 400
    assert response.text == "Text field is required"


def test_null_text_is_rejected_as_missing(make_client):
    client = make_client(lambda req: httpx.Response(200, json=gemini_reply("unused")))

    response = client.post("/summarize", json={"text": None})

    assert response.status_code == 400
    assert response.text == "Text field is required"


def test_malformed_json_is_rejected(make_client, upstream_calls):
    client = make_client(lambda req: httpx.Response(200, json=gemini_reply("unused")))

    response = client.post(
        "/summarize",
        content=b'{"text": "unterminated',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.text == "Invalid request body"
    assert_cors(response)
    assert upstream_calls == []


def test_non_string_text_is_rejected(make_client):
    client = make_client(lambda req: httpx.Response(200, json=gemini_reply("unused")))

    response = client.post("/summarize", json={"text": 42})

    assert response.status_code == 400
    assert response.text == "Invalid request body"


@pytest.mark.parametrize("method", ["GET", "DELETE", "PUT", "PATCH", "HEAD", "TRACE"])
def test_other_methods_are_not_allowed(make_client, upstream_calls, method):
    client = make_client(lambda req: httpx.Response(200, json=gemini_reply("unused")))

    response = client.request(method, "/summarize")

    assert response.status_code == 405
    assert response.headers["allow"] == "POST, OPTIONS"
    # HEAD responses carry no body
    if method != "HEAD":
        assert response.text == "Only POST method is allowed"
    assert_cors(response)
    assert upstream_calls == []


def test_preflight_returns_empty_body(make_client, upstream_calls):
    client = make_client(lambda req: httpx.Response(200, json=gemini_reply("unused")))

    response = client.options(
        "/summarize",
        headers={
            "Origin": "chrome-extension://abcdef",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.content == b""
    assert_cors(response)
    assert upstream_calls == []


def test_upstream_error_is_not_leaked(make_client, caplog):
    client = make_client(
        lambda req: httpx.Response(500, text="quota exceeded for project secret-123")
    )

    response = client.post("/summarize", json={"text": "Hello world"})

    assert response.status_code == 500
    assert response.text == "Failed to generate summary"
    assert "secret-123" not in response.text
    assert_cors(response)
    assert "secret-123" in caplog.text


def test_empty_candidates_is_server_error(make_client):
    client = make_client(lambda req: httpx.Response(200, json={"candidates": []}))

    response = client.post("/summarize", json={"text": "Hello world"})

    assert response.status_code == 500
    assert response.text == "Failed to generate summary"
    assert_cors(response)


def test_network_failure_is_server_error(make_client):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(refuse)

    response = client.post("/summarize", json={"text": "Hello world"})

    assert response.status_code == 500
    assert response.text == "Failed to generate summary"


def test_health_and_root_carry_cors(make_client):
    client = make_client(lambda req: httpx.Response(200, json=gemini_reply("unused")))

    health = client.get("/health")
    root = client.get("/")

    assert health.json() == {"status": "healthy"}
    assert root.json()["services"] == ["summarizer"]
    assert_cors(health)
    assert_cors(root)
