"""Integration tests for the HTTP contract of the application."""

import json

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock, patch

from bfhl.main import app
from bfhl.config import Settings, get_settings
from bfhl.dependencies import get_http_client

EMAIL = "dev@example.com"


@pytest.fixture
def mock_http_client() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def settings() -> Settings:
    return Settings(OFFICIAL_EMAIL=EMAIL, AI_API_KEY="")


@pytest.fixture
def client(settings, mock_http_client):
    # No lifespan: the shared HTTP client is replaced by a mock.
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_client] = lambda: mock_http_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def post_json(client: TestClient, body, **kwargs):
    return client.post(
        "/bfhl",
        content=json.dumps(body),
        headers={"content-type": "application/json", **kwargs.pop("headers", {})},
        **kwargs,
    )


def provider_reply(status_code: int = 200, json_data=None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.json.return_value = json_data
    return response


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["is_success"] is True
    assert response.json()["status"] == "ok"


@pytest.mark.parametrize(
    "body,expected",
    [
        ({"fibonacci": 5}, [0, 1, 1, 2, 3]),
        ({"prime": [1, 2, 3, 4, 5, 6, 7]}, [2, 3, 5, 7]),
        ({"prime": []}, []),
        ({"lcm": [4, 6]}, 12),
        ({"hcf": [12, 18, 24]}, 6),
    ],
)
def test_numeric_operations(client, body, expected):
    response = post_json(client, body)

    assert response.status_code == 200
    assert response.json() == {"is_success": True, "official_email": EMAIL, "data": expected}


@pytest.mark.parametrize("body", [{}, {"a": 1, "b": 2}])
def test_key_count_errors(client, body):
    response = post_json(client, body)

    assert response.status_code == 400
    assert response.json()["is_success"] is False
    assert "exactly one key" in response.json()["error"]
    assert "data" not in response.json()


@pytest.mark.parametrize("body", [{"fibonacci": -1}, {"hcf": []}, {"prime": "2,3"}, {"AI": ""}])
def test_invalid_input(client, body):
    response = post_json(client, body)

    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid '")


def test_unknown_operation(client):
    response = post_json(client, {"sqrt": 4})

    assert response.status_code == 400
    assert "Unknown operation" in response.json()["error"]


def test_array_body_is_invalid(client):
    response = post_json(client, [{"fibonacci": 5}])

    assert response.status_code == 400
    assert response.json()["error"] == "Request body must be a JSON object"


def test_malformed_json(client):
    response = client.post("/bfhl", content="{oops", headers={"content-type": "application/json"})

    assert response.status_code == 400
    assert response.json()["error"] == "Request body is not valid JSON"


def test_wrong_content_type(client):
    response = client.post("/bfhl", content='{"fibonacci": 5}', headers={"content-type": "text/plain"})

    assert response.status_code == 415


def test_validation_order(client):
    """Content type is checked before the body, the body before key count."""
    assert client.post("/bfhl", content="{oops", headers={"content-type": "text/plain"}).status_code == 415

    response = post_json(client, [])
    assert response.status_code == 400
    assert "JSON object" in response.json()["error"]

    response = post_json(client, {"fibonacci": -1, "prime": "x"})
    assert "exactly one key" in response.json()["error"]


def test_ai_not_configured(client, mock_http_client):
    response = post_json(client, {"AI": "What is the capital of France?"})

    assert response.status_code == 501
    assert response.json()["is_success"] is False
    mock_http_client.post.assert_not_called()


def test_ai_provider_failure(client, settings, mock_http_client):
    configured = settings.model_copy(update={"AI_API_KEY": "sk-secret-123"})
    app.dependency_overrides[get_settings] = lambda: configured
    mock_http_client.post.return_value = provider_reply(status_code=500, text="upstream broke for sk-secret-123")

    response = post_json(client, {"AI": "What is the capital of France?"})

    assert response.status_code == 502
    assert "500" in response.json()["error"]
    assert "sk-secret-123" not in response.text


def test_ai_success_with_header_override(client, mock_http_client):
    mock_http_client.post.return_value = provider_reply(
        json_data={"candidates": [{"content": {"parts": [{"text": "Paris\n"}]}}]}
    )

    response = post_json(
        client,
        {"ai": "What is the capital of France?"},
        headers={"X-AI-API-Key": "header-key"},
    )

    assert response.status_code == 200
    assert response.json()["data"] == "Paris"
    assert mock_http_client.post.call_args.kwargs["params"] == {"key": "header-key"}


def test_ai_query_override_uses_generic_shape(client, mock_http_client):
    mock_http_client.post.return_value = provider_reply(json_data={"output": " Paris "})

    response = post_json(
        client,
        {"AI": "What is the capital of France?"},
        params={"ai_url": "https://llm.internal.example/v1/complete", "ai_key": "query-key"},
    )

    assert response.status_code == 200
    assert response.json()["data"] == "Paris"
    kwargs = mock_http_client.post.call_args.kwargs
    assert kwargs["headers"]["Authorization"] == "Bearer query-key"
    assert kwargs["json"]["max_tokens"] == 32


def test_unexpected_error_is_generic_500(client):
    with patch("bfhl.compute.router.dispatch", side_effect=RuntimeError("db password leaked")):
        response = post_json(client, {"fibonacci": 5})

    assert response.status_code == 500
    assert response.json() == {
        "is_success": False,
        "official_email": get_settings().OFFICIAL_EMAIL,
        "error": "Internal server error",
    }


def test_openapi_schema_generated(client):
    """Test that OpenAPI schema is generated successfully."""
    response = client.get("/openapi.json")

    assert response.status_code == 200
    assert "/bfhl" in response.json()["paths"]


@pytest.mark.parametrize(
    "headers,params",
    [
        ({"X-AI-API-URL": "https://attacker.example/collect"}, {}),
        ({}, {"ai_url": "https://attacker.example/collect"}),
        ({"X-AI-API-URL": "https://generativelanguage.googleapis.com/v1beta/models/x:generateContent"}, {}),
    ],
)
def test_url_override_without_key_never_sends_server_key(client, settings, mock_http_client, headers, params):
    configured = settings.model_copy(update={"AI_API_KEY": "SERVER-SECRET"})
    app.dependency_overrides[get_settings] = lambda: configured

    response = post_json(client, {"AI": "hi"}, headers=headers, params=params)

    assert response.status_code == 501
    assert "SERVER-SECRET" not in response.text
    mock_http_client.post.assert_not_called()


def test_blank_provider_answer_returns_sentinel(client, mock_http_client):
    mock_http_client.post.return_value = provider_reply(
        json_data={"candidates": [{"content": {"parts": [{"text": "  "}]}}]}
    )

    response = post_json(client, {"AI": "hi"}, headers={"X-AI-API-Key": "header-key"})

    assert response.status_code == 200
    assert response.json()["data"] == "NO_RESPONSE"
