from fastapi.testclient import TestClient


def test_healthcheck_returns_ok(client: TestClient) -> None:
    response = client.get("/healthz")
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert "timestamp" in payload


def test_root_reports_service_name(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert "service" in response.json()


def test_languages_lists_table_in_order(client: TestClient) -> None:
    response = client.get("/languages")
    assert response.status_code == 200
    languages = response.json()["languages"]
    assert languages[0] == {"code": "en", "name": "English"}
    assert {"code": "zh-CN", "name": "Chinese (Simplified)"} in languages
    assert len(languages) == 12


def test_voices_lists_options_and_speed_range(client: TestClient) -> None:
    response = client.get("/voices")
    assert response.status_code == 200
    payload = response.json()
    assert payload["voices"] == ["alloy", "echo", "fable", "onyx", "nova", "shimmer"]
    assert payload["default"] == "alloy"
    assert payload["speed"] == {"min": 0.25, "max": 4.0, "default": 1.0}


def test_unknown_route_uses_error_shape(client: TestClient) -> None:
    response = client.get("/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
    assert response.headers["access-control-allow-origin"] == "*"
