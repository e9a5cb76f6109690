from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from app.main import create_app


@pytest.fixture
def web_client() -> Iterator[TestClient]:
    with TestClient(create_app()) as client:
        yield client


def test_form_page_renders(web_client: TestClient) -> None:
    response = web_client.get("/ui")

    assert response.status_code == 200
    assert "Marine Industry Paint Condition Checker" in response.text
    assert 'name="airTemp"' in response.text
    assert "Decision:" not in response.text


def test_form_submission_renders_verdict(web_client: TestClient) -> None:
    response = web_client.post(
        "/ui",
        data={"airTemp": "15", "steelTemp": "6", "rh": "50", "unit": "C"},
    )

    assert response.status_code == 200
    assert "Decision: NO-GO" in response.text
    assert "alert-danger" in response.text
    assert "Critical: Steel Temp must be at least 3°C above the Dew Point." in response.text
    assert 'value="6"' in response.text


def test_form_submission_in_fahrenheit_keeps_unit_selected(web_client: TestClient) -> None:
    response = web_client.post(
        "/ui",
        data={"airTemp": "59", "steelTemp": "68", "rh": "50", "unit": "F"},
    )

    assert response.status_code == 200
    assert "Decision: GO" in response.text
    assert "Steel Temperature: 68.0°F" in response.text


def test_invalid_form_submission_shows_error(web_client: TestClient) -> None:
    response = web_client.post(
        "/ui",
        data={"airTemp": "15", "steelTemp": "", "rh": "50", "unit": "C"},
    )

    assert response.status_code == 400
    assert "Steel temperature is required." in response.text
    assert "Decision:" not in response.text


def test_static_assets_are_served(web_client: TestClient) -> None:
    response = web_client.get("/static/js/checker.js")

    assert response.status_code == 200
    assert "/evaluate" in response.text or "evaluateUrl" in response.text
