from __future__ import annotations

import json
from typing import Any, Dict, List

import pytest
from typer.testing import CliRunner

from cli.app import app
from cli.config import load_config, load_server_config


class StubClient:
    def __init__(self, config) -> None:
        self.config = config
        self.evaluate_calls: List[Dict[str, Any]] = []
        self.verdict_payload: Dict[str, Any] = {
            "status": "CAUTION",
            "severityClass": "warning",
            "message": "CAUTION: Conditions are borderline. Monitor closely.",
            "details": ["Calculated Dew Point: 4.7°C"],
        }
        self.closed = False

    def evaluate(self, **kwargs: Any) -> Dict[str, Any]:
        self.evaluate_calls.append(kwargs)
        return self.verdict_payload

    def get_thresholds(self) -> Dict[str, Any]:
        return {"maxRelativeHumidity": 80}

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def stub(monkeypatch) -> StubClient:
    client = StubClient(config=None)

    def factory(config):
        client.config = config
        return client

    monkeypatch.setattr("cli.app.ApiClient", factory)
    return client


def test_local_evaluate_prints_verdict(runner: CliRunner, stub: StubClient) -> None:
    result = runner.invoke(app, ["evaluate", "--air", "15", "--steel", "20", "--rh", "50"])

    assert result.exit_code == 0
    assert "Decision: GO" in result.stdout
    assert "Calculated Dew Point: 4.7°C" in result.stdout
    assert not stub.evaluate_calls
    assert stub.closed is True


def test_local_evaluate_json_output(runner: CliRunner, stub: StubClient) -> None:
    result = runner.invoke(
        app, ["evaluate", "-a", "59", "-s", "68", "-r", "50", "--unit", "F", "--json"]
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["status"] == "GO"
    assert payload["severityClass"] == "success"
    assert payload["details"][3] == "Steel Temperature: 68.0°F"


def test_local_evaluate_rejects_invalid_humidity(runner: CliRunner, stub: StubClient) -> None:
    result = runner.invoke(app, ["evaluate", "--air", "15", "--steel", "20", "--rh", "0"])

    assert result.exit_code == 2


def test_local_evaluate_rejects_unknown_unit(runner: CliRunner, stub: StubClient) -> None:
    result = runner.invoke(app, ["evaluate", "--air", "15", "--steel", "20", "--rh", "50", "-u", "K"])

    assert result.exit_code == 2


def test_remote_evaluate_uses_api_client(runner: CliRunner, stub: StubClient) -> None:
    result = runner.invoke(
        app,
        ["--base-url", "http://checker:9000/", "evaluate", "--air", "15", "--steel", "8", "--rh", "50", "--remote"],
    )

    assert result.exit_code == 0
    assert "Decision: CAUTION" in result.stdout
    assert stub.evaluate_calls == [
        {"air_temp": 15.0, "steel_temp": 8.0, "relative_humidity": 50.0, "unit": "C"}
    ]
    assert stub.config.base_url == "http://checker:9000"
    assert stub.closed is True


def test_local_thresholds(runner: CliRunner, stub: StubClient) -> None:
    result = runner.invoke(app, ["thresholds"])

    assert result.exit_code == 0
    assert "Thresholds" in result.stdout
    assert "maxRelativeHumidity: 85.0" in result.stdout


def test_remote_thresholds(runner: CliRunner, stub: StubClient) -> None:
    result = runner.invoke(app, ["thresholds", "--remote"])

    assert result.exit_code == 0
    assert "maxRelativeHumidity: 80" in result.stdout


def test_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("API_BASE_URL", "http://example.test/")
    monkeypatch.setenv("CLI_HTTP_TIMEOUT", "not-a-number")

    config = load_config()

    assert config.base_url == "http://example.test"
    assert config.timeout == 10.0


def test_serve_runs_uvicorn_with_options(monkeypatch, runner: CliRunner, stub: StubClient) -> None:
    calls: List[tuple] = []
    monkeypatch.setattr("cli.app.uvicorn.run", lambda *args, **kwargs: calls.append((args, kwargs)))

    result = runner.invoke(app, ["serve", "--host", "0.0.0.0", "--port", "9000", "--reload"])

    assert result.exit_code == 0
    assert calls == [(("app.main:app",), {"host": "0.0.0.0", "port": 9000, "reload": True})]


def test_serve_defaults_from_environment(monkeypatch, runner: CliRunner, stub: StubClient) -> None:
    calls: List[tuple] = []
    monkeypatch.setattr("cli.app.uvicorn.run", lambda *args, **kwargs: calls.append((args, kwargs)))
    monkeypatch.setenv("SERVER_PORT", "8123")
    monkeypatch.delenv("SERVER_HOST", raising=False)

    result = runner.invoke(app, ["serve"])

    assert result.exit_code == 0
    assert "http://127.0.0.1:8123" in result.stdout
    assert calls == [(("app.main:app",), {"host": "127.0.0.1", "port": 8123, "reload": False})]


def test_server_config_ignores_invalid_port(monkeypatch) -> None:
    monkeypatch.setenv("SERVER_PORT", "99999")

    assert load_server_config().port == 8000
