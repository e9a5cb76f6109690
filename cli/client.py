from __future__ import annotations

from typing import Any, Dict

import httpx
import typer

from cli.config import CLIConfig


class ApiClient:
    """Minimal HTTP client for a running checker service."""

    def __init__(self, config: CLIConfig) -> None:
        self._config = config
        self._client = httpx.Client(base_url=config.base_url, timeout=config.timeout)

    def close(self) -> None:
        self._client.close()

    def evaluate(
        self,
        air_temp: float,
        steel_temp: float,
        relative_humidity: float,
        unit: str,
    ) -> Dict[str, Any]:
        payload = {
            "airTemp": air_temp,
            "steelTemp": steel_temp,
            "relativeHumidity": relative_humidity,
            "unit": unit,
        }
        try:
            response = self._client.post("/evaluate", json=payload)
            if response.status_code == 400:
                raise typer.BadParameter(self._detail(response))
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        except httpx.TransportError as exc:
            self._handle_transport_error(exc)
        return response.json()

    def get_thresholds(self) -> Dict[str, Any]:
        try:
            response = self._client.get("/thresholds")
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        except httpx.TransportError as exc:
            self._handle_transport_error(exc)
        return response.json()

    @staticmethod
    def _detail(response: httpx.Response) -> str:
        try:
            detail = response.json().get("detail")
        except ValueError:
            detail = response.text.strip()
        return str(detail) if detail else "no detail provided."

    @classmethod
    def _handle_http_error(cls, exc: httpx.HTTPStatusError) -> None:
        message = (
            f"Request failed with status {exc.response.status_code}: {cls._detail(exc.response)}"
        )
        typer.secho(message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    def _handle_transport_error(self, exc: httpx.TransportError) -> None:
        typer.secho(
            f"Could not reach {self._config.base_url}: {exc}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)
