from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

import typer
import uvicorn

from app.schemas import EvaluationResponse, ThresholdsResponse
from cli.client import ApiClient
from cli.config import CLIConfig, load_config, load_server_config
from cli.render import render_thresholds, render_verdict
from models.errors import ComputationError, InvalidInputError
from models.readings import Reading
from services.evaluator import build_default_engine


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Check whether site conditions allow marine coating application.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


def _evaluate_locally(
    air_temp: float, steel_temp: float, relative_humidity: float, unit: str
) -> Dict[str, Any]:
    try:
        reading = Reading.from_raw(
            steel_temp=steel_temp,
            air_temp=air_temp,
            relative_humidity=relative_humidity,
            unit=unit,
        )
        verdict = build_default_engine().evaluate(reading)
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except ComputationError as exc:
        typer.secho(f"Evaluation failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    return EvaluationResponse.from_verdict(verdict).model_dump(mode="json", by_alias=True)


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Checker API base URL for --remote (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="HTTP timeout in seconds for --remote requests.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("evaluate")
def evaluate_command(
    ctx: typer.Context,
    air_temp: float = typer.Option(..., "--air", "-a", help="Air temperature."),
    steel_temp: float = typer.Option(..., "--steel", "-s", help="Steel surface temperature."),
    relative_humidity: float = typer.Option(..., "--rh", "-r", help="Relative humidity in percent."),
    unit: str = typer.Option("C", "--unit", "-u", help="Unit for both temperatures: C or F."),
    remote: bool = typer.Option(
        False,
        "--remote/--local",
        help="Evaluate against a running API instead of in-process.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON verdict."),
) -> None:
    """Evaluate site conditions and print a painting decision."""
    if remote:
        state = _get_state(ctx)
        payload = state.client.evaluate(
            air_temp=air_temp,
            steel_temp=steel_temp,
            relative_humidity=relative_humidity,
            unit=unit,
        )
    else:
        payload = _evaluate_locally(air_temp, steel_temp, relative_humidity, unit)

    if as_json:
        typer.echo(json.dumps(payload, indent=2))
        return
    render_verdict(payload)


@app.command("thresholds")
def thresholds_command(
    ctx: typer.Context,
    remote: bool = typer.Option(
        False,
        "--remote/--local",
        help="Fetch thresholds from a running API instead of local settings.",
    ),
) -> None:
    """Show the limits the decision engine applies."""
    if remote:
        payload = _get_state(ctx).client.get_thresholds()
    else:
        thresholds = build_default_engine().thresholds
        payload = ThresholdsResponse(**thresholds.as_dict()).model_dump(by_alias=True)
    render_thresholds(payload)


@app.command("serve")
def serve_command(
    host: Optional[str] = typer.Option(
        None,
        "--host",
        help="Interface to bind (defaults to SERVER_HOST env or 127.0.0.1).",
    ),
    port: Optional[int] = typer.Option(
        None,
        "--port",
        "-p",
        help="Port to bind (defaults to SERVER_PORT env or 8000).",
    ),
    reload: bool = typer.Option(False, "--reload/--no-reload", help="Restart on code changes."),
) -> None:
    """Run the checker API and web form."""
    config = load_server_config(host=host, port=port)
    typer.echo(f"Serving on http://{config.host}:{config.port} ...")
    uvicorn.run("app.main:app", host=config.host, port=config.port, reload=reload)
