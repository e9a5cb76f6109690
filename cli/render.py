from __future__ import annotations

from typing import Any, Dict, Iterable

import typer

_STATUS_COLORS = {
    "success": typer.colors.GREEN,
    "warning": typer.colors.YELLOW,
    "danger": typer.colors.RED,
}


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_verdict(payload: Dict[str, Any]) -> None:
    severity = payload.get("severityClass")
    typer.secho(
        f"Decision: {payload.get('status')}",
        fg=_STATUS_COLORS.get(severity),
        bold=True,
    )
    typer.echo(payload.get("message", ""))

    typer.echo()
    echo_heading("Details")
    details = payload.get("details") or []
    if details:
        for detail in details:
            typer.echo(f"  - {detail}")
    else:
        typer.echo("No details available.")


def render_thresholds(payload: Dict[str, Any]) -> None:
    echo_heading("Thresholds")
    echo_key_values(sorted(payload.items()))
