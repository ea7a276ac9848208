"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer

from adapters.gate_client import build_gate_client
from cli.state import get_state
from cli.ui_components import build_settings_table
from core.config import AppSettings, write_user_env_vars
from core.errors import GateEndpointError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")


def check_gate(settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_gate_client(settings) as client:
            status = client.check_health()
    except (httpx.HTTPError, GateEndpointError) as exc:
        return False, str(exc)
    return status == 200, f"HTTP {status}"


@app.command()
def run(ctx: typer.Context) -> None:
    """Show the effective settings and check that the gate answers."""

    state = get_state(ctx)
    console = state.stdout()

    table = build_settings_table(state.settings)
    ok_gate, detail_gate = check_gate(state.settings)
    table.add_row("Gate health", "OK" if ok_gate else "FAIL", detail_gate)
    console.print(table)

    if not ok_gate:
        console.print(
            "\n[yellow]Note:[/yellow] set the endpoint with `spinpatch doctor setup-gate` "
            "or SPINPATCH_GATE_ENDPOINT."
        )
        raise typer.Exit(code=1)


@app.command(name="setup-gate")
def setup_gate(ctx: typer.Context) -> None:
    """Interactive gate setup (stores config in the user config .env)."""

    state = get_state(ctx)
    endpoint = typer.prompt(
        "Gate endpoint",
        default=state.settings.gate_endpoint,
        show_default=True,
    ).strip()
    if not endpoint.startswith(("http://", "https://")):
        raise typer.BadParameter("endpoint must start with http:// or https://")

    env_path = write_user_env_vars({"SPINPATCH_GATE_ENDPOINT": endpoint.rstrip("/")})
    state.stdout().print(f"[green]Saved gate config to:[/green] {env_path}")
