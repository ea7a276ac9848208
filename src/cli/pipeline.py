"""`pipeline` command group."""

from __future__ import annotations

import typer

from adapters.gate_client import build_gate_client
from adapters.output_renderer import ConsoleSink
from cli.state import get_state
from cli.ui_components import print_error
from core.domain.models import PatchOptions
from core.errors import PipelinePatchError
from core.services.pipeline_patch import patch_pipeline

app = typer.Typer(no_args_is_help=True, help="Work with pipeline definitions.")


@app.command()
def patch(
    ctx: typer.Context,
    application: str = typer.Option(
        "",
        "--application",
        "-a",
        help="Application the pipeline belongs to.",
    ),
    name: str = typer.Option("", "--name", "-n", help="Name of the pipeline."),
    patch_value: str = typer.Option("", "--patch", "-p", help="Patch value in JSON (RFC 7386 merge-patch)."),
    enable: bool = typer.Option(False, "--enable", help="Enables the pipeline."),
    disable: bool = typer.Option(False, "--disable", help="Disables the pipeline."),
) -> None:
    """Patches the specified pipeline definition and prints the result.

    Only the first patch fragment is applied: when both --patch and a toggle
    are given, the toggle is ignored. The result is not saved to the gate.
    """

    state = get_state(ctx)
    options = PatchOptions(
        application=application,
        name=name,
        patch=patch_value,
        enable=enable,
        disable=disable,
    )
    sink = ConsoleSink(state.stdout())

    try:
        with build_gate_client(state.settings) as source:
            patch_pipeline(options, source=source, sink=sink, fmt=state.output_format)
    except PipelinePatchError as exc:
        print_error(state.stderr(), exc)
        raise typer.Exit(code=exc.exit_code) from exc
