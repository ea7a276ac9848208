"""spinpatch command line entry point.

Global flags are parsed once in the root callback and stored on the Typer
context as a plain `CliState`; subcommands read it from `ctx.obj` instead of
embedding a shared options struct.
"""

from __future__ import annotations

import typer
from pydantic import ValidationError

from cli import doctor, pipeline
from cli.state import CliState
from core.config import AppSettings, parse_header_pairs
from core.domain.output_format import OutputFormat
from core.logging_setup import resolve_level, setup_logging

app = typer.Typer(
    no_args_is_help=True,
    help="Client-side helpers for pipelines stored behind a gate API.",
)
app.add_typer(pipeline.app, name="pipeline")
app.add_typer(doctor.app, name="doctor")


@app.callback()
def main(
    ctx: typer.Context,
    gate_endpoint: str | None = typer.Option(
        None,
        "--gate-endpoint",
        help="Gate API base URL (overrides SPINPATCH_GATE_ENDPOINT).",
    ),
    output: OutputFormat | None = typer.Option(
        None,
        "--output",
        "-o",
        case_sensitive=False,
        help="Output format for printed documents.",
    ),
    default_headers: str | None = typer.Option(
        None,
        "--default-headers",
        help="Extra request headers, e.g. 'X-Team=ops,X-Env=prod'.",
    ),
    insecure: bool = typer.Option(False, "--insecure", help="Skip TLS certificate verification."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors."),
) -> None:
    setup_logging(resolve_level(verbose=verbose, quiet=quiet), no_color=no_color)

    overrides: dict[str, object] = {}
    if gate_endpoint:
        overrides["gate_endpoint"] = gate_endpoint
    if output is not None:
        overrides["output_format"] = output
    if insecure:
        overrides["insecure"] = True
    if default_headers:
        try:
            overrides["default_headers"] = parse_header_pairs(default_headers)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--default-headers") from exc

    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    ctx.obj = CliState(
        settings=settings,
        output_format=settings.output_format,
        no_color=no_color,
    )


def run() -> None:
    app(prog_name="spinpatch")
