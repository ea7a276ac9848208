"""State shared by every subcommand through `typer.Context.obj`."""

from __future__ import annotations

from dataclasses import dataclass

import typer
from rich.console import Console

from core.config import AppSettings
from core.domain.output_format import OutputFormat


@dataclass
class CliState:
    """Options parsed once by the root callback."""

    settings: AppSettings
    output_format: OutputFormat
    no_color: bool = False

    def stdout(self) -> Console:
        return Console(no_color=self.no_color, highlight=False, emoji=False)

    def stderr(self) -> Console:
        return Console(stderr=True, no_color=self.no_color, highlight=False, emoji=False)


def get_state(ctx: typer.Context) -> CliState:
    """Return the root state, building a default one when run standalone."""

    state = ctx.obj
    if isinstance(state, CliState):
        return state
    settings = AppSettings()
    state = CliState(settings=settings, output_format=settings.output_format)
    ctx.obj = state
    return state
