"""CLI UI components (Rich).

Why separate components:
- Keeps visual details out of the command functions.
- Lets tables and error lines be reused across commands.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.config import AppSettings


def print_error(console: Console, error: BaseException) -> None:
    """Print an error on one line without wrapping or markup parsing."""

    line = Text.assemble(("Error: ", "bold red"), str(error))
    console.print(line, soft_wrap=True)


def build_settings_table(settings: AppSettings) -> Table:
    """Table with the effective gate settings (header values are hidden)."""

    table = Table(title="spinpatch doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Gate endpoint", "OK", settings.gate_endpoint)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Output format", "OK", settings.output_format.label())
    if settings.insecure:
        table.add_row("TLS", "WARN", "certificate verification disabled")
    else:
        table.add_row("TLS", "OK", "certificate verification enabled")
    if settings.default_headers:
        table.add_row("Default headers", "OK", ", ".join(sorted(settings.default_headers)))
    return table
