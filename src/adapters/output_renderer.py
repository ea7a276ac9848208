"""Rendering of command results.

Why a separate adapter:
- The core hands a generic JSON value to an `OutputSink`; how it turns into
  text (JSON, YAML) and where it is written is an I/O concern.
"""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from core.domain.output_format import OutputFormat
from core.interfaces.output_sink import OutputSink


def render_document(value: Any, fmt: OutputFormat = OutputFormat.JSON) -> str:
    """Render `value` with a stable layout. Key order is preserved."""

    if fmt is OutputFormat.YAML:
        return yaml.safe_dump(
            value,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        ).rstrip("\n")
    return json.dumps(value, ensure_ascii=False, indent=2)


class ConsoleSink(OutputSink):
    """Prints rendered documents on a Rich console (stdout by default)."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False, emoji=False)

    def emit(self, value: Any, fmt: OutputFormat) -> None:
        self._console.print(
            render_document(value, fmt),
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
