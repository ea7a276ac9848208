"""Contract for emitting command results."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.domain.output_format import OutputFormat


@runtime_checkable
class OutputSink(Protocol):
    """Receives a generic JSON value and the rendering to use for it."""

    def emit(self, value: Any, fmt: OutputFormat) -> None:
        ...
