"""Output format options for spinpatch.

This module centralizes the renderings supported for command output. Keeping
it in the domain layer lets both the CLI and the adapters share a single
source of truth without creating circular imports.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Supported renderings for documents printed by commands."""

    JSON = "json"
    YAML = "yaml"

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return "YAML" if self is OutputFormat.YAML else "JSON"
