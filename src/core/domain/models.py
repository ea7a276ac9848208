"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  core to I/O libraries.

Note:
- These models describe *what* a patch request is, not *how* the pipeline is
  fetched. The pipeline document itself stays an untyped JSON value: its
  shape is owned by the remote service.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field


class PipelineRef(BaseModel):
    """Identifies a pipeline on the remote service."""

    application: str = Field(
        ...,
        min_length=1,
        description="Application the pipeline belongs to.",
    )
    name: str = Field(
        ...,
        min_length=1,
        description="Name of the pipeline inside the application.",
    )


class PatchOptions(BaseModel):
    """Parameters of the `pipeline patch` command.

    Empty identifiers are accepted here on purpose: they are reported as usage
    errors by the patch service, before any network call.
    """

    application: str = Field(
        default="",
        description="Application the pipeline belongs to.",
    )
    name: str = Field(
        default="",
        description="Name of the pipeline.",
    )
    patch: str = Field(
        default="",
        description="JSON merge-patch (RFC 7386) body as raw text.",
    )
    enable: bool = Field(
        default=False,
        description="Synthesize a fragment that enables the pipeline.",
    )
    disable: bool = Field(
        default=False,
        description="Synthesize a fragment that disables the pipeline.",
    )

    @property
    def has_toggle(self) -> bool:
        return self.enable or self.disable


@dataclass
class FetchedPipeline:
    """Raw answer of the remote read call."""

    status_code: int
    payload: Any = None


@dataclass
class PatchOutcome:
    """Result of a successful patch command."""

    ref: PipelineRef
    document: Any
    applied_fragment: Any
    ignored_fragments: list[str] = field(default_factory=list)
