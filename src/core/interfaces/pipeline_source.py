"""Contract for reading pipeline configurations.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The patch service can be exercised with an in-memory fake instead of the
  HTTP gate client.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import FetchedPipeline


@runtime_checkable
class PipelineConfigSource(Protocol):
    """Minimal contract for a pipeline configuration reader.

    Design rules:
    - Transport failures raise `RemoteFetchError`.
    - HTTP answers are returned as-is; status interpretation belongs to the
      patch service.
    """

    def get_pipeline_config(self, application: str, name: str) -> FetchedPipeline:
        """Read the pipeline `name` of `application`."""

        ...
