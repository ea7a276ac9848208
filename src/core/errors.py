"""Error taxonomy of the patch command.

Each error carries the process exit code the CLI uses for it, so the CLI layer
can stay a thin translation from exception to exit status.
"""

from __future__ import annotations


class PipelinePatchError(Exception):
    """Base class for every failure surfaced by spinpatch."""

    exit_code = 1


class UsageError(PipelinePatchError):
    """Missing identifiers or patch content. Raised before any network call."""

    exit_code = 2


class RemoteFetchError(PipelinePatchError):
    """Transport failure or non-200 answer while reading a pipeline."""

    def __init__(
        self,
        message: str,
        *,
        application: str,
        name: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.application = application
        self.name = name
        self.status_code = status_code

    @classmethod
    def from_status(cls, *, application: str, name: str, status_code: int) -> "RemoteFetchError":
        return cls(
            f"Encountered an error getting pipeline in application {application} "
            f"with name {name}, status code: {status_code}",
            application=application,
            name=name,
            status_code=status_code,
        )


class MergePatchError(PipelinePatchError):
    """Malformed patch fragment or target document."""


class GateEndpointError(PipelinePatchError):
    """The configured gate endpoint is not a usable URL."""
