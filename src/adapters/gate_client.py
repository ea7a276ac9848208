"""Gate client: reads pipeline configurations over HTTP.

These calls live in adapters because they are pure I/O. The client only reads;
it never writes a pipeline back.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import FetchedPipeline
from core.errors import GateEndpointError, RemoteFetchError
from core.interfaces.pipeline_source import PipelineConfigSource

logger = logging.getLogger(__name__)


def pipeline_config_path(application: str, name: str) -> str:
    return f"/applications/{quote(application, safe='')}/pipelineConfigs/{quote(name, safe='')}"


class GateClient(PipelineConfigSource):
    """Pipeline configuration source backed by the gate REST API."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        try:
            self._client = client or build_client(self._settings)
        except httpx.InvalidURL as exc:
            raise GateEndpointError(f"invalid gate endpoint {self._settings.gate_endpoint!r}: {exc}") from exc

    def __enter__(self) -> "GateClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def get_pipeline_config(self, application: str, name: str) -> FetchedPipeline:
        path = pipeline_config_path(application, name)
        logger.debug("GET %s%s", self._settings.gate_endpoint, path)
        try:
            resp = self._client.get(path)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise RemoteFetchError(
                f"Could not reach gate at {self._settings.gate_endpoint} while getting "
                f"pipeline {name} of application {application}: {exc}",
                application=application,
                name=name,
            ) from exc

        if resp.status_code != 200:
            logger.debug("gate answered %s for %s", resp.status_code, path)
            return FetchedPipeline(status_code=resp.status_code)

        try:
            payload = resp.json()
        except ValueError as exc:
            raise RemoteFetchError(
                f"Gate returned a body that is not JSON for pipeline {name} "
                f"of application {application}",
                application=application,
                name=name,
                status_code=resp.status_code,
            ) from exc
        return FetchedPipeline(status_code=resp.status_code, payload=payload)

    def check_health(self) -> int:
        """Return the status code of the gate health endpoint."""

        try:
            resp = self._client.get("/health")
        except httpx.InvalidURL as exc:
            raise GateEndpointError(f"invalid gate endpoint {self._settings.gate_endpoint!r}: {exc}") from exc
        return resp.status_code


def build_gate_client(settings: AppSettings) -> GateClient:
    return GateClient(settings)
