from __future__ import annotations

from typing import Any

import pytest

from core.domain.models import FetchedPipeline
from core.domain.output_format import OutputFormat


class FakeSource:
    """In-memory pipeline source that records every read."""

    def __init__(self, status_code: int = 200, payload: Any = None) -> None:
        self.status_code = status_code
        self.payload = payload
        self.calls: list[tuple[str, str]] = []

    def __enter__(self) -> "FakeSource":
        return self

    def __exit__(self, *exc_info: object) -> None:
        pass

    def get_pipeline_config(self, application: str, name: str) -> FetchedPipeline:
        self.calls.append((application, name))
        return FetchedPipeline(status_code=self.status_code, payload=self.payload)


class RecordingSink:
    def __init__(self) -> None:
        self.emitted: list[tuple[Any, OutputFormat]] = []

    def emit(self, value: Any, fmt: OutputFormat) -> None:
        self.emitted.append((value, fmt))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    import os

    for key in list(os.environ):
        if key.upper().startswith("SPINPATCH_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def pipeline_doc() -> dict[str, Any]:
    return {"name": "p1", "disabled": False}


@pytest.fixture
def source(pipeline_doc) -> FakeSource:
    return FakeSource(payload=pipeline_doc)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
