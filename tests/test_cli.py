from __future__ import annotations

import json

import httpx
import pytest
import yaml
from typer.testing import CliRunner

from adapters.gate_client import GateClient
from adapters.http_client import build_client
from cli import pipeline
from cli.main import app
from conftest import FakeSource

runner = CliRunner()


@pytest.fixture
def gate_requests(monkeypatch):
    """Route the CLI's gate client to an in-memory handler."""

    requests: list[httpx.Request] = []
    responses = {"status": 200, "body": {"name": "p1", "disabled": False}}

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(responses["status"], json=responses["body"])

    def factory(settings):
        return GateClient(settings, client=build_client(settings, transport=httpx.MockTransport(handler)))

    monkeypatch.setattr(pipeline, "build_gate_client", factory)
    return requests, responses


def test_patch_prints_merged_document(gate_requests):
    requests, _ = gate_requests

    result = runner.invoke(
        app,
        ["pipeline", "patch", "-a", "app1", "-n", "p1", "--patch", '{"disabled":true}'],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"name": "p1", "disabled": True}
    assert len(requests) == 1
    assert requests[0].url.path == "/applications/app1/pipelineConfigs/p1"


def test_patch_uses_gate_endpoint_flag(gate_requests):
    requests, _ = gate_requests

    result = runner.invoke(
        app,
        ["--gate-endpoint", "https://gate.internal/", "pipeline", "patch", "-a", "app1", "-n", "p1", "--enable"],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"name": "p1", "disabled": "false"}
    assert str(requests[0].url).startswith("https://gate.internal/applications/")


def test_disable_toggle(gate_requests):
    result = runner.invoke(app, ["pipeline", "patch", "-a", "app1", "-n", "p1", "--disable"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["disabled"] == "true"


def test_yaml_output(gate_requests):
    result = runner.invoke(app, ["-o", "yaml", "pipeline", "patch", "-a", "app1", "-n", "p1", "--disable"])

    assert result.exit_code == 0, result.output
    assert yaml.safe_load(result.stdout) == {"name": "p1", "disabled": "true"}


@pytest.mark.parametrize(
    "args",
    [
        ["pipeline", "patch", "-n", "p1", "-p", "{}"],
        ["pipeline", "patch", "-a", "app1", "-p", "{}"],
        ["pipeline", "patch", "-a", "app1", "-n", "p1"],
    ],
)
def test_usage_errors_skip_fetch(monkeypatch, args):
    source = FakeSource(payload={})
    monkeypatch.setattr(pipeline, "build_gate_client", lambda settings: source)

    result = runner.invoke(app, args)

    assert result.exit_code == 2
    assert "Error:" in result.stderr
    assert source.calls == []


def test_server_error_reports_context(gate_requests):
    _, responses = gate_requests
    responses["status"] = 500
    responses["body"] = {"error": "boom"}

    result = runner.invoke(app, ["pipeline", "patch", "-a", "app1", "-n", "p1", "-p", '{"a":1}'])

    assert result.exit_code == 1
    assert result.stdout == ""
    assert "app1" in result.stderr
    assert "p1" in result.stderr
    assert "500" in result.stderr


def test_invalid_patch_json(gate_requests):
    result = runner.invoke(app, ["pipeline", "patch", "-a", "app1", "-n", "p1", "-p", "{oops"])

    assert result.exit_code == 1
    assert "not valid JSON" in result.stderr


def test_invalid_default_headers():
    result = runner.invoke(app, ["--default-headers", "broken", "pipeline", "patch", "-a", "x", "-n", "y", "--enable"])

    assert result.exit_code == 2


def test_malformed_gate_endpoint_exits_cleanly():
    result = runner.invoke(
        app,
        ["--gate-endpoint", "http://gate.example:notaport", "pipeline", "patch", "-a", "app1", "-n", "p1", "--enable"],
    )

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Error:" in result.stderr


def test_string_literal_patch_is_printed(gate_requests):
    result = runner.invoke(app, ["pipeline", "patch", "-a", "app1", "-n", "p1", "-p", '"hello"'])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == "hello"
