from __future__ import annotations

import httpx
from typer.testing import CliRunner

from adapters.gate_client import GateClient
from adapters.http_client import build_client
from cli import doctor
from cli.main import app

runner = CliRunner()


def _route(monkeypatch, handler) -> None:
    def factory(settings):
        return GateClient(settings, client=build_client(settings, transport=httpx.MockTransport(handler)))

    monkeypatch.setattr(doctor, "build_gate_client", factory)


def test_doctor_reports_healthy_gate(monkeypatch):
    _route(monkeypatch, lambda request: httpx.Response(200, json={"status": "UP"}))

    result = runner.invoke(app, ["--gate-endpoint", "https://gate.example", "doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "gate.example" in result.stdout
    assert "HTTP 200" in result.stdout


def test_doctor_fails_when_gate_unreachable(monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    _route(monkeypatch, handler)

    result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 1
    assert "FAIL" in result.stdout


def test_setup_gate_writes_user_env(monkeypatch, tmp_path):
    env_file = tmp_path / "user" / ".env"
    monkeypatch.setattr("core.config.get_user_env_file", lambda: env_file)

    result = runner.invoke(app, ["doctor", "setup-gate"], input="https://gate.example/\n")

    assert result.exit_code == 0, result.output
    assert "SPINPATCH_GATE_ENDPOINT=https://gate.example" in env_file.read_text(encoding="utf-8")
