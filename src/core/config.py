"""Gate connection settings.

Where the gate lives, how long to wait for it and which headers to send all
come from `SPINPATCH_*` variables or a `.env` file. Global CLI flags only
override individual fields; `doctor setup-gate` persists the endpoint in the
per-user `.env` handled below.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.output_format import OutputFormat


def get_user_config_dir() -> Path:
    """Per-user config directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "spinpatch"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "spinpatch"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "spinpatch"
    return Path.home() / ".config" / "spinpatch"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Write or update variables in the user's global .env file."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# spinpatch user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


def parse_header_pairs(raw: str) -> dict[str, str]:
    """Parse ``"Name=value,Other=value"`` into a header mapping."""

    headers: dict[str, str] = {}
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        if "=" not in chunk:
            raise ValueError(f"invalid header '{chunk}', expected NAME=VALUE")
        key, value = chunk.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError(f"invalid header '{chunk}', empty name")
        headers[key] = value.strip()
    return headers


class AppSettings(BaseSettings):
    """Settings shared by the gate client, the renderer and the doctor command.

    Validated once at startup, so a bad timeout or output format fails before
    any request is made.
    """

    model_config = SettingsConfigDict(
        env_prefix="SPINPATCH_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    gate_endpoint: str = Field(
        default="http://localhost:8084",
        min_length=1,
        description="Base URL of the gate API serving pipeline configurations.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="spinpatch/0.1",
        min_length=1,
        description="User-Agent sent to the gate.",
    )
    default_headers: dict[str, str] = Field(
        default_factory=dict,
        description="Extra headers sent with every gate request.",
    )
    insecure: bool = Field(
        default=False,
        description="Skip TLS certificate verification.",
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.JSON,
        description="Rendering used for command output (json/yaml).",
    )

    @field_validator("gate_endpoint")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/") or value
