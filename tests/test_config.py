from __future__ import annotations

import pytest
from pydantic import ValidationError

from job_portal.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("PORT", "MCP_PATH", "MATCH_DEFAULT_LIMIT", "CORS_ORIGINS"):
        monkeypatch.delenv(key, raising=False)
    cfg = Settings(_env_file=None)
    assert cfg.port == 3000
    assert cfg.mcp_path == "/mcp"
    assert cfg.match_default_limit == 3


def test_cors_origins_accepts_json_or_comma_separated(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CORS_ORIGINS", '["http://a.test", "http://b.test"]')
    assert Settings(_env_file=None).cors_origins == ["http://a.test", "http://b.test"]

    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    assert Settings(_env_file=None).cors_origins == ["http://a.test", "http://b.test"]


def test_mcp_path_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MCP_PATH", "rpc/")
    assert Settings(_env_file=None).mcp_path == "/rpc"


def test_invalid_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
