"""설정 — pydantic-settings v2 + 타입 안전 검증."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── MCP Server ────────────────────────────────────────
    mcp_server_name: str = "liability-quote"
    mcp_host: str = "127.0.0.1"
    mcp_port: int = Field(default=8000, ge=1, le=65535)
    # 어시스턴트가 프로세스를 직접 띄우는 stdio가 기본값
    mcp_transport: Literal["sse", "stdio", "streamable-http"] = "stdio"

    # ── Logging ───────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
