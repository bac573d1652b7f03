from __future__ import annotations

from dataclasses import dataclass
import os


@dataclass(frozen=True)
class ServerConfig:
    """Identity of one content server."""

    name: str
    title: str
    scheme: str
    description: str = ""
    version: str = "1.0.0"


@dataclass
class Settings:
    """Runtime configuration shared by every server process."""

    host: str = "127.0.0.1"
    port: int = 8085
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        host = os.getenv("MCP_HOST", cls.host)
        port = int(os.getenv("MCP_PORT", str(cls.port)))
        log_level = os.getenv("MCP_LOG_LEVEL", cls.log_level).upper()
        return cls(host=host, port=port, log_level=log_level)
