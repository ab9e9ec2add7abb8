"""
MCP Server Configuration

Loads server settings from YAML config or environment variables.
Transcription settings live in transcriber.config.TranscriberConfig and are
read from the ``transcriber`` section of the same file.
"""

import os
from dataclasses import dataclass
from typing import Optional

import yaml

TRANSPORTS = ("stdio", "sse")


@dataclass
class MCPServerConfig:
    """Configuration for the MCP server."""
    transport: str = "stdio"
    port: int = 8080
    log_level: str = "info"
    log_file: Optional[str] = None

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "MCPServerConfig":
        """Load config from YAML file, env vars, or defaults.

        Priority: env vars > YAML > defaults.
        """
        config = cls()

        # Load from YAML if available
        path = config_path or os.environ.get("MCP_SERVER_CONFIG")
        if path and os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            mcp_section = data.get("mcp_server") or {}
            if "transport" in mcp_section:
                config.transport = mcp_section["transport"]
            if "port" in mcp_section:
                config.port = int(mcp_section["port"])
            if "log_level" in mcp_section:
                config.log_level = mcp_section["log_level"]
            if "log_file" in mcp_section:
                config.log_file = mcp_section["log_file"]

        # Env var overrides
        if os.environ.get("MCP_TRANSPORT"):
            config.transport = os.environ["MCP_TRANSPORT"]
        if os.environ.get("MCP_PORT"):
            config.port = int(os.environ["MCP_PORT"])
        if os.environ.get("MCP_LOG_LEVEL"):
            config.log_level = os.environ["MCP_LOG_LEVEL"]
        if os.environ.get("MCP_LOG_FILE"):
            config.log_file = os.environ["MCP_LOG_FILE"]

        if config.transport not in TRANSPORTS:
            raise ValueError(
                f"Invalid transport '{config.transport}'. Valid options: {', '.join(TRANSPORTS)}"
            )

        return config
