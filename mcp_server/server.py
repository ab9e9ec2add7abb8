"""
MLX Whisper Transcriber MCP Server

Exposes audio/video transcription as MCP tools for AI agents.
Supports stdio transport (for Claude Desktop and similar hosts) and SSE transport.

Usage:
    python -m mcp_server.server                    # stdio mode (default)
    python -m mcp_server.server --transport sse     # SSE mode
"""

import argparse
import logging
import sys
from typing import Annotated, Optional

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from mcp_server.config import TRANSPORTS, MCPServerConfig
from mcp_server.tools.files import list_audio_files as _list_audio_files
from mcp_server.tools.status import check_mlx_status as _check_mlx_status
from mcp_server.tools.transcribe import transcribe_audio as _transcribe_audio
from transcriber import __version__
from transcriber.config import WHISPER_MODELS, ModelName, TranscriberConfig
from transcriber.errors import TranscriptionError
from transcriber.utils.logging_config import configure_logging, logging_config

logger = logging.getLogger(__name__)

SERVER_NAME = "mlx-whisper-transcriber"


# --- Tool Descriptions ---

def transcribe_description(config: TranscriberConfig) -> str:
    base_info = (
        f"\n\nBase path configured: {config.base_path} (you can use just filenames)"
        if config.base_path else ""
    )
    return (
        "Transcribe an audio or video file using MLX Whisper (optimized for Apple Silicon). "
        "Supports MP3, WAV, OGG, FLAC, M4A, MP4, MOV, AVI, MKV, WebM files."
        f"{base_info}"
    )


def file_path_description(config: TranscriberConfig) -> str:
    if config.base_path:
        return f"File path or just the filename (will look in {config.base_path})"
    return "Absolute path to the audio or video file to transcribe"


def list_description(config: TranscriberConfig) -> str:
    if config.base_path:
        return f"List audio and video files. Defaults to {config.base_path} if no directory specified."
    return "List audio and video files in a directory"


def directory_description(config: TranscriberConfig) -> str:
    if config.base_path:
        return f"Directory path (defaults to {config.base_path})"
    return "Directory path to scan for audio/video files"


# --- Server Factory ---

def create_server(config: TranscriberConfig, port: int = 8080) -> FastMCP:
    """Build a FastMCP server whose tools are bound to ``config``."""
    mcp = FastMCP(SERVER_NAME, port=port)

    model_help = (
        f"Whisper model to use: {', '.join(WHISPER_MODELS)} "
        f"(default: {config.whisper_model})"
    )

    @mcp.tool(name="transcribe_audio", description=transcribe_description(config))
    async def transcribe_audio(
        file_path: Annotated[str, Field(description=file_path_description(config))],
        model: Annotated[Optional[ModelName], Field(description=model_help)] = None,
    ) -> str:
        logger.info(f"Tool called: transcribe_audio (file_path={file_path!r}, model={model!r})")
        return await _transcribe_audio(config, file_path=file_path, model=model)

    @mcp.tool(name="check_mlx_status", description="Check if MLX Whisper is installed and ready")
    async def check_mlx_status() -> str:
        logger.info("Tool called: check_mlx_status")
        return await _check_mlx_status(config)

    @mcp.tool(name="list_audio_files", description=list_description(config))
    async def list_audio_files(
        directory: Annotated[Optional[str], Field(description=directory_description(config))] = None,
    ) -> str:
        logger.info(f"Tool called: list_audio_files (directory={directory!r})")
        return await _list_audio_files(config, directory=directory)

    return mcp


# --- Server Entry Point ---

def main(argv: Optional[list] = None):
    """Start the MCP server."""
    parser = argparse.ArgumentParser(description="MLX Whisper Transcriber MCP Server")
    parser.add_argument("--transport", choices=list(TRANSPORTS), default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--config", type=str, help="Path to server config YAML")
    args = parser.parse_args(argv)

    load_dotenv()

    server_config = MCPServerConfig.load(args.config)
    configure_logging(level=server_config.log_level, log_file=server_config.log_file)

    try:
        transcriber_config = TranscriberConfig.load(args.config)
    except TranscriptionError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    transport = args.transport or server_config.transport
    port = args.port or server_config.port

    mcp = create_server(transcriber_config, port=port)

    logging_config.log_configuration_details({
        "transport": transport,
        "port": port,
        "whisper_model": transcriber_config.whisper_model,
        "base_path": transcriber_config.base_path,
        "python_executable": transcriber_config.python_executable,
        "ffmpeg_executable": transcriber_config.ffmpeg_executable,
        "timeout": transcriber_config.timeout,
    })

    logger.info(f"MLX Whisper Transcriber MCP server v{__version__} started")
    if transcriber_config.base_path:
        logger.info(f"Base path configured: {transcriber_config.base_path}")

    mcp.run(transport=transport)


if __name__ == "__main__":
    main()
