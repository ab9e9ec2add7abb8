"""
Centralized Help Text Constants

This module provides all CLI help text constants for commands and options,
plus the exit codes shared by the subcommands.
"""

from transcriber.config import DEFAULT_MODEL, WHISPER_MODELS


# Exit codes for different error types
class ExitCodes:
    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_CONFIGURATION = 3
    ENGINE_NOT_AVAILABLE = 4
    FILE_NOT_FOUND = 6


# Command help texts
TRANSCRIBE_HELP = "Transcribe an audio or video file with MLX Whisper."
STATUS_HELP = "Check if MLX Whisper is installed and ready."
LIST_HELP = "List audio and video files in a directory (defaults to TRANSCRIBE_BASE_PATH)."
SERVE_HELP = "Run the MCP server."

# Option help texts
TRANSCRIBE_FILE_HELP = (
    "Absolute path, relative path, or bare filename. Bare filenames are looked up "
    "in TRANSCRIBE_BASE_PATH when it is set."
)

TRANSCRIBE_MODEL_HELP = (
    f"Whisper model to use: {', '.join(WHISPER_MODELS)}. "
    f"Defaults to WHISPER_MODEL or {DEFAULT_MODEL}."
)

TRANSCRIBE_JSON_HELP = "Print the full result (text and segments) as JSON instead of plain text."

CONFIG_HELP = "YAML file with 'transcriber' and 'mcp_server' sections."

LOG_LEVEL_HELP = "Logging level (debug, info, warning, error). Logs go to stderr."

SERVE_TRANSPORT_HELP = "MCP transport: stdio (default) or sse."

SERVE_PORT_HELP = "Port for the SSE transport."
