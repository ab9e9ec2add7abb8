"""
Transcriber Core

Orchestrates audio/video transcription with external tools: ffmpeg extracts
audio from video, mlx_whisper (run in a separate Python process) produces
the transcript.

Key Components:
    - config.py: TranscriberConfig, built once at startup
    - paths.py: Path resolution against an optional base directory
    - media.py: Extension based audio/video classification
    - extraction.py: ffmpeg audio extraction
    - engine.py: mlx_whisper invocation and output parsing
    - status.py: mlx_whisper availability probe
    - errors.py: Transcriber error classes

Usage:
    >>> from transcriber import TranscriberConfig, transcribe_file
    >>>
    >>> config = TranscriberConfig.load()
    >>> result = await transcribe_file("/media/talk.mp4", "base", config)
    >>> print(result.text)
"""

from transcriber.config import DEFAULT_MODEL, WHISPER_MODELS, TranscriberConfig
from transcriber.engine import parse_engine_output, run_transcription, transcribe_file
from transcriber.errors import (
    ExtractionFailedError,
    NotFoundError,
    ParseFailedError,
    ProviderNotAvailableError,
    RuntimeNotFoundError,
    ToolNotFoundError,
    TranscriptionError,
    TranscriptionFailedError,
    TranscriptionTimeoutError,
)
from transcriber.media import is_media_file, is_video_file
from transcriber.models import Segment, StatusReport, TranscriptionResult
from transcriber.paths import format_file_size, resolve_file_path
from transcriber.status import check_status

__version__ = "2.1.0"

__all__ = [
    # Configuration
    "TranscriberConfig",
    "WHISPER_MODELS",
    "DEFAULT_MODEL",

    # Operations
    "transcribe_file",
    "run_transcription",
    "parse_engine_output",
    "check_status",
    "resolve_file_path",
    "format_file_size",
    "is_video_file",
    "is_media_file",

    # Models
    "Segment",
    "TranscriptionResult",
    "StatusReport",

    # Errors
    "TranscriptionError",
    "NotFoundError",
    "ProviderNotAvailableError",
    "ToolNotFoundError",
    "RuntimeNotFoundError",
    "ExtractionFailedError",
    "TranscriptionFailedError",
    "ParseFailedError",
    "TranscriptionTimeoutError",
]
