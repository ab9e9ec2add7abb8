"""Transcribe tool - resolves the file, runs ffmpeg/mlx_whisper, renders a report."""

import logging
import os
import time
from typing import Optional

from transcriber.config import WHISPER_MODELS, TranscriberConfig
from transcriber.engine import transcribe_file
from transcriber.errors import NotFoundError, TranscriptionError
from transcriber.models import TranscriptionResult
from transcriber.paths import format_file_size, resolve_file_path
from transcriber.utils.logging_config import logging_config

logger = logging.getLogger(__name__)


def format_transcription_report(
    file_name: str,
    file_size: str,
    model: str,
    result: TranscriptionResult,
) -> str:
    """Render a successful transcription as Markdown."""
    return (
        f"## Transcription of {file_name}\n\n"
        f"**File size:** {file_size}\n"
        f"**Model:** whisper-{model}-mlx\n\n"
        f"---\n\n"
        f"{result.text}"
    )


def _require_file(file_path: str, config: TranscriberConfig) -> str:
    resolved = resolve_file_path(file_path, config.base_path)
    logger.info(f"Resolved path: {resolved}")
    if not os.path.isfile(resolved):
        suggestion = (
            f"\n\nTip: Files should be in {config.base_path} or provide a full path."
            if config.base_path else ""
        )
        raise NotFoundError(f"File not found: {resolved}{suggestion}")
    return resolved


async def transcribe_audio(
    config: TranscriberConfig,
    file_path: str,
    model: Optional[str] = None,
) -> str:
    """Transcribe an audio or video file.

    Args:
        config: Transcriber configuration
        file_path: Absolute path, relative path or bare filename
        model: Whisper model (tiny, base, small, medium, large-v3);
            defaults to config.whisper_model

    Returns:
        Markdown report, or an ``Error: ...`` text when anything fails
    """
    model = model or config.whisper_model

    logger.info("=== Starting Transcription ===")
    logger.info(f"Input path: {file_path}")
    logger.info(f"Model: {model}")

    try:
        if model not in WHISPER_MODELS:
            raise TranscriptionError(
                f"Unknown model '{model}'. Choose one of: {', '.join(WHISPER_MODELS)}"
            )

        resolved = _require_file(file_path, config)
        file_size = format_file_size(os.path.getsize(resolved))
        file_name = os.path.basename(resolved)
        logger.info(f"File size: {file_size}")
        logger.info(f"File name: {file_name}")

        started = time.monotonic()
        result = await transcribe_file(resolved, model, config)
        logging_config.log_operation_timing("Transcription", time.monotonic() - started)

        logger.info("=== Transcription Complete ===")
        logger.info(f"Text length: {len(result.text)} characters")
        return format_transcription_report(file_name, file_size, model, result)
    except TranscriptionError as e:
        logger.error(f"Error: {e}")
        return f"Error: {e}"
    except Exception as e:
        logger.exception("Unexpected error during transcription")
        return f"Error: {e}"
