"""
Audio extraction from video files.

ffmpeg turns a video into a mono, 16 kHz, 16-bit PCM WAV, the format Whisper
consumes directly. The WAV is written next to the source under a
request-scoped name; the caller owns it and must delete it.
"""

import logging
import os
import uuid
from typing import List

import ffmpeg

from transcriber.config import TranscriberConfig
from transcriber.errors import ExtractionFailedError, ToolNotFoundError
from transcriber.process import run_process

logger = logging.getLogger(__name__)

TEMP_AUDIO_MARKER = "_temp_audio"

SAMPLE_RATE = 16000


def make_temp_audio_path(video_path: str) -> str:
    """Return a unique temp WAV path adjacent to ``video_path``.

    The random part keeps two concurrent calls on the same video from sharing
    (and deleting) each other's artifact.
    """
    stem = os.path.splitext(video_path)[0]
    return f"{stem}{TEMP_AUDIO_MARKER}_{uuid.uuid4().hex[:8]}.wav"


def build_ffmpeg_command(video_path: str, output_path: str, executable: str = "ffmpeg") -> List[str]:
    """Build the ffmpeg argv: drop video, pcm_s16le, 16 kHz, mono, overwrite."""
    stream = (
        ffmpeg
        .input(video_path)
        .output(output_path, vn=None, acodec="pcm_s16le", ar=SAMPLE_RATE, ac=1)
        .overwrite_output()
    )
    return stream.compile(cmd=executable)


async def extract_audio(video_path: str, output_path: str, config: TranscriberConfig) -> str:
    """Extract the audio track of ``video_path`` into ``output_path``.

    Args:
        video_path: Source video file
        output_path: WAV file to create (see make_temp_audio_path)
        config: Transcriber configuration

    Returns:
        ``output_path`` once ffmpeg exits successfully

    Raises:
        ToolNotFoundError: If ffmpeg is not installed
        ExtractionFailedError: If ffmpeg exits with a nonzero status
    """
    logger.info("Extracting audio from video...")
    logger.info(f"Input: {video_path}")
    logger.info(f"Output: {output_path}")

    argv = build_ffmpeg_command(video_path, output_path, config.ffmpeg_executable)
    try:
        result = await run_process(argv, timeout=config.timeout)
    except OSError as e:
        logger.error(f"FFmpeg error: {e}")
        raise ToolNotFoundError(
            "ffmpeg not found. Please install ffmpeg: brew install ffmpeg"
        ) from e

    if result.returncode != 0:
        logger.error(f"FFmpeg failed with code {result.returncode}")
        raise ExtractionFailedError(
            f"ffmpeg failed: {result.stderr.strip()}",
            returncode=result.returncode,
            stderr=result.stderr,
        )

    logger.info(f"Audio extraction complete: {output_path}")
    return output_path
