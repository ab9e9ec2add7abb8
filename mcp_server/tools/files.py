"""List tool - audio and video files in a directory, with sizes."""

import logging
import os
from typing import List, Optional

from transcriber.config import TranscriberConfig
from transcriber.errors import NotFoundError, TranscriptionError
from transcriber.media import is_media_file
from transcriber.paths import format_file_size

logger = logging.getLogger(__name__)


def _resolve_directory(directory: Optional[str], config: TranscriberConfig) -> str:
    directory = directory or config.base_path
    if not directory:
        raise NotFoundError("No directory specified and TRANSCRIBE_BASE_PATH is not configured.")
    if not os.path.isdir(directory):
        raise NotFoundError(f"Directory not found: {directory}")
    return directory


def find_media_files(directory: str) -> List[str]:
    """Return sorted names of audio/video files directly inside ``directory``."""
    return sorted(
        name for name in os.listdir(directory)
        if is_media_file(name) and os.path.isfile(os.path.join(directory, name))
    )


async def list_audio_files(config: TranscriberConfig, directory: Optional[str] = None) -> str:
    """List audio and video files.

    Args:
        config: Transcriber configuration
        directory: Directory to scan; defaults to config.base_path

    Returns:
        Markdown list, or an ``Error: ...`` text
    """
    try:
        directory = _resolve_directory(directory, config)
        logger.info(f"Listing audio files in: {directory}")

        names = find_media_files(directory)
        logger.info(f"Found {len(names)} audio/video files")
        if not names:
            return f"No audio or video files found in: {directory}"

        lines = [
            f"- **{name}** ({format_file_size(os.path.getsize(os.path.join(directory, name)))})"
            for name in names
        ]
        return f"## Audio/Video files in {directory}\n\n" + "\n".join(lines)
    except TranscriptionError as e:
        logger.error(f"Error: {e}")
        return f"Error: {e}"
    except OSError as e:
        logger.error(f"Error listing {directory}: {e}")
        return f"Error: {e}"
