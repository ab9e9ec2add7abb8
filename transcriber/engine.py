"""
MLX Whisper Transcription Invoker

Runs mlx_whisper in a separate Python process and recovers the structured
result from its output.

mlx_whisper prints segment text to stdout while it works (verbose=True), so
the inline script writes JSON_MARKER immediately before the final JSON
payload. Everything ahead of the marker is log text. When the marker is
missing the parser falls back to scanning for a JSON object with a
``success`` key, and failing that raises ParseFailedError with the raw output.

Per invocation: Idle -> ExtractingAudio (video only) -> Invoking -> Parsing
-> Succeeded | Failed. There are no retries.
"""

import json
import logging
import os
import re
from typing import Optional

from pydantic import ValidationError

from transcriber.config import TranscriberConfig
from transcriber.errors import (
    ParseFailedError,
    RuntimeNotFoundError,
    TranscriptionFailedError,
)
from transcriber.extraction import extract_audio, make_temp_audio_path
from transcriber.media import is_video_file
from transcriber.models import EngineFailure, EngineSuccess, TranscriptionResult
from transcriber.process import run_process

logger = logging.getLogger(__name__)

JSON_MARKER = "---JSON_START---"

ENGINE_TAG = "[MLX]"

_JSON_FALLBACK = re.compile(r'\{[\s\S]*"success"[\s\S]*\}')

# Receives the audio path and model repo through sys.argv
TRANSCRIBE_SCRIPT = '''
import json
import sys

audio_path, repo = sys.argv[1], sys.argv[2]

print("Loading MLX Whisper...", file=sys.stderr)
try:
    import mlx_whisper

    print("Starting transcription...", file=sys.stderr)
    result = mlx_whisper.transcribe(audio_path, path_or_hf_repo=repo, verbose=True)
    payload = {"success": True, "text": result["text"], "segments": result.get("segments", [])}
    print("Transcription complete!", file=sys.stderr)
except Exception as e:
    payload = {"success": False, "error": str(e)}

sys.stdout.flush()
print("---JSON_START---")
print(json.dumps(payload))
'''


def _log_engine_line(line: str) -> None:
    logger.info(f"{ENGINE_TAG} {line}")


def _extract_payload(stdout: str) -> str:
    marker_at = stdout.rfind(JSON_MARKER)
    if marker_at != -1:
        return stdout[marker_at + len(JSON_MARKER):].strip()

    logger.warning("JSON marker not found in engine output, scanning for a JSON object")
    match = _JSON_FALLBACK.search(stdout)
    return match.group(0) if match else stdout.strip()


def parse_engine_output(stdout: str, stderr: str = "") -> TranscriptionResult:
    """Recover the transcription result from the engine's stdout.

    Args:
        stdout: Complete standard output of the engine process
        stderr: Complete standard error, quoted in parse failures

    Returns:
        TranscriptionResult with the engine's text and segments

    Raises:
        TranscriptionFailedError: If the engine reported ``success: false``
        ParseFailedError: If no valid result object can be found
    """
    payload = _extract_payload(stdout)

    logger.debug("Parsing JSON response...")
    try:
        data = json.loads(payload)
        if not isinstance(data, dict) or "success" not in data:
            raise ValueError("expected a JSON object with a 'success' key")
        if data["success"]:
            result = EngineSuccess.model_validate(data).to_result()
        else:
            failure = EngineFailure.model_validate({**data, "success": False})
            logger.error(f"Transcription failed: {failure.error}")
            raise TranscriptionFailedError(failure.error or "Unknown error")
    except (ValueError, ValidationError) as e:
        # json.JSONDecodeError is a ValueError
        logger.error(f"Failed to parse output: {e}")
        logger.debug(f"Raw stdout: {stdout}")
        raise ParseFailedError(
            f"Failed to parse MLX output: {e}\nStdout: {stdout}\nStderr: {stderr}",
            stdout=stdout,
            stderr=stderr,
        ) from e

    logger.info(f"Successfully transcribed {len(result.segments)} segments")
    return result


async def run_transcription(audio_path: str, model: str, config: TranscriberConfig) -> TranscriptionResult:
    """Run mlx_whisper on ``audio_path`` with ``model``.

    Raises:
        RuntimeNotFoundError: If the Python runtime cannot be spawned
        TranscriptionFailedError: If the engine reports a failure
        ParseFailedError: If the engine output cannot be parsed
        TranscriptionTimeoutError: If the engine outlives config.timeout
    """
    repo = config.model_repo(model)
    logger.info("Starting MLX Whisper transcription...")
    logger.info(f"Audio file: {audio_path}")
    logger.info(f"Model: {repo}")

    argv = [config.python_executable, "-c", TRANSCRIBE_SCRIPT, audio_path, repo]
    try:
        result = await run_process(argv, on_stderr_line=_log_engine_line, timeout=config.timeout)
    except OSError as e:
        logger.error(f"Python error: {e}")
        raise RuntimeNotFoundError(f"Python not found: {e}") from e

    logger.info(f"Python process exited with code {result.returncode}")
    return parse_engine_output(result.stdout, result.stderr)


def remove_temp_file(path: Optional[str]) -> None:
    """Delete a temporary audio artifact; failures are logged, not raised."""
    if not path or not os.path.exists(path):
        return
    try:
        os.remove(path)
        logger.info(f"Cleaned up temp file: {path}")
    except OSError as e:
        logger.warning(f"Could not delete temp file {path}: {e}")


async def transcribe_file(file_path: str, model: str, config: TranscriberConfig) -> TranscriptionResult:
    """Transcribe an audio or video file.

    Video input is converted to a temporary WAV first. The WAV is removed
    before this coroutine returns or raises, whichever step failed.
    """
    temp_audio = None
    audio_path = file_path
    try:
        if is_video_file(file_path):
            temp_audio = make_temp_audio_path(file_path)
            audio_path = await extract_audio(file_path, temp_audio, config)
        return await run_transcription(audio_path, model, config)
    finally:
        remove_temp_file(temp_audio)
