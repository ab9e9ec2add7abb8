"""
Transcription Error Classes

This module defines the exception classes raised by the transcriber core.
Every exception derives from TranscriptionError so the MCP tool boundary can
catch them in one place and render them as text content.
"""


class TranscriptionError(Exception):
    """Base exception class for all transcriber errors.

    Example:
        try:
            result = await transcribe_file(path, "base", config)
        except TranscriptionError as e:
            logger.error(f"Transcription failed: {e}")
    """
    pass


class NotFoundError(TranscriptionError):
    """Exception raised when a file or directory does not exist.

    This exception is raised when:
    - The resolved media file is missing
    - A directory to list is missing
    - No directory was given and no base path is configured
    """
    pass


class ProviderNotAvailableError(TranscriptionError):
    """Exception raised when an external executable cannot be spawned."""
    pass


class ToolNotFoundError(ProviderNotAvailableError):
    """Exception raised when the media processing tool (ffmpeg) is missing.

    Example:
        raise ToolNotFoundError("ffmpeg not found. Please install ffmpeg: brew install ffmpeg")
    """
    pass


class RuntimeNotFoundError(ProviderNotAvailableError):
    """Exception raised when the Python runtime hosting mlx_whisper is missing."""
    pass


class ExtractionFailedError(TranscriptionError):
    """Exception raised when ffmpeg exits with a nonzero status.

    Attributes:
        returncode: Exit status reported by ffmpeg
        stderr: Diagnostic output captured from ffmpeg
    """

    def __init__(self, message: str, returncode: int = 1, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class TranscriptionFailedError(TranscriptionError):
    """Exception raised when the engine reports ``success: false``.

    The message carries only the engine's own error string.
    """
    pass


class ParseFailedError(TranscriptionError):
    """Exception raised when the engine output has no recognizable result.

    Attributes:
        stdout: Raw standard output captured from the engine
        stderr: Raw standard error captured from the engine
    """

    def __init__(self, message: str, stdout: str = "", stderr: str = ""):
        super().__init__(message)
        self.stdout = stdout
        self.stderr = stderr


class TranscriptionTimeoutError(TranscriptionError):
    """Exception raised when a subprocess outlives the configured timeout.

    Example:
        if elapsed_time > timeout:
            raise TranscriptionTimeoutError(f"Transcription timed out after {timeout}s")
    """
    pass
